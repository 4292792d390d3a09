"""Rule lookups within a loaded manual, including cross-reference resolution."""

import logging
import re
from typing import Iterable

from rulebook.models.manual import GameManual, Rule

logger = logging.getLogger(__name__)

# "<R3d>" -> "<R3>"
_SUFFIX_RE = re.compile(r"^(<[A-Z]+\d+)[a-z](>)$")


def get_all_rules(manual: GameManual) -> list[Rule]:
    """Flatten every rule of the manual in group order."""
    return [rule for group in manual.rule_groups for rule in group.rules]


def _find_by_code(manual: GameManual, code: str) -> Rule | None:
    for group in manual.rule_groups:
        for rule in group.rules:
            if rule.code == code:
                return rule
    return None


def resolve_rule_reference(code: str, manual: GameManual) -> Rule | None:
    """Find the rule a cross-reference token points at.

    Looks for an exact code match across all groups. When none is found and
    the token carries a sub-part letter, the letter is dropped and the lookup
    repeated, so ``<R3d>`` falls back to ``<R3>``.

    Args:
        code: Reference token including angle brackets.
        manual: The manual currently loaded.

    Returns:
        The first matching rule, or None.
    """
    rule = _find_by_code(manual, code)
    if rule is not None:
        return rule

    match = _SUFFIX_RE.match(code)
    if match is None:
        return None

    base_code = match.group(1) + match.group(2)
    logger.debug("No rule %s, retrying as %s", code, base_code)
    return _find_by_code(manual, base_code)


def get_rule_by_id(manual: GameManual, rule_id: str) -> Rule | None:
    for group in manual.rule_groups:
        for rule in group.rules:
            if rule.id == rule_id:
                return rule
    return None


def _rules_for_ids(manual: GameManual, rule_ids: Iterable[str]) -> list[Rule]:
    rules = []
    for rule_id in rule_ids:
        rule = get_rule_by_id(manual, rule_id)
        if rule is None:
            logger.debug("Unknown rule id %s in %s", rule_id, manual.manual_key)
            continue
        rules.append(rule)
    return rules


def get_related_rules(manual: GameManual, rule: Rule) -> list[Rule]:
    """Related rules in the order listed on the rule; unknown ids are skipped."""
    return _rules_for_ids(manual, rule.related_rules)


def get_favorite_rules(manual: GameManual, favorite_ids: Iterable[str]) -> list[Rule]:
    """Rules for stored favorite ids, in favorite order."""
    return _rules_for_ids(manual, favorite_ids)
