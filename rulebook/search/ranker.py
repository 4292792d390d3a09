"""Prioritized rule search.

Each rule gets one score from the first field that contains the query:

    4  rule code
    3  title
    2  category
    1  description, full text or complete text (markup removed)

Scores are not summed. Matching is case-insensitive substring containment.
"""

import logging
from typing import Sequence

from rulebook.markup.markers import strip_markup
from rulebook.models.manual import GameManual, Rule, RuleGroup
from rulebook.models.search import SearchHit

logger = logging.getLogger(__name__)

CODE_SCORE = 4
TITLE_SCORE = 3
CATEGORY_SCORE = 2
BODY_SCORE = 1


def score_rule(rule: Rule, query: str) -> int:
    """Score a rule against an already lower-cased query; 0 means no match."""
    if query in rule.code.lower():
        return CODE_SCORE
    if query in rule.title.lower():
        return TITLE_SCORE
    if query in rule.category.lower():
        return CATEGORY_SCORE
    for text in (rule.description, rule.full_text, rule.complete_text):
        if text and query in strip_markup(text).lower():
            return BODY_SCORE
    return 0


def find_hits(groups: Sequence[RuleGroup], query: str) -> list[SearchHit]:
    """Score every rule and return the matches, best first.

    The sort is stable, so equal scores keep manual order.
    """
    needle = query.lower()
    hits = []
    for group in groups:
        for rule in group.rules:
            score = score_rule(rule, needle)
            if score > 0:
                hits.append(SearchHit(rule=rule, group=group, score=score))

    hits.sort(key=lambda hit: hit.score, reverse=True)
    return hits


def rank_and_filter_rules(groups: Sequence[RuleGroup], query: str) -> list[RuleGroup]:
    """Filter and reorder rule groups by search relevance.

    A blank query returns the groups unchanged. Otherwise matching rules are
    ranked and regrouped: rules keep their rank order inside each group, and
    groups appear in the order their first hit appears.

    Args:
        groups: Rule groups, already program-filtered.
        query: Free-text search query.

    Returns:
        New RuleGroup list holding only matching rules.
    """
    if not query.strip():
        return list(groups)

    hits = find_hits(groups, query)

    buckets: dict[str, tuple[RuleGroup, list[Rule]]] = {}
    for hit in hits:
        bucket = buckets.setdefault(hit.group.name, (hit.group, []))
        bucket[1].append(hit.rule)

    logger.debug("Query %r matched %d rules in %d groups", query, len(hits), len(buckets))

    return [
        group.model_copy(update={"rules": tuple(rules)})
        for group, rules in buckets.values()
    ]


def search_rules(manual: GameManual, query: str) -> list[Rule]:
    """Flat ranked list of the manual's rules matching the query."""
    if not query.strip():
        return []
    return [hit.rule for hit in find_hits(manual.rule_groups, query)]
