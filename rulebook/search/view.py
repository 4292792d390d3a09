"""Rule list view model: program filter, search or ordering, then filters."""

import logging
from typing import Collection, Sequence

from rulebook.config import AppConfig, GroupConfig
from rulebook.models.manual import GameManual, RuleGroup
from rulebook.search.ordering import filter_groups_by_program, group_sort_key, order_groups
from rulebook.search.ranker import rank_and_filter_rules

logger = logging.getLogger(__name__)


def filter_by_group(groups: Sequence[RuleGroup], group_name: str | None) -> list[RuleGroup]:
    if group_name is None:
        return list(groups)
    return [group for group in groups if group.name == group_name]


def filter_by_favorites(
    groups: Sequence[RuleGroup], favorite_ids: Collection[str]
) -> list[RuleGroup]:
    """Keep favorite rules only, dropping groups left empty."""
    filtered = []
    for group in groups:
        rules = tuple(rule for rule in group.rules if rule.id in favorite_ids)
        if rules:
            filtered.append(group.model_copy(update={"rules": rules}))
    return filtered


def _program_groups(manual: GameManual, program: str, groups_config: GroupConfig) -> list[RuleGroup]:
    return filter_groups_by_program(
        manual.rule_groups,
        program,
        groups_config.base_program_denylist,
        base_marker=groups_config.base_program_marker,
        broader_markers=groups_config.broader_program_markers,
    )


def build_rule_view(
    manual: GameManual,
    program: str,
    query: str = "",
    *,
    group: str | None = None,
    favorite_ids: Collection[str] | None = None,
    config: AppConfig | None = None,
) -> list[RuleGroup]:
    """Build the ordered, filtered rule groups for one render pass.

    A non-blank query ranks rules by relevance; otherwise groups are put in
    canonical order. Exactly one of the two orderings is applied.

    Args:
        manual: Loaded manual snapshot.
        program: Active competition program, e.g. "V5RC".
        query: Search text.
        group: Only show the group with this name.
        favorite_ids: Only show these rule ids.
        config: Application config; defaults are used when omitted.

    Returns:
        Rule groups ready for display.
    """
    groups_config = (config or AppConfig()).groups
    groups = _program_groups(manual, program, groups_config)

    if query.strip():
        groups = rank_and_filter_rules(groups, query)
    else:
        groups = order_groups(groups, groups_config.canonical_order)

    groups = filter_by_group(groups, group)
    if favorite_ids is not None:
        groups = filter_by_favorites(groups, favorite_ids)

    logger.debug(
        "Rule view for %s: %d groups (query=%r, group=%r)",
        manual.manual_key,
        len(groups),
        query,
        group,
    )
    return groups


def available_rule_groups(
    manual: GameManual, program: str, config: AppConfig | None = None
) -> list[str]:
    """Group names offered as filters for a program, in canonical order."""
    groups_config = (config or AppConfig()).groups
    names = [group.name for group in _program_groups(manual, program, groups_config)]
    return sorted(names, key=lambda name: group_sort_key(name, groups_config.canonical_order))
