"""Rule search ranking, group ordering and view filters."""

from rulebook.search.ordering import (
    filter_groups_by_program,
    group_display_name,
    group_short_name,
    is_base_program,
    order_groups,
)
from rulebook.search.ranker import (
    find_hits,
    rank_and_filter_rules,
    score_rule,
    search_rules,
)
from rulebook.search.view import (
    available_rule_groups,
    build_rule_view,
    filter_by_favorites,
    filter_by_group,
)

__all__ = [
    "available_rule_groups",
    "build_rule_view",
    "filter_by_favorites",
    "filter_by_group",
    "filter_groups_by_program",
    "find_hits",
    "group_display_name",
    "group_short_name",
    "is_base_program",
    "order_groups",
    "rank_and_filter_rules",
    "score_rule",
    "search_rules",
]
