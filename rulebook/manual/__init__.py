"""Game manual loading and rule lookups."""

from rulebook.manual.loader import ManualLoader, is_newer_version, pick_newest_manual
from rulebook.manual.references import (
    get_all_rules,
    get_favorite_rules,
    get_related_rules,
    get_rule_by_id,
    resolve_rule_reference,
)

__all__ = [
    "ManualLoader",
    "get_all_rules",
    "get_favorite_rules",
    "get_related_rules",
    "get_rule_by_id",
    "is_newer_version",
    "pick_newest_manual",
    "resolve_rule_reference",
]
