"""Canonical rule group ordering and program-scoped group filtering."""

from typing import Mapping, Sequence

from rulebook.config import (
    BASE_PROGRAM_DENYLIST,
    GROUP_DISPLAY_NAMES,
    GROUP_SHORT_NAMES,
    RULE_GROUP_ORDER,
)
from rulebook.models.manual import RuleGroup


def group_sort_key(name: str, canonical_order: Sequence[str]) -> tuple:
    """Canonical groups by index, then the rest alphabetically."""
    try:
        return (0, canonical_order.index(name))
    except ValueError:
        return (1, name.casefold(), name)


def order_groups(
    groups: Sequence[RuleGroup], canonical_order: Sequence[str] = RULE_GROUP_ORDER
) -> list[RuleGroup]:
    """Sort groups into canonical order.

    Groups named in ``canonical_order`` come first, in that order; any other
    group follows, sorted alphabetically by name.
    """
    return sorted(groups, key=lambda group: group_sort_key(group.name, canonical_order))


def is_base_program(
    program: str,
    base_marker: str = "v5",
    broader_markers: Sequence[str] = ("vex u", "ai"),
) -> bool:
    """True for the base variant of a program family (V5RC, not VURC/VAIRC)."""
    program = program.lower()
    if base_marker not in program:
        return False
    return not any(marker in program for marker in broader_markers)


def filter_groups_by_program(
    groups: Sequence[RuleGroup],
    program: str,
    denylist: Sequence[str] = BASE_PROGRAM_DENYLIST,
    *,
    base_marker: str = "v5",
    broader_markers: Sequence[str] = ("vex u", "ai"),
) -> list[RuleGroup]:
    """Drop denylisted groups for the base program; broader programs see all."""
    if not is_base_program(program, base_marker, broader_markers):
        return list(groups)
    excluded = set(denylist)
    return [group for group in groups if group.name not in excluded]


def group_display_name(name: str, names: Mapping[str, str] = GROUP_DISPLAY_NAMES) -> str:
    """Section title for a group."""
    return names.get(name, name)


def group_short_name(name: str, names: Mapping[str, str] = GROUP_SHORT_NAMES) -> str:
    """Compact filter-chip label for a group."""
    return names.get(name, name)
