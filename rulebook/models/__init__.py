"""Data models for the rulebook engine."""

from rulebook.models.manual import GameManual, Rule, RuleGroup
from rulebook.models.search import SearchHit
from rulebook.models.segments import (
    ActionKind,
    Callout,
    ColorRole,
    ImageBlock,
    Line,
    ParsedSegment,
    RunAction,
    RunStyle,
    StyledRun,
    Table,
    TextBlock,
    ViolationNotes,
)

__all__ = [
    "ActionKind",
    "Callout",
    "ColorRole",
    "GameManual",
    "ImageBlock",
    "Line",
    "ParsedSegment",
    "Rule",
    "RuleGroup",
    "RunAction",
    "RunStyle",
    "SearchHit",
    "StyledRun",
    "Table",
    "TextBlock",
    "ViolationNotes",
]
