"""Parsed rule-text structures produced by the markup engine."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ColorRole(str, Enum):
    DEFAULT = "default"
    RED = "red"


class ActionKind(str, Enum):
    OPEN_LINK = "open_link"
    NAVIGATE_RULE = "navigate_rule"


class RunStyle(BaseModel):
    """Concrete style resolved from the format stack."""

    model_config = ConfigDict(frozen=True)

    color: ColorRole = ColorRole.DEFAULT
    bold: bool = False
    italic: bool = False
    small: bool = False
    highlighted: bool = False  # inverted search-match style


class RunAction(BaseModel):
    """What happens when a run is tapped.

    ``target`` is an absolute URL for ``OPEN_LINK`` and a rule id for
    ``NAVIGATE_RULE``.
    """

    model_config = ConfigDict(frozen=True)

    kind: ActionKind
    target: str


class StyledRun(BaseModel):
    """A piece of text with one style and an optional action."""

    model_config = ConfigDict(frozen=True)

    text: str
    style: RunStyle = Field(default_factory=RunStyle)
    action: RunAction | None = None


class Line(BaseModel):
    """One rendered line of runs."""

    model_config = ConfigDict(frozen=True)

    runs: tuple[StyledRun, ...] = ()

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


class TextBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    lines: tuple[Line, ...] = ()

    @property
    def runs(self) -> Iterator[StyledRun]:
        for line in self.lines:
            yield from line.runs

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)


class Table(BaseModel):
    """A table; rows may have a different cell count than the header."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["table"] = "table"
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()


class Callout(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["callout"] = "callout"
    lines: tuple[Line, ...] = ()


class ViolationNotes(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["violation_notes"] = "violation_notes"
    lines: tuple[Line, ...] = ()


class ImageBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["image"] = "image"
    url: str


ParsedSegment = Annotated[
    Union[TextBlock, Table, Callout, ViolationNotes, ImageBlock],
    Field(discriminator="kind"),
]
