"""Game manual data models.

Manuals are read-only snapshots: every model is frozen and sequences are
tuples, so an update means loading a whole new manual.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Rule(BaseModel):
    """One addressable rule entry in a rulebook."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str  # e.g. "v5rc_sg1"
    code: str = Field(alias="rule")  # e.g. "<SG1>"
    title: str
    description: str = ""
    full_text: str | None = Field(default=None, alias="fullText")
    complete_text: str | None = Field(default=None, alias="completeText")
    category: str = ""
    severity: Literal["minor", "major", "info"] | None = None
    pdf_page: int | None = Field(default=None, alias="pdfPage")
    pdf_section: str | None = Field(default=None, alias="pdfSection")
    tags: tuple[str, ...] = ()
    vex_link: str | None = Field(default=None, alias="vexLink")
    related_rules: tuple[str, ...] = Field(default=(), alias="relatedRules")
    image_urls: tuple[str, ...] = Field(default=(), alias="imageUrls")

    @property
    def body(self) -> str:
        """Text shown when the rule is expanded."""
        return self.complete_text or self.full_text or self.description


class RuleGroup(BaseModel):
    """A named category bucket of rules, in authorial order."""

    model_config = ConfigDict(frozen=True)

    name: str
    programs: tuple[str, ...] = ()
    rules: tuple[Rule, ...] = ()


def manual_key(program: str, season: str) -> str:
    """Key identifying one program's manual for one season, e.g. "V5RC_2025-2026"."""
    return f"{program}_{season}"


class GameManual(BaseModel):
    """The full rulebook for one program and season."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    program: str  # e.g. "V5RC"
    season: str  # e.g. "2025-2026"
    title: str
    pdf_url: str = Field(default="", alias="pdfUrl")
    pdf_version: str | None = Field(default=None, alias="pdfVersion")
    qna_url: str | None = Field(default=None, alias="qnaUrl")
    version: str | None = None  # YYYYMMDD
    rule_groups: tuple[RuleGroup, ...] = Field(default=(), alias="ruleGroups")

    @property
    def manual_key(self) -> str:
        return manual_key(self.program, self.season)
