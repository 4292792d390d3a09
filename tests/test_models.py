"""Tests for data models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from rulebook.models import (
    ActionKind,
    Callout,
    GameManual,
    ImageBlock,
    Line,
    ParsedSegment,
    Rule,
    RuleGroup,
    RunAction,
    SearchHit,
    StyledRun,
    Table,
    TextBlock,
)


class TestRule:
    def test_create_rule_by_field_name(self) -> None:
        rule = Rule(id="v5rc_sg1", code="<SG1>", title="Starting a Match", category="SG")
        assert rule.code == "<SG1>"
        assert rule.description == ""
        assert rule.related_rules == ()
        assert rule.image_urls == ()

    def test_create_rule_from_document_keys(self) -> None:
        rule = Rule.model_validate(
            {
                "id": "v5rc_sg1",
                "rule": "<SG1>",
                "title": "Starting a Match",
                "description": "Robots start in contact with the field perimeter.",
                "fullText": "Body",
                "completeText": "Body and notes",
                "category": "SG",
                "relatedRules": ["v5rc_sg2"],
                "imageUrls": ["https://example.com/a.png"],
            }
        )
        assert rule.full_text == "Body"
        assert rule.complete_text == "Body and notes"
        assert rule.related_rules == ("v5rc_sg2",)
        assert rule.image_urls == ("https://example.com/a.png",)

    def test_body_prefers_complete_text(self) -> None:
        rule = Rule(id="a", code="<A1>", title="t", description="d", full_text="f", complete_text="c")
        assert rule.body == "c"
        assert rule.model_copy(update={"complete_text": None}).body == "f"
        assert Rule(id="a", code="<A1>", title="t", description="d").body == "d"

    def test_rule_is_immutable(self) -> None:
        rule = Rule(id="a", code="<A1>", title="t")
        with pytest.raises(ValidationError):
            rule.title = "changed"  # type: ignore[misc]

    def test_invalid_severity_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Rule(id="a", code="<A1>", title="t", severity="fatal")  # type: ignore[arg-type]


class TestGameManual:
    def test_manual_key(self, manual: GameManual) -> None:
        assert manual.manual_key == "V5RC_2025-2026"

    def test_groups_are_tuples(self, manual: GameManual) -> None:
        assert isinstance(manual.rule_groups, tuple)
        assert isinstance(manual.rule_groups[0].rules, tuple)

    def test_group_is_immutable(self) -> None:
        group = RuleGroup(name="Safety Rules")
        with pytest.raises(ValidationError):
            group.name = "Other"  # type: ignore[misc]


class TestSegments:
    def test_text_block_text_and_runs(self) -> None:
        block = TextBlock(
            lines=(
                Line(runs=(StyledRun(text="a"), StyledRun(text="b"))),
                Line(runs=(StyledRun(text="c"),)),
            )
        )
        assert block.text == "ab\nc"
        assert [run.text for run in block.runs] == ["a", "b", "c"]

    def test_discriminated_union(self) -> None:
        adapter = TypeAdapter(list[ParsedSegment])
        segments = adapter.validate_python(
            [
                {"kind": "image", "url": "https://example.com/a.png"},
                {"kind": "table", "header": ["A"], "rows": [["1"]]},
                {"kind": "callout", "lines": []},
            ]
        )
        assert isinstance(segments[0], ImageBlock)
        assert isinstance(segments[1], Table)
        assert segments[1].rows == (("1",),)
        assert isinstance(segments[2], Callout)

    def test_run_action(self) -> None:
        run = StyledRun(
            text="<SG1>",
            action=RunAction(kind=ActionKind.NAVIGATE_RULE, target="v5rc_sg1"),
        )
        assert run.action is not None
        assert run.action.kind == ActionKind.NAVIGATE_RULE
        assert run.style.highlighted is False


class TestSearchHit:
    def test_score_bounds(self) -> None:
        rule = Rule(id="a", code="<A1>", title="t")
        group = RuleGroup(name="G", rules=(rule,))
        assert SearchHit(rule=rule, group=group, score=4).score == 4
        with pytest.raises(ValidationError):
            SearchHit(rule=rule, group=group, score=0)
