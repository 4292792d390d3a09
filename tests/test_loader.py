"""Tests for the game manual loader."""

import json
from pathlib import Path

import pytest

from rulebook.manual.loader import ManualLoader, is_newer_version, pick_newest_manual
from rulebook.models.manual import GameManual

MINIMAL_MANUAL = {
    "program": "VIQRC",
    "season": "2025-2026",
    "title": "Mix & Match",
    "pdfUrl": "https://example.com/viqrc.pdf",
    "ruleGroups": [
        {"name": "Safety Rules", "programs": ["VIQRC"], "rules": []},
    ],
}


def _manual(version: str | None) -> GameManual:
    return GameManual(program="V5RC", season="2025-2026", title="t", version=version)


class TestLoadFile:
    def test_loads_fixture(self, manual: GameManual) -> None:
        assert manual.program == "V5RC"
        assert manual.title == "Push Back"
        assert manual.version == "20250915"
        assert manual.qna_url == "https://www.robotevents.com/V5RC/2025-2026/QA"
        assert [g.name for g in manual.rule_groups] == [
            "VURC Robot Rules",
            "Robot Rules",
            "Safety Rules",
            "Scoring Rules",
        ]

    def test_rule_fields_mapped(self, manual: GameManual) -> None:
        rule = manual.rule_groups[1].rules[0]
        assert rule.code == "<R3>"
        assert rule.severity == "major"
        assert rule.pdf_page == 42
        assert rule.pdf_section == "7.2.3"
        assert rule.related_rules == ("v5rc_sg1", "v5rc_missing")

    def test_missing_file_raises(self, loader: ManualLoader, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            loader.load_file(tmp_path / "nope.json")

    def test_invalid_json_raises_value_error(self, loader: ManualLoader, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid game manual"):
            loader.load_file(path)

    def test_missing_fields_raise_value_error(self, loader: ManualLoader, tmp_path: Path) -> None:
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"program": "V5RC"}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid game manual"):
            loader.load_file(path)

    def test_utf16_file(self, loader: ManualLoader, tmp_path: Path) -> None:
        data = dict(MINIMAL_MANUAL, title="Règles du jeu")
        path = tmp_path / "utf16.json"
        path.write_bytes(json.dumps(data, ensure_ascii=False).encode("utf-16"))
        assert loader.load_file(path).title == "Règles du jeu"


class TestLoad:
    def test_load_by_program_and_season(self, loader: ManualLoader) -> None:
        manual = loader.load("V5RC", "2025-2026")
        assert manual is not None
        assert manual.manual_key == "V5RC_2025-2026"

    def test_manual_path(self, tmp_path: Path) -> None:
        loader = ManualLoader(tmp_path)
        assert loader.manual_path("VIQRC", "2025/2026") == tmp_path / "viqrc-2025-2026.json"

    def test_missing_manual_returns_none(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        loader = ManualLoader(tmp_path)
        assert loader.load("V5RC", "1999-2000") is None
        assert "No game manual available" in caplog.text

    def test_invalid_manual_returns_none(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (tmp_path / "v5rc-2025-2026.json").write_text("[]", encoding="utf-8")
        loader = ManualLoader(tmp_path)
        assert loader.load("V5RC", "2025-2026") is None
        assert "Failed to load game manual" in caplog.text


class TestVersions:
    @pytest.mark.parametrize(
        ("version", "other", "expected"),
        [
            (None, None, False),
            ("20250101", None, True),
            (None, "20250101", False),
            ("20250915", "20250101", True),
            ("20250101", "20250915", False),
            ("20250101", "20250101", False),
        ],
    )
    def test_is_newer_version(self, version: str | None, other: str | None, expected: bool) -> None:
        assert is_newer_version(version, other) is expected

    def test_pick_newest_prefers_newer_candidate(self) -> None:
        bundled = _manual("20250101")
        cached = _manual("20250301")
        remote = _manual("20250601")
        assert pick_newest_manual(bundled, cached, remote) is cached

    def test_pick_newest_keeps_bundled(self) -> None:
        bundled = _manual("20250601")
        assert pick_newest_manual(bundled, _manual("20250101"), None) is bundled

    def test_pick_newest_without_bundled(self) -> None:
        remote = _manual(None)
        assert pick_newest_manual(None, remote) is None
        assert pick_newest_manual(None, _manual("20250101")).version == "20250101"
