"""Shared fixtures for rulebook tests."""

from pathlib import Path

import pytest

from rulebook.manual.loader import ManualLoader
from rulebook.models.manual import GameManual

MANUALS_DIR = Path(__file__).parent / "fixtures" / "manuals"


@pytest.fixture
def loader() -> ManualLoader:
    return ManualLoader(MANUALS_DIR)


@pytest.fixture
def manual(loader: ManualLoader) -> GameManual:
    return loader.load_file(MANUALS_DIR / "v5rc-2025-2026.json")
