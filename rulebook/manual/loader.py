"""Game manual loader for bundled JSON manual documents."""

import json
import logging
from pathlib import Path

import chardet
from pydantic import ValidationError

from rulebook.models.manual import GameManual

logger = logging.getLogger(__name__)


def is_newer_version(version: str | None, other: str | None) -> bool:
    """Return True if ``version`` is newer than ``other``.

    Versions are YYYYMMDD stamps, so string comparison orders them. A
    missing ``other`` counts as older; a missing ``version`` never wins.
    """
    if not version and not other:
        return False
    if not other:
        return True
    if not version:
        return False
    return version > other


def pick_newest_manual(
    bundled: GameManual | None, *candidates: GameManual | None
) -> GameManual | None:
    """Prefer the bundled manual unless a candidate carries a newer version.

    Candidates are checked in order and the first newer one wins.
    """
    bundled_version = bundled.version if bundled else None
    for candidate in candidates:
        if candidate is not None and is_newer_version(candidate.version, bundled_version):
            logger.debug(
                "Using manual v%s over bundled v%s", candidate.version, bundled_version
            )
            return candidate
    return bundled


class ManualLoader:
    """Loads GameManual documents from a directory of JSON files.

    Files are named ``{program}-{season}.json`` with a lower-cased program,
    e.g. ``v5rc-2025-2026.json``.

    Args:
        manuals_dir: Directory holding the manual files.
    """

    def __init__(self, manuals_dir: str | Path) -> None:
        self._manuals_dir = Path(manuals_dir)

    def manual_path(self, program: str, season: str) -> Path:
        filename = f"{program.lower()}-{season.replace('/', '-')}.json"
        return self._manuals_dir / filename

    def load(self, program: str, season: str) -> GameManual | None:
        """Load the manual for a program and season.

        Returns:
            The manual, or None when it is missing or unreadable.
        """
        path = self.manual_path(program, season)
        try:
            return self.load_file(path)
        except FileNotFoundError:
            logger.warning("No game manual available for %s %s", program, season)
        except ValueError:
            logger.exception("Failed to load game manual: %s", path)
        return None

    def load_file(self, file_path: str | Path) -> GameManual:
        """Parse a manual JSON file.

        Args:
            file_path: Path to the JSON document.

        Returns:
            The loaded GameManual.

        Raises:
            FileNotFoundError: If file_path does not exist.
            ValueError: If the document is not a valid manual.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        text = self._read_text(path)
        try:
            manual = GameManual.model_validate(json.loads(text))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise ValueError(f"Invalid game manual: {path}") from exc

        logger.debug(
            "Loaded %s (v%s) with %d rule groups",
            manual.manual_key,
            manual.version,
            len(manual.rule_groups),
        )
        return manual

    def _read_text(self, file_path: Path) -> str:
        """Read a manual file, trying UTF-8 first, then chardet detection."""
        try:
            return file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            pass

        raw_bytes = file_path.read_bytes()
        detected = chardet.detect(raw_bytes)
        encoding = detected.get("encoding") or "utf-8"
        confidence = detected.get("confidence", 0)

        if confidence < 0.7:
            logger.warning(
                "Low confidence encoding detection for %s: %s (%.0f%%)",
                file_path,
                encoding,
                confidence * 100,
            )

        try:
            return raw_bytes.decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ValueError(f"Cannot decode game manual: {file_path}") from exc
