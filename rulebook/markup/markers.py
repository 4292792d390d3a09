"""Inline format markers and the format stack that resolves them to styles."""

import re
from enum import Enum

from rulebook.models.segments import ColorRole, RunStyle


class Marker(str, Enum):
    """Inline format marker names, as written between ``{{`` and ``}}``."""

    BOLD = "BOLD"
    ITALIC = "ITALIC"
    RED = "RED"
    SMALL = "SMALL"
    RED_ITALIC = "RED_ITALIC"
    RED_BOLD = "RED_BOLD"
    ITALIC_BOLD = "ITALIC_BOLD"
    RED_ITALIC_BOLD = "RED_ITALIC_BOLD"


# (red, bold, italic, small) contributed by each marker
_MARKER_EFFECTS: dict[Marker, tuple[bool, bool, bool, bool]] = {
    Marker.BOLD: (False, True, False, False),
    Marker.ITALIC: (False, False, True, False),
    Marker.RED: (True, False, False, False),
    Marker.SMALL: (False, False, False, True),
    Marker.RED_ITALIC: (True, False, True, False),
    Marker.RED_BOLD: (True, True, False, False),
    Marker.ITALIC_BOLD: (False, True, True, False),
    Marker.RED_ITALIC_BOLD: (True, True, True, False),
}

# Longest names first so RED_ITALIC_BOLD is never read as RED.
_MARKER_NAMES = "|".join(
    sorted((m.value for m in Marker), key=len, reverse=True)
)

MARKER_RE = re.compile(r"\{\{(/?)(" + _MARKER_NAMES + r")\}\}")

# Any {{TAG}}, {{/TAG}} or {{TAG:argument}} token.
ANY_TAG_RE = re.compile(r"\{\{/?[A-Z_]+(?::[^}]*)?\}\}")


def strip_markup(text: str) -> str:
    """Remove every markup tag, keeping the text between tags."""
    return ANY_TAG_RE.sub("", text)


class FormatStack:
    """Open inline markers for the current line.

    Closing a marker pops whatever is on top; a closer with nothing open is
    ignored.
    """

    def __init__(self) -> None:
        self._stack: list[Marker] = []

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, marker: Marker) -> None:
        self._stack.append(marker)

    def pop(self) -> Marker | None:
        if not self._stack:
            return None
        return self._stack.pop()

    def style(self) -> RunStyle:
        """Resolve the combined style of every open marker."""
        red = bold = italic = small = False
        for marker in self._stack:
            m_red, m_bold, m_italic, m_small = _MARKER_EFFECTS[marker]
            red = red or m_red
            bold = bold or m_bold
            italic = italic or m_italic
            small = small or m_small
        return RunStyle(
            color=ColorRole.RED if red else ColorRole.DEFAULT,
            bold=bold,
            italic=italic,
            small=small,
        )
