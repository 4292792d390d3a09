"""Block-level tokenizer for rule text.

Splits raw rule text into plain-text spans and block constructs::

    {{TABLE}} ... {{/TABLE}}
    {{CALLOUT}} ... {{/CALLOUT}}
    {{VIOLATION_NOTES}} ... {{/VIOLATION_NOTES}}
    {{IMAGE:<url>}}

The scan is a single left-to-right pass driven by an explicit cursor. The
leftmost opener of any kind wins. An opener with no closer is kept as literal
text, and block bodies are never scanned again for nested blocks.
"""

import logging
import re
from typing import NamedTuple

logger = logging.getLogger(__name__)

BLOCK_KINDS: dict[str, str] = {
    "TABLE": "table",
    "CALLOUT": "callout",
    "VIOLATION_NOTES": "violation_notes",
}

_OPENER_RE = re.compile(r"\{\{(?:(TABLE|CALLOUT|VIOLATION_NOTES)\}\}|IMAGE:)")
_IMAGE_RE = re.compile(r"\{\{IMAGE:([^{}]*)\}\}")


class RawBlock(NamedTuple):
    """A block span before inline parsing.

    ``kind`` is "text", "table", "callout", "violation_notes" or "image";
    ``content`` is the body text, or the url for images.
    """

    kind: str
    content: str


def tokenize_blocks(raw: str) -> list[RawBlock]:
    """Split raw rule text into ordered block spans.

    Args:
        raw: The authored rule text.

    Returns:
        RawBlock list in source order. Text spans keep every source
        character; only empty spans between adjacent blocks are dropped.
    """
    blocks: list[RawBlock] = []
    pending: list[str] = []
    pos = 0

    while pos < len(raw):
        match = _OPENER_RE.search(raw, pos)
        if match is None:
            break

        pending.append(raw[pos:match.start()])
        tag = match.group(1)

        if tag is None:
            image = _IMAGE_RE.match(raw, match.start())
            url = image.group(1).strip() if image else ""
            if not url:
                logger.debug("Unterminated image tag at %d", match.start())
                pending.append(match.group())
                pos = match.end()
                continue
            _flush_text(blocks, pending)
            blocks.append(RawBlock("image", url))
            pos = image.end()
            continue

        closer = "{{/" + tag + "}}"
        close_at = raw.find(closer, match.end())
        if close_at == -1:
            logger.debug("Unterminated %s block at %d", tag, match.start())
            pending.append(match.group())
            pos = match.end()
            continue

        _flush_text(blocks, pending)
        blocks.append(RawBlock(BLOCK_KINDS[tag], raw[match.end():close_at]))
        pos = close_at + len(closer)

    pending.append(raw[pos:])
    _flush_text(blocks, pending)
    return blocks


def _flush_text(blocks: list[RawBlock], pending: list[str]) -> None:
    """Emit pending text verbatim as a text span, unless it is empty."""
    text = "".join(pending)
    pending.clear()
    if text:
        blocks.append(RawBlock("text", text))
