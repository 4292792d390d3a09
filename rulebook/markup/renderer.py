"""Rule-text entry point: raw markup in, parsed segments out."""

from __future__ import annotations

import logging
from typing import Iterable

from rulebook.config import DEFAULT_LINK_BASE_URL
from rulebook.manual.references import resolve_rule_reference
from rulebook.markup.inline import ReferenceResolver, parse_line
from rulebook.markup.tables import build_table
from rulebook.markup.tokenizer import tokenize_blocks
from rulebook.models.manual import GameManual
from rulebook.models.segments import (
    Callout,
    ImageBlock,
    Line,
    ParsedSegment,
    Table,
    TextBlock,
    ViolationNotes,
)

logger = logging.getLogger(__name__)


def parse_rule_text(
    raw: str,
    highlight_query: str | None = None,
    *,
    manual: GameManual | None = None,
    link_base_url: str = DEFAULT_LINK_BASE_URL,
) -> list[ParsedSegment]:
    """Parse authored rule text into renderable segments.

    Pure and deterministic: the same text, query and manual always give the
    same structure. Malformed markup degrades to literal text instead of
    raising.

    Args:
        raw: Rule body text with markup.
        highlight_query: Optional search text to highlight.
        manual: Manual used to resolve ``<CODE>`` cross-references. Without
            one, references are plain text.
        link_base_url: Prefix for relative hyperlink targets.

    Returns:
        Segments in source order.
    """
    if not raw:
        return []

    resolver = _reference_resolver(manual) if manual is not None else None

    segments: list[ParsedSegment] = []
    for block in tokenize_blocks(raw):
        if block.kind == "text":
            lines = _parse_lines(block.content.split("\n"), highlight_query, resolver, link_base_url)
            segments.append(TextBlock(lines=lines))
        elif block.kind == "table":
            table = build_table(block.content)
            if table is not None:
                segments.append(table)
        elif block.kind == "callout":
            lines = _parse_lines(block.content.split("\n"), highlight_query, resolver, link_base_url)
            segments.append(Callout(lines=lines))
        elif block.kind == "violation_notes":
            lines = _parse_lines(block.content.split("\n"), highlight_query, resolver, link_base_url)
            segments.append(ViolationNotes(lines=lines))
        elif block.kind == "image":
            segments.append(ImageBlock(url=block.content))
        else:
            logger.warning("Skipping unknown block kind: %s", block.kind)

    return segments


def _reference_resolver(manual: GameManual) -> ReferenceResolver:
    def resolve(code: str) -> str | None:
        rule = resolve_rule_reference(code, manual)
        return rule.id if rule else None

    return resolve


def _parse_lines(
    lines: Iterable[str],
    highlight_query: str | None,
    resolver: ReferenceResolver | None,
    link_base_url: str,
) -> tuple[Line, ...]:
    return tuple(
        parse_line(
            line,
            highlight_query=highlight_query,
            resolve_reference=resolver,
            link_base_url=link_base_url,
        )
        for line in lines
    )


def flatten_segments(segments: Iterable[ParsedSegment]) -> str:
    """Join segments back into plain text with all styling dropped.

    Segments are concatenated as-is. Lines within a segment are joined with
    newlines, table cells with pipes, and image blocks contribute nothing.
    """
    parts: list[str] = []
    for segment in segments:
        if isinstance(segment, (TextBlock, Callout, ViolationNotes)):
            parts.append("\n".join(line.text for line in segment.lines))
        elif isinstance(segment, Table):
            rows = (segment.header, *segment.rows)
            parts.append("\n".join("|".join(row) for row in rows))
    return "".join(parts)
