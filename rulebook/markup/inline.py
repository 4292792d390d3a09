"""Inline parser: turns one line of rule text into styled runs."""

import logging
import re
from typing import Callable, NamedTuple

from rulebook.config import DEFAULT_LINK_BASE_URL
from rulebook.markup.markers import MARKER_RE, FormatStack, Marker, strip_markup
from rulebook.models.segments import (
    ActionKind,
    Line,
    RunAction,
    RunStyle,
    StyledRun,
)

logger = logging.getLogger(__name__)

LINK_RE = re.compile(r"\{\{LINK:([^}]*)\}\}(.*?)\{\{/LINK\}\}")

# <SG1>, <R3d>: uppercase prefix, digits, optional sub-part letter
RULE_REFERENCE_RE = re.compile(r"<[A-Z]+\d+[a-z]?>")

# Maps a rule code token to a rule id, or None when it does not resolve.
ReferenceResolver = Callable[[str], str | None]


class _LinkSpan(NamedTuple):
    start: int
    end: int
    url: str
    text: str


def absolute_url(url: str, base_url: str = DEFAULT_LINK_BASE_URL) -> str:
    """Resolve a link target against the external site when relative."""
    url = url.strip()
    if url.startswith("http"):
        return url
    return base_url.rstrip("/") + "/" + url.lstrip("/")


def parse_line(
    line: str,
    highlight_query: str | None = None,
    resolve_reference: ReferenceResolver | None = None,
    link_base_url: str = DEFAULT_LINK_BASE_URL,
) -> Line:
    """Parse one block-free line into runs.

    Hyperlinks are located first; the line is then walked left to right,
    handling whichever of the next link or the next format marker comes
    first. Text between events is split around rule references and styled
    by the format stack. The runs cover the line's visible text with no gaps.

    Args:
        line: A single line with no newline characters.
        highlight_query: Optional search text to mark in each run.
        resolve_reference: Maps a rule code to a rule id for navigation.
        link_base_url: Prefix for relative link targets.

    Returns:
        The parsed Line.
    """
    links = [
        _LinkSpan(m.start(), m.end(), m.group(1), m.group(2))
        for m in LINK_RE.finditer(line)
    ]
    stack = FormatStack()
    runs: list[StyledRun] = []
    pos = 0
    link_index = 0

    while pos < len(line):
        while link_index < len(links) and links[link_index].start < pos:
            link_index += 1
        next_link = links[link_index] if link_index < len(links) else None
        marker = MARKER_RE.search(line, pos)

        if next_link is not None and (marker is None or next_link.start <= marker.start()):
            _emit_text(runs, line[pos:next_link.start], stack.style(), resolve_reference)
            visible = strip_markup(next_link.text)
            if visible:
                runs.append(
                    StyledRun(
                        text=visible,
                        style=stack.style(),
                        action=RunAction(
                            kind=ActionKind.OPEN_LINK,
                            target=absolute_url(next_link.url, link_base_url),
                        ),
                    )
                )
            pos = next_link.end
            link_index += 1
        elif marker is not None:
            _emit_text(runs, line[pos:marker.start()], stack.style(), resolve_reference)
            if marker.group(1):
                stack.pop()
            else:
                stack.push(Marker(marker.group(2)))
            pos = marker.end()
        else:
            _emit_text(runs, line[pos:], stack.style(), resolve_reference)
            pos = len(line)

    if highlight_query and highlight_query.strip():
        runs = [part for run in runs for part in highlight_run(run, highlight_query)]

    return Line(runs=tuple(runs))


def _emit_text(
    runs: list[StyledRun],
    text: str,
    style: RunStyle,
    resolve_reference: ReferenceResolver | None,
) -> None:
    """Append plain text, excising rule references into their own runs."""
    pos = 0
    for match in RULE_REFERENCE_RE.finditer(text):
        if match.start() > pos:
            runs.append(StyledRun(text=text[pos:match.start()], style=style))

        code = match.group()
        rule_id = resolve_reference(code) if resolve_reference else None
        if rule_id is None:
            logger.debug("Unresolved rule reference %s", code)
            runs.append(StyledRun(text=code, style=style))
        else:
            runs.append(
                StyledRun(
                    text=code,
                    style=style,
                    action=RunAction(kind=ActionKind.NAVIGATE_RULE, target=rule_id),
                )
            )
        pos = match.end()

    if pos < len(text):
        runs.append(StyledRun(text=text[pos:], style=style))


def highlight_run(run: StyledRun, query: str) -> list[StyledRun]:
    """Split a run around the first case-insensitive occurrence of query.

    Only the first occurrence is marked. Sub-runs keep the run's style and
    action; the match gets ``highlighted=True``.
    """
    match = re.search(re.escape(query), run.text, re.IGNORECASE)
    if match is None or not match.group():
        return [run]

    parts: list[StyledRun] = []
    before = run.text[:match.start()]
    after = run.text[match.end():]
    if before:
        parts.append(run.model_copy(update={"text": before}))
    parts.append(
        run.model_copy(
            update={
                "text": match.group(),
                "style": run.style.model_copy(update={"highlighted": True}),
            }
        )
    )
    if after:
        parts.append(run.model_copy(update={"text": after}))
    return parts
