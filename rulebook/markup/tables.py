"""Table builder for ``{{TABLE}}`` block bodies."""

import logging
import re

from rulebook.markup.markers import strip_markup
from rulebook.models.segments import Table

logger = logging.getLogger(__name__)

# Divider rows such as "---|---|---" or "+----+----+"
SEPARATOR_RE = re.compile(r"^[\s\-+|]+$")


def split_cells(line: str) -> list[str]:
    """Split a table line on pipes into trimmed, markup-free cells.

    Empty cells produced by a leading or trailing pipe are dropped; empty
    cells between two pipes are kept.
    """
    cells = [strip_markup(cell).strip() for cell in line.split("|")]
    if cells and not cells[0]:
        cells = cells[1:]
    if cells and not cells[-1]:
        cells = cells[:-1]
    return cells


def build_table(raw: str) -> Table | None:
    """Build a table from the raw text between the table tags.

    The first content line is the header; every following content line is a
    data row. Blank and divider lines are skipped.

    Args:
        raw: Table block body.

    Returns:
        The Table, or None when there is no header or no data row.
    """
    rows: list[tuple[str, ...]] = []
    for line in raw.split("\n"):
        if not line.strip() or SEPARATOR_RE.match(line):
            continue
        cells = split_cells(line)
        if cells:
            rows.append(tuple(cells))

    if len(rows) < 2:
        logger.debug("Dropping table with %d content rows", len(rows))
        return None

    return Table(header=rows[0], rows=tuple(rows[1:]))
