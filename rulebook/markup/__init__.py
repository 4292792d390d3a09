"""Rule-text markup engine: block tokenizer, inline parser, tables."""

from rulebook.markup.inline import highlight_run, parse_line
from rulebook.markup.markers import FormatStack, Marker, strip_markup
from rulebook.markup.renderer import flatten_segments, parse_rule_text
from rulebook.markup.tables import build_table
from rulebook.markup.tokenizer import RawBlock, tokenize_blocks

__all__ = [
    "FormatStack",
    "Marker",
    "RawBlock",
    "build_table",
    "flatten_segments",
    "highlight_run",
    "parse_line",
    "parse_rule_text",
    "strip_markup",
    "tokenize_blocks",
]
