"""Canonical text rendering of parsed outline lines."""

from __future__ import annotations

from .constants import INDENT_SIZE
from .models import LineKind, ParsedDocument, ParsedLine


def format_line(parsed: ParsedLine) -> str:
    """Render a parsed line back to canonical outline markup.

    Valid entries are rebuilt from their parts with two spaces per depth
    level and single spaces between markers. Blank lines render empty.
    Header and invalid lines are returned unchanged so that nothing the
    parser could not understand is rewritten.

    Args:
        parsed: Line to render.

    Returns:
        str: Line text without a trailing newline.

    Examples:
        format_line(classify_line("    .!!!  Urgent", 1))  # "    . !!! Urgent"
        format_line(classify_line(">[friday]Call", 1))  # "> [friday] Call"
    """
    kind = parsed.kind
    if kind is LineKind.BLANK:
        return ""
    if kind is not LineKind.ENTRY or parsed.symbol is None:
        return parsed.raw

    parts = [parsed.symbol.value]
    if parsed.migration_target is not None:
        parts.append(f"[{parsed.migration_target}]")
    if parsed.priority.marker:
        parts.append(parsed.priority.marker)
    parts.append(parsed.content)

    indent = " " * (INDENT_SIZE * parsed.depth)
    return indent + " ".join(parts)


def format_document(document: ParsedDocument) -> str:
    """Render every line of a parsed document, joined with line feeds.

    Examples:
        format_document(parse_document(".a\\n\\t-b"))  # ". a\\n  - b"
    """
    return "\n".join(format_line(line) for line in document.lines)
