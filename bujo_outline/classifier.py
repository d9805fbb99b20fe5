"""Single-line classification of bullet-journal outline markup."""

from __future__ import annotations

from .constants import (
    CONTENT_REQUIRED,
    HEADER_SEPARATOR,
    INDENT_SIZE,
    PRIORITY_PATTERN,
    TAB_REPLACEMENT,
    UNKNOWN_ENTRY_TYPE,
)
from .models import EntrySymbol, ParsedLine, Priority


def is_blank(line: str) -> bool:
    """Return True for empty or whitespace-only lines."""
    return not line.strip()


def measure_depth(line: str) -> int:
    """Compute the nesting level of a line from its leading whitespace.

    Tabs in the indentation count as two spaces. The number of leading spaces
    is divided by the indent size and rounded to the nearest level, with
    halves rounding up.

    Args:
        line: Raw line text.

    Returns:
        int: Non-negative nesting level.

    Examples:
        measure_depth(". Root")  # 0
        measure_depth("    . Grandchild")  # 2
        measure_depth("\\t. Child")  # 1
        measure_depth("   . Odd")  # 2
    """
    indent = line[: len(line) - len(line.lstrip())]
    leading_spaces = len(indent.replace("\t", TAB_REPLACEMENT))
    return (leading_spaces + INDENT_SIZE // 2) // INDENT_SIZE


def _split_migration_target(text: str) -> tuple[str | None, str]:
    """Extract a ``[target]`` annotation from the start of `text`.

    Returns:
        tuple[str | None, str]: The raw target (None when absent or
            unterminated) and the text following the annotation.

    Examples:
        _split_migration_target("[tomorrow] Review PR")  # ("tomorrow", "Review PR")
        _split_migration_target("[unclosed task")  # (None, "[unclosed task")
    """
    if not text.startswith("["):
        return None, text

    close = text.find("]")
    if close == -1:
        return None, text

    return text[1:close], text[close + 1 :].lstrip()


def _split_priority(text: str) -> tuple[Priority, str]:
    """Extract a leading priority marker from `text`.

    Examples:
        _split_priority("!!! Urgent")  # (Priority.HIGH, "Urgent")
        _split_priority("!important")  # (Priority.NONE, "!important")
    """
    match = PRIORITY_PATTERN.match(text)
    if not match:
        return Priority.NONE, text

    return Priority.from_marker(match.group(1)), text[match.end() :]


def classify_line(line: str, line_number: int) -> ParsedLine:
    """Classify one line of outline text.

    Checks run in a fixed order and the first that applies decides the
    result: blank, header, unknown symbol, then entry parsing (migration
    annotation, priority marker, content). Never raises; problems are
    reported through `is_valid` and `error_message`.

    Args:
        line: Raw text of the line, without its trailing newline.
        line_number: One-based position of the line in its document.

    Returns:
        ParsedLine: Classification of the line.

    Examples:
        classify_line(". Buy groceries", 1).content  # "Buy groceries"
        classify_line(">[tomorrow] Review PR", 1).migration_target  # "tomorrow"
        classify_line("^ Unknown", 1).error_message  # "Unknown entry type"
    """
    if is_blank(line):
        return ParsedLine(line_number=line_number, raw=line, is_empty=True)

    if HEADER_SEPARATOR in line:
        return ParsedLine(line_number=line_number, raw=line, is_header=True)

    depth = measure_depth(line)
    body = line.lstrip()

    symbol = EntrySymbol.from_char(body[0])
    if symbol is None:
        return ParsedLine(
            line_number=line_number,
            raw=line,
            depth=depth,
            is_valid=False,
            error_message=UNKNOWN_ENTRY_TYPE,
        )

    remainder = body[1:].lstrip()

    migration_target = None
    if symbol is EntrySymbol.MIGRATED:
        migration_target, remainder = _split_migration_target(remainder)

    priority, content = _split_priority(remainder)

    is_valid = bool(content.strip())
    return ParsedLine(
        line_number=line_number,
        raw=line,
        depth=depth,
        symbol=symbol,
        priority=priority,
        content=content,
        migration_target=migration_target,
        is_valid=is_valid,
        error_message=None if is_valid else CONTENT_REQUIRED,
    )
