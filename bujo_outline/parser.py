"""Document-level parsing of bullet-journal outlines."""

from __future__ import annotations

from pathlib import Path

from .classifier import classify_line
from .config import ConfigError, OutlineConfig, validate_config
from .exceptions import LineTooLongError, ParseError
from .filesystem import safe_read
from .log import get_logger
from .models import DocumentError, ParsedDocument

logger = get_logger(__name__)


def parse_document(document: str) -> ParsedDocument:
    """Parse an outline document into classified lines and errors.

    Splits on line feeds without dropping trailing empty segments, so a
    document ending in a newline has a final blank line. One bad line never
    stops the remaining lines from being classified.

    Args:
        document: Full outline text.

    Returns:
        ParsedDocument: Parsed lines, validity, and per-line errors. An empty
            string yields a document with no lines.

    Examples:
        parse_document(". Buy groceries\\n  - Milk").is_valid  # True
        parse_document("^ Unknown").errors  # (DocumentError(1, "Unknown entry type"),)
    """
    if not document:
        return ParsedDocument()

    lines = []
    errors = []
    for index, raw_line in enumerate(document.split("\n")):
        parsed = classify_line(raw_line, index + 1)
        lines.append(parsed)
        if not parsed.is_valid and parsed.error_message:
            errors.append(DocumentError(line_number=parsed.line_number, message=parsed.error_message))

    return ParsedDocument(lines=tuple(lines), is_valid=not errors, errors=tuple(errors))


def check_line_lengths(document: str, max_line_length: int) -> None:
    """Reject documents containing an overlong line.

    Args:
        document: Full outline text.
        max_line_length: Maximum allowed characters per line, excluding the
            line ending.

    Raises:
        LineTooLongError: If any line is longer than `max_line_length`.
    """
    for index, line in enumerate(document.split("\n")):
        if len(line.rstrip("\r")) > max_line_length:
            raise LineTooLongError(index + 1, max_line_length)


class ParseFileError(Exception):
    """Raised when parsing a journal file fails."""


def parse_file(
    filepath: Path,
    max_line_length: int | None = None,
    config: OutlineConfig | None = None,
) -> ParsedDocument:
    """Read and parse a journal file.

    Args:
        filepath: Path to the outline file.
        max_line_length: Optional override for the maximum allowed line length
            (excluding line endings).
        config: Configuration supplying default limits; defaults to a new
            `OutlineConfig` when omitted.

    Returns:
        ParsedDocument: Parsed content of the file.

    Raises:
        ParseFileError: If configuration is invalid, a limit is exceeded, or
            the file cannot be read or decoded.

    Examples:
        document = parse_file(Path("journal.bujo"), 120)
    """
    config = config or OutlineConfig()
    try:
        validate_config(config)
    except ConfigError as error:
        raise ParseFileError(str(error)) from error

    effective_max_line_length = (
        config.max_line_length if max_line_length is None else max_line_length
    )
    if effective_max_line_length <= 0:
        raise ParseFileError("`max_line_length` override must be a positive integer")

    try:
        with safe_read(filepath) as file:
            content = file.read()
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise ParseFileError(error_message) from error
    except IOError as error:
        raise ParseFileError(str(error)) from error

    try:
        check_line_lengths(content, effective_max_line_length)
    except LineTooLongError as error:
        error_message = (
            f"{filepath} contains a line at line {error.line_number} "
            f"exceeding the maximum allowed length of {error.max_line_length} characters."
        )
        raise ParseFileError(error_message) from error
    except ParseError as error:
        raise ParseFileError(f"{filepath}: {error}") from error

    document = parse_document(content)
    logger.debug(
        "document_parsed",
        path=str(filepath),
        lines=len(document.lines),
        errors=document.error_count,
    )
    return document
