"""
bujo-outline: parser for bullet-journal outline text.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    bujo-outline check today.bujo

Library Usage:
    from bujo_outline import fold_range, parse_document

    text = ". Parent\\n  . Child\\n. Next"
    document = parse_document(text)
    assert document.is_valid
    fold = fold_range(text.split("\\n"), 0)  # FoldRange(start=0, end=1)
"""

__version__ = "0.1.0"

from .classifier import classify_line, measure_depth
from .config import ConfigError, OutlineConfig
from .constants import CONTENT_REQUIRED, UNKNOWN_ENTRY_TYPE
from .exceptions import LineTooLongError, ParseError
from .folding import fold_range, foldable_ranges
from .formatter import format_document, format_line
from .locator import find_entry_line
from .models import (
    DocumentError,
    EntrySymbol,
    FoldRange,
    LineKind,
    LineMatch,
    ParsedDocument,
    ParsedLine,
    Priority,
)
from .parser import ParseFileError, parse_document, parse_file

__all__ = [
    # Core functionality
    "classify_line",
    "parse_document",
    "fold_range",
    "find_entry_line",
    # Helpers
    "measure_depth",
    "foldable_ranges",
    "format_line",
    "format_document",
    "parse_file",
    # Data models
    "DocumentError",
    "EntrySymbol",
    "FoldRange",
    "LineKind",
    "LineMatch",
    "ParsedDocument",
    "ParsedLine",
    "Priority",
    # Configuration
    "OutlineConfig",
    # Error messages
    "CONTENT_REQUIRED",
    "UNKNOWN_ENTRY_TYPE",
    # Exceptions
    "ConfigError",
    "LineTooLongError",
    "ParseError",
    "ParseFileError",
    # Version
    "__version__",
]
