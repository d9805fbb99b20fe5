"""Package-specific exception types."""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for parsing-related errors.

    Content problems inside an outline are reported as data on the parsed
    lines; this hierarchy covers the limits enforced when reading files.
    """


class LineTooLongError(ParseError):
    """Raised when a line exceeds the configured maximum length.

    Args:
        line_number: One-based index of the offending line.
        max_line_length: Maximum allowed line length in characters.
    """

    def __init__(self, line_number: int, max_line_length: int):
        self.line_number = line_number
        self.max_line_length = max_line_length
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Line {self.line_number} exceeds maximum allowed length "
            f"of {self.max_line_length} characters"
        )
