"""Data models for bujo-outline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


class EntrySymbol(Enum):
    """Entry kinds recognized at the start of an outline line.

    Each member's value is the single character that introduces the entry.

    Attributes:
        TASK: Something to do (``.``).
        NOTE: A note or observation (``-``).
        EVENT: Something that happens at a point in time (``o``).
        DONE: A completed task (``x``).
        CANCELLED: A task that will not be done (``~``).
        QUESTION: An open question (``?``).
        MIGRATED: A task deferred to another day (``>``).
    """

    TASK = "."
    NOTE = "-"
    EVENT = "o"
    DONE = "x"
    CANCELLED = "~"
    QUESTION = "?"
    MIGRATED = ">"

    @classmethod
    def from_char(cls, char: str) -> EntrySymbol | None:
        """Return the member for a symbol character, or None when unknown.

        Examples:
            EntrySymbol.from_char("x")  # EntrySymbol.DONE
            EntrySymbol.from_char("^")  # None
        """
        try:
            return cls(char)
        except ValueError:
            return None

    @property
    def entry_type(self) -> str:
        return self.name.lower()


class Priority(IntEnum):
    """Urgency of an entry; lower non-zero values are more urgent.

    Attributes:
        NONE: No priority marker.
        HIGH: Marked with ``!!!``.
        MEDIUM: Marked with ``!!``.
        LOW: Marked with ``!``.
    """

    NONE = 0
    HIGH = 1
    MEDIUM = 2
    LOW = 3

    @property
    def marker(self) -> str:
        if self is Priority.NONE:
            return ""
        return "!" * (4 - self.value)

    @classmethod
    def from_marker(cls, marker: str) -> Priority:
        """Map a run of one to three ``!`` characters to a priority.

        Raises:
            ValueError: If `marker` is not a run of one to three ``!``.
        """
        if not marker or len(marker) > 3 or marker.strip("!"):
            raise ValueError(f"Invalid priority marker: {marker!r}")
        return cls(4 - len(marker))


class LineKind(Enum):
    """Classification path taken for a single line.

    Attributes:
        BLANK: Empty or whitespace-only line.
        HEADER: Separator line such as ``── Monday ──``.
        ENTRY: Valid line carrying an entry symbol.
        INVALID: Line that failed validation.
    """

    BLANK = auto()
    HEADER = auto()
    ENTRY = auto()
    INVALID = auto()


@dataclass(frozen=True)
class ParsedLine:
    """Classification of one source line.

    Attributes:
        line_number: One-based position of the line in its document.
        raw: Original text of the line, unmodified.
        depth: Nesting level derived from leading whitespace; 0 is top level.
        symbol: Entry kind, or None for blank, header, and unknown lines.
        priority: Priority marker found before the content.
        content: Text left after symbol, migration annotation, and priority
            marker are removed.
        migration_target: Raw text of a ``>[...]`` annotation, if any.
        is_valid: False when the line carries an error.
        is_empty: True for blank lines.
        is_header: True for separator lines.
        error_message: Reason the line is invalid, or None.
    """

    line_number: int
    raw: str
    depth: int = 0
    symbol: EntrySymbol | None = None
    priority: Priority = Priority.NONE
    content: str = ""
    migration_target: str | None = None
    is_valid: bool = True
    is_empty: bool = False
    is_header: bool = False
    error_message: str | None = None

    @property
    def kind(self) -> LineKind:
        if not self.is_valid:
            return LineKind.INVALID
        if self.is_empty:
            return LineKind.BLANK
        if self.is_header:
            return LineKind.HEADER
        return LineKind.ENTRY

    @property
    def entry_type(self) -> str | None:
        return self.symbol.entry_type if self.symbol is not None else None


@dataclass(frozen=True)
class DocumentError:
    """A validation error attached to one line of a document."""

    line_number: int
    message: str


@dataclass(frozen=True)
class ParsedDocument:
    """Structured result of parsing a whole outline document.

    Attributes:
        lines: One parsed line per input line, in order.
        is_valid: True when no line produced an error.
        errors: One error per invalid line, in line order.
    """

    lines: tuple[ParsedLine, ...] = ()
    is_valid: bool = True
    errors: tuple[DocumentError, ...] = ()

    @property
    def entries(self) -> tuple[ParsedLine, ...]:
        return tuple(line for line in self.lines if line.kind is LineKind.ENTRY)

    @property
    def error_count(self) -> int:
        return len(self.errors)


@dataclass(frozen=True)
class FoldRange:
    """Inclusive range of zero-based line indices covering a foldable subtree.

    Attributes:
        start: Index of the anchor line.
        end: Index of the last descendant line.
    """

    start: int
    end: int


@dataclass(frozen=True)
class LineMatch:
    """Location of an entry line inside a document string.

    Attributes:
        line: One-based line number.
        start: Offset of the first character of the line.
        end: Offset just past the last character of the line, newline excluded.
    """

    line: int
    start: int
    end: int
