"""Locate entry lines inside an outline document by their content."""

from __future__ import annotations

from .constants import ENTRY_LINE_PATTERN
from .models import LineMatch


def find_entry_line(document: str, search_text: str) -> LineMatch | None:
    """Find the first entry line whose content matches `search_text`.

    Only lines that start (after indentation) with an entry symbol are
    considered. A single modifier character (``!``, ``*`` or ``^``) may follow
    the symbol. The stripped content matches when it equals `search_text` or
    contains it.

    Args:
        document: Full outline text.
        search_text: Content to look for.

    Returns:
        LineMatch | None: One-based line number and the character offsets of
            the whole line within `document`, or None when either argument is
            empty or no entry matches.

    Examples:
        find_entry_line(".task one\\n-note two", "note two")
        # LineMatch(line=2, start=10, end=19)
    """
    if not document or not search_text:
        return None

    offset = 0
    for index, line in enumerate(document.split("\n")):
        match = ENTRY_LINE_PATTERN.match(line)
        if match:
            content = match.group("content").strip()
            if content == search_text or search_text in content:
                return LineMatch(line=index + 1, start=offset, end=offset + len(line))
        offset += len(line) + 1

    return None
