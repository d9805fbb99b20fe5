"""Indentation-driven fold ranges for outline subtrees.

Hierarchy is never materialized as a tree: a subtree is the run of following
lines indented deeper than its anchor, found by a forward scan over raw line
strings. Lines do not need to be valid entries, so folding keeps working
while a document is being edited.
"""

from __future__ import annotations

from collections.abc import Sequence

from .classifier import is_blank, measure_depth
from .models import FoldRange


def fold_range(lines: Sequence[str], line_index: int) -> FoldRange | None:
    """Compute the range of descendant lines under an anchor line.

    Blank lines inside a subtree do not end it, but trailing blank lines are
    not included in the range. The first non-blank line at the anchor's depth
    or shallower ends the scan.

    Args:
        lines: Raw document lines.
        line_index: Zero-based index of the anchor line.

    Returns:
        FoldRange | None: Inclusive range from the anchor to its last
            descendant, or None when the anchor is blank, is the last line,
            is out of range, or has no deeper lines beneath it.

    Examples:
        fold_range([". Parent", "  . Child", ". Next"], 0)  # FoldRange(0, 1)
        fold_range([". Parent", ". Next"], 0)  # None
    """
    if line_index < 0 or line_index >= len(lines) - 1:
        return None

    anchor = lines[line_index]
    if is_blank(anchor):
        return None

    anchor_depth = measure_depth(anchor)
    last_descendant = None

    for index in range(line_index + 1, len(lines)):
        line = lines[index]
        if is_blank(line):
            continue
        if measure_depth(line) <= anchor_depth:
            break
        last_descendant = index

    if last_descendant is None:
        return None

    return FoldRange(start=line_index, end=last_descendant)


def foldable_ranges(lines: Sequence[str]) -> list[FoldRange]:
    """Return the fold range of every foldable line, in document order.

    Nested subtrees produce one range each, so a root with a child that has
    children of its own yields two overlapping ranges.

    Examples:
        foldable_ranges([". Root", "  . Mid", "    . Leaf"])
        # [FoldRange(0, 2), FoldRange(1, 2)]
    """
    ranges = []
    for index in range(len(lines)):
        found = fold_range(lines, index)
        if found is not None:
            ranges.append(found)
    return ranges
