from __future__ import annotations

import dataclasses

import pytest

from bujo_outline.models import (
    EntrySymbol,
    FoldRange,
    LineKind,
    ParsedDocument,
    ParsedLine,
    Priority,
)


def test_entry_symbol_members():
    assert [symbol.value for symbol in EntrySymbol] == [".", "-", "o", "x", "~", "?", ">"]
    assert [symbol.entry_type for symbol in EntrySymbol] == [
        "task",
        "note",
        "event",
        "done",
        "cancelled",
        "question",
        "migrated",
    ]


def test_entry_symbol_from_char():
    assert EntrySymbol.from_char(">") is EntrySymbol.MIGRATED
    assert EntrySymbol.from_char("^") is None
    assert EntrySymbol.from_char("") is None


def test_priority_markers_round_trip():
    for priority in (Priority.HIGH, Priority.MEDIUM, Priority.LOW):
        assert Priority.from_marker(priority.marker) is priority
    assert Priority.NONE.marker == ""
    assert Priority.HIGH.marker == "!!!"
    assert Priority.LOW.marker == "!"


@pytest.mark.parametrize("marker", ["", "!!!!", "!?", "x"])
def test_priority_from_marker_rejects_other_text(marker: str):
    with pytest.raises(ValueError):
        Priority.from_marker(marker)


def test_parsed_line_defaults():
    line = ParsedLine(line_number=1, raw="")

    assert line.depth == 0
    assert line.symbol is None
    assert line.priority is Priority.NONE
    assert line.content == ""
    assert line.migration_target is None
    assert line.is_valid
    assert not line.is_empty
    assert not line.is_header
    assert line.error_message is None
    assert line.entry_type is None


def test_parsed_line_kind():
    assert ParsedLine(1, "", is_empty=True).kind is LineKind.BLANK
    assert ParsedLine(1, "──", is_header=True).kind is LineKind.HEADER
    assert ParsedLine(1, ". a", symbol=EntrySymbol.TASK, content="a").kind is LineKind.ENTRY
    assert ParsedLine(1, "^", is_valid=False, error_message="x").kind is LineKind.INVALID


def test_models_are_immutable():
    line = ParsedLine(line_number=1, raw=". a")

    with pytest.raises(dataclasses.FrozenInstanceError):
        line.content = "b"  # type: ignore[misc]

    with pytest.raises(dataclasses.FrozenInstanceError):
        FoldRange(start=0, end=1).end = 2  # type: ignore[misc]


def test_parsed_document_defaults():
    document = ParsedDocument()

    assert document.lines == ()
    assert document.is_valid
    assert document.errors == ()
    assert document.error_count == 0
    assert document.entries == ()
