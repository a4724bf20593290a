"""Tests for :mod:`fluxhover.routes.document`."""

from __future__ import annotations

import pytest

from fluxhover.routes.document import TextDocument
from fluxhover.routes.errors import BadLocationError
from fluxhover.routes.models import Position


def test_to_range_maps_offsets_to_lines() -> None:
    doc = TextDocument("first\nsecond line\nthird", uri="file:///Routes.java")

    source_range = doc.to_range(6, 6)

    assert source_range.start == Position(line=1, character=0)
    assert source_range.end == Position(line=1, character=6)
    assert (source_range.offset, source_range.length) == (6, 6)
    assert doc.uri == "file:///Routes.java"
    assert doc.line_count == 3


def test_to_range_allows_span_ending_at_document_end() -> None:
    doc = TextDocument("abc")

    source_range = doc.to_range(1, 2)

    assert source_range.end == Position(line=0, character=3)


def test_position_after_trailing_newline() -> None:
    doc = TextDocument("abc\n")

    assert doc.position_at(4) == Position(line=1, character=0)


@pytest.mark.parametrize(
    ("offset", "length"),
    [(-1, 1), (0, -1), (2, 5), (10, 0)],
)
def test_to_range_rejects_out_of_bounds(offset: int, length: int) -> None:
    doc = TextDocument("abcd")

    with pytest.raises(BadLocationError) as excinfo:
        doc.to_range(offset, length)

    assert excinfo.value.size == 4
    assert isinstance(excinfo.value, IndexError)
