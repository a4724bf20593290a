"""Offset to line/character conversion for a single source document."""

from __future__ import annotations

from bisect import bisect_right
from typing import Sequence

from .errors import BadLocationError
from .models import Position, SourceRange

__all__ = ["TextDocument"]


def _line_starts(text: str) -> Sequence[int]:
    """Return starting character offsets for each line in ``text``."""

    starts = [0]
    for index, char in enumerate(text):
        if char == "\n":
            starts.append(index + 1)
    return starts


class TextDocument:
    """Immutable text snapshot that converts offsets into ranges.

    Example:
        >>> doc = TextDocument("ab\\ncd")
        >>> doc.to_range(3, 2).start
        Position(line=1, character=0)
    """

    def __init__(self, text: str, *, uri: str | None = None) -> None:
        self._text = text
        self._uri = uri
        self._line_starts = _line_starts(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def uri(self) -> str | None:
        return self._uri

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def __len__(self) -> int:
        return len(self._text)

    def position_at(self, offset: int) -> Position:
        """Return the position of ``offset``.

        Raises:
            BadLocationError: If ``offset`` is outside ``[0, len(text)]``.
        """

        if offset < 0 or offset > len(self._text):
            raise BadLocationError(offset, 0, len(self._text))
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line=line, character=offset - self._line_starts[line])

    def to_range(self, offset: int, length: int) -> SourceRange:
        """Return the range spanning ``length`` characters from ``offset``.

        Raises:
            BadLocationError: If the span is not fully inside the document.
        """

        if offset < 0 or length < 0 or offset + length > len(self._text):
            raise BadLocationError(offset, length, len(self._text))
        return SourceRange(
            start=self.position_at(offset),
            end=self.position_at(offset + length),
            offset=offset,
            length=length,
        )
