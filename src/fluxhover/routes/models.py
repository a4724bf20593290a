"""Value types produced by route analysis."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Position",
    "SourceRange",
    "RouteElement",
    "SkippedMatch",
    "RouteDefinition",
]


@dataclass(frozen=True, slots=True)
class Position:
    """Zero-based line/character position within a document."""

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class SourceRange:
    """Document range produced by :meth:`TextDocument.to_range`."""

    start: Position
    end: Position
    offset: int
    length: int


@dataclass(frozen=True, slots=True)
class RouteElement:
    """Named route construct extracted from source, e.g. a content type."""

    name: str
    range: SourceRange


@dataclass(frozen=True, slots=True)
class SkippedMatch:
    """Predicate match dropped because its argument could not be located."""

    name: str
    offset: int
    length: int
    reason: str


@dataclass(frozen=True, slots=True)
class RouteDefinition:
    """Route-definition call together with the predicate facts it declares."""

    method: str
    range: SourceRange
    content_types: tuple[RouteElement, ...] = ()
    accept_types: tuple[RouteElement, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when no predicate elements were extracted."""

        return not (self.content_types or self.accept_types)
