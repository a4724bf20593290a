"""Domain-specific exceptions for route analysis."""

from __future__ import annotations


class RouteAnalysisError(RuntimeError):
    """Base error for route analysis failures."""


class BadLocationError(RouteAnalysisError, IndexError):
    """Raised when an offset/length pair falls outside a document."""

    def __init__(self, offset: int, length: int, size: int) -> None:
        super().__init__(
            f"Location {offset}+{length} is outside document of size {size}"
        )
        self.offset = offset
        self.length = length
        self.size = size


class FrontendUnavailableError(RouteAnalysisError):
    """Raised when the source frontend dependencies cannot be loaded."""


__all__ = [
    "RouteAnalysisError",
    "BadLocationError",
    "FrontendUnavailableError",
]
