"""Typed errors raised while composing or rendering renderables."""

from __future__ import annotations

__all__ = ["RenderError", "EmptyConcatError", "MissingConverterError"]


class RenderError(RuntimeError):
    """Base error for rendering failures."""


class EmptyConcatError(RenderError, ValueError):
    """Raised when :func:`concat` is called without any pieces."""


class MissingConverterError(RenderError):
    """Raised when HTML must be converted to Markdown without a converter."""
