"""Collaborators handed to the render functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from typing import Any, Protocol

from markdownify import markdownify

from fluxhover.core.logging import Logger, get_logger

__all__ = [
    "MarkupConverter",
    "MarkdownifyConverter",
    "ResourceLoader",
    "PackageResourceLoader",
    "RenderContext",
]


class MarkupConverter(Protocol):
    """Convert HTML markup into Markdown text."""

    def convert(self, markup: str) -> str:
        """Return the Markdown rendition of ``markup``."""


class MarkdownifyConverter:
    """Default :class:`MarkupConverter` backed by :mod:`markdownify`.

    Example:
        >>> MarkdownifyConverter().convert("<b>x</b>")
        '**x**'
    """

    def __init__(self, **options: Any) -> None:
        self._options = {"heading_style": "ATX", **options}

    def convert(self, markup: str) -> str:
        return markdownify(markup, **self._options).strip("\n")


class ResourceLoader(Protocol):
    """Load named documents from a resource scope."""

    def load(self, scope: str, path: str) -> bytes | None:
        """Return the bytes of ``path`` within ``scope`` or ``None``."""


class PackageResourceLoader:
    """Resolve scopes as importable packages via :mod:`importlib.resources`.

    Example:
        >>> loader = PackageResourceLoader()
        >>> loader.load("fluxhover.resources", "missing.md") is None
        True
    """

    def load(self, scope: str, path: str) -> bytes | None:
        candidate = resources.files(scope).joinpath(path)
        if not candidate.is_file():
            return None
        return candidate.read_bytes()


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Dependencies consulted while rendering a tree."""

    converter: MarkupConverter | None = field(
        default_factory=MarkdownifyConverter
    )
    loader: ResourceLoader = field(default_factory=PackageResourceLoader)
    logger: Logger = field(
        default_factory=lambda: get_logger("fluxhover.render")
    )
