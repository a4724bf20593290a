"""Immutable building blocks for hover and documentation content.

A renderable is a small tree of frozen values. Each variant carries only its
payload; :mod:`fluxhover.render.render` holds one writer per output format
that walks the same tree, so HTML and Markdown output cannot drift apart in
structure.

Example:
    >>> from fluxhover.render import render_html, render_markdown
    >>> hover = concat(bold(text("Content type: ")), text("JSON"))
    >>> render_markdown(hover)
    '**Content type: **JSON'
    >>> render_html(hover)
    '<b>Content type: </b>JSON'
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable as IterableABC
from typing import TYPE_CHECKING, Any, Callable, Iterable, Union

from .errors import EmptyConcatError

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .buffers import HtmlBuffer

__all__ = [
    "Renderable",
    "Text",
    "Bold",
    "Italic",
    "StrikeThrough",
    "Paragraph",
    "LineBreak",
    "Link",
    "Concat",
    "Lazy",
    "HtmlBlob",
    "FromResource",
    "HtmlFiller",
    "NO_DESCRIPTION_TEXT",
    "NO_DESCRIPTION",
    "text",
    "bold",
    "italic",
    "strike_through",
    "paragraph",
    "line_break",
    "link",
    "concat",
    "lazy",
    "html_blob",
    "from_resource",
]

HtmlFiller = Callable[["HtmlBuffer"], None]


@dataclass(frozen=True, slots=True)
class Text:
    value: str


@dataclass(frozen=True, slots=True)
class Bold:
    child: "Renderable"


@dataclass(frozen=True, slots=True)
class Italic:
    child: "Renderable"


@dataclass(frozen=True, slots=True)
class StrikeThrough:
    child: "Renderable"


@dataclass(frozen=True, slots=True)
class Paragraph:
    child: "Renderable"


@dataclass(frozen=True, slots=True)
class LineBreak:
    pass


@dataclass(frozen=True, slots=True)
class Link:
    text: str
    url: str | None = None


@dataclass(frozen=True, slots=True)
class Concat:
    pieces: tuple["Renderable", ...]


@dataclass(frozen=True, slots=True)
class Lazy:
    """Renderable produced by ``supplier`` anew on every render; never cached."""

    supplier: Callable[[], "Renderable"]


@dataclass(frozen=True, slots=True)
class HtmlBlob:
    """Raw HTML, either literal ``content`` or written by ``filler``."""

    content: str | None = None
    filler: HtmlFiller | None = None


@dataclass(frozen=True, slots=True)
class FromResource:
    """Document ``path`` + format extension loaded from ``scope`` at render time."""

    scope: str
    path: str


Renderable = Union[
    Text,
    Bold,
    Italic,
    StrikeThrough,
    Paragraph,
    LineBreak,
    Link,
    Concat,
    Lazy,
    HtmlBlob,
    FromResource,
]


_VARIANTS = (
    Text,
    Bold,
    Italic,
    StrikeThrough,
    Paragraph,
    LineBreak,
    Link,
    Concat,
    Lazy,
    HtmlBlob,
    FromResource,
)


def text(value: str) -> Text:
    return Text(value)


def bold(child: Renderable) -> Bold:
    return Bold(child)


def italic(child: Renderable) -> Italic:
    return Italic(child)


def strike_through(child: Renderable) -> StrikeThrough:
    return StrikeThrough(child)


def paragraph(child: Renderable) -> Paragraph:
    return Paragraph(child)


def line_break() -> LineBreak:
    """Return a hard line break."""

    return LineBreak()


def link(label: str, url: str | None = None) -> Link:
    """Return a hyperlink; Markdown renders ``[label]`` alone when ``url`` is absent."""

    return Link(text=label, url=url)


def concat(*pieces: Renderable | Iterable[Renderable]) -> Renderable:
    """Join ``pieces`` in order.

    Accepts the pieces either as positional arguments or as one iterable. A
    single piece is returned unchanged.

    Raises:
        EmptyConcatError: If no pieces are given.
        TypeError: If a piece is not a renderable.
    """

    items: tuple[Any, ...] = pieces
    if len(pieces) == 1 and not isinstance(pieces[0], (_VARIANTS, str)):
        if not isinstance(pieces[0], IterableABC):
            raise TypeError(f"Cannot concat {pieces[0]!r}")
        items = tuple(pieces[0])

    if not items:
        raise EmptyConcatError("At least one piece is required for concat")
    for item in items:
        if not isinstance(item, _VARIANTS):
            raise TypeError(f"Cannot concat non-renderable piece {item!r}")
    if len(items) == 1:
        return items[0]
    return Concat(items)


def lazy(supplier: Callable[[], Renderable]) -> Lazy:
    return Lazy(supplier)


def html_blob(content: str | HtmlFiller) -> HtmlBlob:
    """Wrap literal HTML or a callable that writes into an ``HtmlBuffer``."""

    if isinstance(content, str):
        return HtmlBlob(content=content)
    return HtmlBlob(filler=content)


def from_resource(scope: str, path: str) -> FromResource:
    """Render ``path.html`` or ``path.md`` from ``scope``.

    Falls back to :data:`NO_DESCRIPTION` when the document is missing or
    unreadable.
    """

    return FromResource(scope=scope, path=path)


NO_DESCRIPTION_TEXT = "no description"
NO_DESCRIPTION: Renderable = italic(text(NO_DESCRIPTION_TEXT))
