"""Composable renderables producing HTML and Markdown hover content."""

from __future__ import annotations

from .buffers import HtmlBuffer, MarkdownBuffer
from .context import (
    MarkdownifyConverter,
    MarkupConverter,
    PackageResourceLoader,
    RenderContext,
    ResourceLoader,
)
from .errors import EmptyConcatError, MissingConverterError, RenderError
from .render import render_html, render_markdown, write_html, write_markdown
from .renderables import (
    NO_DESCRIPTION,
    Renderable,
    bold,
    concat,
    from_resource,
    html_blob,
    italic,
    lazy,
    line_break,
    link,
    paragraph,
    strike_through,
    text,
)

__all__ = [
    "EmptyConcatError",
    "HtmlBuffer",
    "MarkdownBuffer",
    "MarkdownifyConverter",
    "MarkupConverter",
    "MissingConverterError",
    "NO_DESCRIPTION",
    "PackageResourceLoader",
    "RenderContext",
    "RenderError",
    "Renderable",
    "ResourceLoader",
    "bold",
    "concat",
    "from_resource",
    "html_blob",
    "italic",
    "lazy",
    "line_break",
    "link",
    "paragraph",
    "render_html",
    "render_markdown",
    "strike_through",
    "text",
    "write_html",
    "write_markdown",
]
