"""Format writers for renderable trees."""

from __future__ import annotations

from .buffers import HtmlBuffer, MarkdownBuffer
from .context import RenderContext
from .errors import MissingConverterError
from .renderables import (
    NO_DESCRIPTION,
    Bold,
    Concat,
    FromResource,
    HtmlBlob,
    Italic,
    Lazy,
    LineBreak,
    Link,
    Paragraph,
    Renderable,
    StrikeThrough,
    Text,
)

__all__ = ["write_html", "write_markdown", "render_html", "render_markdown"]

_HTML_EXTENSION = ".html"
_MARKDOWN_EXTENSION = ".md"


def render_html(
    renderable: Renderable,
    context: RenderContext | None = None,
) -> str:
    """Return ``renderable`` rendered as HTML."""

    buffer = HtmlBuffer()
    write_html(renderable, buffer, context)
    return buffer.getvalue()


def render_markdown(
    renderable: Renderable,
    context: RenderContext | None = None,
) -> str:
    """Return ``renderable`` rendered as Markdown."""

    buffer = MarkdownBuffer()
    write_markdown(renderable, buffer, context)
    return buffer.getvalue()


def write_html(
    renderable: Renderable,
    buffer: HtmlBuffer,
    context: RenderContext | None = None,
) -> None:
    """Append the HTML form of ``renderable`` to ``buffer``."""

    context = context or RenderContext()
    node = renderable

    if isinstance(node, Text):
        buffer.text(node.value)
    elif isinstance(node, Bold):
        _wrap_html(buffer, "b", node.child, context)
    elif isinstance(node, Italic):
        _wrap_html(buffer, "i", node.child, context)
    elif isinstance(node, StrikeThrough):
        _wrap_html(buffer, "del", node.child, context)
    elif isinstance(node, Paragraph):
        _wrap_html(buffer, "p", node.child, context)
    elif isinstance(node, LineBreak):
        buffer.raw("<br>")
    elif isinstance(node, Link):
        if node.url is None:
            buffer.raw("<a>")
        else:
            buffer.raw('<a href="')
            buffer.url(node.url)
            buffer.raw('">')
        buffer.text(node.text)
        buffer.raw("</a>")
    elif isinstance(node, Concat):
        for piece in node.pieces:
            write_html(piece, buffer, context)
    elif isinstance(node, Lazy):
        write_html(node.supplier(), buffer, context)
    elif isinstance(node, HtmlBlob):
        _fill_html(node, buffer)
    elif isinstance(node, FromResource):
        content = _load_resource(node, _HTML_EXTENSION, context)
        if content is None:
            write_html(NO_DESCRIPTION, buffer, context)
        else:
            buffer.raw(content)
    else:
        raise TypeError(f"Unsupported renderable: {node!r}")


def write_markdown(
    renderable: Renderable,
    buffer: MarkdownBuffer,
    context: RenderContext | None = None,
) -> None:
    """Append the Markdown form of ``renderable`` to ``buffer``."""

    context = context or RenderContext()
    node = renderable

    if isinstance(node, Text):
        # TODO: escape Markdown control characters in plain text
        buffer.append(node.value)
    elif isinstance(node, Bold):
        _wrap_markdown(buffer, "**", node.child, context)
    elif isinstance(node, Italic):
        _wrap_markdown(buffer, "*", node.child, context)
    elif isinstance(node, StrikeThrough):
        _wrap_markdown(buffer, "~~", node.child, context)
    elif isinstance(node, Paragraph):
        _wrap_markdown(buffer, "\n", node.child, context)
    elif isinstance(node, LineBreak):
        # Two trailing spaces turn the newline into a hard break.
        if not buffer.ends_with_newline():
            buffer.append("  ")
        buffer.append("\n")
    elif isinstance(node, Link):
        buffer.append(f"[{node.text}]")
        if node.url is not None:
            buffer.append(f"({node.url})")
    elif isinstance(node, Concat):
        for piece in node.pieces:
            write_markdown(piece, buffer, context)
    elif isinstance(node, Lazy):
        write_markdown(node.supplier(), buffer, context)
    elif isinstance(node, HtmlBlob):
        if context.converter is None:
            raise MissingConverterError(
                "Rendering HTML content as Markdown requires a converter"
            )
        html_buffer = HtmlBuffer()
        _fill_html(node, html_buffer)
        buffer.append(context.converter.convert(html_buffer.getvalue()))
    elif isinstance(node, FromResource):
        content = _load_resource(node, _MARKDOWN_EXTENSION, context)
        if content is None:
            write_markdown(NO_DESCRIPTION, buffer, context)
        else:
            buffer.append(content)
    else:
        raise TypeError(f"Unsupported renderable: {node!r}")


def _wrap_html(
    buffer: HtmlBuffer,
    tag: str,
    child: Renderable,
    context: RenderContext,
) -> None:
    buffer.raw(f"<{tag}>")
    write_html(child, buffer, context)
    buffer.raw(f"</{tag}>")


def _wrap_markdown(
    buffer: MarkdownBuffer,
    marker: str,
    child: Renderable,
    context: RenderContext,
) -> None:
    buffer.append(marker)
    write_markdown(child, buffer, context)
    buffer.append(marker)


def _fill_html(node: HtmlBlob, buffer: HtmlBuffer) -> None:
    if node.filler is not None:
        node.filler(buffer)
    elif node.content is not None:
        buffer.raw(node.content)


def _load_resource(
    node: FromResource,
    extension: str,
    context: RenderContext,
) -> str | None:
    """Return the decoded resource or ``None`` after logging the failure."""

    path = node.path + extension
    try:
        data = context.loader.load(node.scope, path)
        if data is None:
            context.logger.warning(
                "render-resource-missing",
                scope=node.scope,
                path=path,
            )
            return None
        return data.decode("utf-8")
    except Exception as exc:
        context.logger.error(
            "render-resource-failed",
            scope=node.scope,
            path=path,
            error=str(exc),
        )
        return None
