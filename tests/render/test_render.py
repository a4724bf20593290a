"""Tests for resource-backed and converted renderables."""

from __future__ import annotations

from structlog.testing import capture_logs
import pytest

from fluxhover.render import (
    HtmlBuffer,
    MarkdownifyConverter,
    MissingConverterError,
    NO_DESCRIPTION,
    PackageResourceLoader,
    RenderContext,
    bold,
    concat,
    from_resource,
    html_blob,
    paragraph,
    render_html,
    render_markdown,
    text,
)
from fluxhover.resources import HOVERS_SCOPE

SCOPE = "acme.docs"


def _failure_events(captured: list[dict]) -> list[dict]:
    return [event for event in captured if event["event"].startswith("render-resource-")]


def test_html_blob_emits_raw_markup(recording_converter) -> None:
    blob = html_blob("<ul><li>one</li></ul>")

    assert render_html(blob) == "<ul><li>one</li></ul>"
    assert recording_converter.calls == []


def test_html_blob_converts_on_every_markdown_render(recording_converter) -> None:
    blob = html_blob("<em>hi</em>")
    context = RenderContext(converter=recording_converter)

    first = render_markdown(concat(text("> "), blob), context)
    second = render_markdown(blob, context)

    assert first == "> md(<em>hi</em>)"
    assert second == "md(<em>hi</em>)"
    assert recording_converter.calls == ["<em>hi</em>", "<em>hi</em>"]


def test_html_blob_filler_writes_into_buffer(recording_converter) -> None:
    def fill(buffer: HtmlBuffer) -> None:
        buffer.raw("<code>")
        buffer.text("a<b")
        buffer.raw("</code>")

    blob = html_blob(fill)

    assert render_html(blob) == "<code>a&lt;b</code>"
    assert (
        render_markdown(blob, RenderContext(converter=recording_converter))
        == "md(<code>a&lt;b</code>)"
    )


def test_html_blob_markdown_uses_markdownify_by_default() -> None:
    blob = html_blob("<p>Use <b>JSON</b> or <code>XML</code></p>")

    assert render_markdown(html_blob("<b>x</b>")) == "**x**"
    assert render_markdown(blob) == "Use **JSON** or `XML`"
    assert isinstance(RenderContext().converter, MarkdownifyConverter)


def test_html_blob_markdown_without_converter_is_rejected() -> None:
    with pytest.raises(MissingConverterError):
        render_markdown(html_blob("<b>x</b>"), RenderContext(converter=None))


def test_from_resource_reads_format_specific_documents(make_loader) -> None:
    loader = make_loader(
        {
            (SCOPE, "content-type.html"): b"<p>HTML docs</p>",
            (SCOPE, "content-type.md"): "Markdown döcs".encode("utf-8"),
        }
    )
    context = RenderContext(loader=loader)
    renderable = from_resource(SCOPE, "content-type")

    assert render_html(renderable, context) == "<p>HTML docs</p>"
    assert render_markdown(renderable, context) == "Markdown döcs"
    assert loader.requests == [
        (SCOPE, "content-type.html"),
        (SCOPE, "content-type.md"),
    ]


def test_from_resource_is_read_on_every_render(make_loader) -> None:
    loader = make_loader({(SCOPE, "a.md"): b"first"})
    context = RenderContext(loader=loader)
    renderable = from_resource(SCOPE, "a")

    assert render_markdown(renderable, context) == "first"
    loader.documents[(SCOPE, "a.md")] = b"second"
    assert render_markdown(renderable, context) == "second"


def test_missing_resource_falls_back_and_logs_once(make_loader) -> None:
    loader = make_loader()
    renderable = from_resource(SCOPE, "missing")

    with capture_logs() as captured:
        context = RenderContext(loader=loader)
        markdown = render_markdown(renderable, context)
    assert markdown == render_markdown(NO_DESCRIPTION) == "*no description*"
    assert len(_failure_events(captured)) == 1

    with capture_logs() as captured:
        context = RenderContext(loader=loader)
        html = render_html(renderable, context)
    assert html == render_html(NO_DESCRIPTION) == "<i>no description</i>"
    events = _failure_events(captured)
    assert len(events) == 1
    assert events[0]["path"] == "missing.html"
    assert events[0]["log_level"] == "warning"


def test_unreadable_resource_falls_back_and_logs_error(make_loader) -> None:
    loader = make_loader(error=OSError("disk gone"))

    with capture_logs() as captured:
        context = RenderContext(loader=loader)
        rendered = render_markdown(
            paragraph(from_resource(SCOPE, "broken")), context
        )

    assert rendered == "\n*no description*\n"
    events = _failure_events(captured)
    assert len(events) == 1
    assert events[0]["log_level"] == "error"
    assert events[0]["error"] == "disk gone"


def test_undecodable_resource_falls_back(make_loader) -> None:
    loader = make_loader({(SCOPE, "bad.md"): b"\xff\xfe\xfa"})

    with capture_logs() as captured:
        context = RenderContext(loader=loader)
        rendered = render_markdown(from_resource(SCOPE, "bad"), context)

    assert rendered == "*no description*"
    assert len(_failure_events(captured)) == 1


def test_package_loader_reads_packaged_hovers() -> None:
    loader = PackageResourceLoader()

    markdown = loader.load(HOVERS_SCOPE, "content-type.md")
    html = loader.load(HOVERS_SCOPE, "content-type.html")

    assert markdown is not None and b"`Content-Type`" in markdown
    assert html is not None and b"<code>Content-Type</code>" in html
    assert loader.load(HOVERS_SCOPE, "missing.md") is None


def test_unknown_scope_falls_back() -> None:
    with capture_logs() as captured:
        rendered = render_html(
            bold(from_resource("fluxhover_missing_scope", "x")),
            RenderContext(),
        )

    assert rendered == "<b><i>no description</i></b>"
    assert len(_failure_events(captured)) == 1
