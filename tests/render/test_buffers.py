"""Tests for :mod:`fluxhover.render.buffers`."""

from __future__ import annotations

from fluxhover.render import HtmlBuffer, MarkdownBuffer


def test_html_buffer_escapes_text_and_attributes_separately() -> None:
    buffer = HtmlBuffer()
    buffer.raw("<a title=\"")
    buffer.url('say "hi" & <bye>')
    buffer.raw("\">")
    buffer.text('"quoted" & <tagged>')
    buffer.raw("</a>")

    assert buffer.getvalue() == (
        '<a title="say &quot;hi&quot; &amp; &lt;bye&gt;">'
        '"quoted" &amp; &lt;tagged&gt;</a>'
    )
    assert str(buffer) == buffer.getvalue()


def test_markdown_buffer_tracks_trailing_newline() -> None:
    buffer = MarkdownBuffer()
    assert not buffer.ends_with_newline()

    buffer.append("line\n")
    assert buffer.ends_with_newline()

    buffer.append("")
    assert buffer.ends_with_newline()

    buffer.append("more")
    assert not buffer.ends_with_newline()
    assert buffer.getvalue() == "line\nmore"


def test_markdown_buffer_accepts_initial_text() -> None:
    assert MarkdownBuffer("seed\n").ends_with_newline()
    assert MarkdownBuffer("").getvalue() == ""


def test_html_buffer_ends_with_checks_written_markup() -> None:
    buffer = HtmlBuffer()
    assert not buffer.ends_with("<br>")

    buffer.raw("<b>x</b><br>")
    assert buffer.ends_with("<br>")

    buffer.text("<br>")
    assert not buffer.ends_with("<br>")
    assert buffer.ends_with("&lt;br&gt;")
