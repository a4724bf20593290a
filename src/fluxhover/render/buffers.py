"""Output accumulators for the two render formats."""

from __future__ import annotations

import html

__all__ = ["HtmlBuffer", "MarkdownBuffer"]


class HtmlBuffer:
    """Append-only HTML builder separating raw markup from escaped text."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def raw(self, markup: str) -> None:
        """Append ``markup`` without escaping."""

        self._parts.append(markup)

    def text(self, value: str) -> None:
        """Append ``value`` escaped for element content."""

        self._parts.append(html.escape(value, quote=False))

    def url(self, value: str) -> None:
        """Append ``value`` escaped for use inside a quoted attribute."""

        self._parts.append(html.escape(value, quote=True))

    def ends_with(self, suffix: str) -> bool:
        """Return ``True`` when the markup written so far ends with ``suffix``."""

        return self.getvalue().endswith(suffix)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.getvalue()


class MarkdownBuffer:
    """Append-only Markdown builder."""

    def __init__(self, initial: str = "") -> None:
        self._parts: list[str] = [initial] if initial else []

    def append(self, value: str) -> None:
        self._parts.append(value)

    def ends_with_newline(self) -> bool:
        for part in reversed(self._parts):
            if part:
                return part.endswith("\n")
        return False

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.getvalue()
