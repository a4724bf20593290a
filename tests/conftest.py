"""Shared pytest fixtures for fluxhover tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from fluxhover.core.config import MatcherSettings, load_config


class RecordingConverter:
    """Markup converter double recording every conversion request."""

    def __init__(self, transform: Callable[[str], str] | None = None) -> None:
        self.calls: list[str] = []
        self._transform = transform or (lambda markup: f"md({markup})")

    def convert(self, markup: str) -> str:
        self.calls.append(markup)
        return self._transform(markup)


class DictResourceLoader:
    """Resource loader double backed by an in-memory mapping."""

    def __init__(
        self,
        documents: dict[tuple[str, str], bytes] | None = None,
        *,
        error: Exception | None = None,
    ) -> None:
        self.documents = dict(documents or {})
        self.requests: list[tuple[str, str]] = []
        self._error = error

    def load(self, scope: str, path: str) -> bytes | None:
        self.requests.append((scope, path))
        if self._error is not None:
            raise self._error
        return self.documents.get((scope, path))


@pytest.fixture
def matcher_settings() -> MatcherSettings:
    """Return matcher settings built from the packaged defaults."""

    return load_config().matcher


@pytest.fixture
def recording_converter() -> RecordingConverter:
    """Return a converter that wraps its input as ``md(<html>)``."""

    return RecordingConverter()


@pytest.fixture
def make_loader() -> Callable[..., DictResourceLoader]:
    """Return a factory for in-memory resource loaders."""

    def _make(
        documents: dict[tuple[str, str], bytes] | None = None,
        *,
        error: Exception | None = None,
    ) -> DictResourceLoader:
        return DictResourceLoader(documents, error=error)

    return _make
