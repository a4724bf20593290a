"""Tests for :mod:`fluxhover.core.logging`."""

from __future__ import annotations

import io
import logging

import pytest
import structlog
from rich.console import Console
from rich.logging import RichHandler

from fluxhover.core.config import load_config
from fluxhover.core.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Restore the package logger and structlog defaults after each test."""

    yield
    package_logger = logging.getLogger("fluxhover")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    structlog.reset_defaults()


def _build_console() -> Console:
    """Return a console that writes to an in-memory buffer for tests."""

    return Console(file=io.StringIO(), width=200, record=True)


def test_configure_logging_uses_config_level() -> None:
    config = load_config(overrides={"log_level": "debug"})
    console = _build_console()

    handler = configure_logging(config, console=console)
    get_logger("fluxhover.routes", feature="hover").debug(
        "route-scanned", count=2
    )

    package_logger = logging.getLogger("fluxhover")
    assert isinstance(handler, RichHandler)
    assert package_logger.handlers == [handler]
    assert package_logger.level == logging.DEBUG
    output = console.export_text()
    assert "route-scanned" in output
    assert "feature=hover" in output


def test_configure_logging_filters_below_level() -> None:
    config = load_config(overrides={"log_level": "warning"})
    console = _build_console()

    configure_logging(config, console=console)
    logger = get_logger("fluxhover.render")
    logger.info("quiet-event")
    logger.warning("loud-event")

    output = console.export_text()
    assert "quiet-event" not in output
    assert "loud-event" in output


def test_configure_logging_defaults_to_info_without_config() -> None:
    configure_logging(console=_build_console())

    assert logging.getLogger("fluxhover").level == logging.INFO


def test_configure_logging_replaces_previous_handler() -> None:
    first = configure_logging(console=_build_console())
    second = configure_logging(console=_build_console())

    handlers = logging.getLogger("fluxhover").handlers
    assert handlers == [second]
    assert first not in handlers


def test_configure_logging_rejects_unknown_level() -> None:
    config = load_config(overrides={"log_level": "chatty"})

    with pytest.raises(ValueError):
        configure_logging(config, console=_build_console())


def test_get_logger_binds_initial_context() -> None:
    with structlog.testing.capture_logs() as captured:
        get_logger("fluxhover.test", feature="hover").info("bound")

    assert captured == [
        {"event": "bound", "feature": "hover", "log_level": "info"}
    ]
