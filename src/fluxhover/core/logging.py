"""Logging helpers for :mod:`fluxhover`.

Library modules only emit events through :func:`get_logger`. Hosts that want
console output call :func:`configure_logging` once with their loaded
:class:`~fluxhover.core.config.AppConfig`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler
import structlog

if TYPE_CHECKING:
    from fluxhover.core.config import AppConfig

Logger = structlog.stdlib.BoundLogger

_HANDLER_NAME = "fluxhover-console"

_SHARED_PROCESSORS: tuple[Any, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
)


def _normalize_level(level: str) -> int:
    """Return the :mod:`logging` constant for ``level``.

    Raises:
        ValueError: If the level name is not recognized.
    """

    value = logging.getLevelName(level.strip().upper())
    if isinstance(value, str):  # ``getLevelName`` echoes unknown names.
        raise ValueError(f"Unsupported log level: {level!r}")
    return value


def _console_handler(level: int, console: Console | None) -> RichHandler:
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=list(_SHARED_PROCESSORS),
        )
    )
    return handler


def configure_logging(
    config: AppConfig | None = None,
    *,
    console: Console | None = None,
) -> logging.Handler:
    """Route structlog events for ``fluxhover`` to a Rich console handler.

    The level comes from ``config.log_level`` (``INFO`` without a config).
    Only the ``fluxhover`` logger hierarchy is touched; calling this again
    replaces the previously installed handler.

    Returns:
        The installed handler.

    Raises:
        ValueError: If the configured level name is not recognized.
    """

    level = _normalize_level(config.log_level if config is not None else "INFO")

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    package_logger = logging.getLogger("fluxhover")
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
            existing.close()

    handler = _console_handler(level, console)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return handler


def get_logger(name: str | None = None, **initial_context: Any) -> Logger:
    """Return a structured logger bound to an optional context.

    Example:
        >>> logger = get_logger(__name__, feature="hover")
        >>> hasattr(logger, "bind")
        True
    """

    return structlog.get_logger(name).bind(**initial_context)


__all__ = ["Logger", "configure_logging", "get_logger"]
