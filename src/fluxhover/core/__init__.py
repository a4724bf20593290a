"""Core utilities shared across :mod:`fluxhover` modules.

The core namespace provides cohesive seams for configuration loading and
logging setup so the route and render modules remain lightweight.

Example:
    >>> from fluxhover.core import get_logger
    >>> logger = get_logger(__name__)
    >>> isinstance(logger, object)
    True
"""

from __future__ import annotations

from .config import AppConfig, MatcherSettings, RenderSettings, load_config
from .logging import configure_logging, get_logger

__all__ = [
    "AppConfig",
    "MatcherSettings",
    "RenderSettings",
    "configure_logging",
    "get_logger",
    "load_config",
]
