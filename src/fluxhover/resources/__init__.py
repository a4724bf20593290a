"""Packaged resource helpers for :mod:`fluxhover`."""

from __future__ import annotations

from importlib import resources
from importlib.resources.abc import Traversable

HOVERS_SCOPE = f"{__package__}.hovers"


def get_resource(relative_path: str) -> Traversable:
    """Return a traversable handle to a packaged resource.

    Example:
        >>> get_resource("fluxhover.defaults.toml").name
        'fluxhover.defaults.toml'
    """

    candidate = resources.files(__package__).joinpath(relative_path)
    if not candidate.is_file():
        raise FileNotFoundError(relative_path)
    return candidate


__all__ = ["HOVERS_SCOPE", "get_resource"]
