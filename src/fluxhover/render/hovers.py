"""Assemble hover content for route definitions."""

from __future__ import annotations

from typing import Sequence

from fluxhover.core.config import RenderSettings
from fluxhover.routes.models import RouteDefinition, RouteElement

from .renderables import (
    Renderable,
    bold,
    concat,
    from_resource,
    line_break,
    paragraph,
    text,
)

__all__ = [
    "CONTENT_TYPE_LABEL",
    "ACCEPT_LABEL",
    "element_list",
    "content_type_hover",
    "route_hover",
]

CONTENT_TYPE_LABEL = "Content type"
ACCEPT_LABEL = "Accept"


def element_list(label: str, elements: Sequence[RouteElement]) -> Renderable:
    """Return ``**label:** name, name`` for ``elements``.

    Raises:
        ValueError: If ``elements`` is empty.
    """

    if not elements:
        raise ValueError(f"No elements to list for {label!r}")
    names = ", ".join(element.name for element in elements)
    return concat(bold(text(f"{label}: ")), text(names))


def content_type_hover(elements: Sequence[RouteElement]) -> Renderable:
    """Return a one-line hover naming the content types in ``elements``."""

    return element_list(CONTENT_TYPE_LABEL, elements)


def route_hover(
    definition: RouteDefinition,
    settings: RenderSettings | None = None,
) -> Renderable:
    """Return hover content summarizing ``definition``.

    Each non-empty element list gets its own line, followed by the
    description of every predicate that appeared, loaded from
    ``settings.resource_scope``.
    """

    scope = (settings or RenderSettings()).resource_scope

    pieces: list[Renderable] = []
    descriptions: list[Renderable] = []

    if definition.content_types:
        pieces.append(element_list(CONTENT_TYPE_LABEL, definition.content_types))
        pieces.append(line_break())
        descriptions.append(paragraph(from_resource(scope, "content-type")))
    if definition.accept_types:
        pieces.append(element_list(ACCEPT_LABEL, definition.accept_types))
        pieces.append(line_break())
        descriptions.append(paragraph(from_resource(scope, "accept")))

    if not pieces:
        return bold(text(definition.method))
    return concat([*pieces, *descriptions])
