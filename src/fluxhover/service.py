"""Entry point tying configuration, route scanning and hover rendering together."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Literal, Mapping

from rich.console import Console

from fluxhover.core.config import AppConfig, config_from_env, load_config
from fluxhover.core.logging import Logger, configure_logging, get_logger
from fluxhover.render import (
    RenderContext,
    Renderable,
    render_html,
    render_markdown,
)
from fluxhover.render.hovers import route_hover
from fluxhover.routes.models import RouteDefinition
from fluxhover.routes.scanner import scan_java_routes

__all__ = ["HoverFormat", "RouteHover", "HoverService"]

HoverFormat = Literal["markdown", "html"]


@dataclass(frozen=True, slots=True)
class RouteHover:
    """Hover content prepared for one route definition."""

    definition: RouteDefinition
    content: Renderable


class HoverService:
    """Scan Java sources for routes and render their hovers.

    Example:
        >>> HoverService().config.rendering.resource_scope
        'fluxhover.resources.hovers'
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        context: RenderContext | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._config = config or load_config()
        self._context = context or RenderContext()
        self._logger = logger or get_logger(__name__)

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        user_config: Mapping[str, object] | None = None,
        console: Console | None = None,
    ) -> "HoverService":
        """Load configuration from ``FLUXHOVER_*`` variables and set up logging."""

        config = load_config(
            user_config=user_config,
            env_config=config_from_env(
                os.environ if environ is None else environ
            ),
        )
        configure_logging(config, console=console)
        return cls(config)

    @property
    def config(self) -> AppConfig:
        return self._config

    def route_hovers(
        self,
        text: str,
        *,
        uri: str | None = None,
    ) -> tuple[RouteHover, ...]:
        """Return hover content for every route declared in Java ``text``."""

        definitions = scan_java_routes(text, self._config.matcher, uri=uri)
        hovers = tuple(
            RouteHover(
                definition=definition,
                content=route_hover(definition, self._config.rendering),
            )
            for definition in definitions
        )
        self._logger.debug("route-hovers-built", uri=uri, count=len(hovers))
        return hovers

    def render(self, hover: RouteHover, fmt: HoverFormat = "markdown") -> str:
        """Render ``hover`` in the requested format.

        Raises:
            ValueError: If ``fmt`` is not ``"markdown"`` or ``"html"``.
        """

        if fmt == "markdown":
            return render_markdown(hover.content, self._context)
        if fmt == "html":
            return render_html(hover.content, self._context)
        raise ValueError(f"Unsupported hover format: {fmt!r}")
