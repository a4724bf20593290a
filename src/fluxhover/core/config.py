"""Configuration models and loaders for :mod:`fluxhover`."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from typing import Any, Mapping

import tomllib
from pydantic import BaseModel, Field, field_validator, model_validator

from fluxhover.resources import HOVERS_SCOPE, get_resource

_SERVER_PACKAGE = "org.springframework.web.reactive.function.server"

ENV_PREFIX = "FLUXHOVER_"


class MatcherSettings(BaseModel):
    """Signatures recognized by the route predicate matchers."""

    predicate_type: str = Field(
        default=f"{_SERVER_PACKAGE}.RequestPredicates",
        description="Fully-qualified type declaring the predicate methods.",
    )
    content_type_method: str = Field(
        default="contentType",
        description="Predicate method whose argument names a content type.",
    )
    accept_method: str = Field(
        default="accept",
        description="Predicate method whose argument names an accepted type.",
    )
    boundary_return_types: tuple[str, ...] = Field(
        default=(f"{_SERVER_PACKAGE}.RouterFunction",),
        description=(
            "Return types marking route-definition calls whose subtrees "
            "are never scanned by a predicate matcher."
        ),
    )
    signatures: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description=(
            "Known method return types keyed by declaring type, then by "
            "method name."
        ),
    )

    model_config = {
        "frozen": True,
        "str_strip_whitespace": True,
    }

    @field_validator("boundary_return_types")
    @classmethod
    def _validate_boundary(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized = tuple(
            dict.fromkeys(item.strip() for item in value if item.strip())
        )
        if not normalized:
            raise ValueError("At least one boundary return type is required.")
        return normalized

    @field_validator("predicate_type", "content_type_method", "accept_method")
    @classmethod
    def _validate_not_blank(cls, value: str) -> str:
        if not value:
            raise ValueError("Matcher signature values cannot be blank.")
        return value

    def return_type_of(self, declaring_type: str, method: str) -> str | None:
        """Return the known return type of ``declaring_type#method``.

        Example:
            >>> settings = MatcherSettings(signatures={"a.B": {"m": "a.C"}})
            >>> settings.return_type_of("a.B", "m")
            'a.C'
            >>> settings.return_type_of("a.B", "other") is None
            True
        """

        return self.signatures.get(declaring_type, {}).get(method)

    def is_known_type(self, qualified_name: str) -> bool:
        """Return ``True`` when ``qualified_name`` has known signatures."""

        return qualified_name in self.signatures


class RenderSettings(BaseModel):
    """Rendering configuration for hover content."""

    resource_scope: str = Field(
        default=HOVERS_SCOPE,
        description="Package holding hover description documents.",
    )

    model_config = {
        "frozen": True,
        "str_strip_whitespace": True,
    }


class AppConfig(BaseModel):
    """Root configuration for :mod:`fluxhover`."""

    log_level: str = Field(
        default="INFO",
        description="Default logging level for the host integration.",
    )
    matcher: MatcherSettings = Field(
        default_factory=MatcherSettings,
        description="Route predicate matcher configuration.",
    )
    rendering: RenderSettings = Field(
        default_factory=RenderSettings,
        description="Hover rendering configuration.",
    )

    model_config = {
        "str_strip_whitespace": True,
        "validate_assignment": True,
    }

    @model_validator(mode="after")
    def _post_process(self) -> "AppConfig":
        """Normalize fields after validation."""

        object.__setattr__(self, "log_level", self.log_level.upper())
        return self


DEFAULTS_RESOURCE_NAME = "fluxhover.defaults.toml"


def read_packaged_defaults_text() -> str:
    """Return the raw packaged defaults TOML content.

    Example:
        >>> text = read_packaged_defaults_text()
        >>> text.startswith("#")
        True
    """

    resource = get_resource(DEFAULTS_RESOURCE_NAME)
    return resource.read_text(encoding="utf-8")


def load_packaged_defaults() -> dict[str, Any]:
    """Load the packaged defaults as a plain dictionary.

    Example:
        >>> defaults = load_packaged_defaults()
        >>> defaults["log_level"]
        'INFO'
    """

    text = read_packaged_defaults_text()
    data: dict[str, Any] = tomllib.loads(text)
    return data


def _deep_merge(
    base: Mapping[str, Any],
    overlay: Mapping[str, Any],
) -> dict[str, Any]:
    """Recursively merge ``overlay`` into ``base`` returning a new dict."""

    merged: dict[str, Any] = dict(base)
    for key, value in overlay.items():
        if (
            key in merged
            and isinstance(merged[key], MappingABC)
            and isinstance(value, MappingABC)
        ):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def config_from_env(environ: Mapping[str, str]) -> dict[str, Any]:
    """Return configuration overrides derived from ``FLUXHOVER_*`` variables.

    Example:
        >>> config_from_env({"FLUXHOVER_LOG_LEVEL": "debug"})
        {'log_level': 'debug'}
    """

    layer: dict[str, Any] = {}
    log_level = environ.get(f"{ENV_PREFIX}LOG_LEVEL")
    if log_level:
        layer["log_level"] = log_level
    resource_scope = environ.get(f"{ENV_PREFIX}RESOURCE_SCOPE")
    if resource_scope:
        layer["rendering"] = {"resource_scope": resource_scope}
    return layer


def load_config(
    *,
    defaults: Mapping[str, Any] | None = None,
    user_config: Mapping[str, Any] | None = None,
    env_config: Mapping[str, Any] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> AppConfig:
    """Load configuration according to the precedence stack.

    Args:
        defaults: Packaged defaults; loaded from the package when omitted.
        user_config: Parsed user configuration content.
        env_config: Settings derived from environment variables.
        overrides: Explicit settings supplied by the host integration.

    Returns:
        A validated :class:`AppConfig` instance.

    Raises:
        TypeError: If a section payload is not a mapping.
    """

    stack = dict(defaults if defaults is not None else load_packaged_defaults())
    for layer in (user_config, env_config, overrides):
        if layer:
            stack = _deep_merge(stack, layer)

    for section in ("matcher", "rendering"):
        raw = stack.get(section)
        if raw is not None and not isinstance(raw, (MappingABC, BaseModel)):
            raise TypeError(
                f"Unsupported {section} configuration payload: {raw!r}"
            )

    return AppConfig(**stack)


__all__ = [
    "AppConfig",
    "MatcherSettings",
    "RenderSettings",
    "DEFAULTS_RESOURCE_NAME",
    "ENV_PREFIX",
    "config_from_env",
    "load_config",
    "load_packaged_defaults",
    "read_packaged_defaults_text",
]
