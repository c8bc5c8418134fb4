"""Automatic attribute resolution."""

from collections.abc import Mapping
from typing import Any

from nragent.config.models.attributes import (
    AttributeSource,
    ComputedAttribute,
    EnvAttribute,
    LiteralAttribute,
)
from nragent.exceptions import ConfigParseError


def resolve_attribute(source: AttributeSource, environ: Mapping[str, str]) -> Any:
    """Resolve a single attribute source to its final value.

    Env references to unset variables resolve to None. Exceptions raised by
    a computed attribute propagate to the caller.
    """
    if isinstance(source, LiteralAttribute):
        return source.value
    if isinstance(source, EnvAttribute):
        return environ.get(source.env)
    if isinstance(source, ComputedAttribute):
        return source.call(*source.args)
    raise TypeError(f"Unsupported attribute source: {source!r}")


def resolve_automatic_attributes(
    sources: Mapping[str, AttributeSource], environ: Mapping[str, str]
) -> dict[str, Any]:
    """Resolve every configured automatic attribute, preserving order.

    Raises:
        ConfigParseError: If a computed attribute raises
    """
    resolved: dict[str, Any] = {}
    for name, source in sources.items():
        try:
            resolved[name] = resolve_attribute(source, environ)
        except Exception as e:
            raise ConfigParseError(
                f"Automatic attribute {name!r} failed: {type(e).__name__}: {e}",
                key=f"automatic_attributes.{name}",
            ) from e
    return resolved
