"""Automatic attribute source models.

An automatic attribute is attached to every event the agent reports. Its
value comes from one of three sources, resolved once at startup:

- LiteralAttribute: a value written directly in the config table
- EnvAttribute: the value of an environment variable, read by name
- ComputedAttribute: the return value of a callable invoked with arguments

In TOML the reference forms are inline tables:

    [automatic_attributes]
    team = "payments"
    region = { env = "AWS_REGION" }
    hostname = { call = "socket:gethostname" }
"""

from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ImportString


class LiteralAttribute(BaseModel):
    """Attribute whose value is used as written."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    value: Any = Field(default=None, description="Attribute value")


class EnvAttribute(BaseModel):
    """Attribute read from an environment variable at startup."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["env"] = "env"
    env: str = Field(..., min_length=1, description="Environment variable name")


class ComputedAttribute(BaseModel):
    """Attribute computed by calling a function once at startup."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["computed"] = "computed"
    call: ImportString[Callable[..., Any]] = Field(
        ...,
        description="Callable or import path ('module:attr' or 'module.attr')",
    )
    args: tuple[Any, ...] = Field(default=(), description="Positional arguments")


AttributeSource = LiteralAttribute | EnvAttribute | ComputedAttribute


def coerce_attribute_source(value: Any) -> AttributeSource:
    """Build an AttributeSource from a raw config value.

    Tables with an ``env`` key are environment references, tables with a
    ``call`` key are computed references; anything else is a literal.
    """
    if isinstance(value, LiteralAttribute | EnvAttribute | ComputedAttribute):
        return value
    if isinstance(value, dict):
        if "env" in value:
            return EnvAttribute.model_validate(value)
        if "call" in value:
            return ComputedAttribute.model_validate(value)
    return LiteralAttribute(value=value)
