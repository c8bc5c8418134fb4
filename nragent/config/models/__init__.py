"""Configuration models for the agent bootstrap."""

from nragent.config.models.attributes import (
    AttributeSource,
    ComputedAttribute,
    EnvAttribute,
    LiteralAttribute,
    coerce_attribute_source,
)
from nragent.config.models.observability import LoggingConfig
from nragent.config.models.resolved import FeatureFlags, Label, ResolvedConfig

__all__ = [
    "AttributeSource",
    "ComputedAttribute",
    "EnvAttribute",
    "FeatureFlags",
    "Label",
    "LiteralAttribute",
    "LoggingConfig",
    "ResolvedConfig",
    "coerce_attribute_source",
]
