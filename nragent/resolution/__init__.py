"""Configuration resolution for the agent bootstrap."""

from nragent.resolution.attributes import resolve_attribute, resolve_automatic_attributes
from nragent.resolution.features import FEATURES, FeatureSpec, determine_feature
from nragent.resolution.hosts import (
    determine_collector_host,
    determine_environment,
    determine_region,
    determine_telemetry_hosts,
)
from nragent.resolution.parsing import parse_app_names, parse_bool, parse_labels, parse_port
from nragent.resolution.resolver import ConfigResolver

__all__ = [
    "FEATURES",
    "ConfigResolver",
    "FeatureSpec",
    "determine_collector_host",
    "determine_environment",
    "determine_feature",
    "determine_region",
    "determine_telemetry_hosts",
    "parse_app_names",
    "parse_bool",
    "parse_labels",
    "parse_port",
    "resolve_attribute",
    "resolve_automatic_attributes",
]
