"""ConfigResolver: turns env vars and the static table into published records."""

import os
from collections.abc import Mapping
from typing import Any

from nragent.config.models.resolved import FeatureFlags, ResolvedConfig
from nragent.config.settings import Settings
from nragent.observability.logging import get_logger
from nragent.resolution.attributes import resolve_automatic_attributes
from nragent.resolution.features import FEATURES, LEGACY_SQL_COLLECTION, determine_feature
from nragent.resolution.hosts import determine_collector_host, determine_telemetry_hosts
from nragent.resolution.parsing import (
    parse_app_names,
    parse_bool,
    parse_labels,
    parse_port,
)

logger = get_logger(__name__)

ENV_PREFIX = "NEW_RELIC_"

DEFAULT_PORT = 443
DEFAULT_SCHEME = "https"
DEFAULT_HARVEST_ENABLED = True


class ConfigResolver:
    """Resolve agent configuration from the environment and static defaults.

    Every key is looked up as NEW_RELIC_<KEY> in the environment first and
    in the static Settings table second. Resolution is pure: nothing is
    published until the caller hands the results to a ConfigStore.
    """

    def __init__(
        self,
        settings: Settings,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            settings: Static application config table
            environ: Environment to read (default: os.environ)
        """
        self._settings = settings
        self._environ = os.environ if environ is None else environ

    def determine_config(self, key: str, default: Any = None) -> Any:
        """Look up a config key, environment first.

        Empty strings are treated as unset in both the environment and the
        static table.
        """
        value = self._environ.get(ENV_PREFIX + key.upper())
        if value:
            return value

        value = getattr(self._settings, key, None)
        if value is not None and value != "":
            return value

        return default

    def resolve_config(self) -> ResolvedConfig:
        """Build the connection and identity configuration.

        Raises:
            ConfigParseError: If the port is malformed or an automatic
                attribute fails
        """
        host = self.determine_config("host")
        license_key = self.determine_config("license_key")
        collector_host, region_prefix = determine_collector_host(host, license_key)

        config = ResolvedConfig(
            log=self.determine_config("log"),
            host=host,
            license_key=license_key,
            port=parse_port(self.determine_config("port", DEFAULT_PORT)),
            scheme=self.determine_config("scheme", DEFAULT_SCHEME),
            app_names=parse_app_names(self.determine_config("app_name")),
            harvest_enabled=self._resolve_harvest_enabled(),
            collector_host=collector_host,
            region_prefix=region_prefix,
            automatic_attributes=resolve_automatic_attributes(
                self._settings.automatic_attributes, self._environ
            ),
            labels=parse_labels(self.determine_config("labels")),
            telemetry_hosts=determine_telemetry_hosts(host, region_prefix),
        )

        logger.info(
            "config_resolved",
            collector_host=config.collector_host,
            region_prefix=config.region_prefix,
            app_names=config.app_names,
            port=config.port,
            harvest_enabled=config.harvest_enabled,
            license_key_present=license_key is not None,
        )
        return config

    def resolve_features(self) -> FeatureFlags:
        """Resolve every feature flag.

        db_query_collection was called sql_collection in earlier agents; it
        is enabled when either name resolves true.
        """
        flags = {
            name: determine_feature(spec, self._settings, self._environ)
            for name, spec in FEATURES.items()
        }
        flags["db_query_collection"] = determine_feature(
            LEGACY_SQL_COLLECTION, self._settings, self._environ
        ) or flags["db_query_collection"]

        features = FeatureFlags(**flags)
        logger.info("features_resolved", **features.model_dump())
        return features

    def _resolve_harvest_enabled(self) -> bool:
        raw = self.determine_config("harvest_enabled", DEFAULT_HARVEST_ENABLED)
        parsed = parse_bool(raw)
        if parsed is None:
            logger.warning(
                "invalid_harvest_enabled",
                value=raw,
                default=DEFAULT_HARVEST_ENABLED,
            )
            return DEFAULT_HARVEST_ENABLED
        return parsed
