"""Feature flag definitions and resolution."""

from collections.abc import Mapping
from dataclasses import dataclass

from nragent.config.settings import Settings
from nragent.resolution.parsing import parse_bool


@dataclass(frozen=True)
class FeatureSpec:
    """Where a feature flag is read from."""

    env: str
    config_key: str
    default: bool = True


FEATURES: dict[str, FeatureSpec] = {
    "error_collector": FeatureSpec(
        "NEW_RELIC_ERROR_COLLECTOR_ENABLED", "error_collector_enabled"
    ),
    "db_query_collection": FeatureSpec(
        "NEW_RELIC_DB_QUERY_COLLECTION_ENABLED", "db_query_collection_enabled"
    ),
    "ecto_instrumentation": FeatureSpec(
        "NEW_RELIC_ECTO_INSTRUMENTATION_ENABLED", "ecto_instrumentation_enabled"
    ),
    "redix_instrumentation": FeatureSpec(
        "NEW_RELIC_REDIX_INSTRUMENTATION_ENABLED", "redix_instrumentation_enabled"
    ),
    "function_argument_collection": FeatureSpec(
        "NEW_RELIC_FUNCTION_ARGUMENT_COLLECTION_ENABLED",
        "function_argument_collection_enabled",
    ),
    "request_queuing_metrics": FeatureSpec(
        "NEW_RELIC_REQUEST_QUEUING_METRICS_ENABLED", "request_queuing_metrics_enabled"
    ),
}

# Former name of db_query_collection; either name enables the feature
LEGACY_SQL_COLLECTION = FeatureSpec(
    "NEW_RELIC_SQL_COLLECTION_ENABLED", "sql_collection_enabled", default=False
)


def determine_feature(
    spec: FeatureSpec, settings: Settings, environ: Mapping[str, str]
) -> bool:
    """Resolve one feature flag.

    The env var wins when it is exactly "true" or "false"; any other value
    falls through to the static config, then to the feature default.
    """
    from_env = parse_bool(environ.get(spec.env))
    if from_env is not None:
        return from_env

    configured = getattr(settings, spec.config_key, None)
    if configured is None:
        return spec.default
    return bool(configured)
