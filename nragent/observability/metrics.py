"""Prometheus metrics describing the agent bootstrap.

The harvest pipeline exports these alongside its own metrics so that the
resolved feature set and startup failures are visible per process.
"""

from prometheus_client import Counter, Gauge, Histogram

from nragent.config.models.resolved import FeatureFlags

FEATURE_ENABLED = Gauge(
    "nragent_feature_enabled",
    "Whether an instrumentation feature is enabled (1) or disabled (0)",
    labelnames=["feature"],
)

STARTUP_ERRORS = Counter(
    "nragent_startup_errors_total",
    "Total number of errors that aborted agent startup",
    labelnames=["error_type"],
)

CONFIG_RESOLUTION_LATENCY = Histogram(
    "nragent_config_resolution_seconds",
    "Time spent resolving the agent configuration",
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)


def record_features(features: FeatureFlags) -> None:
    """Publish one gauge sample per feature flag."""
    for name, enabled in features.model_dump().items():
        FEATURE_ENABLED.labels(feature=name).set(1 if enabled else 0)


def record_startup_error(error: Exception) -> None:
    STARTUP_ERRORS.labels(error_type=type(error).__name__).inc()
