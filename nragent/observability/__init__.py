"""Observability: structured logging and bootstrap metrics.

Provides standardized observability primitives using structlog for logging
and Prometheus for metrics.
"""

from nragent.observability.logging import SecretRedactor, get_logger, setup_logging

__all__ = [
    "SecretRedactor",
    "get_logger",
    "setup_logging",
]
