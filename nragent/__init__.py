"""nragent - runtime configuration bootstrap for the monitoring agent."""

from nragent.runtime import verify_runtime_version

# Fail with a readable error before importing modules that need a newer Python
verify_runtime_version()

from nragent.bootstrap import run  # noqa: E402
from nragent.config.models import FeatureFlags, ResolvedConfig  # noqa: E402
from nragent.exceptions import (  # noqa: E402
    AgentStartupError,
    ConfigParseError,
    ConfigStoreError,
    FatalStartupError,
)
from nragent.resolution import ConfigResolver  # noqa: E402

__version__ = "0.1.0"

__all__ = [
    "AgentStartupError",
    "ConfigParseError",
    "ConfigResolver",
    "ConfigStoreError",
    "FatalStartupError",
    "FeatureFlags",
    "ResolvedConfig",
    "run",
    "verify_runtime_version",
]
