"""Agent startup: verify the runtime, resolve config, publish it.

Run once at process start, before any concurrent agent subsystem starts.
The returned store is passed to those subsystems by reference.

Example usage:

    from nragent.bootstrap import run

    store = run()
    config = store.get(CONFIG_KEY)
    collector = f"{config.scheme}://{config.collector_host}:{config.port}"
"""

from collections.abc import Mapping, Sequence

from nragent.config import get_settings
from nragent.config.settings import Settings
from nragent.exceptions import AgentStartupError, ConfigParseError
from nragent.observability.logging import get_logger, setup_logging
from nragent.observability.metrics import (
    CONFIG_RESOLUTION_LATENCY,
    record_features,
    record_startup_error,
)
from nragent.resolution.resolver import ConfigResolver
from nragent.runtime import verify_runtime_version
from nragent.store import CONFIG_KEY, FEATURES_KEY, ConfigStore, InMemoryConfigStore

logger = get_logger(__name__)


def load_settings() -> Settings:
    """Load the static config table, reporting failures as startup errors.

    Raises:
        ConfigParseError: If a config file is missing, unreadable or invalid
    """
    try:
        return get_settings()
    except (OSError, ValueError) as e:
        # ValueError covers TOML syntax errors and pydantic ValidationError
        raise ConfigParseError(f"Invalid static config: {e}") from e


def run(
    settings: Settings | None = None,
    store: ConfigStore | None = None,
    environ: Mapping[str, str] | None = None,
    version_info: Sequence[int] | None = None,
    capability: str | None = None,
) -> ConfigStore:
    """Resolve the agent configuration and publish it.

    Args:
        settings: Static config table (default: load_settings())
        store: Store to publish into (default: a new InMemoryConfigStore)
        environ: Environment to read (default: os.environ)
        version_info: Interpreter version for the runtime check
        capability: Marker module for the runtime check

    Returns:
        The store holding ResolvedConfig under "config" and FeatureFlags
        under "features"

    Raises:
        FatalStartupError: If the interpreter is unsupported
        ConfigParseError: If the static table or a config value is malformed
        ConfigStoreError: If the store already holds published config
    """
    _configure_logging(settings)
    store = store if store is not None else InMemoryConfigStore()

    try:
        verify_runtime_version(version_info=version_info, capability=capability)

        if settings is None:
            settings = load_settings()
            _configure_logging(settings)

        resolver = ConfigResolver(settings, environ=environ)
        with CONFIG_RESOLUTION_LATENCY.time():
            config = resolver.resolve_config()
            features = resolver.resolve_features()

        store.put(CONFIG_KEY, config)
        store.put(FEATURES_KEY, features)
    except AgentStartupError as e:
        record_startup_error(e)
        logger.error("agent_startup_failed", error_type=type(e).__name__, error=e.message)
        raise

    record_features(features)
    logger.info("agent_config_published", collector_host=config.collector_host)
    return store


def _configure_logging(settings: Settings | None) -> None:
    if settings is None:
        setup_logging()
        return
    setup_logging(
        level=settings.logging.level,
        format=settings.logging.format,
        redact_secrets=settings.logging.redact_secrets,
    )
