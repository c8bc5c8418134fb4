"""Static configuration loading for the agent.

The static table holds application-level defaults for every agent config
key. It is loaded from TOML files; NEW_RELIC_* environment variables are
overlaid later by the resolver.

Usage:
    from nragent.config import get_settings

    settings = get_settings()
    default_port = settings.port
"""

from functools import lru_cache

from nragent.config.loader import load_config
from nragent.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{NEW_RELIC_CONFIG_ENV}.toml (environment overrides)

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.

    Returns:
        Settings instance with all configuration loaded and validated
    """
    config_dict = load_config()
    set_toml_config(config_dict)

    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration.

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
