"""Configuration store interface and implementations."""

from nragent.store.config_store import CONFIG_KEY, FEATURES_KEY, ConfigStore
from nragent.store.inmemory import InMemoryConfigStore

__all__ = [
    "CONFIG_KEY",
    "FEATURES_KEY",
    "ConfigStore",
    "InMemoryConfigStore",
]
