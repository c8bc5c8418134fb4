"""In-memory implementation of ConfigStore."""

from typing import Any

from nragent.exceptions import ConfigStoreError
from nragent.store.config_store import ConfigStore


class InMemoryConfigStore(ConfigStore):
    """Dict-backed ConfigStore with publish-once keys."""

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._values: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def put(self, key: str, value: Any) -> None:
        """Publish a value.

        Raises:
            ConfigStoreError: If key was already published
        """
        if key in self._values:
            raise ConfigStoreError(f"Config key already published: {key}", key=key)
        self._values[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._values
