"""ConfigStore abstract interface."""

from abc import ABC, abstractmethod
from typing import Any

CONFIG_KEY = "config"
FEATURES_KEY = "features"


class ConfigStore(ABC):
    """Abstract interface for the agent's configuration registry.

    Holds the records published at startup. Components receive the store
    by reference and only read from it.
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a published value, or default if the key is absent."""
        pass

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """Publish a value under key."""
        pass

    @abstractmethod
    def __contains__(self, key: object) -> bool:
        """Whether a value has been published under key."""
        pass
