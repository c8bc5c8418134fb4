"""Startup exception hierarchy for the agent bootstrap.

All bootstrap exceptions inherit from AgentStartupError. None of them are
retried: the configuration has to be fixed before the process restarts.
"""

from __future__ import annotations

from typing import Any


class AgentStartupError(Exception):
    """Base exception for all errors that abort agent startup."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class FatalStartupError(AgentStartupError):
    """Raised when the hosting runtime is too old to run the agent."""


class ConfigParseError(AgentStartupError):
    """Raised when a configuration value cannot be parsed."""

    def __init__(self, message: str, key: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.key = key
        self.value = value


class ConfigStoreError(AgentStartupError):
    """Raised when a key is published into the config store twice."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
