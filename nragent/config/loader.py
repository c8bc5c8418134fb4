"""Loads the static application config table from TOML files."""

import os
import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from nragent.observability.logging import get_logger

logger = get_logger(__name__)

CONFIG_DIR_VAR = "NEW_RELIC_CONFIG_DIR"
CONFIG_ENV_VAR = "NEW_RELIC_CONFIG_ENV"
DEFAULT_FILE = "default.toml"

# How many directories above the start to search for config/
_SEARCH_DEPTH = 5


def get_config_dir(start: Path | None = None) -> Path:
    """Locate the directory holding the agent's TOML files.

    NEW_RELIC_CONFIG_DIR wins when set and must exist. Otherwise the nearest
    'config/' directory at or above start (default: cwd) is used, falling
    back to a relative 'config' path.

    Raises:
        FileNotFoundError: If NEW_RELIC_CONFIG_DIR points nowhere
    """
    explicit = os.environ.get(CONFIG_DIR_VAR)
    if explicit:
        path = Path(explicit)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {explicit}")
        return path

    current = start or Path.cwd()
    for candidate in [current, *current.parents][:_SEARCH_DEPTH]:
        if (candidate / "config").is_dir():
            return candidate / "config"

    return Path("config")


def get_environment() -> str:
    """Name of the overlay file to apply on top of default.toml."""
    return os.environ.get(CONFIG_ENV_VAR, "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Read one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base.

    Tables present on both sides are merged recursively; any other value in
    override replaces the base value.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config(config_dir: Path | None = None, env: str | None = None) -> dict[str, Any]:
    """Load the static application config table.

    Reads default.toml, then overlays {env}.toml. Both files are optional:
    an agent embedded without any config files gets an empty table and
    relies on NEW_RELIC_* variables and built-in defaults.

    Args:
        config_dir: Directory to read (default: get_config_dir())
        env: Overlay name (default: get_environment())

    Returns:
        Merged configuration dictionary
    """
    config_dir = config_dir or get_config_dir()
    env = env or get_environment()

    config: dict[str, Any] = {}
    loaded: list[str] = []
    for path in (config_dir / DEFAULT_FILE, config_dir / f"{env}.toml"):
        if path.is_file():
            config = deep_merge(config, load_toml(path))
            loaded.append(path.name)

    logger.debug("static_config_loaded", config_dir=str(config_dir), files=loaded)
    return config
