"""Parsers for raw config values.

Raw values arrive either as strings from the environment or as typed values
from the static config table, so each parser accepts both.
"""

import re
from typing import Any

from nragent.config.models.resolved import Label
from nragent.exceptions import ConfigParseError

# Optional sign followed by ASCII digits, nothing else
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_port(port: Any) -> int:
    """Parse a collector port.

    Integers are returned unchanged and numeric strings are converted. No
    other coercion happens: whitespace, underscores, floats and bools fail.

    Raises:
        ConfigParseError: If the value is not an integer or numeric string
    """
    if isinstance(port, int) and not isinstance(port, bool):
        return port
    if isinstance(port, str) and _INTEGER.fullmatch(port):
        return int(port)
    raise ConfigParseError(f"Invalid port: {port!r}", key="port", value=port)


def parse_app_names(name_string: str | None) -> list[str] | None:
    """Split ';'-separated application names, trimming each one.

    Returns None for None so that "not configured" stays distinguishable
    from an empty list.
    """
    if name_string is None:
        return None
    return [name.strip() for name in name_string.split(";")]


def parse_labels(label_string: str | None) -> list[Label]:
    """Parse 'key:value;key:value' into ordered (key, value) pairs.

    ';' and ':' are interchangeable separators. Empty tokens are dropped
    before trimming, and a trailing token without a partner is discarded.
    """
    if label_string is None:
        return []

    tokens = [
        token.strip()
        for token in label_string.replace(":", ";").split(";")
        if token
    ]
    return [(tokens[i], tokens[i + 1]) for i in range(0, len(tokens) - 1, 2)]


def parse_bool(value: Any) -> bool | None:
    """Parse an exact boolean literal.

    Returns None for anything that is not a bool or the strings
    "true" / "false", leaving the fallback to the caller.
    """
    if isinstance(value, bool):
        return value
    if value == "true":
        return True
    if value == "false":
        return False
    return None
