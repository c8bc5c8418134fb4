"""Runtime version gate run before any configuration is resolved.

This module is imported by the package __init__ before anything else, so it
must stay importable on any Python 3 interpreter.
"""

from __future__ import annotations

import importlib.util
import sys
from typing import Sequence

from nragent.exceptions import FatalStartupError

MINIMUM_PYTHON = (3, 11)

# TOML backport; with it installed the agent runs on 3.10 as well
CAPABILITY_MARKER = "tomli"


def verify_runtime_version(
    version_info: Sequence[int] | None = None,
    capability: str | None = None,
) -> None:
    """Abort startup unless the interpreter can run the agent.

    The capability marker is checked first: when it is importable the
    interpreter is accepted whatever its version string says.

    Args:
        version_info: Interpreter version (default: sys.version_info)
        capability: Marker module name (default: CAPABILITY_MARKER);
            pass "" to check the version only

    Raises:
        FatalStartupError: If neither the marker nor the version qualifies
    """
    marker = CAPABILITY_MARKER if capability is None else capability
    if marker and importlib.util.find_spec(marker) is not None:
        return

    version = tuple(version_info if version_info is not None else sys.version_info)
    if version[:2] >= MINIMUM_PYTHON:
        return

    raise FatalStartupError(
        "Python %d.%d required to run the agent (found %s; installing %s also works)"
        % (
            MINIMUM_PYTHON[0],
            MINIMUM_PYTHON[1],
            ".".join(str(part) for part in version[:3]),
            marker or CAPABILITY_MARKER,
        )
    )
