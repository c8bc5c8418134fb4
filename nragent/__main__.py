"""Print the resolved agent configuration.

Usage:
    python -m nragent [--config-dir DIR] [--env NAME]
"""

import argparse
import json
import os
import sys

from nragent.bootstrap import run
from nragent.config import get_settings
from nragent.exceptions import AgentStartupError
from nragent.store import CONFIG_KEY, FEATURES_KEY


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nragent",
        description="Resolve the agent configuration and print it as JSON",
    )
    parser.add_argument("--config-dir", help="Directory holding default.toml")
    parser.add_argument("--env", help="Config environment overlay to load")
    args = parser.parse_args(argv)

    if args.config_dir:
        os.environ["NEW_RELIC_CONFIG_DIR"] = args.config_dir
    if args.env:
        os.environ["NEW_RELIC_CONFIG_ENV"] = args.env

    try:
        get_settings.cache_clear()
        store = run()
    except AgentStartupError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    output = {
        "config": store.get(CONFIG_KEY).model_dump(),
        "features": store.get(FEATURES_KEY).model_dump(),
    }
    print(json.dumps(output, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
