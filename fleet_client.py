#!/usr/bin/env python3
"""World Control - fleet client.

Interactive client for the fleet server. The server URL is taken from the
WORLDC_SERVER_URL environment variable.
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.client.api import FleetApi
from src.client.session import ClientConfig
from src.client.shell import FleetShell
from src.utils.constants import DEFAULT_FLEET_SERVER_URL, SERVER_URL_ENV_VAR


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="fleet-client",
        description="World Control - fleet operations client",
        epilog=f"Set {SERVER_URL_ENV_VAR} to override the server URL (default: {DEFAULT_FLEET_SERVER_URL})",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    config = ClientConfig.from_env()
    print(f"Server: {config.server_url}")

    api = FleetApi(config)
    try:
        return FleetShell(api).run()
    finally:
        api.close()


if __name__ == "__main__":
    sys.exit(main())
