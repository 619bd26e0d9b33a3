#!/usr/bin/env python3
"""World Control - colony client.

Interactive client for the colony server: log in or register, then inspect
your colonies and request new buildings.
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.client.api import ColonyApi
from src.client.session import ClientConfig
from src.client.shell import ColonyShell
from src.utils.constants import DEFAULT_COLONY_SERVER_URL


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="colony-client",
        description="World Control - colony management client",
    )
    parser.add_argument(
        "--server",
        type=str,
        default=DEFAULT_COLONY_SERVER_URL,
        help=f"Game server URL (default: {DEFAULT_COLONY_SERVER_URL})",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # Request logs are only useful with --debug
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    try:
        config = ClientConfig(server_url=args.server)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    api = ColonyApi(config)
    try:
        return ColonyShell(api).run()
    finally:
        api.close()


if __name__ == "__main__":
    sys.exit(main())
