#!/usr/bin/env python3
"""World Control - local world management CLI.

Runs a single command against the world save file: show the state, build
or destroy infrastructure, set the tax rate, research ship designs and
construct ships from them.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from src.engine.construction import construct_ships
from src.engine.infrastructure import build_infrastructure, destroy_infrastructure
from src.engine.research import normalize_ship_class, research_ship
from src.engine.settings import set_parameter
from src.interface.command_parser import (
    Command,
    CommandParseError,
    CommandParser,
    ErrorType,
    parse_int,
    parse_positive_int,
)
from src.interface.display import DisplayManager, format_error_message
from src.interface.prompts import read_int
from src.models.game_state import GameState
from src.utils.constants import DEFAULT_STATE_PATH
from src.utils.serialization import load_state, save_state

logger = logging.getLogger(__name__)


class WorldController:
    """Applies one parsed command to the world state."""

    def __init__(self, state: GameState, input_fn: Callable[[str], str] = input):
        """Initialize controller.

        Args:
            state: World state loaded from the save file
            input_fn: Line reader used by interactive prompts
        """
        self.state = state
        self.input_fn = input_fn
        self.parser = CommandParser()
        self.display = DisplayManager()

    def execute(self, command: Command) -> bool:
        """Run a command.

        Args:
            command: Parsed command

        Returns:
            True if the command changed the state, False otherwise
        """
        handler = getattr(self, f"_cmd_{command.name}")
        try:
            return handler(command.args)
        except CommandParseError as e:
            print(format_error_message(e.message))
        except ValueError as e:
            print(format_error_message(str(e)))
        return False

    def _cmd_show(self, args: List[str]) -> bool:
        self.display.show_state(self.state)
        return False

    def _cmd_build(self, args: List[str]) -> bool:
        count = parse_positive_int(args[1], "number")
        cost = build_infrastructure(self.state, args[0], count)
        self.display.show_build_result(args[0].lower(), count, cost, self.state)
        return True

    def _cmd_destroy(self, args: List[str]) -> bool:
        count = parse_positive_int(args[1], "number")
        refund = destroy_infrastructure(self.state, args[0], count)
        self.display.show_destroy_result(args[0].lower(), count, refund, self.state)
        return True

    def _cmd_set(self, args: List[str]) -> bool:
        rate = set_parameter(self.state, args[0], args[1])
        print(f"✓ TaxRate set to {rate:.2f}")
        return True

    def _cmd_construct(self, args: List[str]) -> bool:
        count = parse_positive_int(args[1], "number")
        design_name = args[2] if len(args) > 2 else None
        ship = construct_ships(self.state, args[0], count, design_name)
        self.display.show_construct_result(ship, count, self.state)
        return True

    def _cmd_research(self, args: List[str]) -> bool:
        # Reject unknown classes before asking for an investment
        ship_class = normalize_ship_class(args[0])
        name = args[1]

        if len(args) > 2:
            star_coins = max(0, parse_int(args[2], "StarCoins"))
        else:
            star_coins = read_int(
                "How many StarCoins do you want to put into this research project?",
                self.input_fn,
            )

        if len(args) > 3:
            dev_points = max(0, parse_int(args[3], "Development Points"))
        else:
            dev_points = read_int(
                "How many Development Points do you want to add to this project?",
                self.input_fn,
            )

        ship = research_ship(self.state, ship_class, name, star_coins, dev_points)
        self.display.show_research_result(ship)
        return True


def build_arg_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="worldc",
        description="World Control - manage your world from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=CommandParser().help_text(),
    )
    parser.add_argument(
        "--state",
        type=str,
        default=DEFAULT_STATE_PATH,
        metavar="FILE",
        help=f"World save file (default: {DEFAULT_STATE_PATH})",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("command", nargs="?", help="Command to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Command arguments")
    return parser


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    """Main entry point.

    Returns:
        Process exit status
    """
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    parser = CommandParser()

    if not args.command:
        print(parser.help_text())
        return 1

    try:
        command = parser.parse([args.command] + args.args)
    except CommandParseError as e:
        print(e.message if e.error_type == ErrorType.USAGE_ERROR else parser.help_text())
        return 1 if e.error_type == ErrorType.USAGE_ERROR else 0

    try:
        state = load_state(args.state)
    except (OSError, ValueError) as e:
        print(f"Error loading state: {e}")
        return 1

    controller = WorldController(state, input_fn=input_fn)
    changed = controller.execute(command)

    if not parser.is_mutating(command.name):
        return 0
    if not changed:
        return 1

    try:
        save_state(controller.state, args.state)
    except OSError as e:
        print(f"Error saving state: {e}")
        return 1

    logger.debug(f"Command '{command.name}' applied and saved to {args.state}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
