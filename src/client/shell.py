"""Interactive command shells for the networked clients.

Both shells read a line, split it into tokens and dispatch on the first
token to a fixed command table. A command makes at most one request; any
failure is printed and the shell goes back to the prompt.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from ..interface.command_parser import (
    CommandParseError,
    CommandParser,
    CommandSpec,
    ErrorType,
    parse_int,
)
from ..interface.display import format_error_message
from .api import ApiError, ColonyApi, FleetApi, InvalidRequestError, NotAuthenticatedError
from .schemas.responses import BuildResponse, Colony

logger = logging.getLogger(__name__)

SHELL_ALIASES = {"exit": "quit", "q": "quit", "h": "help", "?": "help"}

HELP_SPEC = CommandSpec("", "Show this help message")
QUIT_SPEC = CommandSpec("", "Exit the client")


class CommandShell(ABC):
    """Read-dispatch loop shared by the networked clients."""

    title = "World Control"

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None):
        """Initialize shell.

        Args:
            input_fn: Line reader (defaults to built-in input)
        """
        self.input_fn = input_fn or input

    @abstractmethod
    def command_table(self) -> Dict[str, CommandSpec]:
        """Commands available right now."""

    def prompt(self) -> str:
        return "> "

    def parser(self) -> CommandParser:
        return CommandParser(self.command_table(), program="", aliases=SHELL_ALIASES)

    def run(self) -> int:
        """Run until quit or end of input.

        Returns:
            Process exit status
        """
        print(f"{self.title} - type 'help' for commands")
        while True:
            try:
                line = self.input_fn(self.prompt())
            except EOFError:
                print()
                return 0
            except KeyboardInterrupt:
                print("\nInterrupted. Type 'quit' to exit.")
                continue

            if not self.handle_line(line):
                return 0

    def handle_line(self, line: str) -> bool:
        """Process one line of input.

        Returns:
            False when the shell should stop, True otherwise
        """
        parser = self.parser()
        try:
            command = parser.parse_line(line)
        except CommandParseError as e:
            print(self._format_parse_error(e, parser))
            return True

        if command is None:
            return True

        if command.name == "quit":
            print("Goodbye!")
            return False

        if command.name == "help":
            print(parser.help_text())
            return True

        handler = getattr(self, f"_cmd_{command.name}")
        try:
            handler(command.args)
        except CommandParseError as e:
            print(self._format_parse_error(e, parser))
        except NotAuthenticatedError:
            print(format_error_message(self.not_authenticated_message()))
        except InvalidRequestError as e:
            print(format_error_message(e.message))
        except ApiError as e:
            logger.debug(f"Command '{command.name}' failed: {e}")
            print(format_error_message(f"Request failed: {e}"))
        return True

    def not_authenticated_message(self) -> str:
        return "Not logged in"

    def _format_parse_error(self, error: CommandParseError, parser: CommandParser) -> str:
        # Only unknown commands get the command list
        if error.error_type == ErrorType.UNKNOWN_COMMAND:
            commands = ", ".join(parser.commands)
            return format_error_message(error.message, f"Available commands: {commands}")
        if error.error_type == ErrorType.USAGE_ERROR:
            return error.message
        return format_error_message(error.message)

    def _usage_int(self, value: str, command: str, positive: bool = False) -> int:
        """Parse a numeric argument, reporting bad input with the usage line."""
        try:
            number = parse_int(value, command)
        except CommandParseError:
            raise CommandParseError(ErrorType.USAGE_ERROR, self.parser().usage(command))
        if positive and number <= 0:
            raise CommandParseError(
                ErrorType.VALIDATION_ERROR, f"Invalid {command} amount: must be positive (got {number})"
            )
        return number

    def show_build(self, reply: BuildResponse) -> None:
        print(f"✓ {reply.message or 'Build request accepted'}")
        if reply.colony is not None:
            show_colony(reply.colony)


def show_colony(colony: Colony) -> None:
    """Print a colony snapshot."""
    print(f"  [{colony.id}] {colony.name} at ({colony.x:g}, {colony.y:g}) - Population: {colony.population}")
    if colony.buildings:
        buildings = ", ".join(f"{k}: {v}" for k, v in sorted(colony.buildings.items()))
        print(f"    Buildings: {buildings}")
    if colony.resources:
        resources = ", ".join(f"{k}: {v}" for k, v in sorted(colony.resources.items()))
        print(f"    Resources: {resources}")


# Colony client menus
MAIN_MENU = {
    "login": CommandSpec("<username> <password>", "Log in to your account", 2),
    "register": CommandSpec("<username> <password>", "Create a new account", 2),
    "help": HELP_SPEC,
    "quit": QUIT_SPEC,
}

COLONY_MENU = {
    "state": CommandSpec("", "Show your colonies"),
    "build": CommandSpec("<colony_id> <building> [count]", "Build in a colony", 2),
    "logout": CommandSpec("", "Log out and return to the main menu"),
    "help": HELP_SPEC,
    "quit": QUIT_SPEC,
}


class ColonyShell(CommandShell):
    """Shell for the colony server.

    Starts in the main menu; a successful login switches to the colony
    menu and logout switches back.
    """

    title = "World Control - Colony Client"

    def __init__(self, api: ColonyApi, input_fn: Optional[Callable[[str], str]] = None):
        super().__init__(input_fn)
        self.api = api

    def command_table(self) -> Dict[str, CommandSpec]:
        return COLONY_MENU if self.api.session.authenticated else MAIN_MENU

    def prompt(self) -> str:
        if self.api.session.authenticated:
            return f"[{self.api.session.username or self.api.session.user_id}] > "
        return "[main] > "

    def _cmd_login(self, args: List[str]) -> None:
        reply = self.api.login(args[0], args[1])
        print(f"✓ Logged in as {args[0]} (user {reply.userId})")
        if reply.message:
            print(f"  {reply.message}")

    def _cmd_register(self, args: List[str]) -> None:
        reply = self.api.register(args[0], args[1])
        print(f"✓ {reply.message or 'Registration successful'}")
        print("  Use 'login <username> <password>' to continue")

    def _cmd_state(self, args: List[str]) -> None:
        state = self.api.get_state()
        print(f"Tick: {state.tick} | StarCoins: {state.starCoins}")
        if not state.colonies:
            print("Colonies: None")
            return
        print("Colonies:")
        for colony in state.colonies:
            show_colony(colony)

    def _cmd_build(self, args: List[str]) -> None:
        count = self._usage_int(args[2], "build", positive=True) if len(args) > 2 else 1
        self.show_build(self.api.build(args[0], args[1], count))

    def _cmd_logout(self, args: List[str]) -> None:
        self.api.logout()
        print("Logged out")


# Fleet client commands
FLEET_COMMANDS = {
    "status": CommandSpec("", "Show server status"),
    "register": CommandSpec("<name>", "Register a new player", 1),
    "build": CommandSpec("<colony_id> <building>", "Build in a colony", 2),
    "burn": CommandSpec("<amount>", "Burn currency from your bank", 1),
    "launch": CommandSpec("<colony_id> <ship_class> <x> <y>", "Launch a fleet", 4),
    "help": HELP_SPEC,
    "quit": QUIT_SPEC,
}


class FleetShell(CommandShell):
    """Shell for the fleet server (/api/...)."""

    title = "World Control - Fleet Client"

    def __init__(self, api: FleetApi, input_fn: Optional[Callable[[str], str]] = None):
        super().__init__(input_fn)
        self.api = api

    def command_table(self) -> Dict[str, CommandSpec]:
        return FLEET_COMMANDS

    def not_authenticated_message(self) -> str:
        return "Not registered: use 'register <name>' first"

    def _cmd_status(self, args: List[str]) -> None:
        status = self.api.status()
        line = f"Server: {status.status} | Tick: {status.tick}"
        if status.players is not None:
            line += f" | Players: {status.players}"
        print(line)

    def _cmd_register(self, args: List[str]) -> None:
        reply = self.api.register(args[0])
        print(f"✓ Registered {args[0]} (player {reply.playerId})")
        if reply.colonyId is not None:
            print(f"  Home colony: {reply.colonyId}")

    def _cmd_build(self, args: List[str]) -> None:
        self.show_build(self.api.build(args[0], args[1]))

    def _cmd_burn(self, args: List[str]) -> None:
        amount = self._usage_int(args[0], "burn", positive=True)
        reply = self.api.burn(amount)
        line = f"✓ Burned {reply.burned}"
        if reply.balance is not None:
            line += f" | Balance: {reply.balance}"
        print(line)

    def _cmd_launch(self, args: List[str]) -> None:
        x = self._usage_int(args[2], "launch")
        y = self._usage_int(args[3], "launch")
        reply = self.api.launch(args[0], args[1], x, y)
        line = f"✓ {reply.message or 'Fleet launched'}"
        if reply.fleetId is not None:
            line += f" | Fleet: {reply.fleetId}"
        if reply.eta is not None:
            line += f" | ETA: {reply.eta}"
        print(line)
