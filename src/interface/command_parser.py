"""Command parser for the local world CLI and the networked shells.

The local CLI receives one command per process invocation as argv tokens;
the networked shells read one line at a time. Both end up as a Command with
a lowercase name and its raw argument tokens.
"""

import shlex
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ErrorType(Enum):
    """Classification of command input errors."""
    UNKNOWN_COMMAND = "unknown_command"
    USAGE_ERROR = "usage_error"
    VALIDATION_ERROR = "validation_error"


class CommandParseError(Exception):
    """Raised when command parsing fails with classification."""

    def __init__(self, error_type: ErrorType, message: str):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


@dataclass
class Command:
    """A parsed command: its name and the argument tokens that follow it."""

    name: str
    args: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class CommandSpec:
    """Static description of one command in a command table."""

    usage: str  # Argument synopsis, e.g. "<infrastructure> <number>"
    description: str
    min_args: int = 0
    mutating: bool = False


# Local CLI command table
WORLD_COMMANDS = {
    "show": CommandSpec("", "Display the current game state."),
    "build": CommandSpec(
        "<infrastructure> <number>", "Build specified amount of infrastructure.", 2, True
    ),
    "destroy": CommandSpec(
        "<infrastructure> <number>", "Destroy specified amount of infrastructure.", 2, True
    ),
    "set": CommandSpec("<TaxRate> <value>", "Set the tax rate.", 2, True),
    "construct": CommandSpec(
        "<ship_class> <number> [name]",
        "Construct specified amount of ships based on class.",
        2,
        True,
    ),
    "research": CommandSpec(
        "<class> <name> [coins] [dev_points]",
        "Start a new research project for a ship.",
        2,
        True,
    ),
}


def tokenize(line: str) -> List[str]:
    """Split an input line into tokens.

    Quoted strings stay together ("research Explorer 'Deep Star'"). An
    unbalanced quote falls back to plain whitespace splitting.
    """
    try:
        return shlex.split(line)
    except ValueError:
        return line.split()


def parse_int(value: str, what: str) -> int:
    """Parse an integer argument.

    Raises:
        CommandParseError: If the value is not an integer
    """
    try:
        return int(value)
    except ValueError:
        raise CommandParseError(
            ErrorType.VALIDATION_ERROR, f"Invalid {what}: '{value}' is not a number"
        )


def parse_positive_int(value: str, what: str) -> int:
    """Parse an integer argument that must be > 0."""
    number = parse_int(value, what)
    if number <= 0:
        raise CommandParseError(
            ErrorType.VALIDATION_ERROR, f"Invalid {what}: must be positive (got {number})"
        )
    return number


class CommandParser:
    """Parse command tokens against a command table."""

    def __init__(
        self,
        commands: Optional[dict] = None,
        program: str = "worldc",
        aliases: Optional[dict] = None,
    ):
        """Initialize parser.

        Args:
            commands: Mapping of command name to CommandSpec
            program: Program name used in usage lines ("" for interactive shells)
            aliases: Mapping of shorthand name to command name
        """
        self.commands = WORLD_COMMANDS if commands is None else commands
        self.program = program
        self.aliases = aliases or {}

    def usage(self, name: str) -> str:
        """Usage line for a command."""
        spec = self.commands[name]
        parts = [self.program, name, spec.usage]
        return "Usage: " + " ".join(part for part in parts if part)

    def parse(self, tokens: List[str]) -> Command:
        """Parse command tokens into a Command.

        Args:
            tokens: Command name followed by its arguments

        Returns:
            Parsed Command with a lowercase name

        Raises:
            CommandParseError: If the command is unknown or has too few arguments
        """
        if not tokens:
            raise CommandParseError(ErrorType.UNKNOWN_COMMAND, "No command given")

        name = tokens[0].lower()
        name = self.aliases.get(name, name)
        args = list(tokens[1:])

        if name not in self.commands:
            raise CommandParseError(
                ErrorType.UNKNOWN_COMMAND, f"Unknown command: '{tokens[0]}'"
            )

        if len(args) < self.commands[name].min_args:
            raise CommandParseError(ErrorType.USAGE_ERROR, self.usage(name))

        return Command(name=name, args=args)

    def parse_line(self, line: str) -> Optional[Command]:
        """Parse one line of interactive input.

        Returns:
            Parsed Command, or None for a blank line
        """
        tokens = tokenize(line)
        if not tokens:
            return None
        return self.parse(tokens)

    def is_mutating(self, name: str) -> bool:
        """Whether a command changes state that must be saved."""
        spec = self.commands.get(name)
        return bool(spec and spec.mutating)

    def help_text(self) -> str:
        """Command summary for help output."""
        lines = [f"Usage: {self.program} <command> [args]"] if self.program else []
        lines.append("Commands:")
        for name, spec in self.commands.items():
            synopsis = f"{name} {spec.usage}".rstrip()
            lines.append(f"  {synopsis:<38} - {spec.description}")
        return "\n".join(lines)
