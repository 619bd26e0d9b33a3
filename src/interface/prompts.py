"""Interactive numeric prompts."""

from typing import Callable


def read_int(prompt: str, input_fn: Callable[[str], str] = input) -> int:
    """Ask for a non-negative integer.

    Malformed or negative input reads as 0, as does end of input.

    Args:
        prompt: Question shown to the player
        input_fn: Line reader (defaults to built-in input)

    Returns:
        The number entered, or 0
    """
    print(prompt)
    try:
        raw = input_fn("> ")
    except EOFError:
        return 0

    try:
        value = int(raw.strip())
    except ValueError:
        return 0
    return max(0, value)
