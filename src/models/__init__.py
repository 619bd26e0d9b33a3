"""Data models for World Control."""

from .game_state import GameState
from .ship import Ship

__all__ = [
    "GameState",
    "Ship",
]
