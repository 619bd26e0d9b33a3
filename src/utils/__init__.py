"""Utility functions and constants for World Control."""

from .constants import (
    DEFAULT_STATE_PATH,
    INFRASTRUCTURE_COSTS,
    MIN_SHIP_PRICE,
    SHIP_CLASSES,
)

__all__ = [
    "DEFAULT_STATE_PATH",
    "INFRASTRUCTURE_COSTS",
    "MIN_SHIP_PRICE",
    "SHIP_CLASSES",
]
