"""World state serialization to/from JSON.

This module saves and loads the local game's state document. The on-disk
key names are fixed by existing save files, so every field is mapped
explicitly rather than derived from attribute names.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any

from ..models.game_state import GameState
from ..models.ship import Ship
from .constants import SHIP_CLASS_ALIASES

logger = logging.getLogger(__name__)

# Serializes load/save calls within the process
_state_lock = threading.Lock()


def save_state(state: GameState, filepath: str) -> None:
    """Save world state to a JSON file.

    The whole file is rewritten in place. Parent directories are created
    if they do not exist yet.

    Args:
        state: World state to save
        filepath: Path of the save file
    """
    path = Path(filepath)
    state_dict = _serialize_state(state)

    with _state_lock:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(state_dict, f, indent=2)

    logger.debug(f"Saved state to {path}")


def load_state(filepath: str) -> GameState:
    """Load world state from a JSON file.

    Missing or null infrastructure/ship maps are replaced by empty maps.

    Args:
        filepath: Path of the save file

    Returns:
        Loaded GameState

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is invalid or malformed
    """
    path = Path(filepath)

    with _state_lock:
        with open(path) as f:
            raw = f.read()

    try:
        state_dict = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed save file {path}: {e}") from e

    if not isinstance(state_dict, dict):
        raise ValueError(f"Malformed save file {path}: expected a JSON object")

    logger.debug(f"Loaded state from {path}")
    return _deserialize_state(state_dict)


def _serialize_state(state: GameState) -> dict[str, Any]:
    """Convert GameState to JSON-compatible dictionary."""
    return {
        "food": state.food,
        "water": state.water,
        "minerals": state.minerals,
        "population": state.population,
        "happiness": state.happiness,
        "researchPoints": state.research_points,
        "infrastructure": dict(state.infrastructure),
        "ticksPassed": state.ticks_passed,
        "starCoins": state.star_coins,
        "taxRate": state.tax_rate,
        "ships": {
            ship_class: [_serialize_ship(s) for s in ships]
            for ship_class, ships in state.ships.items()
        },
    }


def _number(data: dict[str, Any], key: str, kind: type = int):
    """Read a numeric field; missing or null reads as zero."""
    value = data.get(key)
    if value is None:
        return kind(0)
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Malformed save file: invalid value for '{key}': {value!r}") from e


def _mapping(data: dict[str, Any], key: str) -> dict[str, Any]:
    """Read an object field; missing or null reads as an empty map."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Malformed save file: '{key}' must be an object")
    return value


def _deserialize_state(data: dict[str, Any]) -> GameState:
    """Reconstruct GameState from dictionary."""
    ships: dict[str, list[Ship]] = {}
    for ship_class, entries in _mapping(data, "ships").items():
        ship_class = SHIP_CLASS_ALIASES.get(ship_class, ship_class)
        if entries is not None and not isinstance(entries, list):
            raise ValueError(f"Malformed save file: ships for {ship_class} must be a list")
        # Null entries in a design list carry no design
        ships.setdefault(ship_class, []).extend(
            _deserialize_ship(s) for s in (entries or []) if s is not None
        )

    infrastructure = _mapping(data, "infrastructure")
    return GameState(
        food=_number(data, "food"),
        water=_number(data, "water"),
        minerals=_number(data, "minerals"),
        population=_number(data, "population"),
        happiness=_number(data, "happiness", float),
        research_points=_number(data, "researchPoints"),
        infrastructure={kind: _number(infrastructure, kind) for kind in infrastructure},
        ticks_passed=_number(data, "ticksPassed"),
        star_coins=_number(data, "starCoins"),
        tax_rate=_number(data, "taxRate", float),
        ships=ships,
    )


def _serialize_ship(ship: Ship) -> dict[str, Any]:
    """Convert Ship to dictionary."""
    return {
        "name": ship.name,
        "Class": ship.ship_class,
        "Health": ship.health,
        "Description": ship.description,
        "Personnel_Limit": ship.personnel_limit,
        "Personnel_Minimum": ship.personnel_minimum,
        "Cargo_Limit": ship.cargo_limit,
        "Fuel_Capacity": ship.fuel_capacity,
        "Fuel_Efficiency": ship.fuel_efficiency,
        "Level": ship.level,
        "Damage": ship.damage,
        "Price": ship.price,
        "Amount": ship.amount,
    }


def _deserialize_ship(data: Any) -> Ship:
    """Reconstruct Ship from dictionary."""
    if not isinstance(data, dict):
        raise ValueError(f"Malformed save file: ship entry must be an object, got {data!r}")
    ship_class = data.get("Class") or ""
    return Ship(
        name=data.get("name") or "",
        ship_class=SHIP_CLASS_ALIASES.get(ship_class, ship_class),
        health=_number(data, "Health"),
        description=data.get("Description") or "",
        personnel_limit=_number(data, "Personnel_Limit"),
        personnel_minimum=_number(data, "Personnel_Minimum"),
        cargo_limit=_number(data, "Cargo_Limit"),
        fuel_capacity=_number(data, "Fuel_Capacity"),
        fuel_efficiency=_number(data, "Fuel_Efficiency", float),
        level=_number(data, "Level"),
        damage=_number(data, "Damage"),
        price=_number(data, "Price"),
        amount=_number(data, "Amount"),
    )
