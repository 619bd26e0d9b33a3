"""World state container for the local game."""

from dataclasses import dataclass, field

from .ship import Ship


@dataclass
class GameState:
    """Complete state of one player's world.

    The state is read from the save file at process start, mutated by a
    single command, and written back when that command changes it.
    """

    food: int = 0
    water: int = 0
    minerals: int = 0
    population: int = 0
    happiness: float = 0.0  # Percentage
    research_points: int = 0
    infrastructure: dict[str, int] = field(default_factory=dict)  # Type -> count
    ticks_passed: int = 0
    star_coins: int = 0
    tax_rate: float = 0.0
    ships: dict[str, list[Ship]] = field(default_factory=dict)  # Class -> designs

    def designs(self, ship_class: str) -> list[Ship]:
        """Return researched designs for a class, oldest first."""
        return self.ships.get(ship_class, [])

    def find_design(self, ship_class: str, name: str) -> Ship | None:
        """Look up a design by class and name."""
        for ship in self.designs(ship_class):
            if ship.name == name:
                return ship
        return None
