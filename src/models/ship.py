"""Ship design data model."""

from dataclasses import dataclass

from ..utils.constants import SHIP_CLASSES


@dataclass
class Ship:
    """A researched ship design.

    Designs are produced by the research flow. Each design tracks how many
    hulls have been constructed from it in ``amount``.
    """

    name: str  # Design name chosen by the player
    ship_class: str  # "Explorer", "Enforcer" or "Pioneer"
    health: int = 0
    description: str = ""
    personnel_limit: int = 0
    personnel_minimum: int = 0
    cargo_limit: int = 0
    fuel_capacity: int = 0
    fuel_efficiency: float = 0.0
    level: int = 0
    damage: int = 0
    price: int = 0
    amount: int = 0  # Hulls built from this design

    def __post_init__(self):
        """Validate ship data after initialization."""
        if self.ship_class not in SHIP_CLASSES:
            raise ValueError(
                f"Invalid ship class: {self.ship_class} (must be one of {', '.join(SHIP_CLASSES)})"
            )
        if not self.name:
            raise ValueError("name cannot be empty")
        if self.price < 0:
            raise ValueError(f"Invalid price: {self.price} (must be >= 0)")
        if self.amount < 0:
            raise ValueError(f"Invalid amount: {self.amount} (must be >= 0)")
