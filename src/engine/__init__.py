"""Game rules for the local world."""

from .construction import construct_ships
from .infrastructure import build_infrastructure, destroy_infrastructure
from .research import derive_ship, research_ship
from .settings import set_parameter

__all__ = [
    "build_infrastructure",
    "construct_ships",
    "derive_ship",
    "destroy_infrastructure",
    "research_ship",
    "set_parameter",
]
