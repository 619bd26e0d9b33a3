"""Ship construction from researched designs."""

import logging

from ..models.game_state import GameState
from ..models.ship import Ship
from .research import normalize_ship_class

logger = logging.getLogger(__name__)


def construct_ships(
    state: GameState, ship_class: str, count: int, design_name: str | None = None
) -> Ship:
    """Construct hulls of a researched design.

    Without a design name the most recently researched design of the class
    is used. Construction costs the design's price per hull in StarCoins.

    Args:
        state: World state to update
        ship_class: Class to construct
        count: Number of hulls (must be > 0)
        design_name: Optional design to build

    Returns:
        The design whose amount was increased

    Raises:
        ValueError: If the class is unknown, no matching design exists,
            count is not positive or StarCoins are insufficient
    """
    ship_class = normalize_ship_class(ship_class)
    if count <= 0:
        raise ValueError(f"Invalid count: must be positive (got {count})")

    if design_name is not None:
        design = state.find_design(ship_class, design_name)
        if design is None:
            raise ValueError(f"No {ship_class} design named '{design_name}'")
    else:
        designs = state.designs(ship_class)
        if not designs:
            raise ValueError(
                f"No {ship_class} designs researched yet (use 'research {ship_class} <name>')"
            )
        design = designs[-1]

    cost = design.price * count
    if state.star_coins < cost:
        raise ValueError(
            f"Insufficient StarCoins to construct {count} x {design.name}\n"
            f"Cost: {cost}, Available: {state.star_coins}"
        )

    state.star_coins -= cost
    design.amount += count

    logger.info(f"Constructed {count} x {design.name} ({ship_class}) for {cost} StarCoins")
    return design
