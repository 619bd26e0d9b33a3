"""Ship research: turning invested StarCoins and development points into designs.

Every design starts from the same base hull. StarCoins buy class-specific
bonuses, development points buy a lower price:

- Explorer: +1 fuel capacity per 10 coins, +0.01 fuel efficiency per coin
- Enforcer: +1 damage per 10 coins
- Pioneer: +1 personnel limit per 10 coins, +1 fuel capacity per 20 coins,
  +0.005 fuel efficiency per coin

Price is 100 minus 50 per development point, never below 50.
"""

import logging

from ..models.game_state import GameState
from ..models.ship import Ship
from ..utils.constants import (
    BASE_FUEL_CAPACITY,
    BASE_FUEL_EFFICIENCY,
    BASE_SHIP_HEALTH,
    BASE_SHIP_LEVEL,
    BASE_SHIP_PRICE,
    DEV_POINT_DISCOUNT,
    MIN_SHIP_PRICE,
    SHIP_CLASS_ALIASES,
    SHIP_CLASSES,
)

logger = logging.getLogger(__name__)


def normalize_ship_class(ship_class: str) -> str:
    """Resolve a user-supplied class name to its canonical spelling.

    Args:
        ship_class: Class name as typed

    Returns:
        Canonical class name

    Raises:
        ValueError: If the class is not one of the known classes
    """
    ship_class = SHIP_CLASS_ALIASES.get(ship_class, ship_class)
    if ship_class not in SHIP_CLASSES:
        raise ValueError(f"Unknown ship class: {ship_class}")
    return ship_class


def calculate_price(dev_points: int) -> int:
    """Price of a new design after the development point discount."""
    return max(MIN_SHIP_PRICE, BASE_SHIP_PRICE - max(0, dev_points) * DEV_POINT_DISCOUNT)


def derive_ship(ship_class: str, name: str, star_coins: int, dev_points: int) -> Ship:
    """Build a new ship design from the research investment.

    Args:
        ship_class: "Explorer", "Enforcer" or "Pioneer"
        name: Design name
        star_coins: StarCoins invested (negative values count as 0)
        dev_points: Development points invested (negative values count as 0)

    Returns:
        The derived Ship design (amount 0)

    Raises:
        ValueError: If the class is unknown or the name is empty
    """
    ship_class = normalize_ship_class(ship_class)
    coins = max(0, star_coins)

    ship = Ship(
        name=name,
        ship_class=ship_class,
        health=BASE_SHIP_HEALTH,
        level=BASE_SHIP_LEVEL,
        price=BASE_SHIP_PRICE,
        fuel_capacity=BASE_FUEL_CAPACITY,
        fuel_efficiency=BASE_FUEL_EFFICIENCY,
    )

    if ship_class == "Explorer":
        ship.fuel_capacity += coins // 10
        ship.fuel_efficiency += coins / 100.0
    elif ship_class == "Enforcer":
        ship.damage += coins // 10
    elif ship_class == "Pioneer":
        ship.personnel_limit += coins // 10
        ship.fuel_capacity += coins // 20
        ship.fuel_efficiency += coins / 200.0

    ship.price = calculate_price(dev_points)
    return ship


def research_ship(
    state: GameState, ship_class: str, name: str, star_coins: int, dev_points: int
) -> Ship:
    """Research a new design and add it to the state's ship collections.

    The state is only modified once the design has been derived, so an
    unknown class leaves it untouched.

    Args:
        state: World state to update
        ship_class: Requested class
        name: Design name
        star_coins: StarCoins invested
        dev_points: Development points invested

    Returns:
        The new design

    Raises:
        ValueError: If the class is unknown
    """
    ship = derive_ship(ship_class, name, star_coins, dev_points)
    state.ships.setdefault(ship.ship_class, []).append(ship)
    logger.info(
        f"Researched {ship.ship_class} design '{ship.name}' "
        f"(coins={star_coins}, dev_points={dev_points}, price={ship.price})"
    )
    return ship
