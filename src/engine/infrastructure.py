"""Building and demolishing infrastructure.

Each structure costs a fixed amount of minerals and StarCoins. Demolishing
returns half of the mineral cost; StarCoins are not refunded.
"""

import logging

from ..models.game_state import GameState
from ..utils.constants import DESTROY_REFUND_RATE, INFRASTRUCTURE_COSTS

logger = logging.getLogger(__name__)

# Display names for the resources a structure consumes
RESOURCE_LABELS = {
    "minerals": "Minerals",
    "star_coins": "StarCoins",
}


def normalize_infrastructure(kind: str) -> str:
    """Resolve an infrastructure name (case-insensitive).

    Raises:
        ValueError: If the type is not in the catalogue
    """
    key = kind.strip().lower()
    if key not in INFRASTRUCTURE_COSTS:
        known = ", ".join(sorted(INFRASTRUCTURE_COSTS))
        raise ValueError(f"Unknown infrastructure type: '{kind}' (known: {known})")
    return key


def build_cost(kind: str, count: int) -> dict[str, int]:
    """Total resources needed to build ``count`` structures of ``kind``."""
    key = normalize_infrastructure(kind)
    return {resource: amount * count for resource, amount in INFRASTRUCTURE_COSTS[key].items()}


def build_infrastructure(state: GameState, kind: str, count: int) -> dict[str, int]:
    """Build structures, consuming resources from the state.

    Args:
        state: World state to update
        kind: Infrastructure type
        count: Number of structures to build (must be > 0)

    Returns:
        Resources consumed, keyed by resource name

    Raises:
        ValueError: If the type is unknown, count is not positive or
            resources are insufficient (state is left unchanged)
    """
    if count <= 0:
        raise ValueError(f"Invalid count: must be positive (got {count})")

    key = normalize_infrastructure(kind)
    cost = build_cost(key, count)

    shortfalls = []
    for resource, needed in cost.items():
        available = getattr(state, resource)
        if available < needed:
            shortfalls.append(
                f"{RESOURCE_LABELS[resource]}: need {needed}, have {available}"
            )
    if shortfalls:
        raise ValueError(
            f"Insufficient resources to build {count} {key}\n" + "\n".join(shortfalls)
        )

    for resource, needed in cost.items():
        setattr(state, resource, getattr(state, resource) - needed)
    state.infrastructure[key] = state.infrastructure.get(key, 0) + count

    logger.info(f"Built {count} {key} (cost: {cost})")
    return cost


def destroy_infrastructure(state: GameState, kind: str, count: int) -> int:
    """Demolish structures and refund part of their mineral cost.

    Args:
        state: World state to update
        kind: Infrastructure type
        count: Number of structures to demolish (must be > 0)

    Returns:
        Minerals refunded

    Raises:
        ValueError: If the type is unknown, count is not positive or exceeds
            the number of existing structures
    """
    if count <= 0:
        raise ValueError(f"Invalid count: must be positive (got {count})")

    key = normalize_infrastructure(kind)
    existing = state.infrastructure.get(key, 0)
    if count > existing:
        raise ValueError(f"Cannot destroy {count} {key}: only {existing} built")

    remaining = existing - count
    if remaining:
        state.infrastructure[key] = remaining
    else:
        del state.infrastructure[key]

    refund = INFRASTRUCTURE_COSTS[key]["minerals"] // DESTROY_REFUND_RATE * count
    state.minerals += refund

    logger.info(f"Destroyed {count} {key} (refund: {refund} minerals)")
    return refund
