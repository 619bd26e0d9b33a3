"""Player-adjustable world parameters."""

import logging

from ..models.game_state import GameState
from ..utils.constants import TAX_RATE_RANGE

logger = logging.getLogger(__name__)

SETTABLE_PARAMETERS = ("TaxRate",)


def set_parameter(state: GameState, key: str, value: str) -> float:
    """Set a world parameter from its string value.

    Only ``TaxRate`` is settable. The key is matched case-insensitively.

    Raises:
        ValueError: If the key is unknown or the value is out of range
    """
    if key.lower() != "taxrate":
        raise ValueError(
            f"Unknown parameter: '{key}' (settable: {', '.join(SETTABLE_PARAMETERS)})"
        )

    try:
        rate = float(value)
    except ValueError:
        raise ValueError(f"Invalid tax rate: '{value}' is not a number")

    low, high = TAX_RATE_RANGE
    if not (low <= rate <= high):
        raise ValueError(f"Invalid tax rate: {rate} (must be {low}-{high})")

    state.tax_rate = rate
    logger.info(f"Tax rate set to {rate:.2f}")
    return rate
