"""Game configuration constants."""

# Save file location (relative to the working directory)
DEFAULT_STATE_PATH = "../data/game_state.json"

# Ship classes
SHIP_CLASSES = ("Explorer", "Enforcer", "Pioneer")
SHIP_CLASS_ALIASES = {"Explorite": "Explorer"}  # Spelling used by early save files

# Base stats for every freshly researched design
BASE_SHIP_HEALTH = 50
BASE_SHIP_LEVEL = 1
BASE_SHIP_PRICE = 100
BASE_FUEL_CAPACITY = 100
BASE_FUEL_EFFICIENCY = 1.0

# Research pricing
MIN_SHIP_PRICE = 50
DEV_POINT_DISCOUNT = 50  # StarCoins knocked off the price per development point

# Infrastructure build costs (per structure)
INFRASTRUCTURE_COSTS = {
    "farm": {"minerals": 10, "star_coins": 25},
    "water_plant": {"minerals": 15, "star_coins": 30},
    "mine": {"minerals": 5, "star_coins": 40},
    "research_lab": {"minerals": 20, "star_coins": 60},
    "housing": {"minerals": 25, "star_coins": 20},
}
DESTROY_REFUND_RATE = 2  # Refund is mineral cost // this

# Tax rate bounds
TAX_RATE_RANGE = (0.0, 1.0)

# Networked clients
DEFAULT_COLONY_SERVER_URL = "http://localhost:8080"
DEFAULT_FLEET_SERVER_URL = "http://localhost:3000"
SERVER_URL_ENV_VAR = "WORLDC_SERVER_URL"
