from typing import Final

# Per-day price for each meal type (single source of truth for pricing)
MEAL_PRICES: Final[dict[str, int]] = {"veg": 80, "nonveg": 120, "jain": 90}
DEFAULT_MEAL_TYPE: Final[str] = "veg"
DEFAULT_DAYS: Final[int] = 30
