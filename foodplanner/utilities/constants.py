from typing import Final

DAYS: Final[tuple] = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Persisted record kinds (one JSON file each)
CUSTOM_RECIPES: Final[str] = "custom_recipes"
REMOVED_IDS: Final[str] = "removed_ids"
SAVED_PLANS: Final[str] = "saved_plans"
STORE_KINDS: Final[tuple] = (CUSTOM_RECIPES, REMOVED_IDS, SAVED_PLANS)

PLAN_NAME_TEMPLATE: Final[str] = "Week of {month} {day} meal plan"
QUANTITY_FORMAT: Final[str] = "{:.2f}"
