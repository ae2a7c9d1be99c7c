import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from foodplanner.domain.MealType import MealType
from foodplanner.domain.Recipe import Recipe
from foodplanner.infra.paths import BUILTIN_RECIPES_FILE

logger = logging.getLogger(__name__)


def recipes_from_records(records: Any) -> List[Recipe]:
    """Decode a persisted recipe array; any malformed entry makes the whole record absent."""
    if not isinstance(records, list):
        return []
    try:
        return [Recipe.from_dict(entry) for entry in records]
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Malformed recipe record, ignoring it: {e}")
        return []


def group_by_meal_type(recipes: List[Recipe]) -> Dict[MealType, List[Recipe]]:
    grouped: Dict[MealType, List[Recipe]] = {meal: [] for meal in MealType}
    for recipe in recipes:
        grouped[recipe.meal_type].append(recipe)
    return grouped


def load_builtin_recipes(path: Optional[Path] = None) -> Dict[MealType, List[Recipe]]:
    """Read the recipes shipped with the application, grouped by meal type."""
    source = Path(path) if path is not None else BUILTIN_RECIPES_FILE
    try:
        with open(source, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Built-in recipes file not found: {source}. Starting with empty pools.")
        return group_by_meal_type([])
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in built-in recipes file: {e}")
        return group_by_meal_type([])
    return group_by_meal_type(recipes_from_records(records))
