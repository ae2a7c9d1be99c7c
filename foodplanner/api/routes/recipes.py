import logging
from fastapi import APIRouter, Depends, HTTPException

from foodplanner.api.state import get_state
from foodplanner.domain.MealType import MealType
from foodplanner.logic.parsing.recipe_text import parse_recipe_text
from foodplanner.logic.state import PlannerState
from foodplanner.utilities.validators import ParseInput, RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])
logger = logging.getLogger(__name__)


def _meal_or_400(value: str) -> MealType:
    try:
        return MealType.parse(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown meal type: {value}")


@router.get("")
def list_recipes(state: PlannerState = Depends(get_state)):
    """All visible recipes grouped by meal type (breakfast, lunch, dinner)."""
    return {
        meal.value: [r.to_dict() for r in pool]
        for meal, pool in state.catalog.recipes_by_type().items()
    }


@router.get("/{meal_type}")
def list_recipes_for_meal(meal_type: str, state: PlannerState = Depends(get_state)):
    meal = _meal_or_400(meal_type)
    pool = state.catalog.effective_pool(meal)
    return {"mealType": meal.value, "count": len(pool), "recipes": [r.to_dict() for r in pool]}


@router.post("/parse")
def parse_recipe(payload: ParseInput):
    """Parse pasted text into a recipe draft; nothing is stored until it is saved."""
    return parse_recipe_text(payload.text).to_dict()


@router.post("")
def add_recipe(payload: RecipeInput, state: PlannerState = Depends(get_state)):
    recipe = payload.to_recipe()
    state.catalog.add_or_update(recipe)
    return {"status": "success", "recipe": recipe.to_dict()}


@router.put("/{recipe_id}")
def update_recipe(recipe_id: str, payload: RecipeInput, state: PlannerState = Depends(get_state)):
    recipe = payload.to_recipe(recipe_id)
    state.catalog.add_or_update(recipe)
    return {"status": "success", "recipe": recipe.to_dict()}


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str, state: PlannerState = Depends(get_state)):
    recipe = state.catalog.find(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    if not state.catalog.delete(recipe):
        raise HTTPException(status_code=400, detail=f"Cannot delete the last recipe in {recipe.meal_type.label}.")
    return {"status": "success", "deleted": recipe_id}
