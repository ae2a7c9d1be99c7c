"""Shared fixtures for the planner tests."""
from foodplanner.domain.Ingredient import Ingredient
from foodplanner.domain.MealType import MealType
from foodplanner.domain.Recipe import Recipe


class MemoryStore:
    """In-memory stand-in for JsonStore; fail_writes simulates a read-only disk."""

    def __init__(self, records=None, fail_writes=False):
        self.records = dict(records or {})
        self.fail_writes = fail_writes
        self.writes = []

    def load(self, kind):
        return self.records.get(kind)

    def save(self, kind, value):
        self.writes.append(kind)
        if self.fail_writes:
            return False
        self.records[kind] = value
        return True


def make_recipe(name, meal_type=MealType.BREAKFAST, serves=1, ingredients=None, recipe_id=None):
    return Recipe(id=recipe_id, name=name, meal_type=meal_type, serves=serves,
                  ingredients=ingredients or [Ingredient(name, 1, "pc")],
                  instructions=[f"Make {name}"])


def built_in_pools():
    return {
        MealType.BREAKFAST: [make_recipe("Oatmeal", MealType.BREAKFAST, recipe_id="bi-oatmeal")],
        MealType.LUNCH: [
            make_recipe("Salad", MealType.LUNCH, recipe_id="bi-salad"),
            make_recipe("Wrap", MealType.LUNCH, recipe_id="bi-wrap"),
        ],
        MealType.DINNER: [],
    }
