"""Recipe domain entity: id, name, meal type, servings, ingredients, instructions."""
from uuid import uuid4
from typing import List, Optional
from foodplanner.domain.Ingredient import Ingredient
from foodplanner.domain.MealType import MealType


def new_recipe_id() -> str:
    return str(uuid4())


class Recipe:
    def __init__(self, id: Optional[str] = None, name: str = "", meal_type: MealType = MealType.BREAKFAST,
                 serves: int = 1, ingredients: Optional[List[Ingredient]] = None,
                 instructions: Optional[List[str]] = None):
        if serves < 1:
            raise ValueError(f"A recipe must serve at least one person: {serves}")
        self.id = id or new_recipe_id()
        self.name = name
        self.meal_type = MealType.parse(meal_type)
        self.serves = serves
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.name} ({self.meal_type.label}) - {self.serves} servings - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    def copy(self, **changes) -> "Recipe":
        '''Returns a new Recipe with the same id and the given fields replaced.'''
        fields = {
            "id": self.id,
            "name": self.name,
            "meal_type": self.meal_type,
            "serves": self.serves,
            "ingredients": self.ingredients,
            "instructions": self.instructions,
        }
        fields.update(changes)
        return Recipe(**fields)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Recipe(
            id=str(d["id"]),
            name=str(d.get("name", "")),
            meal_type=MealType.parse(d.get("mealType", MealType.BREAKFAST)),
            serves=int(d.get("serves", 1)),
            ingredients=[Ingredient.from_dict(ing) for ing in d.get("ingredients", [])],
            instructions=[str(step) for step in d.get("instructions", [])],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "mealType": self.meal_type.value,
            "serves": self.serves,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": list(self.instructions),
        }
