"""
Input validation schemas using Pydantic for request bodies of the planner API.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from foodplanner.domain.Ingredient import Ingredient
from foodplanner.domain.MealType import MealType
from foodplanner.domain.Recipe import Recipe
from foodplanner.utilities.config import MAX_SERVINGS


class IngredientInput(BaseModel):
    """Schema for ingredient input validation."""
    name: str = Field(..., max_length=100)
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=20)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()

    @field_validator('unit')
    @classmethod
    def blank_unit_is_absent(cls, v):
        if v is None:
            return None
        v = v.strip()
        return v or None

    def to_ingredient(self) -> Ingredient:
        return Ingredient(name=self.name, quantity=self.quantity, unit=self.unit)


class RecipeInput(BaseModel):
    """Schema for recipe create/update validation (the recipe edit form)."""
    id: Optional[str] = None
    name: str = Field(..., max_length=200)
    mealType: str = Field(MealType.BREAKFAST.value)
    serves: int = Field(1, ge=1, le=MAX_SERVINGS)
    ingredients: List[IngredientInput] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return v.strip()

    @field_validator('mealType')
    @classmethod
    def validate_meal_type(cls, v):
        """Normalize to the meal type value; labels are accepted too."""
        return MealType.parse(v).value

    @field_validator('instructions')
    @classmethod
    def validate_instructions(cls, v):
        """Filter out empty steps."""
        return [step.strip() for step in v if step and step.strip()]

    def to_recipe(self, recipe_id: Optional[str] = None) -> Recipe:
        return Recipe(
            id=recipe_id or self.id,
            name=self.name,
            meal_type=MealType.parse(self.mealType),
            serves=self.serves,
            ingredients=[ing.to_ingredient() for ing in self.ingredients if ing.name],
            instructions=self.instructions,
        )


class ParseInput(BaseModel):
    """Schema for the mass recipe add text box."""
    text: str = Field("", max_length=20000)


class GenerateInput(BaseModel):
    servings: int = Field(1, ge=1, le=MAX_SERVINGS)


class SlotUpdateInput(BaseModel):
    recipe_id: str = Field(..., min_length=1)


class SavePlanInput(BaseModel):
    """Schema for saving the current plan; a blank name gets the default weekly name."""
    name: Optional[str] = Field(None, max_length=200)
