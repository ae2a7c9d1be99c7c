"""MealType: closed set of daily meals, iterated breakfast -> lunch -> dinner."""
from enum import Enum


class MealType(Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value) -> "MealType":
        '''Accepts a MealType, its value or its display label (case-insensitive).'''
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for meal in cls:
                if meal.value == key:
                    return meal
        raise ValueError(f"Unknown meal type: {value!r}")

    def __str__(self) -> str:
        return self.label
