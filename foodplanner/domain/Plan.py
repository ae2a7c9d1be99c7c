"""WeeklyPlan domain entity: one row of day slots per meal type, each slot a Recipe or None."""
from typing import Dict, Iterator, List, Optional, Tuple
from foodplanner.domain.MealType import MealType
from foodplanner.domain.Recipe import Recipe
from foodplanner.utilities.constants import DAYS


class WeeklyPlan:
    def __init__(self, meals: Optional[Dict[MealType, List[Optional[Recipe]]]] = None, day_count: int = len(DAYS)):
        self.day_count = day_count
        self.meals: Dict[MealType, List[Optional[Recipe]]] = {}
        source = meals or {}
        # Every meal type is present; short rows are padded with empty slots
        for meal in MealType:
            row = list(source.get(meal, []))[:day_count]
            row.extend([None] * (day_count - len(row)))
            self.meals[meal] = row

    @classmethod
    def empty(cls, day_count: int = len(DAYS)) -> "WeeklyPlan":
        return cls(day_count=day_count)

    @property
    def days(self) -> List[str]:
        '''Day labels for the plan columns (Monday first, numbered beyond a week).'''
        return [DAYS[i] if i < len(DAYS) else f"Day {i + 1}" for i in range(self.day_count)]

    def _check_day(self, day_index: int):
        if not 0 <= day_index < self.day_count:
            raise IndexError(f"Day index out of range: {day_index}")

    def slot(self, meal_type: MealType, day_index: int) -> Optional[Recipe]:
        self._check_day(day_index)
        return self.meals[MealType.parse(meal_type)][day_index]

    def set_slot(self, meal_type: MealType, day_index: int, recipe: Optional[Recipe]):
        self._check_day(day_index)
        self.meals[MealType.parse(meal_type)][day_index] = recipe

    def remove_slot(self, meal_type: MealType, day_index: int):
        self.set_slot(meal_type, day_index, None)

    def occupied(self) -> Iterator[Tuple[MealType, int, Recipe]]:
        '''Yields (meal_type, day_index, recipe) for every filled slot, meal types in order.'''
        for meal in MealType:
            for i, recipe in enumerate(self.meals[meal]):
                if recipe is not None:
                    yield meal, i, recipe

    def is_empty(self) -> bool:
        return next(self.occupied(), None) is None

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeeklyPlan):
            return NotImplemented
        return self.day_count == other.day_count and self.meals == other.meals

    def __str__(self) -> str:
        lines = []
        for i, day in enumerate(self.days):
            names = [(self.meals[m][i].name if self.meals[m][i] else "-") for m in MealType]
            lines.append(f"{day}: " + " | ".join(names))
        return "\n".join(lines)

    __repr__ = __str__

    @staticmethod
    def from_dict(data, day_count: Optional[int] = None):
        '''Builds a plan from {mealType: [recipe dict | None, ...]}; unknown meal keys are ignored.'''
        d = dict(data) if isinstance(data, dict) else {}
        meals: Dict[MealType, List[Optional[Recipe]]] = {}
        for key, row in d.items():
            try:
                meal = MealType.parse(key)
            except ValueError:
                continue
            meals[meal] = [Recipe.from_dict(entry) if entry else None for entry in (row or [])]
        if day_count is None:
            day_count = max((len(row) for row in meals.values()), default=len(DAYS))
        return WeeklyPlan(meals, day_count=day_count)

    def to_dict(self):
        return {
            meal.value: [recipe.to_dict() if recipe else None for recipe in self.meals[meal]]
            for meal in MealType
        }
