"""Shopping list builder.

Provides build_shopping_list(plan, servings): scales every planned recipe to
the requested servings and sums ingredient quantities.

Lines are grouped by (name, unit, declares quantity). The same ingredient in
the same unit is summed across recipes even when the declared amounts differ;
different units stay on separate lines since units are never converted; a
line without a declared quantity is listed by name only and never merged into
a quantified one.
"""
from collections import OrderedDict
from typing import Dict, List, Optional, Tuple
from foodplanner.domain.Plan import WeeklyPlan
from foodplanner.utilities.constants import QUANTITY_FORMAT

GroupKey = Tuple[str, Optional[str], bool]


class ShoppingItem:
    def __init__(self, name: str, unit: Optional[str] = None, total: float = 0.0, has_quantity: bool = True):
        self.name = name
        self.unit = unit
        self.total = total
        # from the recipe lines, not from total (a declared 0 still has a quantity)
        self.has_quantity = has_quantity

    def display(self) -> str:
        if not self.has_quantity:
            return self.name
        return f"{self.name}: {QUANTITY_FORMAT.format(self.total)} {self.unit or ''}".rstrip()

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return self.display()

    __repr__ = __str__

    def to_dict(self):
        return {
            "name": self.name,
            "unit": self.unit,
            "total": self.total if self.has_quantity else None,
            "has_quantity": self.has_quantity,
            "display": self.display(),
        }


def serving_factor(servings: int, recipe_serves: int) -> float:
    return servings / recipe_serves


def build_shopping_list(plan: WeeklyPlan, servings: int) -> List[ShoppingItem]:
    """Aggregate the ingredients of every filled slot, scaled to ``servings``.

    Returns:
        ShoppingItem list sorted by ingredient name (then unit).
    """
    if servings < 1:
        raise ValueError(f"Servings must be positive: {servings}")
    if plan is None:
        return []

    totals: Dict[GroupKey, float] = OrderedDict()
    for _meal, _day, recipe in plan.occupied():
        factor = serving_factor(servings, recipe.serves)
        for ing in recipe.ingredients:
            key = (ing.name, ing.unit, ing.has_quantity)
            qty = ing.quantity if ing.quantity is not None else 1
            totals[key] = totals.get(key, 0.0) + qty * factor

    items = [ShoppingItem(name, unit, total, has_quantity)
             for (name, unit, has_quantity), total in totals.items()]
    items.sort(key=lambda item: (item.name, item.unit or "", not item.has_quantity))
    return items


__all__ = ['ShoppingItem', 'build_shopping_list', 'serving_factor']
