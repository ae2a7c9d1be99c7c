"""Weekly plan generation.

For every meal type the effective pool is shuffled once and the days cycle
through that ordering, so a pool shorter than the week repeats in the same
order (slot i holds shuffled[i % len(pool)]). Empty pools leave empty slots.
"""
import logging
import random
from typing import Optional
from foodplanner.domain.MealType import MealType
from foodplanner.domain.Plan import WeeklyPlan
from foodplanner.utilities.config import DAY_COUNT

logger = logging.getLogger(__name__)


def generate_plan(catalog, day_count: int = DAY_COUNT, rng: Optional[random.Random] = None) -> WeeklyPlan:
    """Build a fresh WeeklyPlan from the catalog's effective pools.

    Args:
        catalog: RecipeCatalog (anything exposing effective_pool(meal_type)).
        day_count: number of slots per meal type.
        rng: random source; pass random.Random(seed) for reproducible plans.
    """
    if day_count < 0:
        raise ValueError(f"Day count cannot be negative: {day_count}")
    rng = rng or random
    meals = {}
    for meal in MealType:
        pool = list(catalog.effective_pool(meal))
        if not pool:
            meals[meal] = [None] * day_count
            logger.debug(f"No {meal.label} recipes; leaving {day_count} empty slots")
            continue
        rng.shuffle(pool)
        meals[meal] = [pool[i % len(pool)] for i in range(day_count)]
    return WeeklyPlan(meals, day_count=day_count)


__all__ = ['generate_plan']
