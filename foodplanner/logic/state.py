"""Planner state: the catalog, the current weekly plan and saved plans behind one object.

Front ends (the HTTP API, tests, a future UI) call into this object and
observe it through its EventBus instead of polling fields:

    state = PlannerState.open(DATA_DIR)
    state.subscribe(PLAN_GENERATED, lambda name, payload: ...)
    state.generate(servings=4)
"""
import logging
import random
from datetime import date
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union
from foodplanner.domain.MealType import MealType
from foodplanner.domain.Plan import WeeklyPlan
from foodplanner.domain.RecipeCatalog import RecipeCatalog
from foodplanner.domain.SavedMealPlan import SavedMealPlan, default_plan_name
from foodplanner.events.Event_Bus import EventBus
from foodplanner.events.event_helpers import publish_plan_generated, publish_slot_changed
from foodplanner.infra.Json_Store import JsonStore
from foodplanner.infra.Plan_Repository import SavedPlanRepository
from foodplanner.logic.planning.generator import generate_plan
from foodplanner.logic.shopping.list_builder import ShoppingItem, build_shopping_list
from foodplanner.utilities.config import DAY_COUNT, DEFAULT_SERVINGS

logger = logging.getLogger(__name__)


class PlannerState:
    def __init__(self, catalog: RecipeCatalog, saved_plans: SavedPlanRepository, bus: Optional[EventBus] = None,
                 rng: Optional[random.Random] = None, day_count: int = DAY_COUNT):
        self.bus = bus if bus is not None else EventBus()
        self.catalog = catalog.set_event_bus(self.bus)
        self.saved_plans = saved_plans.set_event_bus(self.bus)
        self.rng = rng
        self.day_count = day_count
        self.weekly_plan = WeeklyPlan.empty(day_count)
        self.current_servings = DEFAULT_SERVINGS

    @classmethod
    def open(cls, data_dir: Union[str, Path], bus: Optional[EventBus] = None, built_in=None,
             rng: Optional[random.Random] = None, day_count: int = DAY_COUNT) -> "PlannerState":
        """Load catalog and saved plans from JSON files under ``data_dir``."""
        bus = bus if bus is not None else EventBus()
        store = JsonStore(data_dir)
        catalog = RecipeCatalog.load(store, built_in=built_in, bus=bus)
        saved = SavedPlanRepository(store, bus=bus)
        return cls(catalog, saved, bus=bus, rng=rng, day_count=day_count)

    # --- Observation ------------------------------------------------------
    def subscribe(self, event_name: str, callback: Callable):
        self.bus.subscribe(event_name, callback)

    def unsubscribe(self, event_name: str, callback: Callable):
        self.bus.unsubscribe(event_name, callback)

    # --- Current plan -----------------------------------------------------
    def generate(self, servings: int) -> WeeklyPlan:
        '''Replaces the current plan with a freshly generated one.'''
        if servings < 1:
            raise ValueError(f"Servings must be positive: {servings}")
        self.current_servings = servings
        self.weekly_plan = generate_plan(self.catalog, self.day_count, rng=self.rng)
        logger.info(f"Generated plan for {servings} servings")
        publish_plan_generated(self.bus, self.weekly_plan, servings)
        return self.weekly_plan

    def set_slot(self, meal_type: MealType, day_index: int, recipe_id: str):
        '''Puts any catalog recipe (of any meal type) into one slot of the current plan.'''
        recipe = self.catalog.find(recipe_id)
        if recipe is None:
            raise KeyError(recipe_id)
        meal = MealType.parse(meal_type)
        self.weekly_plan.set_slot(meal, day_index, recipe)
        publish_slot_changed(self.bus, meal, day_index, recipe)
        return recipe

    def remove_slot(self, meal_type: MealType, day_index: int):
        meal = MealType.parse(meal_type)
        self.weekly_plan.remove_slot(meal, day_index)
        publish_slot_changed(self.bus, meal, day_index, None)

    def shopping_list(self, servings: Optional[int] = None) -> List[ShoppingItem]:
        return build_shopping_list(self.weekly_plan, servings if servings is not None else self.current_servings)

    # --- Saved plans ------------------------------------------------------
    def save_current_plan(self, name: Optional[str] = None, today: Optional[date] = None) -> SavedMealPlan:
        if not name or not name.strip():
            name = default_plan_name(today)
        return self.saved_plans.create(name.strip(), self.weekly_plan, self.current_servings, today=today)

    def remove_saved_plans(self, plan_ids: Iterable[str]) -> List[str]:
        return self.saved_plans.delete_many(plan_ids)
