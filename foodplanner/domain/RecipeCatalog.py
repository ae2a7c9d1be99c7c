"""RecipeCatalog aggregate: built-in recipes minus hidden ids, plus user recipes."""
import logging
from typing import Dict, Iterable, List, Optional, Set
from foodplanner.domain.MealType import MealType
from foodplanner.domain.Recipe import Recipe
from foodplanner.events.Event_Bus import GLOBAL_EVENT_BUS
from foodplanner.events.event_helpers import publish_catalog_changed, publish_write_failed
from foodplanner.infra.Recipe_Repository import load_builtin_recipes, recipes_from_records
from foodplanner.utilities.constants import CUSTOM_RECIPES, REMOVED_IDS

logger = logging.getLogger(__name__)


class RecipeCatalog:
    def __init__(self, built_in: Optional[Dict[MealType, List[Recipe]]] = None,
                 custom: Optional[Iterable[Recipe]] = None, removed_ids: Optional[Iterable[str]] = None,
                 store=None, bus=None):
        # Built-ins are never mutated; hiding one goes through removed_ids
        source = built_in or {}
        self._built_in: Dict[MealType, tuple] = {meal: tuple(source.get(meal, ())) for meal in MealType}
        self.custom: List[Recipe] = list(custom or [])
        self.removed_ids: Set[str] = set(removed_ids or ())
        self._store = store
        self._event_bus = bus if bus is not None else GLOBAL_EVENT_BUS

    @classmethod
    def load(cls, store, built_in: Optional[Dict[MealType, List[Recipe]]] = None, bus=None) -> "RecipeCatalog":
        '''Builds a catalog from persisted custom recipes and hidden ids (absent records -> empty).'''
        if built_in is None:
            built_in = load_builtin_recipes()
        custom = recipes_from_records(store.load(CUSTOM_RECIPES))
        removed = store.load(REMOVED_IDS)
        if not isinstance(removed, list):
            removed = []
        catalog = cls(built_in, custom, (str(i) for i in removed), store=store, bus=bus)
        logger.info(f"Catalog loaded: {len(catalog.custom)} custom recipes, {len(catalog.removed_ids)} hidden built-ins")
        return catalog

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    # --- Queries ------------------------------------------------------------
    @property
    def built_in(self) -> Dict[MealType, List[Recipe]]:
        return {meal: list(recipes) for meal, recipes in self._built_in.items()}

    def effective_pool(self, meal_type: MealType) -> List[Recipe]:
        '''Visible built-ins for the meal type followed by custom recipes of that type.'''
        meal = MealType.parse(meal_type)
        pool = [r for r in self._built_in[meal] if r.id not in self.removed_ids]
        pool.extend(r for r in self.custom if r.meal_type is meal)
        return pool

    def recipes_by_type(self) -> Dict[MealType, List[Recipe]]:
        return {meal: self.effective_pool(meal) for meal in MealType}

    def find(self, recipe_id: str) -> Optional[Recipe]:
        '''A custom recipe wins over a built-in sharing its id.'''
        for recipe in self.custom:
            if recipe.id == recipe_id:
                return recipe
        for meal in MealType:
            for recipe in self.effective_pool(meal):
                if recipe.id == recipe_id:
                    return recipe
        return None

    def is_custom(self, recipe_id: str) -> bool:
        return any(r.id == recipe_id for r in self.custom)

    def can_delete(self, recipe: Recipe) -> bool:
        '''The last recipe of a meal type is never removable.'''
        return len(self.effective_pool(recipe.meal_type)) > 1

    # --- Mutations ------------------------------------------------------------
    def add_or_update(self, recipe: Recipe):
        '''Replaces the custom recipe with the same id in place, or appends a new one.'''
        for i, existing in enumerate(self.custom):
            if existing.id == recipe.id:
                self.custom[i] = recipe
                action = "updated"
                break
        else:
            self.custom.append(recipe)
            action = "added"
        self._persist(CUSTOM_RECIPES, [r.to_dict() for r in self.custom])
        logger.info(f"Recipe {action}: {recipe.name} ({recipe.id})")
        publish_catalog_changed(self._event_bus, action, recipe)

    def delete(self, recipe: Recipe) -> bool:
        '''Removes a custom recipe or hides a built-in one. No-op for the last recipe of a meal type.'''
        if not self.can_delete(recipe):
            logger.info(f"Refusing to delete last {recipe.meal_type.label} recipe: {recipe.name}")
            return False
        if self.is_custom(recipe.id):
            self.custom = [r for r in self.custom if r.id != recipe.id]
            self._persist(CUSTOM_RECIPES, [r.to_dict() for r in self.custom])
            action = "deleted"
        else:
            self.removed_ids.add(recipe.id)
            self._persist(REMOVED_IDS, sorted(self.removed_ids))
            action = "hidden"
        logger.info(f"Recipe {action}: {recipe.name} ({recipe.id})")
        publish_catalog_changed(self._event_bus, action, recipe)
        return True

    def _persist(self, kind: str, value):
        if self._store is None:
            return
        if not self._store.save(kind, value):
            logger.warning(f"Could not persist {kind}; keeping in-memory catalog")
            publish_write_failed(self._event_bus, kind)

    def __str__(self) -> str:
        counts = ", ".join(f"{meal.label}: {len(pool)}" for meal, pool in self.recipes_by_type().items())
        return f"RecipeCatalog({counts})"

    __repr__ = __str__
