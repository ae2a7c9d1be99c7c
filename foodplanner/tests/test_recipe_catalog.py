import unittest
from foodplanner.domain.MealType import MealType
from foodplanner.domain.RecipeCatalog import RecipeCatalog
from foodplanner.events.Event_Bus import EventBus, CATALOG_CHANGED, STORE_WRITE_FAILED
from foodplanner.tests.helpers import MemoryStore, built_in_pools, make_recipe
from foodplanner.utilities.constants import CUSTOM_RECIPES, REMOVED_IDS


class TestRecipeCatalog(unittest.TestCase):

    def setUp(self):
        self.store = MemoryStore()
        self.bus = EventBus()
        self.events = []
        self.bus.subscribe(CATALOG_CHANGED, lambda name, payload: self.events.append(payload))
        self.catalog = RecipeCatalog(built_in_pools(), store=self.store, bus=self.bus)

    def names(self, meal):
        return [r.name for r in self.catalog.effective_pool(meal)]

    def test_effective_pool_is_built_in_then_custom(self):
        self.catalog.add_or_update(make_recipe("Pancakes", MealType.BREAKFAST))
        self.catalog.add_or_update(make_recipe("Stew", MealType.DINNER))
        self.assertEqual(self.names(MealType.BREAKFAST), ["Oatmeal", "Pancakes"])
        self.assertEqual(self.names(MealType.DINNER), ["Stew"])
        self.assertEqual(set(self.catalog.recipes_by_type()), set(MealType))

    def test_add_appends_and_update_replaces_in_place(self):
        first = make_recipe("Pancakes")
        second = make_recipe("Waffles")
        self.catalog.add_or_update(first)
        self.catalog.add_or_update(second)
        self.catalog.add_or_update(first.copy(name="Crepes"))
        self.assertEqual([r.name for r in self.catalog.custom], ["Crepes", "Waffles"])
        self.assertEqual(len(self.catalog.custom), 2)
        self.assertEqual([e["action"] for e in self.events], ["added", "added", "updated"])
        self.assertEqual(self.store.records[CUSTOM_RECIPES][0]["name"], "Crepes")

    def test_delete_last_recipe_is_a_no_op(self):
        oatmeal = self.catalog.effective_pool(MealType.BREAKFAST)[0]
        self.assertFalse(self.catalog.can_delete(oatmeal))
        self.assertFalse(self.catalog.delete(oatmeal))
        self.assertEqual(self.names(MealType.BREAKFAST), ["Oatmeal"])
        self.assertEqual(self.catalog.removed_ids, set())
        self.assertEqual(self.store.writes, [])
        self.assertEqual(self.events, [])

    def test_delete_built_in_hides_it(self):
        salad = self.catalog.find("bi-salad")
        self.assertTrue(self.catalog.delete(salad))
        self.assertEqual(self.names(MealType.LUNCH), ["Wrap"])
        self.assertEqual(self.store.records[REMOVED_IDS], ["bi-salad"])
        self.assertIn(salad, self.catalog.built_in[MealType.LUNCH])
        self.assertEqual(self.events[-1]["action"], "hidden")
        # now the last lunch recipe
        self.assertFalse(self.catalog.delete(self.catalog.find("bi-wrap")))

    def test_delete_custom_removes_it(self):
        pancakes = make_recipe("Pancakes")
        self.catalog.add_or_update(pancakes)
        self.assertTrue(self.catalog.delete(pancakes))
        self.assertEqual(self.catalog.custom, [])
        self.assertEqual(self.store.records[CUSTOM_RECIPES], [])
        self.assertEqual(self.catalog.removed_ids, set())

    def test_editing_built_in_keeps_shipped_copy(self):
        oatmeal = self.catalog.find("bi-oatmeal")
        self.catalog.add_or_update(oatmeal.copy(name="Overnight oats"))
        self.assertEqual(self.names(MealType.BREAKFAST), ["Oatmeal", "Overnight oats"])
        self.assertEqual(self.catalog.removed_ids, set())
        self.assertNotIn(REMOVED_IDS, self.store.writes)
        self.assertEqual(self.catalog.find("bi-oatmeal").name, "Overnight oats")
        # removing the edit brings back the shipped recipe alone
        self.assertTrue(self.catalog.delete(self.catalog.find("bi-oatmeal")))
        self.assertEqual(self.names(MealType.BREAKFAST), ["Oatmeal"])
        self.assertEqual(self.catalog.custom, [])

    def test_moving_built_in_to_another_meal_type_keeps_original_pool(self):
        oatmeal = self.catalog.find("bi-oatmeal")
        self.catalog.add_or_update(oatmeal.copy(meal_type=MealType.LUNCH))
        self.assertEqual(self.names(MealType.BREAKFAST), ["Oatmeal"])
        self.assertEqual(self.names(MealType.LUNCH), ["Salad", "Wrap", "Oatmeal"])
        self.assertEqual(self.catalog.removed_ids, set())
        self.assertFalse(self.catalog.can_delete(self.catalog.built_in[MealType.BREAKFAST][0]))

    def test_failed_write_keeps_memory_state(self):
        store = MemoryStore(fail_writes=True)
        failures = []
        self.bus.subscribe(STORE_WRITE_FAILED, lambda name, payload: failures.append(payload["kind"]))
        catalog = RecipeCatalog(built_in_pools(), store=store, bus=self.bus)
        catalog.add_or_update(make_recipe("Pancakes"))
        self.assertEqual([r.name for r in catalog.custom], ["Pancakes"])
        self.assertEqual(failures, [CUSTOM_RECIPES])

    def test_failed_write_keeps_deletions(self):
        store = MemoryStore(fail_writes=True)
        failures = []
        self.bus.subscribe(STORE_WRITE_FAILED, lambda name, payload: failures.append(payload["kind"]))
        catalog = RecipeCatalog(built_in_pools(), store=store, bus=self.bus)
        pancakes = make_recipe("Pancakes")
        catalog.add_or_update(pancakes)
        self.events.clear()
        self.assertTrue(catalog.delete(pancakes))
        self.assertTrue(catalog.delete(catalog.find("bi-salad")))
        self.assertEqual(catalog.custom, [])
        self.assertEqual(catalog.removed_ids, {"bi-salad"})
        self.assertEqual([r.name for r in catalog.effective_pool(MealType.LUNCH)], ["Wrap"])
        self.assertEqual(failures, [CUSTOM_RECIPES, CUSTOM_RECIPES, REMOVED_IDS])
        self.assertEqual([e["action"] for e in self.events], ["deleted", "hidden"])
        self.assertEqual(store.records, {})

    def test_load_from_store(self):
        stored = make_recipe("Pancakes", recipe_id="custom-1")
        store = MemoryStore({CUSTOM_RECIPES: [stored.to_dict()], REMOVED_IDS: ["bi-wrap"]})
        catalog = RecipeCatalog.load(store, built_in=built_in_pools(), bus=self.bus)
        self.assertEqual([r.name for r in catalog.effective_pool(MealType.BREAKFAST)], ["Oatmeal", "Pancakes"])
        self.assertEqual([r.name for r in catalog.effective_pool(MealType.LUNCH)], ["Salad"])

    def test_load_ignores_malformed_records(self):
        store = MemoryStore({CUSTOM_RECIPES: [{"name": "no id"}], REMOVED_IDS: "oops"})
        catalog = RecipeCatalog.load(store, built_in=built_in_pools(), bus=self.bus)
        self.assertEqual(catalog.custom, [])
        self.assertEqual(catalog.removed_ids, set())


if __name__ == '__main__':
    unittest.main()
