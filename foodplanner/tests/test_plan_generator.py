import random
import unittest
from foodplanner.domain.MealType import MealType
from foodplanner.domain.RecipeCatalog import RecipeCatalog
from foodplanner.events.Event_Bus import EventBus
from foodplanner.logic.planning.generator import generate_plan
from foodplanner.tests.helpers import built_in_pools, make_recipe


class TestGeneratePlan(unittest.TestCase):

    def setUp(self):
        self.catalog = RecipeCatalog(built_in_pools(), bus=EventBus())
        for name in ("Pancakes", "Eggs", "Yogurt"):
            self.catalog.add_or_update(make_recipe(name, MealType.BREAKFAST))

    def test_every_meal_type_has_day_count_slots(self):
        plan = generate_plan(self.catalog, 7, rng=random.Random(1))
        for meal in MealType:
            self.assertEqual(len(plan.meals[meal]), 7)

    def test_empty_pool_gives_empty_slots(self):
        plan = generate_plan(self.catalog, 7, rng=random.Random(1))
        self.assertEqual(plan.meals[MealType.DINNER], [None] * 7)

    def test_slots_come_from_pool_and_cycle(self):
        for seed in range(20):
            plan = generate_plan(self.catalog, 7, rng=random.Random(seed))
            for meal in MealType:
                pool = self.catalog.effective_pool(meal)
                if not pool:
                    continue
                row = plan.meals[meal]
                size = len(pool)
                self.assertTrue(all(r in pool for r in row))
                # the first |pool| slots are a permutation of the pool
                self.assertEqual(sorted(r.id for r in row[:size]), sorted(r.id for r in pool))
                for i in range(7):
                    self.assertIs(row[i], row[i % size])

    def test_seeded_generation_is_reproducible(self):
        first = generate_plan(self.catalog, 7, rng=random.Random(42))
        second = generate_plan(self.catalog, 7, rng=random.Random(42))
        self.assertEqual(first, second)

    def test_pool_is_not_mutated(self):
        before = [r.id for r in self.catalog.effective_pool(MealType.BREAKFAST)]
        generate_plan(self.catalog, 7, rng=random.Random(3))
        self.assertEqual([r.id for r in self.catalog.effective_pool(MealType.BREAKFAST)], before)

    def test_totally_empty_catalog(self):
        plan = generate_plan(RecipeCatalog(bus=EventBus()), 7)
        self.assertTrue(plan.is_empty())
        self.assertEqual(set(plan.meals), set(MealType))

    def test_custom_day_count(self):
        plan = generate_plan(self.catalog, 10, rng=random.Random(5))
        self.assertEqual(len(plan.meals[MealType.LUNCH]), 10)
        self.assertEqual(plan.days[-1], "Day 10")


if __name__ == '__main__':
    unittest.main()
