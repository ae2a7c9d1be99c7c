import random
import tempfile
import unittest
from fastapi.testclient import TestClient
from foodplanner.api.api_run import app
from foodplanner.api.state import get_state
from foodplanner.events import web_observers
from foodplanner.logic.state import PlannerState
from foodplanner.tests.helpers import built_in_pools


class TestPlannerAPI(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.state = PlannerState.open(self._tmp.name, built_in=built_in_pools(), rng=random.Random(11))
        app.dependency_overrides[get_state] = lambda: self.state
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        web_observers.stop(self.state.bus)
        self._tmp.cleanup()

    def test_list_recipes_grouped(self):
        resp = self.client.get("/api/recipes")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(list(data), ["breakfast", "lunch", "dinner"])
        self.assertEqual([r["name"] for r in data["lunch"]], ["Salad", "Wrap"])
        self.assertEqual(self.client.get("/api/recipes/Lunch").json()["count"], 2)
        self.assertEqual(self.client.get("/api/recipes/brunch").status_code, 400)

    def test_parse_does_not_store(self):
        resp = self.client.post("/api/recipes/parse", json={"text": "Soup\nIngredients\n500g Potato\nInstructions\nBoil\n4"})
        self.assertEqual(resp.status_code, 200)
        draft = resp.json()
        self.assertEqual(draft["ingredients"], [{"name": "Potato", "quantity": 500.0, "unit": "g"}])
        self.assertEqual(draft["serves"], 4)
        self.assertEqual(self.state.catalog.custom, [])

    def test_add_update_delete_recipe(self):
        body = {"name": "Pancakes", "mealType": "breakfast", "serves": 2,
                "ingredients": [{"name": "Flour", "quantity": 200, "unit": "g"}, {"name": "Salt"}],
                "instructions": ["Mix", "", "Fry"]}
        created = self.client.post("/api/recipes", json=body).json()["recipe"]
        self.assertEqual(created["instructions"], ["Mix", "Fry"])
        self.assertEqual(created["ingredients"][1], {"name": "Salt"})

        body["name"] = "Crepes"
        resp = self.client.put(f"/api/recipes/{created['id']}", json=body)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([r.name for r in self.state.catalog.custom], ["Crepes"])

        self.assertEqual(self.client.delete(f"/api/recipes/{created['id']}").status_code, 200)
        self.assertEqual(self.client.delete(f"/api/recipes/{created['id']}").status_code, 404)

    def test_cannot_delete_last_recipe(self):
        resp = self.client.delete("/api/recipes/bi-oatmeal")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "Cannot delete the last recipe in Breakfast.")

    def test_invalid_recipe_is_rejected(self):
        resp = self.client.post("/api/recipes", json={"name": "X", "mealType": "brunch"})
        self.assertEqual(resp.status_code, 422)
        resp = self.client.post("/api/recipes", json={"name": "X", "serves": 0})
        self.assertEqual(resp.status_code, 422)

    def test_generate_edit_and_shop(self):
        resp = self.client.post("/api/plan/generate", json={"servings": 2})
        self.assertEqual(resp.status_code, 200)
        plan = resp.json()
        self.assertEqual(plan["servings"], 2)
        self.assertEqual(len(plan["days"]), 7)
        self.assertEqual(plan["plan"]["dinner"], [None] * 7)

        self.assertEqual(self.client.put("/api/plan/dinner/0", json={"recipe_id": "bi-salad"}).status_code, 200)
        self.assertEqual(self.client.put("/api/plan/dinner/9", json={"recipe_id": "bi-salad"}).status_code, 400)
        self.assertEqual(self.client.put("/api/plan/dinner/0", json={"recipe_id": "nope"}).status_code, 404)
        self.assertEqual(self.client.delete("/api/plan/breakfast/6").status_code, 200)

        items = self.client.get("/api/shopping-list").json()["items"]
        oatmeal = [i for i in items if i["name"] == "Oatmeal"][0]
        self.assertEqual(oatmeal["total"], 12.0)  # 6 breakfasts x 2 servings
        self.assertEqual(oatmeal["display"], "Oatmeal: 12.00 pc")
        scaled = self.client.get("/api/shopping-list", params={"servings": 1}).json()
        self.assertEqual(scaled["servings"], 1)

    def test_saved_plans_lifecycle(self):
        self.client.post("/api/plan/generate", json={"servings": 3})
        saved = self.client.post("/api/plans", json={"name": "Holiday week"}).json()["plan"]
        listing = self.client.get("/api/plans").json()
        self.assertEqual(listing["count"], 1)
        self.assertEqual(listing["plans"][0]["name"], "Holiday week")

        detail = self.client.get(f"/api/plans/{saved['id']}").json()
        self.assertEqual(detail["servings"], 3)
        shop = self.client.get(f"/api/plans/{saved['id']}/shopping-list").json()
        self.assertEqual(shop["servings"], 3)

        pdf = self.client.get(f"/api/plans/{saved['id']}/pdf")
        self.assertEqual(pdf.status_code, 200)
        self.assertTrue(pdf.content.startswith(b"%PDF"))

        self.assertEqual(self.client.delete(f"/api/plans/{saved['id']}").status_code, 200)
        self.assertEqual(self.client.get(f"/api/plans/{saved['id']}").status_code, 404)

    def test_default_plan_name(self):
        saved = self.client.post("/api/plans", json={}).json()["plan"]
        self.assertTrue(saved["name"].startswith("Week of "))

    def test_current_plan_pdf(self):
        self.client.post("/api/plan/generate", json={"servings": 1})
        resp = self.client.get("/api/plan/pdf")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["content-type"], "application/pdf")

    def test_events_feed(self):
        web_observers.start(self.state.bus)
        cursor = self.client.get("/api/events").json()["next_cursor"]
        self.client.post("/api/plan/generate", json={"servings": 2})
        self.client.delete("/api/recipes/bi-wrap")
        data = self.client.get("/api/events", params={"since": cursor}).json()
        types = [e["type"] for e in data["events"]]
        self.assertEqual(types, ["plan.generated", "catalog.changed"])
        self.assertEqual(data["events"][1]["recipe"], {"id": "bi-wrap", "name": "Wrap"})
        self.assertEqual(data["events"][1]["action"], "hidden")


if __name__ == '__main__':
    unittest.main()
