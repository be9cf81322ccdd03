import json
import shutil
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from mealprep.api import deps
from mealprep.api.api_run import app
from mealprep.infra.Ingredient_Repository import IngredientRepository
from mealprep.infra.Plan_Repository import PlanRepository
from mealprep.infra.Recipe_Repository import RecipeRepository


class ApiTestCase(unittest.TestCase):
    """Points every repository at a temporary data directory."""

    def setUp(self):
        self.tmp = Path(tempfile.mkdtemp())
        app.dependency_overrides[deps.get_ingredient_repository] = lambda: IngredientRepository(self.tmp / "ingredients.json")
        app.dependency_overrides[deps.get_recipe_repository] = lambda: RecipeRepository(self.tmp / "recipes.json")
        app.dependency_overrides[deps.get_plan_repository] = lambda: PlanRepository(self.tmp / "weekly_plan.json")
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        shutil.rmtree(self.tmp, ignore_errors=True)

    def create_ingredient(self, name, unit="g", category="Carbohydrate"):
        resp = self.client.post("/api/ingredients", json={"name": name, "unit": unit, "category": category})
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def create_recipe(self, name, lines, servings=1, owner="Gustavo"):
        resp = self.client.post("/api/recipes", json={
            "name": name, "servings": servings, "owner": owner,
            "ingredients": [{"ingredient_id": i, "quantity": q} for i, q in lines],
        })
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()


class TestIngredientsAPI(ApiTestCase):

    def test_crud(self):
        rice = self.create_ingredient("  Rice ")
        self.assertEqual(rice["name"], "Rice")
        self.create_ingredient("Milk", "ml", "Dairy")

        data = self.client.get("/api/ingredients", params={"q": "dairy"}).json()
        self.assertEqual([i["name"] for i in data["items"]], ["Milk"])

        resp = self.client.put(f"/api/ingredients/{rice['id']}", json={"category": "Vegetable"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["category"], "Vegetable")

        self.assertEqual(self.client.delete(f"/api/ingredients/{rice['id']}").status_code, 204)
        self.assertEqual(self.client.delete(f"/api/ingredients/{rice['id']}").status_code, 404)

    def test_rejects_unknown_unit(self):
        resp = self.client.post("/api/ingredients", json={"name": "Rice", "unit": "kg", "category": "Carbohydrate"})
        self.assertEqual(resp.status_code, 422)


class TestRecipesAPI(ApiTestCase):

    def test_create_filter_update(self):
        rice = self.create_ingredient("Rice")
        bowl = self.create_recipe("Rice Bowl", [(rice["id"], 200)], servings=2, owner="Luiza")
        self.create_recipe("Soup", [], owner="Gustavo")

        listed = self.client.get("/api/recipes", params={"owner": "Luiza"}).json()
        self.assertEqual([r["name"] for r in listed["recipes"]], ["Rice Bowl"])
        listed = self.client.get("/api/recipes", params={"q": "sou"}).json()
        self.assertEqual([r["name"] for r in listed["recipes"]], ["Soup"])

        resp = self.client.put(f"/api/recipes/{bowl['id']}", json={"servings": 4})
        self.assertEqual(resp.json()["servings"], 4)
        self.assertEqual(resp.json()["ingredients"], [{"ingredient_id": rice["id"], "quantity": 200}])

    def test_yield_must_be_positive(self):
        resp = self.client.post("/api/recipes", json={"name": "Bad", "servings": 0})
        self.assertEqual(resp.status_code, 422)

    def test_quantity_must_be_positive(self):
        resp = self.client.post("/api/recipes", json={
            "name": "Bad", "ingredients": [{"ingredient_id": "x", "quantity": 0}],
        })
        self.assertEqual(resp.status_code, 422)

    def test_get_missing_recipe(self):
        self.assertEqual(self.client.get("/api/recipes/nope").status_code, 404)


class TestPlanAndShoppingListAPI(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.rice = self.create_ingredient("Rice")
        self.bowl = self.create_recipe("Rice Bowl", [(self.rice["id"], 200)], servings=2)

    def test_rice_bowl_week(self):
        resp = self.client.post("/api/plan/Monday/recipes", json={"recipe_id": self.bowl["id"], "servings": 3})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.client.post("/api/plan/Wednesday/recipes", json={"recipe_id": self.bowl["id"]})

        data = self.client.get("/api/shopping-list").json()
        self.assertEqual(data["count"], 1)
        self.assertAlmostEqual(data["items"][0]["total_quantity"], 400.0)
        self.assertEqual(list(data["groups"]), ["Carbohydrate"])

    def test_servings_clamp_through_api(self):
        self.client.post("/api/plan/Tuesday/recipes", json={"recipe_id": self.bowl["id"], "servings": 2})
        resp = self.client.patch(f"/api/plan/Tuesday/recipes/{self.bowl['id']}/servings", json={"delta": -5})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["servings"][self.bowl["id"]], 1)

    def test_unknown_day_rejected(self):
        resp = self.client.post("/api/plan/Saturday/recipes", json={"recipe_id": self.bowl["id"]})
        self.assertEqual(resp.status_code, 422)

    def test_remove_and_clear(self):
        self.client.put("/api/plan/Thursday", json={"recipe_ids": [self.bowl["id"]], "servings": {}})
        plan = self.client.get("/api/plan").json()
        self.assertEqual(plan["Thursday"]["servings"], {self.bowl["id"]: 1})

        resp = self.client.delete(f"/api/plan/Thursday/recipes/{self.bowl['id']}")
        self.assertEqual(resp.json()["recipe_ids"], [])
        self.assertEqual(self.client.delete(f"/api/plan/Thursday/recipes/{self.bowl['id']}").status_code, 404)

        self.client.post("/api/plan/Friday/recipes", json={"recipe_id": self.bowl["id"]})
        cleared = self.client.delete("/api/plan").json()
        self.assertEqual(set(cleared), {"Monday", "Tuesday", "Wednesday", "Thursday", "Friday"})
        self.assertEqual(self.client.get("/api/shopping-list").json()["count"], 0)

    def test_deleted_recipe_does_not_break_shopping_list(self):
        self.client.post("/api/plan/Monday/recipes", json={"recipe_id": self.bowl["id"]})
        self.client.delete(f"/api/recipes/{self.bowl['id']}")
        resp = self.client.get("/api/shopping-list")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["items"], [])

    def test_pdf_export(self):
        self.client.post("/api/plan/Monday/recipes", json={"recipe_id": self.bowl["id"]})
        resp = self.client.get("/api/shopping-list/pdf")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["content-type"], "application/pdf")
        self.assertTrue(resp.content.startswith(b"%PDF"))

    def test_corrupt_yield_reports_conflict(self):
        path = self.tmp / "recipes.json"
        rows = json.loads(path.read_text(encoding="utf-8"))
        rows[0]["servings"] = 0
        path.write_text(json.dumps(rows), encoding="utf-8")
        self.client.post("/api/plan/Monday/recipes", json={"recipe_id": self.bowl["id"]})
        self.assertEqual(self.client.get("/api/shopping-list").status_code, 409)

    def test_unreadable_ingredient_row_does_not_break_shopping_list(self):
        path = self.tmp / "ingredients.json"
        rows = json.loads(path.read_text(encoding="utf-8"))
        rows.append({"id": "flour", "name": "Flour", "unit": "kg", "category": "Carbohydrate"})
        path.write_text(json.dumps(rows), encoding="utf-8")
        self.client.post("/api/plan/Monday/recipes", json={"recipe_id": self.bowl["id"]})

        resp = self.client.get("/api/shopping-list")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([i["ingredient_id"] for i in resp.json()["items"]], [self.rice["id"]])
        self.assertEqual([i["id"] for i in self.client.get("/api/ingredients").json()["items"]], [self.rice["id"]])

    def test_stored_negative_servings_reported_as_one(self):
        rows = [{"id": "x", "day": "Monday", "recipe_id": self.bowl["id"], "servings": -3}]
        (self.tmp / "weekly_plan.json").write_text(json.dumps(rows), encoding="utf-8")
        plan = self.client.get("/api/plan").json()
        self.assertEqual(plan["Monday"]["servings"], {self.bowl["id"]: 1})
        self.assertAlmostEqual(self.client.get("/api/shopping-list").json()["items"][0]["total_quantity"], 100.0)
