import unittest
from mealprep.domain.Enums import DayOfWeek
from mealprep.domain.Plan import DailyPlan, WeeklyPlan


class TestDailyPlan(unittest.TestCase):

    def setUp(self):
        self.day = DailyPlan(DayOfWeek.MONDAY)

    def test_add_recipe_defaults_to_one_serving(self):
        self.day.add_recipe("r1")
        self.assertEqual(self.day.recipe_ids, ["r1"])
        self.assertEqual(self.day.servings, {"r1": 1})

    def test_add_recipe_twice_keeps_first_entry(self):
        self.day.add_recipe("r1", 3)
        self.day.add_recipe("r1", 5)
        self.assertEqual(self.day.recipe_ids, ["r1"])
        self.assertEqual(self.day.servings["r1"], 3)

    def test_remove_recipe_drops_id_and_servings(self):
        self.day.add_recipe("r1", 2).add_recipe("r2")
        self.day.remove_recipe("r1")
        self.assertEqual(self.day.recipe_ids, ["r2"])
        self.assertNotIn("r1", self.day.servings)

    def test_adjust_servings_clamps_at_one(self):
        self.day.add_recipe("r1", 2)
        self.assertEqual(self.day.adjust_servings("r1", 1), 3)
        self.assertEqual(self.day.adjust_servings("r1", -10), 1)
        self.assertEqual(self.day.adjust_servings("r1", -1), 1)
        self.assertEqual(self.day.servings["r1"], 1)

    def test_adjust_servings_defaults_missing_value_to_one(self):
        self.day.recipe_ids.append("r1")
        self.assertEqual(self.day.adjust_servings("r1", 2), 3)

    def test_adjust_unscheduled_recipe_raises(self):
        with self.assertRaises(KeyError):
            self.day.adjust_servings("nope", 1)


class TestWeeklyPlan(unittest.TestCase):

    def test_empty_plan_has_every_weekday(self):
        plan = WeeklyPlan.empty()
        self.assertEqual([d.day for d in plan], list(DayOfWeek))
        self.assertTrue(all(not d.recipe_ids for d in plan))

    def test_from_rows_groups_and_deduplicates(self):
        rows = [
            {"day": "Monday", "recipe_id": "r1", "servings": 2},
            {"day": "Monday", "recipe_id": "r1", "servings": 4},
            {"day": "Friday", "recipe_id": "r2", "servings": 1},
            {"day": "Sunday", "recipe_id": "r3", "servings": 1},
        ]
        plan = WeeklyPlan.from_rows(rows)
        self.assertEqual(plan[DayOfWeek.MONDAY].recipe_ids, ["r1"])
        self.assertEqual(plan["Monday"].servings["r1"], 4)
        self.assertEqual(plan[DayOfWeek.FRIDAY].recipe_ids, ["r2"])
        self.assertNotIn("r3", plan.scheduled_recipe_ids())
        self.assertEqual(len(plan.to_rows()), 2)

    def test_from_rows_reads_non_positive_servings_as_one(self):
        plan = WeeklyPlan.from_rows([
            {"day": "Monday", "recipe_id": "r1", "servings": -3},
            {"day": "Monday", "recipe_id": "r2", "servings": 0},
            {"day": "Tuesday", "recipe_id": "r3", "servings": "lots"},
        ])
        self.assertEqual(plan["Monday"].servings, {"r1": 1, "r2": 1})
        self.assertEqual(plan["Tuesday"].servings_for("r3"), 1)
        self.assertEqual({row["servings"] for row in plan.to_rows()}, {1})

    def test_servings_for_never_reports_below_one(self):
        daily = DailyPlan(DayOfWeek.MONDAY, ["r1"])
        daily.servings["r1"] = -3
        self.assertEqual(daily.servings_for("r1"), 1)
        self.assertEqual(daily.adjust_servings("r1", 1), 2)

    def test_scheduled_recipe_ids_are_unique(self):
        plan = WeeklyPlan.empty()
        plan[DayOfWeek.MONDAY].add_recipe("r1")
        plan[DayOfWeek.TUESDAY].add_recipe("r2").add_recipe("r1")
        self.assertEqual(plan.scheduled_recipe_ids(), ["r1", "r2"])
