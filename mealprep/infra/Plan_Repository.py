import logging
from pathlib import Path
from typing import Dict, List, Optional
from uuid import uuid4

from mealprep.domain.Enums import DayOfWeek
from mealprep.domain.Plan import DailyPlan, WeeklyPlan
from mealprep.infra.json_store import NotFoundError, load_rows, locked, save_rows
from mealprep.infra.paths import PLAN_FILE

logger = logging.getLogger(__name__)


class PlanRepository:
    """Weekly plan stored as one row per (day, recipe_id) with its servings."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else PLAN_FILE

    def _save_plan(self, plan: WeeklyPlan) -> None:
        save_rows(self.path, [dict(row, id=str(uuid4())) for row in plan.to_rows()])

    def get_week_plan(self) -> WeeklyPlan:
        return WeeklyPlan.from_rows(load_rows(self.path))

    @locked
    def update_day_plan(self, day: DayOfWeek, recipe_ids: List[str], servings: Dict[str, int]) -> DailyPlan:
        """Replace every entry of one day. Recipes without a servings entry get 1."""
        plan = self.get_week_plan()
        daily = DailyPlan(day, recipe_ids, servings)
        plan.days[daily.day] = daily
        self._save_plan(plan)
        return daily

    @locked
    def add_recipe_to_day(self, day: DayOfWeek, recipe_id: str, servings: int = 1) -> DailyPlan:
        plan = self.get_week_plan()
        daily = plan[day].add_recipe(recipe_id, servings)
        self._save_plan(plan)
        logger.info("Scheduled recipe %s on %s", recipe_id, daily.day.value)
        return daily

    @locked
    def remove_recipe_from_day(self, day: DayOfWeek, recipe_id: str) -> DailyPlan:
        plan = self.get_week_plan()
        daily = plan[day]
        if recipe_id not in daily.recipe_ids:
            raise NotFoundError(f"Recipe '{recipe_id}' is not scheduled on {daily.day.value}.")
        daily.remove_recipe(recipe_id)
        self._save_plan(plan)
        return daily

    @locked
    def adjust_servings(self, day: DayOfWeek, recipe_id: str, delta: int) -> DailyPlan:
        plan = self.get_week_plan()
        daily = plan[day]
        try:
            daily.adjust_servings(recipe_id, delta)
        except KeyError as e:
            raise NotFoundError(e.args[0]) from e
        self._save_plan(plan)
        return daily

    @locked
    def clear(self) -> WeeklyPlan:
        save_rows(self.path, [])
        logger.info("Weekly plan cleared")
        return WeeklyPlan.empty()
