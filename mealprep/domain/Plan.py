"""Plan domain entities: DailyPlan (recipes + servings for one weekday) and WeeklyPlan (Monday-Friday)."""
from typing import Dict, Iterable, List, Optional
from mealprep.domain.Enums import DayOfWeek


def _stored_servings(value) -> int:
    try:
        return max(1, int(value or 1))
    except (TypeError, ValueError):
        return 1


class DailyPlan:
    def __init__(self, day: DayOfWeek, recipe_ids: Optional[List[str]] = None,
                 servings: Optional[Dict[str, int]] = None):
        self.day = DayOfWeek(day)
        self.recipe_ids: List[str] = []
        self.servings: Dict[str, int] = {}
        servings = servings or {}
        for rid in recipe_ids or []:
            self.add_recipe(rid, servings.get(rid, 1))

    def __repr__(self) -> str:
        return f"DailyPlan({self.day.value}, {self.servings})"

    def add_recipe(self, recipe_id: str, servings: int = 1):
        '''
        Schedules a recipe for this day. Already scheduled recipes are left untouched.
        '''
        if recipe_id in self.recipe_ids:
            return self
        self.recipe_ids.append(recipe_id)
        self.servings[recipe_id] = max(1, int(servings or 1))
        return self

    def remove_recipe(self, recipe_id: str):
        '''
        Drops the recipe and its servings entry from this day.
        '''
        if recipe_id in self.recipe_ids:
            self.recipe_ids.remove(recipe_id)
        self.servings.pop(recipe_id, None)
        return self

    def servings_for(self, recipe_id: str) -> int:
        return max(1, self.servings.get(recipe_id) or 1)

    def adjust_servings(self, recipe_id: str, delta: int) -> int:
        '''
        Adjusts the requested servings by delta (can be negative), never going below 1.
        '''
        if recipe_id not in self.recipe_ids:
            raise KeyError(f"Recipe '{recipe_id}' is not scheduled on {self.day.value}.")
        new_amount = max(1, self.servings_for(recipe_id) + delta)
        self.servings[recipe_id] = new_amount
        return new_amount

    def to_dict(self):
        return {"day": self.day.value, "recipe_ids": list(self.recipe_ids), "servings": dict(self.servings)}


class WeeklyPlan:
    """One DailyPlan per weekday, always fully populated."""

    def __init__(self, days: Optional[Dict[DayOfWeek, DailyPlan]] = None):
        days = days or {}
        self.days: Dict[DayOfWeek, DailyPlan] = {
            d: days.get(d) or DailyPlan(d) for d in DayOfWeek
        }

    @classmethod
    def empty(cls) -> "WeeklyPlan":
        return cls()

    def __getitem__(self, day) -> DailyPlan:
        return self.days[DayOfWeek(day)]

    def __iter__(self):
        return iter(self.days.values())

    def __repr__(self) -> str:
        return f"WeeklyPlan({list(self.days.values())})"

    def scheduled_recipe_ids(self) -> List[str]:
        """Unique recipe ids scheduled across the week, in first-seen order."""
        seen: List[str] = []
        for daily in self:
            for rid in daily.recipe_ids:
                if rid not in seen:
                    seen.append(rid)
        return seen

    @classmethod
    def from_rows(cls, rows: Iterable[dict]) -> "WeeklyPlan":
        '''
        Groups stored (day, recipe_id, servings) rows into a full week. Unknown days are ignored
        and stored servings below 1 are read as 1.
        '''
        plan = cls()
        valid_days = {d.value for d in DayOfWeek}
        for row in rows:
            day = row.get("day")
            recipe_id = row.get("recipe_id")
            if day not in valid_days or not recipe_id:
                continue
            daily = plan[day]
            if recipe_id not in daily.recipe_ids:
                daily.recipe_ids.append(recipe_id)
            daily.servings[recipe_id] = _stored_servings(row.get("servings"))
        return plan

    def to_rows(self) -> List[dict]:
        return [
            {"day": daily.day.value, "recipe_id": rid, "servings": daily.servings_for(rid)}
            for daily in self for rid in daily.recipe_ids
        ]

    def to_dict(self):
        return {daily.day.value: daily.to_dict() for daily in self}
