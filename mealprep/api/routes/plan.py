from fastapi import APIRouter, Depends

from mealprep.api.deps import get_plan_repository
from mealprep.domain.Enums import DayOfWeek
from mealprep.infra.Plan_Repository import PlanRepository
from mealprep.utilities.validators import DayPlanInput, ScheduleRecipeInput, ServingsAdjustInput

router = APIRouter(prefix="/api/plan", tags=["plan"])


@router.get("")
def get_plan(repo: PlanRepository = Depends(get_plan_repository)):
    return repo.get_week_plan().to_dict()


@router.delete("")
def clear_plan(repo: PlanRepository = Depends(get_plan_repository)):
    return repo.clear().to_dict()


@router.put("/{day}")
def update_day(day: DayOfWeek, payload: DayPlanInput, repo: PlanRepository = Depends(get_plan_repository)):
    return repo.update_day_plan(day, payload.recipe_ids, payload.servings).to_dict()


@router.post("/{day}/recipes")
def schedule_recipe(day: DayOfWeek, payload: ScheduleRecipeInput,
                    repo: PlanRepository = Depends(get_plan_repository)):
    return repo.add_recipe_to_day(day, payload.recipe_id, payload.servings).to_dict()


@router.delete("/{day}/recipes/{recipe_id}")
def unschedule_recipe(day: DayOfWeek, recipe_id: str, repo: PlanRepository = Depends(get_plan_repository)):
    return repo.remove_recipe_from_day(day, recipe_id).to_dict()


@router.patch("/{day}/recipes/{recipe_id}/servings")
def adjust_servings(day: DayOfWeek, recipe_id: str, payload: ServingsAdjustInput,
                    repo: PlanRepository = Depends(get_plan_repository)):
    return repo.adjust_servings(day, recipe_id, payload.delta).to_dict()
