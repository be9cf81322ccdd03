"""Repository providers for FastAPI dependency injection (overridable in tests)."""
from mealprep.infra.Ingredient_Repository import IngredientRepository
from mealprep.infra.Plan_Repository import PlanRepository
from mealprep.infra.Recipe_Repository import RecipeRepository


def get_ingredient_repository() -> IngredientRepository:
    return IngredientRepository()


def get_recipe_repository() -> RecipeRepository:
    return RecipeRepository()


def get_plan_repository() -> PlanRepository:
    return PlanRepository()
