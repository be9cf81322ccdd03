from fastapi import FastAPI, Depends, Request, Response
from fastapi.responses import JSONResponse
import logging

from mealprep.api.deps import get_ingredient_repository, get_plan_repository, get_recipe_repository
from mealprep.infra.Ingredient_Repository import IngredientRepository
from mealprep.infra.Plan_Repository import PlanRepository
from mealprep.infra.Recipe_Repository import RecipeRepository
from mealprep.infra.json_store import NotFoundError
from mealprep.infra.pdf_utils import generate_pdf_for_shopping_list
from mealprep.logic.shopping.list_builder import InvalidRecipeYield, build_shopping_view

# Routers
from mealprep.api.routes import pantry, recipes, plan
from mealprep.api.api_ai import router as ai_router

# Logging
logger = logging.getLogger("mealprep_app")

# Initialize FastAPI app
app = FastAPI(title="Meal Prep Planner API")

# Include routers
app.include_router(pantry.router)
app.include_router(recipes.router)
app.include_router(plan.router)
app.include_router(ai_router)


@app.exception_handler(NotFoundError)
def _not_found(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(InvalidRecipeYield)
def _invalid_yield(request: Request, exc: InvalidRecipeYield):
    logger.error("Data integrity problem while building shopping list: %s", exc)
    return JSONResponse(status_code=409, content={"detail": str(exc)})


def _current_shopping_list(plans: PlanRepository, recipes: RecipeRepository, ingredients: IngredientRepository):
    return build_shopping_view(plans.get_week_plan(), recipes.list(), ingredients.list())


# -------------------- API: Shopping List --------------------
@app.get('/api/shopping-list')
def api_shopping_list(plans: PlanRepository = Depends(get_plan_repository),
                      recipes: RecipeRepository = Depends(get_recipe_repository),
                      ingredients: IngredientRepository = Depends(get_ingredient_repository)):
    shopping = _current_shopping_list(plans, recipes, ingredients)
    logger.info("Shopping list built with %d items", len(shopping))
    return shopping.to_dict()


@app.get('/api/shopping-list/pdf')
def api_shopping_list_pdf(plans: PlanRepository = Depends(get_plan_repository),
                          recipes: RecipeRepository = Depends(get_recipe_repository),
                          ingredients: IngredientRepository = Depends(get_ingredient_repository)):
    shopping = _current_shopping_list(plans, recipes, ingredients)
    pdf_bytes = generate_pdf_for_shopping_list(shopping)
    headers = {"Content-Disposition": 'inline; filename="shopping_list.pdf"'}
    return Response(content=pdf_bytes, media_type="application/pdf", headers=headers)


@app.get('/health')
def health():
    return {"status": "ok"}
