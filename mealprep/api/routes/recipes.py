from typing import Optional
from fastapi import APIRouter, Depends, Query, Response

from mealprep.api.deps import get_recipe_repository
from mealprep.domain.Enums import RecipeOwner
from mealprep.domain.Recipe import RecipeIngredient
from mealprep.infra.Recipe_Repository import RecipeRepository
from mealprep.utilities.validators import RecipeInput, RecipeUpdate

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def _lines(items):
    return [RecipeIngredient(i.ingredient_id, i.quantity) for i in items]


@router.get("")
def list_recipes(q: Optional[str] = Query(default=None),
                 owner: Optional[RecipeOwner] = Query(default=None),
                 repo: RecipeRepository = Depends(get_recipe_repository)):
    recipes = repo.list(q, owner)
    return {"count": len(recipes), "recipes": [r.to_dict() for r in recipes]}


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    return repo.get(recipe_id).to_dict()


@router.post("", status_code=201)
def create_recipe(payload: RecipeInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = repo.create(
        payload.name, _lines(payload.ingredients), payload.servings,
        payload.prep_time_minutes, payload.instructions, payload.owner,
    )
    return recipe.to_dict()


@router.put("/{recipe_id}")
def update_recipe(recipe_id: str, payload: RecipeUpdate,
                  repo: RecipeRepository = Depends(get_recipe_repository)):
    changes = payload.model_dump(exclude_none=True, exclude={"ingredients"})
    lines = _lines(payload.ingredients) if payload.ingredients is not None else None
    return repo.update(recipe_id, ingredients=lines, **changes).to_dict()


@router.delete("/{recipe_id}", status_code=204)
def delete_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    repo.delete(recipe_id)
    return Response(status_code=204)
