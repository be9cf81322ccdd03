from typing import Optional
from fastapi import APIRouter, Depends, Query, Response

from mealprep.api.deps import get_ingredient_repository
from mealprep.infra.Ingredient_Repository import IngredientRepository
from mealprep.utilities.validators import IngredientInput, IngredientUpdate

router = APIRouter(prefix="/api/ingredients", tags=["pantry"])


@router.get("")
def list_ingredients(q: Optional[str] = Query(default=None),
                     repo: IngredientRepository = Depends(get_ingredient_repository)):
    """All pantry ingredients ordered by name; q filters on name or category."""
    items = repo.list(q)
    return {"count": len(items), "items": [i.to_dict() for i in items]}


@router.post("", status_code=201)
def create_ingredient(payload: IngredientInput,
                      repo: IngredientRepository = Depends(get_ingredient_repository)):
    return repo.create(payload.name, payload.unit, payload.category).to_dict()


@router.put("/{ingredient_id}")
def update_ingredient(ingredient_id: str, payload: IngredientUpdate,
                      repo: IngredientRepository = Depends(get_ingredient_repository)):
    return repo.update(ingredient_id, **payload.model_dump(exclude_none=True)).to_dict()


@router.delete("/{ingredient_id}", status_code=204)
def delete_ingredient(ingredient_id: str,
                      repo: IngredientRepository = Depends(get_ingredient_repository)):
    repo.delete(ingredient_id)
    return Response(status_code=204)
