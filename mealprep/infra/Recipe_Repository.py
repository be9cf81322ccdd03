"""Recipe repository (file persistence). Ingredient lines are stored inside each recipe."""
import logging
from pathlib import Path
from typing import List, Optional
from uuid import uuid4

from mealprep.domain.Enums import RecipeOwner
from mealprep.domain.Recipe import Recipe, RecipeIngredient
from mealprep.infra.json_store import NotFoundError, load_rows, locked, save_rows
from mealprep.infra.paths import RECIPES_FILE

logger = logging.getLogger(__name__)

_FIELDS = ("name", "servings", "prep_time_minutes", "instructions", "owner")


class RecipeRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else RECIPES_FILE

    def _load(self) -> List[Recipe]:
        recipes = []
        for row in load_rows(self.path):
            try:
                recipes.append(Recipe.from_dict(row))
            except (ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping invalid recipe row in {self.path}: {row!r} ({e})")
        return recipes

    def _save(self, recipes: List[Recipe]) -> None:
        save_rows(self.path, [r.to_dict() for r in recipes])

    def list(self, term: Optional[str] = None, owner: Optional[RecipeOwner] = None) -> List[Recipe]:
        recipes = [r for r in self._load() if r.matches(term, owner)]
        return sorted(recipes, key=lambda r: r.name.lower())

    def get(self, recipe_id: str) -> Recipe:
        for recipe in self._load():
            if recipe.id == recipe_id:
                return recipe
        raise NotFoundError(f"Recipe '{recipe_id}' not found.")

    @locked
    def create(self, name: str, ingredients: List[RecipeIngredient], servings: int = 1,
               prep_time_minutes: int = 0, instructions: str = "",
               owner: RecipeOwner = RecipeOwner.GUSTAVO) -> Recipe:
        recipes = self._load()
        recipe = Recipe(str(uuid4()), name, ingredients, servings, prep_time_minutes, instructions, owner)
        recipes.append(recipe)
        self._save(recipes)
        logger.info("Created recipe %s (%s) with %d ingredient lines", recipe.name, recipe.id, len(recipe.ingredients))
        return recipe

    @locked
    def update(self, recipe_id: str, ingredients: Optional[List[RecipeIngredient]] = None, **changes) -> Recipe:
        '''
        Updates basic fields; ingredient lines are replaced only when provided.
        '''
        recipes = self._load()
        for recipe in recipes:
            if recipe.id != recipe_id:
                continue
            for field in _FIELDS:
                if changes.get(field) is not None:
                    setattr(recipe, field, changes[field])
            recipe.owner = RecipeOwner(recipe.owner)
            if ingredients is not None:
                recipe.ingredients = list(ingredients)
            self._save(recipes)
            return recipe
        raise NotFoundError(f"Recipe '{recipe_id}' not found.")

    @locked
    def delete(self, recipe_id: str) -> None:
        '''
        Deletes a recipe. Plan entries that still reference it are left as they are.
        '''
        recipes = self._load()
        remaining = [r for r in recipes if r.id != recipe_id]
        if len(remaining) == len(recipes):
            raise NotFoundError(f"Recipe '{recipe_id}' not found.")
        self._save(remaining)
        logger.info("Deleted recipe %s", recipe_id)
