"""Ingredient repository (file persistence)."""
import logging
from pathlib import Path
from typing import List, Optional
from uuid import uuid4

from mealprep.domain.Enums import Category, Unit
from mealprep.domain.Ingredient import Ingredient
from mealprep.infra.json_store import NotFoundError, load_rows, locked, save_rows
from mealprep.infra.paths import INGREDIENTS_FILE

logger = logging.getLogger(__name__)


class IngredientRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else INGREDIENTS_FILE

    def _load(self) -> List[Ingredient]:
        items = []
        for row in load_rows(self.path):
            try:
                items.append(Ingredient.from_dict(row))
            except (ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping invalid ingredient row in {self.path}: {row!r} ({e})")
        return items

    def _save(self, ingredients: List[Ingredient]) -> None:
        save_rows(self.path, [ing.to_dict() for ing in ingredients])

    def list(self, term: Optional[str] = None) -> List[Ingredient]:
        """All ingredients ordered by name, optionally filtered by a search term."""
        items = [ing for ing in self._load() if ing.matches(term)]
        return sorted(items, key=lambda i: i.name.lower())

    def get(self, ingredient_id: str) -> Ingredient:
        for ing in self._load():
            if ing.id == ingredient_id:
                return ing
        raise NotFoundError(f"Ingredient '{ingredient_id}' not found.")

    @locked
    def create(self, name: str, unit: Unit, category: Category) -> Ingredient:
        items = self._load()
        ingredient = Ingredient(str(uuid4()), name, unit, category)
        items.append(ingredient)
        self._save(items)
        logger.info("Created ingredient %s (%s)", ingredient.name, ingredient.id)
        return ingredient

    @locked
    def update(self, ingredient_id: str, **changes) -> Ingredient:
        '''
        Applies name/unit/category changes. Unknown keys and None values are ignored.
        '''
        items = self._load()
        for ing in items:
            if ing.id != ingredient_id:
                continue
            if changes.get("name") is not None:
                ing.name = changes["name"]
            if changes.get("unit") is not None:
                ing.unit = Unit(changes["unit"])
            if changes.get("category") is not None:
                ing.category = Category(changes["category"])
            self._save(items)
            return ing
        raise NotFoundError(f"Ingredient '{ingredient_id}' not found.")

    @locked
    def delete(self, ingredient_id: str) -> None:
        '''
        Deletes an ingredient. Recipe lines that reference it are left as they are.
        '''
        items = self._load()
        remaining = [ing for ing in items if ing.id != ingredient_id]
        if len(remaining) == len(items):
            raise NotFoundError(f"Ingredient '{ingredient_id}' not found.")
        self._save(remaining)
        logger.info("Deleted ingredient %s", ingredient_id)
