"""Recipe domain entity: name, yield (servings), ingredient lines, prep time, instructions, owner."""
from typing import Dict, List, Optional
from mealprep.domain.Enums import RecipeOwner
from mealprep.domain.Ingredient import Ingredient


class RecipeIngredient:
    """One ingredient line of a recipe; quantity is in the referenced ingredient's unit."""

    def __init__(self, ingredient_id: str, quantity: float):
        self.ingredient_id = ingredient_id
        self.quantity = quantity

    def __repr__(self) -> str:
        return f"RecipeIngredient({self.ingredient_id!r}, {self.quantity})"

    @staticmethod
    def from_dict(data):
        return RecipeIngredient(data.get("ingredient_id", ""), data.get("quantity", 0) or 0)

    def to_dict(self):
        return {"ingredient_id": self.ingredient_id, "quantity": self.quantity}


class Recipe:
    def __init__(self, id: str = "", name: str = "", ingredients: Optional[List[RecipeIngredient]] = None,
                 servings: int = 1, prep_time_minutes: int = 0, instructions: str = "",
                 owner: RecipeOwner = RecipeOwner.GUSTAVO):
        self.id = id
        self.name = name
        self.ingredients = ingredients[:] if ingredients else []
        # Yield: number of servings the listed quantities produce
        self.servings = servings
        self.prep_time_minutes = prep_time_minutes
        self.instructions = instructions
        self.owner = RecipeOwner(owner)

    def __str__(self) -> str:
        return f"{self.name} - {self.servings} servings - {self.prep_time_minutes} min - Owner: {self.owner.value}"

    __repr__ = __str__

    def matches(self, term: Optional[str] = None, owner: Optional[RecipeOwner] = None) -> bool:
        """Name search (case-insensitive) combined with an optional owner filter."""
        if owner is not None and self.owner != RecipeOwner(owner):
            return False
        if term and term.strip().lower() not in self.name.lower():
            return False
        return True

    def ingredient_summary(self, catalog: Dict[str, Ingredient]) -> str:
        """Human readable ingredient list, e.g. '200 g Rice, 2 pcs Egg'. Dangling lines are skipped."""
        parts = []
        for line in self.ingredients:
            ing = catalog.get(line.ingredient_id)
            if ing is None:
                continue
            parts.append(f"{line.quantity:g} {ing.unit.value} {ing.name}")
        return ", ".join(parts)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        d['ingredients'] = [RecipeIngredient.from_dict(ing) for ing in d.get('ingredients', [])]
        allowed = {"id", "name", "ingredients", "servings", "prep_time_minutes", "instructions", "owner"}
        return Recipe(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "ingredients": [line.to_dict() for line in self.ingredients],
            "servings": self.servings,
            "prep_time_minutes": self.prep_time_minutes,
            "instructions": self.instructions,
            "owner": self.owner.value,
        }
