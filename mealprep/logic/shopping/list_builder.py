"""Shopping list builder.

Provides build_shopping_list(plan, recipes, ingredients): total quantity of every
ingredient needed for the week, scaled by requested servings over recipe yield.
"""
from typing import Dict, Iterable, List
from mealprep.domain.Ingredient import Ingredient
from mealprep.domain.Plan import WeeklyPlan
from mealprep.domain.Recipe import Recipe
from mealprep.domain.ShoppingList import ShoppingItem, ShoppingList


class InvalidRecipeYield(ValueError):
    """A recipe's yield (servings) is not a positive integer."""

    def __init__(self, recipe: Recipe):
        self.recipe = recipe
        super().__init__(f"Recipe '{recipe.name}' ({recipe.id}) has invalid yield: {recipe.servings!r}")


def _scale_ratio(recipe: Recipe, requested: int) -> float:
    base = recipe.servings
    if isinstance(base, bool) or not isinstance(base, int) or base < 1:
        raise InvalidRecipeYield(recipe)
    if requested is None or requested <= 0:
        requested = 1
    return requested / base


def _sort_key(item: ShoppingItem):
    return (item.category.value, item.name.lower(), item.ingredient_id)


def build_shopping_list(plan: WeeklyPlan, recipes: Iterable[Recipe], ingredients: Iterable[Ingredient]) -> List[ShoppingItem]:
    """Aggregate ingredient totals for every recipe scheduled in the week.

    Args:
        plan: WeeklyPlan with one DailyPlan per weekday.
        recipes: recipe catalog.
        ingredients: ingredient catalog.

    Returns:
        ShoppingItems sorted by category label, then ingredient name. Recipes or
        ingredients that no longer exist are skipped.

    Raises:
        InvalidRecipeYield: a scheduled recipe has a yield below 1.
    """
    recipe_index: Dict[str, Recipe] = {r.id: r for r in recipes}
    ingredient_index: Dict[str, Ingredient] = {i.id: i for i in ingredients}

    totals: Dict[str, ShoppingItem] = {}
    for daily in plan:
        for rid in daily.recipe_ids:
            recipe = recipe_index.get(rid)
            if recipe is None:
                continue
            ratio = _scale_ratio(recipe, daily.servings.get(rid, 1))
            for line in recipe.ingredients:
                ing = ingredient_index.get(line.ingredient_id)
                if ing is None:
                    continue
                needed = line.quantity * ratio
                if ing.id in totals:
                    totals[ing.id].add(needed)
                else:
                    totals[ing.id] = ShoppingItem(ing.id, ing.name, ing.unit, ing.category, needed)

    return sorted(totals.values(), key=_sort_key)


def group_by_category(items: Iterable[ShoppingItem]) -> Dict[str, List[ShoppingItem]]:
    """Category label -> items, in one pass over the (already sorted) flat list."""
    return ShoppingList(list(items)).grouped()


def build_shopping_view(plan: WeeklyPlan, recipes: Iterable[Recipe], ingredients: Iterable[Ingredient]) -> ShoppingList:
    """Flat list and grouped view together, wrapped for presentation callers."""
    return ShoppingList(build_shopping_list(plan, recipes, ingredients))


def format_quantity(value: float) -> str:
    return f"{value:.1f}"


__all__ = ['build_shopping_list', 'build_shopping_view', 'group_by_category', 'format_quantity', 'InvalidRecipeYield']
