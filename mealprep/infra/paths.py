from mealprep.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
INGREDIENTS_FILE = DATA_DIR / 'ingredients.json'
RECIPES_FILE = DATA_DIR / 'recipes.json'
PLAN_FILE = DATA_DIR / 'weekly_plan.json'

__all__ = ['DATA_DIR', 'INGREDIENTS_FILE', 'RECIPES_FILE', 'PLAN_FILE']
