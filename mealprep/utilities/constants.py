from typing import Final

SUGGEST_RECIPES_PROMPT: Final[str] = (
    """
    As a nutritionist who specializes in meal prep (packed lunches), suggest 3 practical,
    healthy recipes using some of these ingredients: {ingredient_names}.
    Return only a JSON array where every element has the following format:

    """
)
SUGGESTED_RECIPE_JSON_FORMAT: Final[str] = (
    """
[
  {
    "name": str,
    "prep_time_minutes": int,
    "servings": int,
    "instructions": str,
    "description": str(short description of the main ingredients)
  }
]
    """
)
DETAILED_INSTRUCTIONS_PROMPT: Final[str] = (
    """
    Write a detailed step-by-step guide to prepare the recipe: "{recipe_name}".
    Ingredients: {ingredient_list}.
    Focus on efficiency for someone cooking several meal-prep boxes at the same time.
    """
)
PREP_SCHEDULE_PROMPT: Final[str] = (
    """
    I need to prepare the following recipes on Sunday for this week's meal-prep boxes: {recipe_summaries}.
    Create an optimized preparation schedule (a kitchen pipeline) so that I lose as little time as possible.
    Suggest the order of preparation, what can be done at the same time (e.g. chop vegetables while
    something roasts) and storage tips.
    Format the answer as clear Markdown.
    """
)

NO_INSTRUCTIONS_TEXT: Final[str] = "No instructions generated."
INSTRUCTIONS_UNAVAILABLE_TEXT: Final[str] = "Could not generate detailed instructions right now."
NO_RECIPES_SCHEDULED_TEXT: Final[str] = "No recipes selected for the week."
SCHEDULE_EMPTY_TEXT: Final[str] = "The assistant returned an empty schedule."
ASSISTANT_UNAVAILABLE_TEXT: Final[str] = "Could not reach the AI assistant."
