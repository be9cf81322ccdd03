import re
import json
import logging
from json import JSONDecodeError
from typing import Any, Dict, List, Optional
from openai import OpenAI
from fastapi import APIRouter, Depends, HTTPException

from mealprep.api.deps import get_ingredient_repository, get_plan_repository, get_recipe_repository
from mealprep.domain.Ingredient import Ingredient
from mealprep.domain.Recipe import Recipe
from mealprep.infra.Ingredient_Repository import IngredientRepository
from mealprep.infra.Plan_Repository import PlanRepository
from mealprep.infra.Recipe_Repository import RecipeRepository
from mealprep.infra.json_store import NotFoundError
from mealprep.utilities.config import OPENAI_MODEL, openai_api_key
from mealprep.utilities.constants import (
    ASSISTANT_UNAVAILABLE_TEXT,
    DETAILED_INSTRUCTIONS_PROMPT,
    INSTRUCTIONS_UNAVAILABLE_TEXT,
    NO_INSTRUCTIONS_TEXT,
    NO_RECIPES_SCHEDULED_TEXT,
    PREP_SCHEDULE_PROMPT,
    SCHEDULE_EMPTY_TEXT,
    SUGGEST_RECIPES_PROMPT,
    SUGGESTED_RECIPE_JSON_FORMAT,
)
from mealprep.utilities.validators import InstructionsRequest

logger = logging.getLogger(__name__)

SUGGESTION_KEYS = ("name", "prep_time_minutes", "servings", "instructions", "description")


class AIServiceError(RuntimeError):
    """The text-generation service could not produce a usable answer."""


# === Helper: Get OpenAI Client ===
def _get_openai_client():
    """Return an OpenAI client if OPENAI_API_KEY is set, otherwise None."""
    api_key = openai_api_key()
    if not api_key:
        return None
    return OpenAI(api_key=api_key)


def _generate(client: OpenAI, prompt: str) -> str:
    response = client.responses.create(model=OPENAI_MODEL, input=prompt)
    return (response.output_text or "").strip()


# === Recipe Suggestions ===
def suggest_recipes_with_ai(ingredients: List[Ingredient]) -> List[Dict[str, Any]]:
    """Suggest recipes (partial dicts) from the pantry. Ingredient lines are left for the user to link."""
    if not ingredients:
        return []

    client = _get_openai_client()
    if client is None:
        logger.warning("OPENAI_API_KEY not set; cannot suggest recipes.")
        raise AIServiceError("AI suggestions are not configured.")

    ingredient_names = ", ".join(i.name for i in ingredients)
    prompt = SUGGEST_RECIPES_PROMPT.format(ingredient_names=ingredient_names) + SUGGESTED_RECIPE_JSON_FORMAT
    try:
        text = _generate(client, prompt)
    except Exception as e:
        logger.exception("Error while generating recipe suggestions")
        raise AIServiceError("Failed to get suggestions from the AI.") from e

    if not text:
        return []
    parsed = _parse_json_payload(text)
    if parsed is None:
        logger.error("AI suggestion output is not valid JSON: %.200s", text)
        raise AIServiceError("Failed to get suggestions from the AI.")
    if isinstance(parsed, dict):
        parsed = [parsed]
    return [
        {k: v for k, v in entry.items() if k in SUGGESTION_KEYS}
        for entry in parsed if isinstance(entry, dict)
    ]


# === Detailed Instructions ===
def generate_detailed_instructions(recipe_name: str, ingredient_list: str) -> str:
    """Step by step guide for one recipe; returns a fixed message when the call fails."""
    client = _get_openai_client()
    if client is None:
        logger.warning("OPENAI_API_KEY not set; skipping instructions generation.")
        return INSTRUCTIONS_UNAVAILABLE_TEXT
    prompt = DETAILED_INSTRUCTIONS_PROMPT.format(recipe_name=recipe_name, ingredient_list=ingredient_list)
    try:
        return _generate(client, prompt) or NO_INSTRUCTIONS_TEXT
    except Exception:
        logger.exception("Error while generating instructions for %s", recipe_name)
        return INSTRUCTIONS_UNAVAILABLE_TEXT


# === Prep Schedule ===
def optimize_prep_schedule(recipes: List[Recipe]) -> str:
    """Markdown cooking-order suggestion for the week's recipes (opaque text)."""
    if not recipes:
        return NO_RECIPES_SCHEDULED_TEXT
    client = _get_openai_client()
    if client is None:
        logger.warning("OPENAI_API_KEY not set; skipping prep schedule.")
        return ASSISTANT_UNAVAILABLE_TEXT
    recipe_summaries = ", ".join(f"{r.name} ({r.prep_time_minutes} min)" for r in recipes)
    try:
        return _generate(client, PREP_SCHEDULE_PROMPT.format(recipe_summaries=recipe_summaries)) or SCHEDULE_EMPTY_TEXT
    except Exception:
        logger.exception("Error while optimizing prep schedule")
        return ASSISTANT_UNAVAILABLE_TEXT


# === Text Cleaning Helpers ===
def _parse_json_payload(text: str):
    """json.loads with fallbacks for code fences, trailing commas and surrounding prose."""
    try:
        return json.loads(text)
    except JSONDecodeError:
        pass
    cleaned = _remove_trailing_commas(_strip_code_fences(text))
    candidate = _extract_json_by_balancing(cleaned)
    if candidate:
        try:
            return json.loads(_remove_trailing_commas(candidate))
        except JSONDecodeError:
            logger.exception("Failed to decode extracted JSON from AI output")
    return None


def _strip_code_fences(text: str) -> str:
    """Remove common markdown code fences and leading/trailing whitespace."""
    text = re.sub(r"```(?:json)?\n(.*?)```", r"\1", text, flags=re.S)
    text = re.sub(r"^```|```$", "", text)
    return text.strip()


def _remove_trailing_commas(text: str) -> str:
    return re.sub(r",\s*(\}|\])", r"\1", text)


def _extract_json_by_balancing(text: str) -> Optional[str]:
    """Extract the first JSON object/array by balancing braces/brackets."""
    start = None
    stack = []
    in_string = False
    escape = False

    for i, ch in enumerate(text):
        if ch == '"' and not escape:
            in_string = not in_string
        if in_string and ch == "\\" and not escape:
            escape = True
            continue
        else:
            escape = False

        if not in_string:
            if ch in "{[":
                if start is None:
                    start = i
                stack.append(ch)
            elif ch in "}]":
                if not stack:
                    continue
                opening = stack.pop()
                if (opening == "{" and ch != "}") or (opening == "[" and ch != "]"):
                    return None
                if not stack and start is not None:
                    return text[start:i + 1]
    return None


# === FastAPI Endpoints ===
router = APIRouter(prefix="/api/ai", tags=["ai"])


@router.post("/suggest-recipes")
def suggest_recipes(ingredients: IngredientRepository = Depends(get_ingredient_repository)):
    try:
        return {"suggestions": suggest_recipes_with_ai(ingredients.list())}
    except AIServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/instructions")
def detailed_instructions(payload: InstructionsRequest,
                          recipes: RecipeRepository = Depends(get_recipe_repository),
                          ingredients: IngredientRepository = Depends(get_ingredient_repository)):
    try:
        recipe = recipes.get(payload.recipe_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    catalog = {i.id: i for i in ingredients.list()}
    text = generate_detailed_instructions(recipe.name, recipe.ingredient_summary(catalog))
    return {"recipe_id": recipe.id, "instructions": text}


@router.post("/prep-schedule")
def prep_schedule(plans: PlanRepository = Depends(get_plan_repository),
                  recipes: RecipeRepository = Depends(get_recipe_repository)):
    catalog = {r.id: r for r in recipes.list()}
    active = [catalog[rid] for rid in plans.get_week_plan().scheduled_recipe_ids() if rid in catalog]
    return {"schedule": optimize_prep_schedule(active)}
