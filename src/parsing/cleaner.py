"""Best-effort reconciliation of untrusted model output.

The model is asked for a literal JSON shape but regularly returns values like
`"mealType": "lunch|dinner"`, `"cookingTime": "25 minutes"` or a bare string
where a meal object belongs. These functions coerce each field into shape
with a fixed default per field; the strict validator runs afterwards as a
separate, non-coercive pass.
"""

import copy
import math
import re
from typing import Any, Optional

from src.models.models import DAY_PLAN_MEALS, DIFFICULTIES, MEAL_TYPES
from src.utils.errors import MissingRecipesError, SchemaValidationError
from src.utils.logger import logger


DEFAULT_MEAL_TYPE = "lunch"
DEFAULT_DIFFICULTY = "easy"
DEFAULT_COOKING_TIME = 30
DEFAULT_PREP_TIME = 15
DEFAULT_SERVINGS = 4

DEFAULT_MEAL_COOKING_TIME = 20
DEFAULT_TOTAL_COOKING_TIME = 60
PLACEHOLDER_INGREDIENTS = ["Basic ingredients"]
PLACEHOLDER_STEPS = ["Simple cooking steps"]

DAY_PLAN_COUNT = 3

# Name and description by plan position
PLAN_LABELS: list[tuple[str, str]] = [
    ("Comfort Food Plan", "Hearty and satisfying meals"),
    ("Quick & Easy Plan", "Fast cooking, great taste"),
    ("Traditional Plan", "Classic Indian flavors"),
]

# Variations derived from a single plan: (name prefix, cooking time) per meal
PLAN_VARIATIONS: dict[int, dict[str, Any]] = {
    1: {
        "planName": "Quick & Easy Plan",
        "planDescription": "Fast cooking, great taste",
        "meals": {"breakfast": ("Quick", 15), "lunch": ("Easy", 20), "dinner": ("Simple", 25)},
    },
    2: {
        "planName": "Traditional Plan",
        "planDescription": "Classic Indian flavors",
        "meals": {"breakfast": ("Traditional", 25), "lunch": ("Classic", 35), "dinner": ("Authentic", 40)},
    },
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


# ============================================================================
# Field coercion helpers
# ============================================================================


def parse_int(value: Any) -> Optional[int]:
    """Parse the leading integer of a value the way `parseInt` would.

    Returns None for booleans, non-numeric strings and non-finite numbers.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def coerce_positive_int(value: Any, default: int) -> int:
    """Coerce to a positive integer, using `default` for anything else."""
    parsed = parse_int(value)
    if parsed is None or parsed <= 0:
        return default
    return parsed


def pick_enum(value: Any, allowed: tuple[str, ...], default: Optional[str]) -> Optional[str]:
    """Reduce a possibly multi-valued enum string to one allowed value.

    `"lunch|dinner"` yields `"lunch"`: the first `|`-separated member of
    `allowed`, compared case-insensitively, else `default`.
    """
    if not isinstance(value, str):
        return default
    for candidate in value.split("|"):
        candidate = candidate.strip().lower()
        if candidate in allowed:
            return candidate
    return default


def coerce_list(value: Any, default: Optional[list] = None) -> list:
    if isinstance(value, list):
        return value
    return list(default) if default is not None else []


def _text_or(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default


def _unique_id(value: Any, used: set[str], index: int) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    candidate = value.strip() if isinstance(value, str) else ""
    if not candidate or candidate in used:
        candidate = f"recipe-{index + 1}"
        suffix = 1
        while candidate in used:
            suffix += 1
            candidate = f"recipe-{index + 1}-{suffix}"
    used.add(candidate)
    return candidate


# ============================================================================
# Recipe mode
# ============================================================================


def clean_recipe(recipe: dict[str, Any], index: int, used_ids: set[str]) -> dict[str, Any]:
    """Coerce one recipe object into the Recipe shape (camelCase keys)."""
    cleaned = dict(recipe)
    cleaned["id"] = _unique_id(recipe.get("id"), used_ids, index)
    cleaned["mealType"] = pick_enum(recipe.get("mealType"), MEAL_TYPES, DEFAULT_MEAL_TYPE)
    cleaned["difficulty"] = pick_enum(recipe.get("difficulty"), DIFFICULTIES, DEFAULT_DIFFICULTY)
    cleaned["cookingTime"] = coerce_positive_int(recipe.get("cookingTime"), DEFAULT_COOKING_TIME)
    cleaned["prepTime"] = coerce_positive_int(recipe.get("prepTime"), DEFAULT_PREP_TIME)
    cleaned["servings"] = coerce_positive_int(recipe.get("servings"), DEFAULT_SERVINGS)
    cleaned["ingredients"] = coerce_list(recipe.get("ingredients"))
    cleaned["steps"] = coerce_list(recipe.get("steps"))
    cleaned["needsExtraIngredients"] = bool(recipe.get("needsExtraIngredients"))
    cleaned["extraIngredients"] = (
        coerce_list(recipe.get("extraIngredients")) if cleaned["needsExtraIngredients"] else []
    )
    return cleaned


def clean_recipe_data(raw: Any) -> dict[str, Any]:
    """Coerce a parsed model response into the recipe batch shape.

    Args:
        raw: Parsed JSON object from the model.

    Returns:
        A new dict with a cleaned `recipes` list. Non-object entries are dropped.

    Raises:
        MissingRecipesError: `recipes` is missing or not a list. No per-field
            repair is attempted in that case.
    """
    if not isinstance(raw, dict) or not isinstance(raw.get("recipes"), list):
        raise MissingRecipesError(
            f"Response has no recipes array (type={type(raw).__name__}, "
            f"has_recipes={isinstance(raw, dict) and 'recipes' in raw})"
        )

    used_ids: set[str] = set()
    recipes = []
    for index, recipe in enumerate(raw["recipes"]):
        if not isinstance(recipe, dict):
            logger.debug(f"Dropping non-object recipe at position {index}")
            continue
        recipes.append(clean_recipe(recipe, index, used_ids))

    return {**raw, "recipes": recipes}


# ============================================================================
# Day plan mode
# ============================================================================


def _placeholder_meal(meal: str, name: Optional[str] = None) -> dict[str, Any]:
    if name is not None:
        return {
            "name": name,
            "description": f"Simple {meal} dish",
            "cookingTime": DEFAULT_MEAL_COOKING_TIME,
            "ingredients": list(PLACEHOLDER_INGREDIENTS),
            "steps": list(PLACEHOLDER_STEPS),
        }
    return {
        "name": f"Simple {meal.capitalize()}",
        "description": f"Easy {meal} recipe",
        "cookingTime": DEFAULT_MEAL_COOKING_TIME,
        "ingredients": list(PLACEHOLDER_INGREDIENTS),
        "steps": list(PLACEHOLDER_STEPS),
    }


def clean_meal(value: Any, meal: str) -> dict[str, Any]:
    """Coerce one meal slot, synthesizing a placeholder for strings or junk."""
    if isinstance(value, str):
        value = _placeholder_meal(meal, _text_or(value, f"Simple {meal}"))
    elif not isinstance(value, dict):
        value = _placeholder_meal(meal)

    return {
        **value,
        "name": _text_or(value.get("name"), f"Simple {meal}"),
        "description": _text_or(value.get("description"), f"Easy {meal} recipe"),
        "cookingTime": coerce_positive_int(value.get("cookingTime"), DEFAULT_MEAL_COOKING_TIME),
        "ingredients": coerce_list(value.get("ingredients"), PLACEHOLDER_INGREDIENTS),
        "steps": coerce_list(value.get("steps"), PLACEHOLDER_STEPS),
    }


def clean_single_plan(raw: dict[str, Any], index: int) -> dict[str, Any]:
    """Clean one plan and label it by position."""
    plan = dict(raw)
    for meal in DAY_PLAN_MEALS:
        plan[meal] = clean_meal(raw.get(meal), meal)

    plan["totalCookingTime"] = coerce_positive_int(raw.get("totalCookingTime"), DEFAULT_TOTAL_COOKING_TIME)
    plan["shoppingList"] = coerce_list(raw.get("shoppingList"))

    if index < len(PLAN_LABELS):
        plan["planName"], plan["planDescription"] = PLAN_LABELS[index]
    else:
        plan["planName"], plan["planDescription"] = f"Plan {index + 1}", "Delicious meal plan"
    return plan


def create_plan_variation(base_plan: dict[str, Any], index: int) -> dict[str, Any]:
    """Derive a renamed, re-timed variation of `base_plan`.

    Index 1 gives the quick variant, index 2 the traditional one; anything
    else falls back to the quick variant.
    """
    variation = PLAN_VARIATIONS.get(index, PLAN_VARIATIONS[1])
    plan = copy.deepcopy(base_plan)
    plan["planName"] = variation["planName"]
    plan["planDescription"] = variation["planDescription"]

    total = 0
    for meal, (prefix, cooking_time) in variation["meals"].items():
        plan[meal]["name"] = f"{prefix} {base_plan[meal]['name']}"
        plan[meal]["cookingTime"] = cooking_time
        total += cooking_time
    plan["totalCookingTime"] = total
    return plan


def clean_day_plan_data(raw: Any) -> list[dict[str, Any]]:
    """Coerce a parsed model response into exactly three day plans.

    A `plans` list is cleaned and labeled entry by entry, then cut to three;
    a single plan object is cleaned and two variations are derived from it.
    Fewer than three plans are topped up with variations of the first.

    Raises:
        SchemaValidationError: The response is not an object, or carries an
            empty or non-list `plans` field.
    """
    if not isinstance(raw, dict):
        raise SchemaValidationError(f"Day plan response must be an object, got {type(raw).__name__}")

    if "plans" in raw:
        entries = raw["plans"]
        if not isinstance(entries, list) or not entries:
            raise SchemaValidationError("Day plan response has no plans")
        plans = [
            clean_single_plan(entry if isinstance(entry, dict) else {}, index)
            for index, entry in enumerate(entries)
        ][:DAY_PLAN_COUNT]
    else:
        plans = [clean_single_plan(raw, 0)]

    while len(plans) < DAY_PLAN_COUNT:
        plans.append(create_plan_variation(plans[0], len(plans)))

    return plans
