"""Prompts and system instructions for Dinezzy Recipe Service.

Provides factory functions that render the recipe-search and day-plan prompts.
Each prompt embeds the literal JSON shape the response parser expects, plus a
random seed in the example identifiers so repeated requests do not come back
with cached-looking, identical output.
"""

import random
from typing import Optional


RECIPE_SYSTEM_INSTRUCTION = (
    "You are a JSON-generating assistant. Return ONLY valid JSON with no additional text. "
    "Your response must be parseable by a standard JSON parser. Use very simple English for cooking steps."
)

DAY_PLAN_SYSTEM_INSTRUCTION = (
    "You are a helpful assistant that creates 3 different Indian meal plans. "
    "Always return 3 unique plans with different dishes. Return ONLY valid JSON."
)

ASSISTANT_INSTRUCTIONS = [
    "You are a helpful cooking assistant specializing in Indian cuisine.",
    "Provide detailed, helpful responses about cooking, recipes, ingredients, and techniques.",
    "Use simple English and Indian home-cooking measurements.",
]


def _new_seed() -> int:
    return random.randint(0, 9999)


def _extra_ingredients_section(include_extra: bool) -> str:
    """Generate the extra-ingredients rule for recipe search.

    Args:
        include_extra: Whether recipes may call for ingredients the user did not list.

    Returns:
        str: Requirement lines for the prompt.
    """
    if include_extra:
        return (
            "- You MAY add a few extra ingredients the user did not list\n"
            '- When you do, set "needsExtraIngredients": true and list them in "extraIngredients"'
        )
    return (
        "- Use ONLY the listed ingredients plus basic pantry staples (oil, salt, common spices)\n"
        '- Always set "needsExtraIngredients": false and "extraIngredients": []'
    )


def _meal_type_section(meal_type: Optional[str]) -> str:
    if not meal_type:
        return '- Spread recipes across meal types: "breakfast", "lunch", "dinner", "snack"'
    return f'- Every recipe MUST be a {meal_type} dish with "mealType": "{meal_type}"'


def build_recipe_prompt(
    ingredients: list[str],
    include_extra: bool = False,
    meal_type: Optional[str] = None,
    count: int = 6,
    seed: Optional[int] = None,
) -> str:
    """Render the recipe-search prompt.

    Args:
        ingredients: Canonical ingredient names from the normalizer.
        include_extra: Whether extra ingredients are allowed.
        meal_type: Optional meal category every recipe must belong to.
        count: Number of recipes to request (default: 6).
        seed: Value embedded in example ids. Random when omitted.

    Returns:
        str: Complete prompt text.
    """
    seed = _new_seed() if seed is None else seed
    ingredient_list = ", ".join(ingredients)
    example_meal_type = meal_type or "lunch"

    return f"""
You are an expert Indian chef with 20 years of experience. Create exactly {count} unique, authentic Indian recipes using these ingredients: "{ingredient_list}".

REQUIREMENTS:
- Generate EXACTLY {count} different recipes
- Use authentic Indian dish names (like "Aloo Gobi", "Dal Tadka", "Jeera Rice")
- Each recipe must have 8-12 detailed cooking steps in VERY SIMPLE ENGLISH
- Use proper Indian measurements and cooking techniques
- Include realistic cooking times and difficulty levels
- Focus on traditional Indian home cooking
- Be creative and varied - don't repeat similar dishes
{_extra_ingredients_section(include_extra)}
{_meal_type_section(meal_type)}

IMPORTANT: Return ONLY valid JSON with no additional text.
"mealType" must be exactly one of "breakfast", "lunch", "dinner", "snack".
"difficulty" must be exactly one of "easy", "medium", "hard".

Recipe Structure (JSON format):
{{
  "recipes": [
    {{
      "id": "recipe-{seed}-1",
      "name": "Authentic Indian Dish Name",
      "mealType": "{example_meal_type}",
      "cookingTime": 25,
      "prepTime": 10,
      "servings": 4,
      "difficulty": "easy",
      "ingredients": ["Ingredient 1 - 1 cup", "Ingredient 2 - 2 tablespoons"],
      "steps": ["Heat oil in pan", "Add cumin seeds", "Add onions and cook"],
      "description": "Traditional Indian dish description",
      "needsExtraIngredients": false,
      "extraIngredients": []
    }}
  ]
}}

CRITICAL: Return ONLY the JSON object above with {count} recipes (ids "recipe-{seed}-1" to "recipe-{seed}-{count}"). No explanations or additional text.
"""


def _meal_example(cooking_time: int) -> str:
    return (
        "{\n"
        '        "name": "Dish Name",\n'
        '        "description": "Simple description",\n'
        f'        "cookingTime": {cooking_time},\n'
        '        "ingredients": ["Item 1 - 1 cup", "Item 2 - 2 spoons"],\n'
        '        "steps": ["Step 1", "Step 2", "Step 3"]\n'
        "      }"
    )


def build_day_plan_prompt(ingredients: list[str], count: int = 3, seed: Optional[int] = None) -> str:
    """Render the day-plan prompt.

    Args:
        ingredients: Canonical ingredient names from the normalizer.
        count: Number of plan variants to request (default: 3).
        seed: Value embedded in the example plan id. Random when omitted.

    Returns:
        str: Complete prompt text.
    """
    seed = _new_seed() if seed is None else seed
    ingredient_list = ", ".join(ingredients)

    return f"""
Create {count} different Indian meal plans for one day using these ingredients: "{ingredient_list}".

IMPORTANT RULES:
- Create {count} DIFFERENT complete day plans
- Use VERY SIMPLE English words
- Each meal should have 5-7 easy steps
- Use simple measurements like "1 cup", "2 spoons"
- Give proper Indian dish names
- Make each plan unique and different

Your response must be valid JSON:
{{
  "plans": [
    {{
      "id": "plan-{seed}-1",
      "planName": "Comfort Food Plan",
      "planDescription": "Hearty and satisfying meals",
      "breakfast": {_meal_example(20)},
      "lunch": {_meal_example(25)},
      "dinner": {_meal_example(30)},
      "totalCookingTime": 75,
      "shoppingList": ["Extra item 1", "Extra item 2"]
    }}
  ]
}}

CRITICAL: Return {count} plans in the "plans" array, with different dishes in each plan. No explanations or additional text.
"""
