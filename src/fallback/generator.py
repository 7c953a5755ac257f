"""Local recipe and day plan synthesis used whenever the model path fails.

The generator works purely from the static knowledge base, so it never
raises and never needs the network. Structure is fixed (counts, step
minimums, time ranges per difficulty) while the content is sampled, which
keeps repeated fallback results varied.
"""

import random
import time
from typing import Optional

from src.fallback.knowledge import (
    COMMON_INGREDIENTS,
    COMPLEXITY_LEVELS,
    DISH_PREP_STEPS,
    DISH_STAPLES,
    DISHES_BY_INGREDIENT,
    EXTRA_INGREDIENTS,
    INGREDIENT_ALIASES,
    MEAL_TYPE_KEYWORDS,
    MIN_STEPS,
    REGIONAL_DISHES,
    STEP_TEMPLATES,
)
from src.models.models import DIFFICULTIES, MEAL_TYPES, DayPlan, Recipe
from src.parsing.cleaner import DAY_PLAN_COUNT, PLAN_LABELS, create_plan_variation, pick_enum
from src.parsing.ingredients import with_filler_ingredients
from src.utils.logger import logger


DEFAULT_RECIPE_COUNT = 6
DEFAULT_MAIN_INGREDIENT = "Mixed Vegetables"

# Longest ingredient text carried into dish names, descriptions and steps
MAX_INGREDIENT_LABEL = 60


def _title(text: str) -> str:
    return text[:1].upper() + text[1:]


def _clip(ingredient: str) -> str:
    return ingredient.strip()[:MAX_INGREDIENT_LABEL].strip() or DEFAULT_MAIN_INGREDIENT


def _matches(dish_name: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in dish_name for keyword in keywords)


class FallbackGenerator:
    """Deterministic-structure, randomized-content recipe synthesis.

    Args:
        rng: Random source. Pass a seeded `random.Random` for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Recipes
    # ------------------------------------------------------------------

    def candidate_dishes(self, ingredient: str) -> list[str]:
        """Dish names for an ingredient plus one random region, without duplicates."""
        key = ingredient.lower()
        key = INGREDIENT_ALIASES.get(key, key)
        dishes = DISHES_BY_INGREDIENT.get(key) or [f"{_title(ingredient)} Curry"]
        region = self.rng.choice(sorted(REGIONAL_DISHES))
        return list(dict.fromkeys([*dishes, *REGIONAL_DISHES[region]]))

    def pick_dish_name(self, candidates: list[str], used: set[str]) -> str:
        """Sample a name not in `used`; reuse one only when the pool is exhausted."""
        fresh = [name for name in candidates if name not in used]
        return self.rng.choice(fresh or candidates)

    def infer_meal_type(self, dish_name: str) -> str:
        """Meal type from dish-name keywords, else uniformly random."""
        for keywords, meal_types in MEAL_TYPE_KEYWORDS:
            if _matches(dish_name, keywords):
                return self.rng.choice(meal_types)
        return self.rng.choice(MEAL_TYPES)

    def build_ingredients(self, main_ingredient: str, dish_name: str) -> list[str]:
        ingredients = [f"{_title(main_ingredient)} - 2 cups"]
        for keywords, staples in DISH_STAPLES:
            if _matches(dish_name, keywords):
                ingredients.extend(staples)
        ingredients.extend(self.rng.sample(COMMON_INGREDIENTS, self.rng.randint(6, 8)))
        return ingredients

    def build_extra_ingredients(self) -> list[str]:
        return self.rng.sample(EXTRA_INGREDIENTS, self.rng.randint(2, 4))

    def build_steps(self, dish_name: str, main_ingredient: str, step_count: int) -> list[str]:
        steps = [template.format(ingredient=main_ingredient.lower()) for template in STEP_TEMPLATES]
        for keywords, prep_steps in DISH_PREP_STEPS:
            if _matches(dish_name, keywords):
                steps = [*prep_steps, *steps]
        return steps[: max(step_count, MIN_STEPS)]

    def create_recipe(
        self,
        main_ingredient: str,
        include_extra: bool,
        used_names: set[str],
        index: int,
        meal_type: Optional[str] = None,
        batch_stamp: Optional[int] = None,
    ) -> Recipe:
        """Synthesize one recipe around `main_ingredient`."""
        dish_name = self.pick_dish_name(self.candidate_dishes(main_ingredient), used_names)

        difficulty = self.rng.choice(DIFFICULTIES)
        complexity = COMPLEXITY_LEVELS[difficulty]
        extra_ingredients = self.build_extra_ingredients() if include_extra else []
        stamp = batch_stamp if batch_stamp is not None else int(time.time() * 1000)

        return Recipe(
            id=f"recipe-{stamp}-{index + 1}-{self.rng.randrange(10000)}",
            name=dish_name,
            meal_type=meal_type or self.infer_meal_type(dish_name),
            cooking_time=self.rng.randrange(*complexity["cook_time"]),
            prep_time=self.rng.randrange(*complexity["prep_time"]),
            servings=self.rng.randint(2, 5),
            difficulty=difficulty,
            ingredients=self.build_ingredients(main_ingredient, dish_name),
            steps=self.build_steps(dish_name, main_ingredient, self.rng.randrange(*complexity["steps"])),
            description=(
                f"Delicious {dish_name.lower()} made with {main_ingredient.lower()} "
                "and traditional Indian spices"
            ),
            needs_extra_ingredients=bool(extra_ingredients),
            extra_ingredients=extra_ingredients,
        )

    def generate_recipes(
        self,
        ingredients: list[str],
        include_extra: bool = False,
        meal_type: Optional[str] = None,
        count: int = DEFAULT_RECIPE_COUNT,
    ) -> list[Recipe]:
        """Generate exactly `count` recipes from the normalized ingredients.

        Args:
            ingredients: Canonical ingredient names from the normalizer. Main
                ingredients are taken round-robin from a per-batch shuffle.
            include_extra: Whether recipes may list extra ingredients to buy.
            meal_type: Force every recipe into this meal category. Unknown
                values are ignored.
            count: Number of recipes to return.

        Returns:
            `count` recipes, each with at least one ingredient and MIN_STEPS
            steps, with unique names wherever the candidate pools allow.
        """
        meal_type = pick_enum(meal_type, MEAL_TYPES, None)
        pool = [_clip(name) for name in with_filler_ingredients(ingredients)]
        self.rng.shuffle(pool)
        used_names: set[str] = set()
        batch_stamp = int(time.time() * 1000)
        recipes = []

        for index in range(count):
            main_ingredient = pool[index % len(pool)]
            recipe = self.create_recipe(main_ingredient, include_extra, used_names, index, meal_type, batch_stamp)
            used_names.add(recipe.name)
            recipes.append(recipe)

        logger.info(
            f"Fallback generated {len(recipes)} recipes from {len(ingredients)} ingredients "
            f"(meal_type={meal_type}, include_extra={include_extra})"
        )
        return recipes

    # ------------------------------------------------------------------
    # Day plans
    # ------------------------------------------------------------------

    def generate_day_plans(self, ingredients: list[str]) -> list[DayPlan]:
        """Generate the base day plan around the first ingredient plus its two variations."""
        main = _clip(ingredients[0]) if ingredients else DEFAULT_MAIN_INGREDIENT
        plan_name, plan_description = PLAN_LABELS[0]

        base_plan = {
            "breakfast": {
                "name": f"{main} Paratha",
                "description": "Easy stuffed bread",
                "cookingTime": 20,
                "ingredients": ["Wheat flour - 2 cups", f"{main} - 1 cup", "Salt - as needed", "Oil - for cooking"],
                "steps": ["Mix flour with water", "Make filling", "Roll and stuff", "Cook on pan", "Serve hot"],
            },
            "lunch": {
                "name": f"{main} Rice",
                "description": "Simple rice dish",
                "cookingTime": 25,
                "ingredients": ["Rice - 1 cup", f"{main} - 1 cup", "Onion - 1 piece", "Salt - as needed"],
                "steps": ["Wash rice", "Heat oil", "Add ingredients", "Cook together", "Serve hot"],
            },
            "dinner": {
                "name": f"{main} Curry",
                "description": "Tasty curry",
                "cookingTime": 30,
                "ingredients": [f"{main} - 2 cups", "Onion - 2 pieces", "Tomato - 2 pieces", "Spices - as needed"],
                "steps": [
                    "Heat oil",
                    "Add onions",
                    "Add tomatoes",
                    "Add spices",
                    f"Add {main.lower()}",
                    "Cook well",
                    "Serve",
                ],
            },
            "totalCookingTime": 75,
            "shoppingList": ["Wheat flour", "Rice", "Onions", "Tomatoes"],
            "planName": plan_name,
            "planDescription": plan_description,
        }

        plans = [base_plan] + [create_plan_variation(base_plan, index) for index in range(1, DAY_PLAN_COUNT)]
        logger.info(f"Fallback generated {len(plans)} day plans around {main!r}")
        return [DayPlan.model_validate(plan) for plan in plans]
