"""Unit tests for prompt construction."""

from unittest.mock import patch

from src.parsing.cleaner import clean_day_plan_data, clean_recipe_data
from src.parsing.extractor import extract_json
from src.parsing.validator import validate_day_plans, validate_recipes
from src.prompts.prompts import ASSISTANT_INSTRUCTIONS, build_day_plan_prompt, build_recipe_prompt


class TestRecipePrompt:
    """Test the recipe search prompt."""

    def test_ingredients_and_count_embedded(self):
        """Test that ingredients and recipe count appear in the prompt."""
        prompt = build_recipe_prompt(["Potato", "Onion"], count=6, seed=42)

        assert '"Potato, Onion"' in prompt
        assert "Generate EXACTLY 6 different recipes" in prompt
        assert '"id": "recipe-42-1"' in prompt

    def test_seed_randomized_when_omitted(self):
        """Test that a random seed is drawn for every prompt."""
        with patch("src.prompts.prompts.random.randint", return_value=1234):
            prompt = build_recipe_prompt(["Rice"])

        assert "recipe-1234-1" in prompt

    def test_extra_ingredients_rule(self):
        """Test the two variants of the extra-ingredients rule."""
        strict = build_recipe_prompt(["Rice"], include_extra=False, seed=1)
        relaxed = build_recipe_prompt(["Rice"], include_extra=True, seed=1)

        assert "Use ONLY the listed ingredients" in strict
        assert "You MAY add a few extra ingredients" in relaxed

    def test_meal_type_rule(self):
        """Test that a meal type filter is stated in the prompt."""
        prompt = build_recipe_prompt(["Rice"], meal_type="dinner", seed=1)

        assert "MUST be a dinner dish" in prompt
        assert '"mealType": "dinner"' in prompt

    def test_example_shape_passes_pipeline(self):
        """Test that the JSON example in the prompt survives extraction, cleaning and validation."""
        prompt = build_recipe_prompt(["Potato"], seed=5)

        recipes = validate_recipes(clean_recipe_data(extract_json(prompt)))

        assert len(recipes) == 1
        assert recipes[0].id == "recipe-5-1"


class TestDayPlanPrompt:
    """Test the day plan prompt."""

    def test_ingredients_and_plan_count(self):
        """Test that ingredients and the plan count appear in the prompt."""
        prompt = build_day_plan_prompt(["Rice", "Lentils"], seed=7)

        assert '"Rice, Lentils"' in prompt
        assert "Create 3 DIFFERENT complete day plans" in prompt
        assert '"id": "plan-7-1"' in prompt

    def test_example_shape_passes_pipeline(self):
        """Test that the JSON example in the prompt cleans into three valid plans."""
        plans = validate_day_plans(clean_day_plan_data(extract_json(build_day_plan_prompt(["Rice"], seed=1))))

        assert len(plans) == 3
        assert plans[0].breakfast.cooking_time == 20


class TestAssistantInstructions:
    """Test the cooking assistant instructions."""

    def test_instructions_focus_on_indian_cooking(self):
        """Test that the assistant is scoped to Indian cuisine."""
        assert any("Indian cuisine" in line for line in ASSISTANT_INSTRUCTIONS)
