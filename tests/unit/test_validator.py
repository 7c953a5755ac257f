"""Unit tests for strict schema validation of cleaned output."""

import pytest

from src.models.models import DayPlan, Recipe
from src.parsing.cleaner import clean_day_plan_data, clean_recipe_data
from src.parsing.validator import validate_day_plans, validate_recipes
from src.utils.errors import SchemaValidationError


class TestValidateRecipes:
    """Test the recipe batch gate."""

    def test_valid_batch(self, recipe_payload):
        """Test that well-formed recipes become Recipe models."""
        recipes = validate_recipes({"recipes": [recipe_payload(1), recipe_payload(2, "dinner")]})

        assert all(isinstance(recipe, Recipe) for recipe in recipes)
        assert recipes[1].meal_type == "dinner"
        assert recipes[0].cooking_time == 25

    def test_numeric_string_rejected(self, recipe_payload):
        """Test that strict mode does not coerce "30" into an integer."""
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_recipes({"recipes": [recipe_payload(cookingTime="30")]})

        assert exc_info.value.reason == "schema_mismatch"
        assert exc_info.value.errors

    def test_unknown_meal_type_rejected(self, recipe_payload):
        """Test that values outside the meal type set are rejected."""
        with pytest.raises(SchemaValidationError):
            validate_recipes({"recipes": [recipe_payload(mealType="brunch")]})

    def test_missing_name_rejected(self, recipe_payload):
        """Test that required fields the cleaner does not default still fail."""
        payload = recipe_payload()
        del payload["name"]

        with pytest.raises(SchemaValidationError):
            validate_recipes({"recipes": [payload]})

    def test_extras_without_flag_rejected(self, recipe_payload):
        """Test the extra-ingredients consistency rule."""
        with pytest.raises(SchemaValidationError):
            validate_recipes({"recipes": [recipe_payload(extraIngredients=["Paneer"])]})

    def test_non_serializable_payload_rejected(self, recipe_payload):
        """Test that payloads that cannot be represented as JSON are rejected."""
        with pytest.raises(SchemaValidationError):
            validate_recipes({"recipes": [recipe_payload(steps={"Boil", "Serve"})]})

    def test_cleaned_messy_output_passes(self, recipe_payload):
        """Test that the cleaner output always satisfies the validator for coercible input."""
        raw = {
            "recipes": [
                recipe_payload(1, mealType="lunch|dinner", cookingTime="20 mins", servings="two"),
                recipe_payload(2, difficulty="Hard", needsExtraIngredients=False, extraIngredients=["Cream"]),
            ]
        }

        recipes = validate_recipes(clean_recipe_data(raw))

        assert recipes[0].meal_type == "lunch"
        assert recipes[0].cooking_time == 20
        assert recipes[0].servings == 4
        assert recipes[1].difficulty == "hard"
        assert recipes[1].extra_ingredients == []


class TestValidateDayPlans:
    """Test the day plan gate."""

    def test_cleaned_plans_pass(self, plan_payload):
        """Test that three cleaned plans validate into DayPlan models."""
        plans = validate_day_plans(clean_day_plan_data(plan_payload()))

        assert len(plans) == 3
        assert all(isinstance(plan, DayPlan) for plan in plans)
        assert len({plan.plan_name for plan in plans}) == 3

    def test_wrong_count_rejected(self, plan_payload):
        """Test that anything but exactly three plans is rejected."""
        two = clean_day_plan_data(plan_payload())[:2]

        with pytest.raises(SchemaValidationError):
            validate_day_plans(two)

    def test_duplicate_names_rejected(self, plan_payload):
        """Test that plans must have distinct names."""
        plans = clean_day_plan_data(plan_payload())
        plans[2]["planName"] = plans[0]["planName"]

        with pytest.raises(SchemaValidationError):
            validate_day_plans(plans)

    def test_non_positive_meal_time_rejected(self, plan_payload):
        """Test that meal cooking time must be positive."""
        plans = clean_day_plan_data(plan_payload())
        plans[0]["lunch"]["cookingTime"] = 0

        with pytest.raises(SchemaValidationError):
            validate_day_plans(plans)
