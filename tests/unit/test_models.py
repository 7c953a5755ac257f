"""Unit tests for Pydantic models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from src.models.models import (
    AnalyticsEvent,
    AssistantReply,
    EventKind,
    Recipe,
    RecipeSearchRequest,
)


class TestRecipe:
    """Test the Recipe domain model."""

    def test_snake_case_and_camel_case_both_accepted(self, recipe_payload):
        """Test that models populate from aliases and field names alike."""
        from_alias = Recipe.model_validate(recipe_payload())
        from_name = Recipe(
            id="r1",
            name="Dal Tadka",
            meal_type="dinner",
            cooking_time=30,
            difficulty="medium",
            ingredients=["Dal - 1 cup"],
            steps=["Boil dal"],
            description="Tempered lentils",
        )

        assert from_alias.meal_type == "lunch"
        assert from_name.prep_time == 15
        assert from_name.servings == 4
        assert from_name.needs_extra_ingredients is False
        assert from_name.extra_ingredients == []

    def test_dump_uses_camel_case(self, recipe_payload):
        """Test that serialization by alias matches the API payload shape."""
        dumped = Recipe.model_validate(recipe_payload()).model_dump(by_alias=True)

        assert "mealType" in dumped
        assert "needsExtraIngredients" in dumped
        assert "meal_type" not in dumped

    def test_non_positive_times_rejected(self, recipe_payload):
        """Test that cooking time must be a positive integer."""
        with pytest.raises(ValidationError):
            Recipe.model_validate(recipe_payload(cookingTime=0))


class TestRequestModels:
    """Test API request schemas."""

    def test_search_request_defaults(self):
        """Test default values for optional search fields."""
        request = RecipeSearchRequest.model_validate({"ingredients": "aloo, pyaz"})

        assert request.include_extra is False
        assert request.meal_type is None

    def test_search_request_rejects_blank_ingredients(self):
        """Test that whitespace-only ingredient text is rejected."""
        with pytest.raises(ValidationError):
            RecipeSearchRequest.model_validate({"ingredients": "   "})

    def test_search_request_rejects_unknown_meal_type(self):
        """Test that meal type must be one of the four categories."""
        with pytest.raises(ValidationError):
            RecipeSearchRequest.model_validate({"ingredients": "aloo", "mealType": "brunch"})


class TestAnalyticsModels:
    """Test analytics and assistant models."""

    def test_event_kind_values(self):
        """Test that event kinds serialize to their wire names."""
        event = AnalyticsEvent(
            timestamp=datetime.now(timezone.utc),
            event=EventKind.FALLBACK_USED,
            session_id="session-1",
        )

        dumped = event.model_dump(by_alias=True, mode="json")

        assert dumped["event"] == "fallback_used"
        assert dumped["sessionId"] == "session-1"
        assert dumped["details"] == {}

    def test_assistant_reply_optional_fields(self):
        """Test that an assistant reply needs only success and text."""
        reply = AssistantReply(success=True, text="Use ghee")

        assert reply.model_dump(by_alias=True)["responseTimeMs"] is None
