"""Shared fixtures for unit tests."""

import json
import random
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.analytics.tracker import EventTracker
from src.fallback.generator import FallbackGenerator


@pytest.fixture
def tracker():
    """Isolated tracker so tests never share analytics state."""
    return EventTracker(capacity=1000)


@pytest.fixture
def generator():
    """Fallback generator with a seeded random source."""
    return FallbackGenerator(rng=random.Random(42))


@pytest.fixture
def model_client():
    """Stand-in for GeminiClient with an awaitable generate()."""
    client = MagicMock()
    client.model = "gemini-test"
    client.generate = AsyncMock()
    return client


@pytest.fixture
def recipe_payload():
    """Factory for a well-formed model recipe object (camelCase keys)."""

    def _make(index: int = 1, meal_type: str = "lunch", **overrides):
        payload = {
            "id": f"recipe-{index}",
            "name": f"Test Dish {index}",
            "mealType": meal_type,
            "cookingTime": 25,
            "prepTime": 10,
            "servings": 4,
            "difficulty": "easy",
            "ingredients": ["Potato - 2 cups", "Onion - 1 piece"],
            "steps": ["Heat oil", "Add onions", "Add potatoes", "Cook well"],
            "description": "Home style dish",
            "needsExtraIngredients": False,
            "extraIngredients": [],
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def recipe_response(recipe_payload):
    """Factory for raw model text wrapping N recipes in prose."""

    def _make(count: int = 6, meal_types=None):
        meal_types = meal_types or ["lunch"] * count
        recipes = [recipe_payload(i + 1, meal_types[i]) for i in range(count)]
        return "Here are your recipes:\n" + json.dumps({"recipes": recipes}) + "\nEnjoy!"

    return _make


@pytest.fixture
def plan_payload():
    """Factory for a well-formed model day plan object."""

    def _make(name: str = "Comfort Food Plan"):
        def meal(dish: str, minutes: int):
            return {
                "name": dish,
                "description": "Simple dish",
                "cookingTime": minutes,
                "ingredients": ["Rice - 1 cup"],
                "steps": ["Wash", "Cook", "Serve"],
            }

        return {
            "planName": name,
            "planDescription": "Hearty and satisfying meals",
            "breakfast": meal("Poha", 20),
            "lunch": meal("Dal Chawal", 30),
            "dinner": meal("Aloo Gobi", 35),
            "totalCookingTime": 85,
            "shoppingList": ["Poha"],
        }

    return _make
