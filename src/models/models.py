"""Data models and schemas for Dinezzy Recipe Service.

Defines Pydantic models for request/response validation and domain objects.
All models use Pydantic v2 with camelCase aliases so API payloads keep the
shape the web client expects (`mealType`, `cookingTime`, ...), while Python
code uses snake_case attributes.

Domain models are validated in strict mode by the schema validator, which
rejects anything the cleaner did not already coerce into shape.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


MealType = Literal["breakfast", "lunch", "dinner", "snack"]
Difficulty = Literal["easy", "medium", "hard"]

MEAL_TYPES: tuple[str, ...] = get_args(MealType)
DIFFICULTIES: tuple[str, ...] = get_args(Difficulty)
DAY_PLAN_MEALS: tuple[str, ...] = ("breakfast", "lunch", "dinner")


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases and accepting either naming."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class Recipe(CamelModel):
    """A single dish suggestion.

    Built fresh per search, either from cleaned model output or from the
    fallback generator. Never persisted.
    """

    id: Annotated[str, Field(min_length=1, description="Identifier, unique within one result batch")]
    name: Annotated[str, Field(min_length=1, max_length=200, description="Dish name")]
    meal_type: Annotated[MealType, Field(description="Meal category")]
    cooking_time: Annotated[int, Field(gt=0, description="Cooking time in minutes")]
    prep_time: Annotated[int, Field(gt=0, description="Preparation time in minutes")] = 15
    servings: Annotated[int, Field(gt=0, description="Number of servings")] = 4
    difficulty: Annotated[Difficulty, Field(description="Difficulty level")]
    ingredients: Annotated[List[str], Field(description="Ingredients with quantities, in order")]
    steps: Annotated[List[str], Field(description="Cooking steps, in order")]
    description: Annotated[str, Field(description="Short dish description")]
    needs_extra_ingredients: Annotated[bool, Field(description="Whether extra ingredients are needed")] = False
    extra_ingredients: Annotated[
        List[str], Field(default_factory=list, description="Extra ingredients (empty unless needed)")
    ]

    @model_validator(mode="after")
    def validate_extra_ingredients(self) -> "Recipe":
        """Extra ingredients only make sense when the recipe says it needs them."""
        if self.extra_ingredients and not self.needs_extra_ingredients:
            raise ValueError("extraIngredients must be empty when needsExtraIngredients is false")
        return self


class RecipeBatch(CamelModel):
    """Envelope the model is asked to produce for recipe search."""

    recipes: List[Recipe]


class Meal(CamelModel):
    """One meal slot of a day plan."""

    name: Annotated[str, Field(min_length=1)]
    description: str
    cooking_time: Annotated[int, Field(gt=0)]
    ingredients: List[str]
    steps: List[str]


class DayPlan(CamelModel):
    """One full day's meal set: breakfast, lunch and dinner."""

    breakfast: Meal
    lunch: Meal
    dinner: Meal
    total_cooking_time: Annotated[int, Field(gt=0)]
    shopping_list: List[str]
    plan_name: Annotated[str, Field(min_length=1)]
    plan_description: str


class DayPlanBatch(CamelModel):
    """Exactly three day plans with distinct names."""

    plans: Annotated[List[DayPlan], Field(min_length=3, max_length=3)]

    @model_validator(mode="after")
    def validate_distinct_plan_names(self) -> "DayPlanBatch":
        """Plans must be distinguishable by name."""
        names = [plan.plan_name for plan in self.plans]
        if len(set(names)) != len(names):
            raise ValueError(f"Day plan names must be distinct, got: {names}")
        return self


class EventKind(str, Enum):
    """Closed set of pipeline events tracked by analytics."""

    REQUEST_STARTED = "request_started"
    MODEL_CALL_SUCCESS = "model_call_success"
    MODEL_CALL_FAILURE = "model_call_failure"
    PARSE_SUCCESS = "parse_success"
    PARSE_FAILURE = "parse_failure"
    VALIDATION_SUCCESS = "validation_success"
    VALIDATION_FAILURE = "validation_failure"
    FALLBACK_USED = "fallback_used"
    COMPLETED = "completed"
    ERROR = "error"


class AnalyticsEvent(CamelModel):
    """A tracked pipeline occurrence."""

    timestamp: datetime
    event: EventKind
    details: dict[str, Any] = Field(default_factory=dict)
    session_id: str


class AnalyticsSummary(CamelModel):
    """Aggregate view over the recent analytics events."""

    total_requests: int
    model_successes: int
    model_failures: int
    parse_failures: int
    validation_failures: int
    fallback_used: int
    errors: int
    model_success_rate: Annotated[str, Field(description="Percentage string, e.g. '83.33%'")]
    fallback_rate: Annotated[str, Field(description="Percentage string, e.g. '16.67%'")]
    last_24_hour_events: Annotated[dict[str, int], Field(alias="last24HourEvents")]
    all_time_events: int


class RecipeSearchRequest(CamelModel):
    """Input schema for recipe search."""

    ingredients: Annotated[
        str,
        Field(min_length=1, max_length=1000, description="Free-text ingredients, English or transliterated Hindi"),
    ]
    include_extra: Annotated[bool, Field(description="Allow recipes that need extra ingredients")] = False
    meal_type: Annotated[Optional[MealType], Field(description="Only return this meal category")] = None


class DayPlanRequest(CamelModel):
    """Input schema for day plan generation."""

    ingredients: Annotated[str, Field(min_length=1, max_length=1000)]


class AssistantQuery(CamelModel):
    """Free-form question for the cooking assistant."""

    prompt: Annotated[str, Field(min_length=1, max_length=4000)]


class AssistantReply(CamelModel):
    """Cooking assistant answer. Failures are reported, never raised."""

    success: bool
    text: str
    response_time_ms: Optional[int] = None
    model: Optional[str] = None
    error: Optional[str] = None
