"""Recipe search and day plan pipeline.

Normalizer → Prompt Builder → Model Client → Extractor → Cleaner → Validator,
with the fallback generator substituted at any failing stage. Every stage
transition is recorded on the injected EventTracker; no failure ever reaches
the caller, which always receives a well-formed result list.

One model call per request, never retried.
"""

import time
from typing import Any, Optional

from src.analytics.tracker import EventTracker
from src.clients.gemini import GeminiClient
from src.fallback.generator import FallbackGenerator
from src.models.models import MEAL_TYPES, AnalyticsSummary, DayPlan, EventKind, Recipe
from src.parsing.cleaner import DAY_PLAN_COUNT, clean_day_plan_data, clean_recipe_data, pick_enum
from src.parsing.extractor import extract_json
from src.parsing.ingredients import normalize_ingredients
from src.parsing.validator import validate_day_plans, validate_recipes
from src.prompts.prompts import (
    DAY_PLAN_SYSTEM_INSTRUCTION,
    RECIPE_SYSTEM_INSTRUCTION,
    build_day_plan_prompt,
    build_recipe_prompt,
)
from src.utils.config import Config, config
from src.utils.errors import (
    ExtractionError,
    MissingRecipesError,
    ModelClientError,
    SchemaValidationError,
    safe_execute_sync,
)
from src.utils.logger import logger


RECIPE_FLOW = "recipe_search"
DAY_PLAN_FLOW = "day_plan"


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class RecipePipeline:
    """Runs recipe search and day plan requests end to end.

    Args:
        client: Model client exposing `async generate(prompt, system_instruction,
            max_output_tokens, temperature) -> str`.
        tracker: Analytics store receiving every stage event.
        generator: Fallback generator. A fresh one is created when omitted.
        settings: Configuration values. Defaults to the module-level config.
    """

    def __init__(
        self,
        client: GeminiClient,
        tracker: EventTracker,
        generator: Optional[FallbackGenerator] = None,
        settings: Optional[Config] = None,
    ) -> None:
        self.client = client
        self.tracker = tracker
        self.generator = generator or FallbackGenerator()
        self.settings = settings or config

    def _track(self, kind: EventKind, flow: str, **details: Any) -> None:
        self.tracker.record(kind, {"flow": flow, **details})

    def _safe_normalize(self, ingredients_text: str) -> list[str]:
        return safe_execute_sync(
            lambda: normalize_ingredients(ingredients_text),
            "Ingredient normalization",
            default_return=[],
        )

    def _last_resort_recipes(
        self,
        ingredients_text: str,
        include_extra: bool,
        meal_type: Optional[str],
        count: int,
    ) -> list[Recipe]:
        """Fallback recipes after an unexpected failure, retried on filler ingredients only."""
        try:
            return self.generator.generate_recipes(
                self._safe_normalize(ingredients_text), include_extra, meal_type, count=count
            )
        except Exception as e:
            logger.error(f"Fallback recipe generation failed, retrying with defaults: {e}", exc_info=True)
            return self.generator.generate_recipes([], count=count)

    def _last_resort_day_plans(self, ingredients_text: str) -> list[DayPlan]:
        try:
            return self.generator.generate_day_plans(self._safe_normalize(ingredients_text))
        except Exception as e:
            logger.error(f"Fallback day plan generation failed, retrying with defaults: {e}", exc_info=True)
            return self.generator.generate_day_plans([])

    # ------------------------------------------------------------------
    # Shared model stages
    # ------------------------------------------------------------------

    async def _call_model(
        self,
        flow: str,
        prompt: str,
        system_instruction: str,
        max_output_tokens: int,
        temperature: float,
    ) -> Optional[str]:
        model = getattr(self.client, "model", None)
        started = time.perf_counter()
        try:
            text = await self.client.generate(prompt, system_instruction, max_output_tokens, temperature)
        except ModelClientError as e:
            logger.warning(f"Model call failed ({flow}): {e}")
            self._track(
                EventKind.MODEL_CALL_FAILURE,
                flow,
                error=str(e),
                responseTimeMs=_elapsed_ms(started),
                model=model,
            )
            return None

        self._track(
            EventKind.MODEL_CALL_SUCCESS,
            flow,
            responseTimeMs=_elapsed_ms(started),
            responseLength=len(text),
            model=model,
            maxOutputTokens=max_output_tokens,
            temperature=temperature,
        )
        return text

    def _extract(self, flow: str, text: str) -> Optional[dict[str, Any]]:
        try:
            parsed = extract_json(text)
        except ExtractionError as e:
            logger.warning(f"JSON extraction failed ({flow}, {e.reason}): {e}")
            self._track(
                EventKind.PARSE_FAILURE,
                flow,
                reason=e.reason,
                error=str(e),
                responseLength=len(text),
                responsePreview=text[:200],
            )
            return None

        self._track(EventKind.PARSE_SUCCESS, flow, responseLength=len(text), keys=sorted(parsed)[:10])
        return parsed

    # ------------------------------------------------------------------
    # Recipe search
    # ------------------------------------------------------------------

    async def _recipes_from_model(
        self,
        ingredients: list[str],
        include_extra: bool,
        meal_type_filter: Optional[str],
    ) -> Optional[list[Recipe]]:
        """Model path for recipe search. Returns None when any stage fails."""
        prompt = build_recipe_prompt(ingredients, include_extra, meal_type_filter, count=self.settings.RECIPE_COUNT)
        text = await self._call_model(
            RECIPE_FLOW,
            prompt,
            RECIPE_SYSTEM_INSTRUCTION,
            self.settings.RECIPE_MAX_OUTPUT_TOKENS,
            self.settings.RECIPE_TEMPERATURE,
        )
        if text is None:
            return None

        parsed = self._extract(RECIPE_FLOW, text)
        if parsed is None:
            return None

        try:
            cleaned = clean_recipe_data(parsed)
            recipe_count = len(cleaned["recipes"])
            if recipe_count < self.settings.MIN_MODEL_RECIPES:
                logger.warning(f"Model returned only {recipe_count} usable recipes")
                self._track(
                    EventKind.VALIDATION_FAILURE,
                    RECIPE_FLOW,
                    reason="insufficient_recipes",
                    recipeCount=recipe_count,
                )
                return None
            recipes = validate_recipes(cleaned)
        except (MissingRecipesError, SchemaValidationError) as e:
            logger.warning(f"Recipe validation failed ({e.reason}): {e}")
            self._track(EventKind.VALIDATION_FAILURE, RECIPE_FLOW, reason=e.reason, error=str(e)[:500])
            return None

        self._track(EventKind.VALIDATION_SUCCESS, RECIPE_FLOW, recipeCount=len(recipes))
        return recipes

    def _filter_by_meal_type(
        self,
        recipes: list[Recipe],
        ingredients: list[str],
        include_extra: bool,
        meal_type: str,
    ) -> list[Recipe]:
        """Keep one meal type, backfilling locally when too few remain."""
        filtered = [recipe for recipe in recipes if recipe.meal_type == meal_type]
        needed = self.settings.MIN_FILTERED_RECIPES - len(filtered)
        if needed <= 0:
            return filtered

        additional = self.generator.generate_recipes(ingredients, include_extra, meal_type, count=needed)
        self._track(
            EventKind.FALLBACK_USED,
            RECIPE_FLOW,
            reason="backfill",
            mealType=meal_type,
            originalCount=len(filtered),
            additionalCount=len(additional),
        )
        return filtered + additional

    async def search_recipes(
        self,
        ingredients_text: str,
        include_extra: bool = False,
        meal_type_filter: Optional[str] = None,
    ) -> list[Recipe]:
        """Find recipes for free-text ingredients.

        Args:
            ingredients_text: Raw user input (English or transliterated Hindi).
            include_extra: Allow recipes that need ingredients the user lacks.
            meal_type_filter: Only return recipes of this meal category.
                Matched case-insensitively; unknown values mean no filter.

        Returns:
            Between 1 and RECIPE_COUNT recipes. Never raises.
        """
        started = time.perf_counter()
        limit = self.settings.RECIPE_COUNT
        meal_type_filter = pick_enum(meal_type_filter, MEAL_TYPES, None)
        self._track(
            EventKind.REQUEST_STARTED,
            RECIPE_FLOW,
            ingredients=(ingredients_text or "")[:100],
            includeExtra=include_extra,
            mealTypeFilter=meal_type_filter,
        )

        try:
            ingredients = normalize_ingredients(ingredients_text)
            recipes = await self._recipes_from_model(ingredients, include_extra, meal_type_filter)

            if recipes is None:
                source = "fallback"
                self._track(
                    EventKind.FALLBACK_USED,
                    RECIPE_FLOW,
                    reason="model_path_failed",
                    ingredientCount=len(ingredients),
                    ingredients=ingredients[:5],
                    includeExtra=include_extra,
                    targetCount=limit,
                )
                recipes = self.generator.generate_recipes(ingredients, include_extra, meal_type_filter, count=limit)
            else:
                source = "model"
                if meal_type_filter:
                    recipes = self._filter_by_meal_type(recipes, ingredients, include_extra, meal_type_filter)

            result = recipes[:limit]
            self._track(
                EventKind.COMPLETED,
                RECIPE_FLOW,
                source=source,
                finalRecipeCount=len(result),
                totalTimeMs=_elapsed_ms(started),
                filtered=bool(meal_type_filter),
            )
            return result

        except Exception as e:
            logger.error(f"Recipe search failed, using fallback: {e}", exc_info=True)
            self._track(EventKind.ERROR, RECIPE_FLOW, error=str(e), totalTimeMs=_elapsed_ms(started))
            return self._last_resort_recipes(ingredients_text, include_extra, meal_type_filter, limit)

    # ------------------------------------------------------------------
    # Day plans
    # ------------------------------------------------------------------

    async def _day_plans_from_model(self, ingredients: list[str]) -> Optional[list[DayPlan]]:
        """Model path for day plans. Returns None when any stage fails."""
        prompt = build_day_plan_prompt(ingredients, count=DAY_PLAN_COUNT)
        text = await self._call_model(
            DAY_PLAN_FLOW,
            prompt,
            DAY_PLAN_SYSTEM_INSTRUCTION,
            self.settings.DAY_PLAN_MAX_OUTPUT_TOKENS,
            self.settings.DAY_PLAN_TEMPERATURE,
        )
        if text is None:
            return None

        parsed = self._extract(DAY_PLAN_FLOW, text)
        if parsed is None:
            return None

        try:
            plans = validate_day_plans(clean_day_plan_data(parsed))
        except SchemaValidationError as e:
            logger.warning(f"Day plan validation failed: {e}")
            self._track(EventKind.VALIDATION_FAILURE, DAY_PLAN_FLOW, reason=e.reason, error=str(e)[:500])
            return None

        self._track(EventKind.VALIDATION_SUCCESS, DAY_PLAN_FLOW, planCount=len(plans))
        return plans

    async def generate_day_plan(self, ingredients_text: str) -> list[DayPlan]:
        """Create exactly three day plans for free-text ingredients. Never raises."""
        started = time.perf_counter()
        self._track(EventKind.REQUEST_STARTED, DAY_PLAN_FLOW, ingredients=(ingredients_text or "")[:100])

        try:
            ingredients = normalize_ingredients(ingredients_text)
            plans = await self._day_plans_from_model(ingredients)

            source = "model"
            if plans is None:
                source = "fallback"
                self._track(
                    EventKind.FALLBACK_USED,
                    DAY_PLAN_FLOW,
                    reason="model_path_failed",
                    ingredientCount=len(ingredients),
                )
                plans = self.generator.generate_day_plans(ingredients)

            self._track(
                EventKind.COMPLETED,
                DAY_PLAN_FLOW,
                source=source,
                planCount=len(plans),
                totalTimeMs=_elapsed_ms(started),
            )
            return plans

        except Exception as e:
            logger.error(f"Day plan generation failed, using fallback: {e}", exc_info=True)
            self._track(EventKind.ERROR, DAY_PLAN_FLOW, error=str(e), totalTimeMs=_elapsed_ms(started))
            return self._last_resort_day_plans(ingredients_text)

    # ------------------------------------------------------------------
    # Analytics
    # ------------------------------------------------------------------

    def get_analytics_summary(self) -> AnalyticsSummary:
        return self.tracker.summarize()
