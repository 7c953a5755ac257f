"""Strict schema validation for cleaned pipeline output.

Runs after the cleaner as a hard gate: no coercion, no partial acceptance.
Cleaned data is validated as JSON in Pydantic strict mode, so a string where
an integer belongs or an unknown enum value rejects the whole batch.
"""

import json
from typing import Any

from pydantic import ValidationError

from src.models.models import DayPlan, DayPlanBatch, Recipe, RecipeBatch
from src.utils.errors import SchemaValidationError


def _validate(model: type, payload: Any):
    try:
        return model.model_validate_json(json.dumps(payload), strict=True)
    except ValidationError as e:
        raise SchemaValidationError(f"{model.__name__} validation failed: {e}", e.errors()) from e
    except TypeError as e:
        # Payload is not JSON-serializable
        raise SchemaValidationError(f"{model.__name__} validation failed: {e}") from e


def validate_recipes(cleaned: dict[str, Any]) -> list[Recipe]:
    """Validate a cleaned recipe batch.

    Raises:
        SchemaValidationError: Any recipe does not match the Recipe schema.
    """
    return _validate(RecipeBatch, cleaned).recipes


def validate_day_plans(cleaned: list[dict[str, Any]]) -> list[DayPlan]:
    """Validate exactly three cleaned day plans with distinct names.

    Raises:
        SchemaValidationError: The plans do not match the DayPlan schema.
    """
    return _validate(DayPlanBatch, {"plans": cleaned}).plans
