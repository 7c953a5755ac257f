"""Error types and error-handling helpers for the recipe pipeline.

Every pipeline error is recovered locally by the fallback generator; the
hierarchy exists so callers can log and track each failure kind separately.
"""

from typing import Optional

from src.utils.logger import logger


class PipelineError(Exception):
    """Base class for recoverable recipe pipeline failures."""


class ModelClientError(PipelineError):
    """The hosted model call failed (network, auth, rate limit or empty output)."""


class ExtractionError(PipelineError):
    """No usable JSON object could be extracted from the model output."""

    reason = "extraction_failed"


class JSONNotFoundError(ExtractionError):
    """The model output contains no balanced JSON object."""

    reason = "no_json_found"


class InvalidJSONError(ExtractionError):
    """A balanced JSON object was located but does not parse."""

    reason = "invalid_json"


class MissingRecipesError(PipelineError):
    """Parsed object has no `recipes` list; not repaired field by field."""

    reason = "missing_recipes_array"


class SchemaValidationError(PipelineError):
    """Cleaned data does not match the strict Recipe/DayPlan schema."""

    reason = "schema_mismatch"

    def __init__(self, message: str, errors: Optional[list] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


def _log_error(operation_name: str, exception: Exception, log_level: str = "warning") -> None:
    """Log error with appropriate level. Helper to reduce duplication.

    Args:
        operation_name: Description for logging
        exception: Exception that occurred
        log_level: Logging level ("debug", "warning", "error"). Default: "warning".
    """
    msg = f"{operation_name}: {exception}"
    if log_level == "debug":
        logger.debug(msg)
    elif log_level == "error":
        logger.error(msg)
    else:
        logger.warning(msg)


def safe_execute_sync(
    func,
    operation_name: str,
    log_level: str = "warning",
    default_return=None,
):
    """Safely execute sync operation with consistent error logging.

    Used for optional steps that should degrade gracefully, such as trying
    one candidate JSON fragment among several.

    Args:
        func: Callable to execute (no args).
        operation_name: Description for logging.
        log_level: Logging level ("debug", "warning", "error"). Default: "warning".
        default_return: Value to return on exception. Default: None (graceful degradation).

    Returns:
        Result of func if successful.
        default_return on exception.
    """
    try:
        return func()
    except Exception as e:
        _log_error(operation_name, e, log_level)
        return default_return
