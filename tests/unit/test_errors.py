"""Unit tests for error types and error-handling helpers."""

import pytest

from src.utils.errors import (
    InvalidJSONError,
    JSONNotFoundError,
    MissingRecipesError,
    ModelClientError,
    PipelineError,
    SchemaValidationError,
    safe_execute_sync,
)


class TestErrorHierarchy:
    """Test the pipeline exception types."""

    @pytest.mark.parametrize(
        "error_cls,reason",
        [
            (JSONNotFoundError, "no_json_found"),
            (InvalidJSONError, "invalid_json"),
            (MissingRecipesError, "missing_recipes_array"),
            (SchemaValidationError, "schema_mismatch"),
        ],
    )
    def test_reasons(self, error_cls, reason):
        """Test the analytics reason carried by each failure kind."""
        assert error_cls.reason == reason
        assert issubclass(error_cls, PipelineError)

    def test_model_client_error_is_pipeline_error(self):
        """Test that model failures share the pipeline base class."""
        assert issubclass(ModelClientError, PipelineError)

    def test_schema_error_keeps_details(self):
        """Test that validation details are preserved."""
        error = SchemaValidationError("bad", [{"loc": ("name",)}])

        assert str(error) == "bad"
        assert error.errors == [{"loc": ("name",)}]
        assert SchemaValidationError("bad").errors == []


class TestSafeExecuteSync:
    """Test the log-then-default helper."""

    def test_returns_result(self):
        """Test that successful calls pass their result through."""
        assert safe_execute_sync(lambda: 5, "Compute") == 5

    def test_returns_default_on_error(self):
        """Test that failures return the default value."""
        assert safe_execute_sync(lambda: 1 / 0, "Divide", default_return=0) == 0
