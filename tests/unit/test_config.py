"""Unit tests for configuration management."""

import pytest

from src.utils.config import Config


CONFIG_ENV_VARS = [
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "ASSISTANT_MODEL",
    "PORT",
    "RECIPE_COUNT",
    "MIN_MODEL_RECIPES",
    "MIN_FILTERED_RECIPES",
    "RECIPE_TEMPERATURE",
    "RECIPE_MAX_OUTPUT_TOKENS",
    "DAY_PLAN_TEMPERATURE",
    "DAY_PLAN_MAX_OUTPUT_TOKENS",
    "ASSISTANT_TEMPERATURE",
    "ASSISTANT_MAX_OUTPUT_TOKENS",
    "ANALYTICS_CAPACITY",
    "ANALYTICS_WINDOW_HOURS",
    "RESPONSE_FLOOR_SECONDS",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every configuration variable from the environment."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfigInitialization:
    """Test Config class initialization and environment variable loading."""

    def test_config_loads_default_values(self, clean_env):
        """Test that Config uses default values when env vars not set."""
        config = Config()

        assert config.GEMINI_API_KEY == ""
        assert config.GEMINI_MODEL == "gemini-2.5-flash"
        assert config.PORT == 7777
        assert config.RECIPE_COUNT == 6
        assert config.MIN_MODEL_RECIPES == 3
        assert config.MIN_FILTERED_RECIPES == 5
        assert config.RECIPE_TEMPERATURE == 0.9
        assert config.RECIPE_MAX_OUTPUT_TOKENS == 8000
        assert config.DAY_PLAN_TEMPERATURE == 0.7
        assert config.DAY_PLAN_MAX_OUTPUT_TOKENS == 6000
        assert config.ASSISTANT_TEMPERATURE == 0.7
        assert config.ANALYTICS_CAPACITY == 1000
        assert config.ANALYTICS_WINDOW_HOURS == 24
        assert config.RESPONSE_FLOOR_SECONDS == 0

    def test_config_loads_from_environment(self, clean_env):
        """Test that Config loads values from environment variables."""
        clean_env.setenv("GEMINI_API_KEY", "test_gemini_key")
        clean_env.setenv("GEMINI_MODEL", "custom-model")
        clean_env.setenv("PORT", "8888")
        clean_env.setenv("RECIPE_COUNT", "8")
        clean_env.setenv("RESPONSE_FLOOR_SECONDS", "1.5")

        config = Config()

        assert config.GEMINI_API_KEY == "test_gemini_key"
        assert config.GEMINI_MODEL == "custom-model"
        assert config.PORT == 8888
        assert config.RECIPE_COUNT == 8
        assert config.RESPONSE_FLOOR_SECONDS == 1.5

    def test_config_converts_numeric_types(self, clean_env):
        """Test that numeric environment variables are converted."""
        clean_env.setenv("ANALYTICS_CAPACITY", "50")
        clean_env.setenv("RECIPE_TEMPERATURE", "1")

        config = Config()

        assert isinstance(config.ANALYTICS_CAPACITY, int)
        assert isinstance(config.RECIPE_TEMPERATURE, float)


class TestConfigValidation:
    """Test Config validation logic."""

    def test_validate_passes_without_api_key(self, clean_env):
        """Test that a missing API key is not a startup error."""
        Config().validate()

    @pytest.mark.parametrize(
        "name,value",
        [
            ("RECIPE_COUNT", "0"),
            ("MIN_MODEL_RECIPES", "10"),
            ("MIN_FILTERED_RECIPES", "0"),
            ("RECIPE_TEMPERATURE", "3.0"),
            ("ASSISTANT_TEMPERATURE", "-0.1"),
            ("DAY_PLAN_MAX_OUTPUT_TOKENS", "100"),
            ("ANALYTICS_CAPACITY", "0"),
            ("ANALYTICS_WINDOW_HOURS", "0"),
            ("RESPONSE_FLOOR_SECONDS", "-1"),
        ],
    )
    def test_validate_rejects_out_of_range(self, clean_env, name, value):
        """Test that out-of-range values raise ValueError naming the setting."""
        clean_env.setenv(name, value)
        config = Config()

        with pytest.raises(ValueError, match=name):
            config.validate()
