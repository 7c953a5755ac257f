"""Configuration management for Dinezzy Recipe Service.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Gemini API Key: optional at startup, the fallback generator serves requests without it
        self.GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
        # Model used for recipe search and day plan generation
        # Default: gemini-2.5-flash (fast, cost-effective for JSON generation)
        self.GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        # Model used by the free-form cooking assistant
        self.ASSISTANT_MODEL: str = os.getenv("ASSISTANT_MODEL", "gemini-2.5-flash")
        # Server Port
        self.PORT: int = int(os.getenv("PORT", "7777"))

        # Recipe Search Settings
        # RECIPE_COUNT: number of recipes requested from the model and returned at most. Default: 6
        self.RECIPE_COUNT: int = int(os.getenv("RECIPE_COUNT", "6"))
        # MIN_MODEL_RECIPES: fewer valid recipes than this from the model triggers the fallback. Default: 3
        self.MIN_MODEL_RECIPES: int = int(os.getenv("MIN_MODEL_RECIPES", "3"))
        # MIN_FILTERED_RECIPES: meal-type filtering below this count is backfilled locally. Default: 5
        self.MIN_FILTERED_RECIPES: int = int(os.getenv("MIN_FILTERED_RECIPES", "5"))
        # Higher temperature keeps repeated searches varied
        self.RECIPE_TEMPERATURE: float = float(os.getenv("RECIPE_TEMPERATURE", "0.9"))
        self.RECIPE_MAX_OUTPUT_TOKENS: int = int(os.getenv("RECIPE_MAX_OUTPUT_TOKENS", "8000"))

        # Day Plan Settings
        self.DAY_PLAN_TEMPERATURE: float = float(os.getenv("DAY_PLAN_TEMPERATURE", "0.7"))
        self.DAY_PLAN_MAX_OUTPUT_TOKENS: int = int(os.getenv("DAY_PLAN_MAX_OUTPUT_TOKENS", "6000"))

        # Cooking Assistant Settings
        self.ASSISTANT_TEMPERATURE: float = float(os.getenv("ASSISTANT_TEMPERATURE", "0.7"))
        self.ASSISTANT_MAX_OUTPUT_TOKENS: int = int(os.getenv("ASSISTANT_MAX_OUTPUT_TOKENS", "8000"))

        # Analytics Settings
        # ANALYTICS_CAPACITY: most recent events kept in memory. Default: 1000
        self.ANALYTICS_CAPACITY: int = int(os.getenv("ANALYTICS_CAPACITY", "1000"))
        # ANALYTICS_WINDOW_HOURS: summary window for per-event counts. Default: 24
        self.ANALYTICS_WINDOW_HOURS: int = int(os.getenv("ANALYTICS_WINDOW_HOURS", "24"))

        # Response Floor: minimum seconds an API response takes (paces the loading animation).
        # Runs concurrently with the pipeline, so it never adds to real latency. Default: 0 (disabled)
        self.RESPONSE_FLOOR_SECONDS: float = float(os.getenv("RESPONSE_FLOOR_SECONDS", "0"))

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If any value is out of its allowed range.
        """
        if not (1 <= self.RECIPE_COUNT <= 20):
            raise ValueError(f"RECIPE_COUNT must be between 1 and 20, got: {self.RECIPE_COUNT}")
        if not (1 <= self.MIN_MODEL_RECIPES <= self.RECIPE_COUNT):
            raise ValueError(
                f"MIN_MODEL_RECIPES must be between 1 and RECIPE_COUNT, got: {self.MIN_MODEL_RECIPES}"
            )
        if not (1 <= self.MIN_FILTERED_RECIPES <= self.RECIPE_COUNT):
            raise ValueError(
                f"MIN_FILTERED_RECIPES must be between 1 and RECIPE_COUNT, got: {self.MIN_FILTERED_RECIPES}"
            )
        for name in ("RECIPE_TEMPERATURE", "DAY_PLAN_TEMPERATURE", "ASSISTANT_TEMPERATURE"):
            value = getattr(self, name)
            if not (0.0 <= value <= 2.0):
                raise ValueError(f"{name} must be between 0.0 and 2.0, got: {value}")
        for name in ("RECIPE_MAX_OUTPUT_TOKENS", "DAY_PLAN_MAX_OUTPUT_TOKENS", "ASSISTANT_MAX_OUTPUT_TOKENS"):
            value = getattr(self, name)
            if value < 512:
                raise ValueError(f"{name} must be at least 512, got: {value}")
        if self.ANALYTICS_CAPACITY < 1:
            raise ValueError(f"ANALYTICS_CAPACITY must be at least 1, got: {self.ANALYTICS_CAPACITY}")
        if self.ANALYTICS_WINDOW_HOURS < 1:
            raise ValueError(f"ANALYTICS_WINDOW_HOURS must be at least 1, got: {self.ANALYTICS_WINDOW_HOURS}")
        if self.RESPONSE_FLOOR_SECONDS < 0:
            raise ValueError(f"RESPONSE_FLOOR_SECONDS must be >= 0, got: {self.RESPONSE_FLOOR_SECONDS}")


# Create module-level config instance and validate immediately
config = Config()
config.validate()
