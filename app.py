"""AgentOS Application - Dinezzy Recipe Service.

Single entry point for the recipe discovery service:
- Builds the recipe pipeline (Gemini client, event tracker, fallback generator)
- Configures the cooking assistant Agno Agent
- Mounts the recipe/day-plan/analytics routes on a FastAPI base app
- Serves REST API and the AgentOS endpoints for the assistant

Run with: python app.py
"""

from agno.os import AgentOS
from fastapi import FastAPI

from src.analytics.tracker import tracker
from src.api.routes import router
from src.clients.gemini import GeminiClient
from src.fallback.generator import FallbackGenerator
from src.services.assistant import create_assistant_agent
from src.services.pipeline import RecipePipeline
from src.utils.config import config
from src.utils.logger import logger


logger.info("=== Initializing Dinezzy Recipe Service ===")

if not config.GEMINI_API_KEY:
    logger.warning("GEMINI_API_KEY is not set - every request will be served by the fallback generator")

pipeline = RecipePipeline(
    client=GeminiClient(api_key=config.GEMINI_API_KEY, model=config.GEMINI_MODEL),
    tracker=tracker,
    generator=FallbackGenerator(),
)
logger.info(f"✓ Recipe pipeline configured with {config.GEMINI_MODEL}")

assistant = create_assistant_agent()

base_app = FastAPI(
    title="Dinezzy Recipe Service",
    description="Indian recipe discovery from the ingredients you already have",
)
base_app.state.pipeline = pipeline
base_app.state.assistant = assistant
base_app.state.response_floor = config.RESPONSE_FLOOR_SECONDS
base_app.include_router(router)

agent_os = AgentOS(
    description="Dinezzy Recipe Service",
    agents=[assistant],
    base_app=base_app,
)
app = agent_os.get_app()

logger.info("=== Service initialization complete ===")


if __name__ == "__main__":
    logger.info(f"Starting Dinezzy Recipe Service on port {config.PORT}")
    logger.info(f"API docs available at: http://localhost:{config.PORT}/docs")
    agent_os.serve(app="app:app", port=config.PORT)
