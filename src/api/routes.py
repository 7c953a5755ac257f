"""HTTP routes for recipe search, day plans, analytics and the cooking assistant.

The pipeline, assistant agent and response floor are read from `app.state`,
which `app.py` populates at startup and tests populate with fakes.
"""

import asyncio
from typing import Awaitable, TypeVar

from agno.agent import Agent
from fastapi import APIRouter, Depends, Request

from src.models.models import (
    AnalyticsSummary,
    AssistantQuery,
    AssistantReply,
    DayPlanBatch,
    DayPlanRequest,
    RecipeBatch,
    RecipeSearchRequest,
)
from src.services.assistant import ask_assistant
from src.services.pipeline import RecipePipeline
from src.utils.config import config


T = TypeVar("T")

router = APIRouter(prefix="/api", tags=["recipes"])


async def run_with_floor(work: Awaitable[T], floor_seconds: float) -> T:
    """Await `work`, taking at least `floor_seconds` overall.

    The delay runs concurrently with the work, so it only pads fast responses.
    """
    if floor_seconds <= 0:
        return await work
    result, _ = await asyncio.gather(work, asyncio.sleep(floor_seconds))
    return result


def get_pipeline(request: Request) -> RecipePipeline:
    return request.app.state.pipeline


def get_assistant(request: Request) -> Agent:
    return request.app.state.assistant


def get_response_floor(request: Request) -> float:
    return getattr(request.app.state, "response_floor", config.RESPONSE_FLOOR_SECONDS)


@router.post("/recipes/search", response_model=RecipeBatch, response_model_by_alias=True)
async def search_recipes(
    body: RecipeSearchRequest,
    pipeline: RecipePipeline = Depends(get_pipeline),
    floor: float = Depends(get_response_floor),
):
    recipes = await run_with_floor(
        pipeline.search_recipes(body.ingredients, body.include_extra, body.meal_type),
        floor,
    )
    return RecipeBatch(recipes=recipes)


@router.post("/day-plans", response_model=DayPlanBatch, response_model_by_alias=True)
async def create_day_plans(
    body: DayPlanRequest,
    pipeline: RecipePipeline = Depends(get_pipeline),
    floor: float = Depends(get_response_floor),
):
    plans = await run_with_floor(pipeline.generate_day_plan(body.ingredients), floor)
    return DayPlanBatch(plans=plans)


@router.get("/analytics", response_model=AnalyticsSummary, response_model_by_alias=True)
async def get_analytics(pipeline: RecipePipeline = Depends(get_pipeline)):
    return pipeline.get_analytics_summary()


@router.post(
    "/assistant/query",
    response_model=AssistantReply,
    response_model_by_alias=True,
    tags=["assistant"],
)
async def query_assistant(body: AssistantQuery, agent: Agent = Depends(get_assistant)):
    return await ask_assistant(agent, body.prompt)
