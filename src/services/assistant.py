"""Free-form cooking assistant backed by an Agno agent.

Answers open questions about Indian cooking. Unlike recipe search there is no
local fallback content: failures come back as an apology reply.
"""

import time
from typing import Optional

from agno.agent import Agent
from agno.models.google import Gemini

from src.models.models import AssistantReply
from src.prompts.prompts import ASSISTANT_INSTRUCTIONS
from src.utils.config import config
from src.utils.logger import logger


APOLOGY_TEXT = "Sorry, I couldn't process your request. Please try again."


def create_assistant_agent(model_id: Optional[str] = None, api_key: Optional[str] = None) -> Agent:
    """Create the cooking assistant agent.

    Stateless: no database, memory or tools. Each question is answered on its own.

    Args:
        model_id: Gemini model id. Defaults to ASSISTANT_MODEL.
        api_key: Gemini API key. Defaults to GEMINI_API_KEY.

    Returns:
        Configured Agent instance.
    """
    agent = Agent(
        model=Gemini(
            id=model_id or config.ASSISTANT_MODEL,
            api_key=api_key or config.GEMINI_API_KEY,
            temperature=config.ASSISTANT_TEMPERATURE,
            max_output_tokens=config.ASSISTANT_MAX_OUTPUT_TOKENS,
        ),
        instructions=ASSISTANT_INSTRUCTIONS,
        markdown=True,
        name="Dinezzy Cooking Assistant",
        description="Answers questions about Indian cooking, ingredients and techniques",
    )
    logger.info(f"✓ Cooking assistant configured with {model_id or config.ASSISTANT_MODEL}")
    return agent


def _agent_model_id(agent: Agent) -> Optional[str]:
    return getattr(getattr(agent, "model", None), "id", None)


async def ask_assistant(agent: Agent, prompt: str) -> AssistantReply:
    """Send one question to the assistant agent.

    Args:
        agent: Agent created by `create_assistant_agent`.
        prompt: The user's question.

    Returns:
        AssistantReply with the answer text, or success=False with the apology text.
    """
    started = time.perf_counter()
    model_id = _agent_model_id(agent)

    try:
        response = await agent.arun(prompt)
        text = response.content if isinstance(response.content, str) else str(response.content or "")
        if not text.strip():
            raise ValueError("Assistant returned an empty response")
    except Exception as e:
        logger.error(f"Assistant query failed: {e}")
        return AssistantReply(
            success=False,
            text=APOLOGY_TEXT,
            response_time_ms=int((time.perf_counter() - started) * 1000),
            model=model_id,
            error=str(e),
        )

    elapsed_ms = int((time.perf_counter() - started) * 1000)
    logger.info(f"Assistant answered in {elapsed_ms}ms ({len(text)} chars)")
    return AssistantReply(success=True, text=text, response_time_ms=elapsed_ms, model=model_id)
