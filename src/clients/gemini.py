"""Gemini text-generation client used by the recipe pipeline.

Thin wrapper over the google-genai SDK: one call in, generated text out.
No retries, no streaming and no timeout of its own. Any failure raises
ModelClientError and the pipeline answers from the fallback generator.
"""

import asyncio
from typing import Optional

from google import genai
from google.genai import types

from src.utils.config import config
from src.utils.errors import ModelClientError
from src.utils.logger import logger


class GeminiClient:
    """Async text generation against a hosted Gemini model.

    Args:
        api_key: Gemini API key. May be empty; calls then fail with ModelClientError.
        model: Model identifier, e.g. "gemini-2.5-flash".
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None) -> None:
        self.api_key = config.GEMINI_API_KEY if api_key is None else api_key
        self.model = model or config.GEMINI_MODEL
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        if not self.api_key:
            raise ModelClientError("GEMINI_API_KEY is not configured")
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(
        self,
        prompt: str,
        system_instruction: str,
        max_output_tokens: int,
        temperature: float,
    ) -> str:
        """Generate text for `prompt` (single attempt).

        Args:
            prompt: User prompt.
            system_instruction: System instruction for the model.
            max_output_tokens: Output length limit.
            temperature: Sampling temperature.

        Returns:
            Generated text.

        Raises:
            ModelClientError: Missing key, SDK/API error, or empty output.
        """
        client = self._get_client()
        generation_config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            max_output_tokens=max_output_tokens,
            temperature=temperature,
        )

        try:
            # Sync SDK call kept off the event loop
            response = await asyncio.to_thread(
                client.models.generate_content,
                model=self.model,
                contents=prompt,
                config=generation_config,
            )
        except Exception as e:
            raise ModelClientError(f"Gemini API call failed: {e}") from e

        text = getattr(response, "text", None)
        if not text:
            raise ModelClientError("Gemini returned an empty response")

        logger.debug(f"Gemini response: {len(text)} chars from {self.model}")
        return text
