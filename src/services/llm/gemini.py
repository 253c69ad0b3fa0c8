"""
Gemini LLM provider implementation.

Uses the ``google-generativeai`` SDK.  ``json_mode`` sets the
``application/json`` response MIME type; Gemini may still fence the reply.
"""

import logging

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.core.config import get_settings
from src.services.llm.base import BaseLLM

logger = logging.getLogger(__name__)


class GeminiLLM(BaseLLM):
    """Google Gemini provider with retry logic."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float = 1.0,
        max_output_tokens: int = 8192,
    ) -> None:
        settings = get_settings()
        self._api_key = api_key or settings.gemini_api_key
        self._model = model or settings.gemini_model
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        genai.configure(api_key=self._api_key)
        self._client = genai.GenerativeModel(self._model)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=16),
        retry=retry_if_exception_type((ConnectionError, TimeoutError)),
        reraise=True,
    )
    async def _call_api(
        self,
        prompt: str,
        temperature: float | None = None,
        json_mode: bool = False,
    ) -> str:
        """Send one prompt to Gemini and return the response text."""
        config = genai.GenerationConfig(
            temperature=self._temperature if temperature is None else temperature,
            max_output_tokens=self._max_output_tokens,
            response_mime_type="application/json" if json_mode else "text/plain",
        )
        try:
            response = await self._client.generate_content_async(
                prompt, generation_config=config
            )
            return response.text

        except google_exceptions.DeadlineExceeded as exc:
            logger.warning("Gemini API timeout: %s", exc)
            raise TimeoutError(f"Gemini API request timed out: {exc}") from exc
        except (
            google_exceptions.ResourceExhausted,
            google_exceptions.ServiceUnavailable,
        ) as exc:
            logger.warning("Gemini API unavailable or rate limited: %s", exc)
            raise ConnectionError(f"Gemini API unavailable: {exc}") from exc
        except Exception as exc:
            logger.error("Unexpected Gemini API error: %s", exc)
            raise RuntimeError(f"Gemini API error: {exc}") from exc

    async def generate(
        self,
        prompt: str,
        *,
        system: str | None = None,
        json_mode: bool = False,
        temperature: float | None = None,
    ) -> str:
        # No system slot on this call; the instruction leads the prompt.
        if system:
            prompt = f"{system}\n\n{prompt}"
        return await self._call_api(prompt, temperature=temperature, json_mode=json_mode)
