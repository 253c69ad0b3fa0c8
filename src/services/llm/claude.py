"""
Claude provider (``anthropic.AsyncAnthropic``).

Claude has no JSON response mode; in ``json_mode`` the assistant turn is
prefilled with ``{`` so the reply starts inside the object.
"""

import asyncio
import logging

from anthropic import (
    APIConnectionError,
    APITimeoutError,
    AsyncAnthropic,
    RateLimitError,
)
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.core.config import get_settings
from src.services.llm.base import BaseLLM

logger = logging.getLogger(__name__)

_JSON_PREFILL = "{"


def _translate(exc: Exception) -> Exception:
    """Map an SDK exception onto the retryable / non-retryable builtins."""
    if isinstance(exc, APITimeoutError):
        return TimeoutError(f"Claude API request timed out: {exc}")
    if isinstance(exc, APIConnectionError):
        return ConnectionError(f"Failed to connect to Claude API: {exc}")
    if isinstance(exc, RateLimitError):
        return ConnectionError(f"Claude API rate limit exceeded: {exc}")
    return RuntimeError(f"Claude API error: {exc}")


class ClaudeLLM(BaseLLM):
    """Grades answers and writes questions with Claude."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        max_concurrent: int = 5,
    ) -> None:
        settings = get_settings()
        self._api_key = api_key or settings.claude_api_key
        self._model = model or settings.claude_model
        self._max_tokens = max_tokens
        self._temperature = temperature
        # Bounds parallel grading requests from one backend process.
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self._client = AsyncAnthropic(api_key=self._api_key)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=16),
        retry=retry_if_exception_type((ConnectionError, TimeoutError)),
        reraise=True,
    )
    async def _complete(self, request: dict) -> str:
        async with self._semaphore:
            try:
                message = await self._client.messages.create(**request)
            except Exception as exc:
                translated = _translate(exc)
                if isinstance(translated, RuntimeError):
                    logger.error("Claude request failed: %s", exc)
                else:
                    logger.warning("Claude request failed (will retry): %s", exc)
                raise translated from exc
        return message.content[0].text

    async def generate(
        self,
        prompt: str,
        *,
        system: str | None = None,
        json_mode: bool = False,
        temperature: float | None = None,
    ) -> str:
        messages = [{"role": "user", "content": prompt}]
        if json_mode:
            messages.append({"role": "assistant", "content": _JSON_PREFILL})

        request: dict = {
            "model": self._model,
            "max_tokens": self._max_tokens,
            "temperature": self._temperature if temperature is None else temperature,
            "messages": messages,
        }
        if system:
            request["system"] = system

        text = await self._complete(request)
        return _JSON_PREFILL + text if json_mode else text
