"""
Ollama provider for running interviews against a local model.

Uses the single-turn ``AsyncClient.generate`` endpoint; ``json_mode`` maps
to Ollama's ``format="json"`` constrained decoding.
"""

import logging

from ollama import AsyncClient, ResponseError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.core.config import get_settings
from src.services.llm.base import BaseLLM

logger = logging.getLogger(__name__)


class OllamaLLM(BaseLLM):
    """Local-model provider.  Connection failures are retried three times."""

    def __init__(
        self,
        base_url: str | None = None,
        model: str | None = None,
        temperature: float = 0.7,
    ) -> None:
        settings = get_settings()
        self._base_url = base_url or settings.ollama_base_url
        self._model = model or settings.ollama_model
        self._temperature = temperature
        self._client = AsyncClient(host=self._base_url)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=16),
        retry=retry_if_exception_type((ConnectionError, TimeoutError)),
        reraise=True,
    )
    async def _complete(self, request: dict) -> str:
        try:
            response = await self._client.generate(model=self._model, **request)
        except (ConnectionError, TimeoutError) as exc:
            logger.warning("Ollama at %s unreachable: %s", self._base_url, exc)
            kind = TimeoutError if isinstance(exc, TimeoutError) else ConnectionError
            raise kind(f"Failed to connect to Ollama at {self._base_url}: {exc}") from exc
        except ResponseError as exc:
            # Typically an unknown model name.
            logger.error("Ollama rejected the request: %s", exc)
            raise RuntimeError(f"Ollama error: {exc}") from exc
        except Exception as exc:
            logger.error("Unexpected Ollama error: %s", exc)
            raise RuntimeError(f"Ollama error: {exc}") from exc
        return response.response

    async def generate(
        self,
        prompt: str,
        *,
        system: str | None = None,
        json_mode: bool = False,
        temperature: float | None = None,
    ) -> str:
        request: dict = {
            "prompt": prompt,
            "options": {"temperature": self._temperature if temperature is None else temperature},
        }
        if system:
            request["system"] = system
        if json_mode:
            request["format"] = "json"
        return await self._complete(request)
