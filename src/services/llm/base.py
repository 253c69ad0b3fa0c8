"""
LLM provider interface.

Interview features only ever need one thing from a model: a single prompt
in, a single text reply out.  Grading and question generation both expect
JSON back, so providers accept ``json_mode`` and use whatever native
mechanism they have to constrain the reply.
"""

from abc import ABC, abstractmethod


class BaseLLM(ABC):
    """A text-completion backend (Gemini, Claude or Ollama)."""

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        *,
        system: str | None = None,
        json_mode: bool = False,
        temperature: float | None = None,
    ) -> str:
        """Return the model's reply to *prompt*.

        The reply is returned as-is; callers strip any code fences.

        Raises:
            ConnectionError: Transport failure or rate limiting (retryable).
            TimeoutError: The provider did not answer in time (retryable).
            RuntimeError: Any other provider error.
        """
