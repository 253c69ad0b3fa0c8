"""
FastAPI dependencies shared by the route modules.

The signed-in user travels as the ``X-User-Email`` header and is turned into
an explicit :class:`SessionContext`; there is no ambient user state.
"""

from fastapi import Header

from src.core.config import get_settings
from src.core.exceptions import UnauthenticatedError
from src.core.models import SessionContext
from src.services.llm import BaseLLM, create_llm
from src.services.transcription import BaseSTT, create_stt


async def get_session_context(
    x_user_email: str | None = Header(default=None),
) -> SessionContext:
    """Build the request's session context or reject it with 401."""
    if not x_user_email or not x_user_email.strip():
        raise UnauthenticatedError()
    return SessionContext(user_email=x_user_email.strip())


def get_llm() -> BaseLLM:
    """Return an LLM for the configured provider (overridden in tests)."""
    return create_llm(provider=get_settings().llm_provider)


def get_stt() -> BaseSTT:
    """Return the configured STT provider (overridden in tests)."""
    return create_stt(provider=get_settings().whisper_provider)
