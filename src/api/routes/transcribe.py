"""
Speech-to-text endpoint.

The UI records an answer clip in the browser and posts the encoded bytes
here as the raw request body; the reply carries finalized text segments.
"""

from fastapi import APIRouter, Depends, Query, Request

from src.api.dependencies import get_stt
from src.core.config import get_settings
from src.core.exceptions import SpeechUnavailableError
from src.core.models import TranscriptionResponse
from src.services.transcription import BaseSTT, stt_enabled

router = APIRouter(tags=["transcription"])


def _require_stt() -> BaseSTT:
    if not stt_enabled(get_settings().whisper_provider):
        raise SpeechUnavailableError()
    return get_stt()


@router.post("/transcribe", response_model=TranscriptionResponse)
async def transcribe(
    request: Request,
    language: str | None = Query(None, description="BCP-47 tag, e.g. en-US"),
    stt: BaseSTT = Depends(_require_stt),
):
    """Transcribe an uploaded audio clip."""
    audio = await request.body()
    return await stt.transcribe(audio, language=language)
