"""Answer transcription with faster-whisper.

The browser records each spoken answer as a compressed clip (WAV or WebM);
faster-whisper decodes it directly from memory, so no temp files are used.
"""

import asyncio
import io
import logging
from functools import lru_cache

from faster_whisper import WhisperModel

from src.core.config import get_settings
from src.core.exceptions import TranscriptionError
from src.core.models import TranscriptionResponse, TranscriptionSegment
from src.services.transcription.base import BaseSTT

logger = logging.getLogger(__name__)


def whisper_language(tag: str | None) -> str | None:
    """Map a BCP-47 tag (``en-US``) to the ISO 639-1 code Whisper expects."""
    if not tag:
        return None
    return tag.split("-")[0].lower()


@lru_cache(maxsize=1)
def load_model(model_size: str, device: str, compute_type: str) -> WhisperModel:
    """Load a Whisper model once per process."""
    logger.info("Loading Whisper model %s on %s (%s)", model_size, device, compute_type)
    return WhisperModel(model_size, device=device, compute_type=compute_type)


class WhisperSTT(BaseSTT):
    """Local speech-to-text for recorded answers.

    Args:
        model_size: ``tiny`` .. ``large-v3``; defaults to ``settings.whisper_model``.
        device: ``cpu`` or ``cuda``.
        compute_type: CTranslate2 quantization, e.g. ``int8`` or ``float16``.
    """

    def __init__(
        self,
        model_size: str | None = None,
        device: str = "cpu",
        compute_type: str = "int8",
        settings=None,
    ) -> None:
        self._settings = settings or get_settings()
        self._model_size = model_size or self._settings.whisper_model
        self._device = device
        self._compute_type = compute_type

    def _run_transcription(self, audio: bytes, language: str | None) -> tuple:
        # Blocking; run via asyncio.to_thread.  The segment generator is
        # drained here so decoding stays on the worker thread.
        model = load_model(self._model_size, self._device, self._compute_type)
        segments, info = model.transcribe(
            io.BytesIO(audio),
            language=language,
            beam_size=5,
            vad_filter=True,
        )
        return list(segments), info

    async def transcribe(self, audio: bytes, language: str | None = None) -> TranscriptionResponse:
        if not audio:
            return TranscriptionResponse(text="", language=language or "unknown")

        code = whisper_language(language or self._settings.speech_language)
        try:
            segments, info = await asyncio.to_thread(self._run_transcription, audio, code)
        except Exception as exc:
            raise TranscriptionError(detail=f"Whisper transcription failed: {exc}") from exc

        # Whisper segments are final; VAD gaps come back as blank text.
        spoken = [
            TranscriptionSegment(text=seg.text.strip(), start=seg.start, end=seg.end)
            for seg in segments
            if seg.text.strip()
        ]
        logger.debug("Transcribed %d bytes into %d segments", len(audio), len(spoken))
        return TranscriptionResponse(
            text=" ".join(seg.text for seg in spoken),
            language=info.language or "unknown",
            segments=spoken,
        )
