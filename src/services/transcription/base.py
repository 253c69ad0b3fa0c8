"""Speech-to-text provider interface used by ``POST /api/v1/transcribe``."""

from abc import ABC, abstractmethod

from src.core.models import TranscriptionResponse


class BaseSTT(ABC):
    @abstractmethod
    async def transcribe(self, audio: bytes, language: str | None = None) -> TranscriptionResponse:
        """Transcribe one recorded answer clip.

        Args:
            audio: Encoded clip bytes (WAV, WebM, MP3, ...) as the browser recorded them.
            language: BCP-47 tag such as ``en-US``; ``None`` uses the configured language.

        Returns:
            The joined text plus its finalized segments.
        """
