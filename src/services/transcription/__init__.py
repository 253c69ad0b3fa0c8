"""
Transcription module - turns recorded answer clips into text.

``whisper_provider`` selects the backend: ``local`` (or ``whisper``) runs
faster-whisper in-process, ``none`` disables recording in the UI.
"""

from .base import BaseSTT

__all__ = ["BaseSTT", "create_stt", "stt_enabled"]

_WHISPER_ALIASES = ("local", "whisper")


def stt_enabled(provider: str) -> bool:
    """Return whether *provider* names an STT backend rather than ``none``."""
    return provider.lower() not in ("", "none")


def create_stt(provider: str, **kwargs) -> BaseSTT:
    """Instantiate the configured STT backend.

    Raises:
        ValueError: For ``none`` or an unrecognized provider name.
    """
    if provider.lower() in _WHISPER_ALIASES:
        from .whisper import WhisperSTT

        return WhisperSTT(**kwargs)
    raise ValueError(f"Unknown STT provider: {provider}")
