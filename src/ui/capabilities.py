"""
Device capability variants.

A capability is either ``Available(handle)`` or ``Unavailable(reason)``.
Controllers receive the detected variant as configuration instead of
probing for optional devices themselves.
"""

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from src.core.config import get_settings
from src.ui.api_client import APIClient, APIError
from src.ui.media import OpenCVCamera
from src.ui.speech import RemoteSpeechRecognizer

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Available(Generic[T]):
    """The capability exists; ``handle`` is the object that provides it."""

    handle: T


@dataclass(frozen=True)
class Unavailable:
    """The capability is missing on this deployment."""

    reason: str = ""


Capability = Available | Unavailable


def detect_speech_capability(client: APIClient) -> Capability:
    """Return speech recognition backed by the API, if the API offers it."""
    try:
        health = client.health_check()
    except APIError as exc:
        logger.warning("Speech capability check failed: %s", exc.message)
        return Unavailable(exc.message)

    if not health.get("stt_available"):
        return Unavailable("Speech-to-text is disabled on the server")
    return Available(RemoteSpeechRecognizer(client, lang=get_settings().speech_language))


def detect_camera_capability(device_index: int = 0) -> Capability:
    """Return the local camera.

    Permission and presence problems surface when the stream is requested.
    """
    return Available(OpenCVCamera(device_index))
