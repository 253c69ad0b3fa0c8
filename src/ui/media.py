"""
Camera access.

``OpenCVCamera.get_user_media()`` opens the local webcam and returns a
``MediaStream`` whose tracks must all be stopped to release the device.
"""

import logging
from typing import Protocol

import cv2
import numpy as np

from src.core.exceptions import CameraPermissionError

logger = logging.getLogger(__name__)


class MediaTrack(Protocol):
    kind: str

    def stop(self) -> None: ...


class MediaStream(Protocol):
    def get_tracks(self) -> list[MediaTrack]: ...


class CameraDevice(Protocol):
    def get_user_media(self, video: bool = True, audio: bool = False) -> MediaStream: ...


class VideoTrack:
    """The single video track of an OpenCV capture."""

    kind = "video"

    def __init__(self, capture: cv2.VideoCapture) -> None:
        self._capture = capture
        self.live = True

    def stop(self) -> None:
        if self.live:
            self._capture.release()
            self.live = False

    def read_frame(self) -> np.ndarray | None:
        """Return the next frame as RGB, or ``None`` if none is available."""
        if not self.live:
            return None
        ok, frame = self._capture.read()
        if not ok:
            return None
        return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)


class OpenCVStream:
    def __init__(self, capture: cv2.VideoCapture) -> None:
        self._tracks = [VideoTrack(capture)]

    def get_tracks(self) -> list[VideoTrack]:
        return list(self._tracks)

    def read_frame(self) -> np.ndarray | None:
        return self._tracks[0].read_frame()


class OpenCVCamera:
    """Local webcam through ``cv2.VideoCapture``. Video only."""

    def __init__(self, device_index: int = 0) -> None:
        self._device_index = device_index

    def get_user_media(self, video: bool = True, audio: bool = False) -> OpenCVStream:
        if audio:
            raise CameraPermissionError("Audio capture is not supported by the camera device")
        if not video:
            raise CameraPermissionError("No media kind requested")

        capture = cv2.VideoCapture(self._device_index)
        if not capture.isOpened():
            capture.release()
            raise CameraPermissionError(
                f"Camera {self._device_index} could not be opened. "
                "Please check your camera permissions"
            )
        logger.info("Opened camera %d", self._device_index)
        return OpenCVStream(capture)
