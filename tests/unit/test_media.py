"""Tests for OpenCV camera access and capability detection."""

from unittest.mock import MagicMock, patch

import numpy as np
import pytest

from src.core.exceptions import CameraPermissionError
from src.ui.api_client import APIError
from src.ui.capabilities import (
    Available,
    Unavailable,
    detect_camera_capability,
    detect_speech_capability,
)
from src.ui.media import OpenCVCamera
from src.ui.speech import RemoteSpeechRecognizer


@pytest.fixture
def capture():
    capture = MagicMock()
    capture.isOpened.return_value = True
    frame = np.zeros((4, 4, 3), dtype=np.uint8)
    frame[..., 0] = 255  # blue channel in BGR
    capture.read.return_value = (True, frame)
    return capture


class TestOpenCVCamera:
    def test_video_stream_opened(self, capture):
        with patch("src.ui.media.cv2.VideoCapture", return_value=capture) as mock_cls:
            stream = OpenCVCamera(1).get_user_media(video=True, audio=False)
        mock_cls.assert_called_once_with(1)
        assert [t.kind for t in stream.get_tracks()] == ["video"]

    def test_frames_are_rgb(self, capture):
        with patch("src.ui.media.cv2.VideoCapture", return_value=capture):
            stream = OpenCVCamera().get_user_media()
        frame = stream.read_frame()
        assert frame[0, 0].tolist() == [0, 0, 255]

    def test_stop_releases_once(self, capture):
        with patch("src.ui.media.cv2.VideoCapture", return_value=capture):
            stream = OpenCVCamera().get_user_media()
        track = stream.get_tracks()[0]
        track.stop()
        track.stop()
        capture.release.assert_called_once()
        assert stream.read_frame() is None

    def test_unopened_device_raises(self, capture):
        capture.isOpened.return_value = False
        with patch("src.ui.media.cv2.VideoCapture", return_value=capture):
            with pytest.raises(CameraPermissionError, match="camera permissions"):
                OpenCVCamera().get_user_media()
        capture.release.assert_called_once()

    def test_audio_not_supported(self):
        with pytest.raises(CameraPermissionError):
            OpenCVCamera().get_user_media(video=True, audio=True)

    def test_failed_read_returns_none(self, capture):
        capture.read.return_value = (False, None)
        with patch("src.ui.media.cv2.VideoCapture", return_value=capture):
            stream = OpenCVCamera().get_user_media()
        assert stream.read_frame() is None


class TestCapabilities:
    def test_camera_always_offered(self):
        capability = detect_camera_capability(2)
        assert isinstance(capability, Available)
        assert isinstance(capability.handle, OpenCVCamera)

    def test_speech_available(self):
        client = MagicMock()
        client.health_check.return_value = {"status": "ok", "stt_available": True}
        capability = detect_speech_capability(client)
        assert isinstance(capability, Available)
        assert isinstance(capability.handle, RemoteSpeechRecognizer)

    def test_speech_disabled_on_server(self):
        client = MagicMock()
        client.health_check.return_value = {"status": "ok", "stt_available": False}
        assert isinstance(detect_speech_capability(client), Unavailable)

    def test_speech_backend_unreachable(self):
        client = MagicMock()
        client.health_check.side_effect = APIError("Backend server is not running.", "connection")
        capability = detect_speech_capability(client)
        assert capability == Unavailable("Backend server is not running.")
