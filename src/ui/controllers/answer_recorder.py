"""
Answer recorder: webcam, speech capture, and answer submission.

States:
    webcam      off <-> on           (independent of the rest)
    recording   idle <-> recording
    submit      idle -> submitting -> idle

The camera stream is owned by the recorder and released on every exit
path: ``disable_webcam()``, ``close()``, or leaving the ``with`` block.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from src.core.config import get_settings
from src.core.models import SessionContext
from src.ui.api_client import APIError
from src.ui.capabilities import Available, Capability
from src.ui.notify import Notifier
from src.ui.speech import RecognitionEvent, TranscriptAccumulator

logger = logging.getLogger(__name__)

# Backend error codes that mean the LLM reply was unusable.
_FEEDBACK_MESSAGES = {
    "FEEDBACK_PARSE_ERROR": "Failed to parse feedback response",
    "FEEDBACK_FORMAT_ERROR": "Invalid feedback response format",
    "EMPTY_ANSWER": "Please provide an answer",
}


class AnswerService(Protocol):
    def submit_answer(
        self,
        mock_id: str,
        question_index: int,
        user_answer: str,
        user_email: str,
    ) -> dict: ...


class AnswerRecorder:
    """Captures one spoken answer at a time and submits it for grading.

    Args:
        answers: Backend that grades and stores answers.
        notifier: Toast sink for user-facing messages.
        speech: Detected speech-recognition capability.
        camera: Detected camera capability.
        ctx: The signed-in user.
        on_answer_save: Called with the stored answer record after a
            successful submission.
    """

    def __init__(
        self,
        answers: AnswerService,
        notifier: Notifier,
        speech: Capability,
        camera: Capability,
        ctx: SessionContext | None,
        on_answer_save: Callable[[dict], None] | None = None,
    ) -> None:
        self._answers = answers
        self._notifier = notifier
        self._camera = camera
        self._ctx = ctx
        self.on_answer_save = on_answer_save

        self._recognizer = None
        if isinstance(speech, Available):
            self._recognizer = speech.handle
            self._recognizer.continuous = True
            self._recognizer.interim_results = True
            self._recognizer.lang = get_settings().speech_language

        self._transcript = TranscriptAccumulator()
        self._stream = None
        self.webcam_enabled = False
        self.is_recording = False
        self.loading = False

    # ------------------------------------------------------------------
    # Transcript
    # ------------------------------------------------------------------

    @property
    def user_answer(self) -> str:
        return self._transcript.text

    @user_answer.setter
    def user_answer(self, value: str) -> None:
        # Manual edits in the answer box
        self._transcript.text = value

    @property
    def speech_available(self) -> bool:
        return self._recognizer is not None

    # ------------------------------------------------------------------
    # Webcam
    # ------------------------------------------------------------------

    @property
    def stream(self):
        return self._stream

    def enable_webcam(self) -> bool:
        """Open a video-only camera stream. Failures are reported, not raised."""
        if not isinstance(self._camera, Available):
            self._notifier.error("Failed to enable webcam", self._camera.reason or None)
            return False

        self.disable_webcam()
        try:
            stream = self._camera.handle.get_user_media(video=True, audio=False)
        except Exception as exc:
            logger.error("Webcam error: %s", exc)
            self._notifier.error("Failed to enable webcam", "Please check your camera permissions")
            return False

        self._stream = stream
        self.webcam_enabled = True
        self._notifier.success("Webcam enabled successfully")
        return True

    def disable_webcam(self) -> None:
        """Stop every track of the held stream. Safe when none is held."""
        if self._stream is not None:
            for track in self._stream.get_tracks():
                track.stop()
            self._stream = None
        self.webcam_enabled = False

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def toggle_recording(self) -> None:
        if self._recognizer is None:
            self._notifier.error("Speech-to-text not supported")
            return

        if self.is_recording:
            self.on_end()
            self._notifier.info("Recording stopped")
        else:
            self._transcript.reset()
            self.is_recording = True
            self._notifier.info("Recording started")

    def on_result(self, event: RecognitionEvent) -> None:
        self._transcript.feed(event)

    def on_error(self, error: str) -> None:
        self._notifier.error(f"Speech recognition error: {error}")
        self.is_recording = False

    def on_end(self) -> None:
        self.is_recording = False

    def capture(self, audio: bytes) -> str:
        """Run one recognition session over a recorded clip.

        Recording stays on between clips, so one answer can span several of
        them until the user stops it.

        Returns:
            The transcript after the clip has been consumed.
        """
        if self._recognizer is None:
            self._notifier.error("Speech-to-text not supported")
            return self.user_answer
        if not self.is_recording:
            logger.debug("Ignoring audio captured while not recording")
            return self.user_answer

        try:
            for event in self._recognizer.session(audio):
                self.on_result(event)
        except APIError as exc:
            logger.error("Speech recognition failed: %s", exc.message)
            self.on_error(exc.message)
        return self.user_answer

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def submit(self, mock_id: str, question_index: int) -> dict | None:
        """Grade and store the current transcript as the answer.

        Returns:
            The stored answer record, or ``None`` when nothing was stored.
        """
        if self.loading:
            logger.warning("Submission already in flight; ignoring")
            return None
        if not self.user_answer.strip():
            self._notifier.error("Please provide an answer")
            return None
        if self._ctx is None:
            self._notifier.error("Sign in to save answers")
            return None

        self.loading = True
        try:
            record = self._answers.submit_answer(
                mock_id,
                question_index,
                self.user_answer,
                self._ctx.user_email,
            )
        except APIError as exc:
            message = _FEEDBACK_MESSAGES.get(exc.code or "")
            if message:
                logger.error("Feedback rejected (%s): %s", exc.code, exc.message)
                self._notifier.error(message)
            else:
                logger.error("Answer save error: %s", exc.message)
                self._notifier.error("Failed to save answer", exc.message)
            return None
        finally:
            self.loading = False

        if self.on_answer_save is not None:
            self.on_answer_save(record)
        self._notifier.success("Answer recorded successfully")
        self._transcript.reset()
        self.is_recording = False
        return record

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the camera and end any recognition session."""
        self.disable_webcam()
        self.is_recording = False

    def __enter__(self) -> "AnswerRecorder":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
