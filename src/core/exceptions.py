"""
MockMate exception hierarchy.

All application-specific exceptions inherit from MockMateError,
enabling centralized error handling in the API middleware layer.
"""

from datetime import UTC, datetime


class MockMateError(Exception):
    """Base exception for all MockMate errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "MOCKMATE_ERROR",
        status_code: int = 500,
    ) -> None:
        self.detail = detail
        self.code = code
        self.status_code = status_code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class InterviewNotFoundError(MockMateError):
    """Raised when a mock interview ID does not exist."""

    def __init__(self, mock_id: str) -> None:
        super().__init__(
            detail=f"Interview not found: {mock_id}",
            code="INTERVIEW_NOT_FOUND",
            status_code=404,
        )


class UnauthenticatedError(MockMateError):
    """Raised when an owner-scoped request carries no user identity."""

    def __init__(self) -> None:
        super().__init__(
            detail="A signed-in user is required",
            code="UNAUTHENTICATED",
            status_code=401,
        )


class EmptyAnswerError(MockMateError):
    """Raised when an answer is submitted with a blank transcript."""

    def __init__(self) -> None:
        super().__init__(
            detail="Please provide an answer",
            code="EMPTY_ANSWER",
            status_code=422,
        )


class QuestionIndexError(MockMateError):
    """Raised when an answer targets a question the interview does not have."""

    def __init__(self, index: int, total: int) -> None:
        super().__init__(
            detail=f"Question index {index} out of range (interview has {total})",
            code="QUESTION_INDEX_OUT_OF_RANGE",
            status_code=422,
        )


class FeedbackError(MockMateError):
    """Raised when the LLM cannot produce answer feedback."""

    def __init__(
        self,
        detail: str = "Feedback generation failed",
        code: str = "FEEDBACK_ERROR",
    ) -> None:
        super().__init__(detail=detail, code=code, status_code=502)


class FeedbackParseError(FeedbackError):
    """Raised when the LLM feedback response is not valid JSON."""

    def __init__(self, detail: str = "Failed to parse feedback response") -> None:
        super().__init__(detail=detail, code="FEEDBACK_PARSE_ERROR")


class FeedbackFormatError(FeedbackError):
    """Raised when the feedback JSON lacks a usable rating or feedback text."""

    def __init__(self, detail: str = "Invalid feedback response format") -> None:
        super().__init__(detail=detail, code="FEEDBACK_FORMAT_ERROR")


class QuestionGenerationError(MockMateError):
    """Raised when the LLM fails to produce a usable question set."""

    def __init__(self, detail: str = "Question generation failed") -> None:
        super().__init__(detail=detail, code="QUESTION_GENERATION_ERROR", status_code=502)


class TranscriptionError(MockMateError):
    """Raised when STT processing fails."""

    def __init__(self, detail: str = "Transcription failed") -> None:
        super().__init__(detail=detail, code="TRANSCRIPTION_ERROR", status_code=500)


class SpeechUnavailableError(MockMateError):
    """Raised when speech-to-text is disabled on this deployment."""

    def __init__(self) -> None:
        super().__init__(
            detail="Speech-to-text not supported",
            code="SPEECH_UNAVAILABLE",
            status_code=503,
        )


class CameraPermissionError(MockMateError):
    """Raised when the camera cannot be opened."""

    def __init__(self, detail: str = "Please check your camera permissions") -> None:
        super().__init__(detail=detail, code="CAMERA_UNAVAILABLE", status_code=500)
