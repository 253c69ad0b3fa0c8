"""
Pydantic v2 request / response models used across the API and UI layers.
"""

from datetime import datetime

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """GET /health response."""

    status: str = "ok"
    version: str = "0.1.0"
    timestamp: datetime
    stt_available: bool = False


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class SessionContext(BaseModel):
    """Identity of the signed-in user, passed explicitly to data access."""

    user_email: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Interviews
# ---------------------------------------------------------------------------


class InterviewQuestion(BaseModel):
    """One generated question with its reference answer."""

    question: str
    answer: str = ""


class InterviewCreate(BaseModel):
    """POST /interviews request body."""

    job_position: str = Field(min_length=1)
    job_desc: str = Field(min_length=1)
    job_experience: int = Field(ge=0, le=60)
    question_count: int | None = Field(default=None, ge=1, le=20)


class InterviewResponse(BaseModel):
    """A stored mock interview.

    ``json_mock_resp`` is returned verbatim; clients decode the question list.
    """

    id: int
    mock_id: str
    json_mock_resp: str
    job_position: str
    job_desc: str
    job_experience: str
    created_by: str
    created_at: str


class DeleteInterviewResponse(BaseModel):
    """DELETE /interviews/{mock_id} response."""

    mock_id: str
    deleted: bool = True
    answers_deleted: int = 0


# ---------------------------------------------------------------------------
# Answers & feedback
# ---------------------------------------------------------------------------


class FeedbackResult(BaseModel):
    """Validated LLM grading of one answer."""

    rating: float = Field(ge=0, le=10)
    feedback: str


class AnswerSubmit(BaseModel):
    """POST /interviews/{mock_id}/answers request body."""

    question_index: int = Field(ge=0)
    user_answer: str


class UserAnswerResponse(BaseModel):
    """A graded answer as persisted."""

    id: int
    mock_id_ref: str
    question: str
    correct_ans: str | None = None
    user_ans: str
    feedback: str
    rating: float
    user_email: str
    created_at: str


# ---------------------------------------------------------------------------
# Transcription
# ---------------------------------------------------------------------------


class TranscriptionSegment(BaseModel):
    """A single transcribed span of speech."""

    text: str
    start: float = 0.0
    end: float = 0.0
    is_final: bool = True


class TranscriptionResponse(BaseModel):
    """POST /transcribe response."""

    text: str
    language: str = "unknown"
    segments: list[TranscriptionSegment] = Field(default_factory=list)
