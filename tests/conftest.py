"""Shared pytest fixtures for the MockMate test suite.

Provides mock LLM/STT providers, an in-memory database, and fake
collaborators for the UI controllers.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.core.models import InterviewQuestion, SessionContext

# ---------------------------------------------------------------------------
# LLM Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_llm():
    """Create a mock LLM provider for unit testing.

    Returns:
        AsyncMock: A mock implementing the BaseLLM interface whose default
        reply is a valid rating/feedback JSON object.
    """
    from src.services.llm.base import BaseLLM

    llm = AsyncMock(spec=BaseLLM)
    llm.generate.return_value = '{"rating": 7, "feedback": "Mention trade-offs."}'
    return llm


@pytest.fixture
def sample_questions() -> list[InterviewQuestion]:
    return [
        InterviewQuestion(question="What is a closure?", answer="A function with its scope."),
        InterviewQuestion(question="Explain the event loop.", answer="It schedules callbacks."),
        InterviewQuestion(question="What is REST?", answer="An architectural style."),
    ]


@pytest.fixture
def sample_questions_json(sample_questions) -> str:
    return json.dumps([q.model_dump() for q in sample_questions])


# ---------------------------------------------------------------------------
# STT Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_stt():
    """Create a mock STT provider returning two finalized segments."""
    from src.core.models import TranscriptionResponse, TranscriptionSegment
    from src.services.transcription.base import BaseSTT

    stt = AsyncMock(spec=BaseSTT)
    stt.transcribe.return_value = TranscriptionResponse(
        text="hello world",
        language="en",
        segments=[
            TranscriptionSegment(text="hello", start=0.0, end=0.5),
            TranscriptionSegment(text="world", start=0.5, end=1.0),
        ],
    )
    return stt


# ---------------------------------------------------------------------------
# Database Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite async engine with tables, dispose after test."""
    from sqlalchemy.ext.asyncio import create_async_engine

    from src.services.storage import models_db  # noqa: F401
    from src.services.storage.database import Base

    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Yield an AsyncSession bound to the test engine; rolls back after test."""
    from sqlalchemy.ext.asyncio import async_sessionmaker

    factory = async_sessionmaker(db_engine, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def repository(db_session):
    """InterviewRepository bound to the in-memory session."""
    from src.services.storage.repository import InterviewRepository

    return InterviewRepository(db_session)


# ---------------------------------------------------------------------------
# UI Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def ctx() -> SessionContext:
    return SessionContext(user_email="ada@example.com")


@pytest.fixture
def notifier():
    """Records every notification in ``calls`` as ``(level, message, description)``."""

    class RecordingNotifier:
        def __init__(self) -> None:
            self.calls: list[tuple[str, str, str | None]] = []

        def success(self, message, description=None):
            self.calls.append(("success", message, description))

        def info(self, message, description=None):
            self.calls.append(("info", message, description))

        def error(self, message, description=None):
            self.calls.append(("error", message, description))

        def messages(self, level: str | None = None) -> list[str]:
            return [m for lvl, m, _ in self.calls if level is None or lvl == level]

    return RecordingNotifier()


@pytest.fixture
def fake_camera():
    """A camera whose streams record how often their tracks were stopped."""

    class FakeTrack:
        kind = "video"

        def __init__(self) -> None:
            self.stop_calls = 0

        def stop(self) -> None:
            self.stop_calls += 1

    class FakeStream:
        def __init__(self) -> None:
            self.tracks = [FakeTrack()]

        def get_tracks(self):
            return list(self.tracks)

        def read_frame(self):
            return None

    camera = MagicMock()
    camera.streams = []

    def get_user_media(video=True, audio=False):
        stream = FakeStream()
        camera.streams.append(stream)
        return stream

    camera.get_user_media.side_effect = get_user_media
    return camera
