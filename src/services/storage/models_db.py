"""
SQLAlchemy ORM models for MockMate.

Tables: ``mock_interviews``, ``user_answers``.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.core.utils import format_created_at
from src.services.storage.database import Base


class MockInterview(Base):
    """A generated interview: job details plus a JSON-encoded question list."""

    __tablename__ = "mock_interviews"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    mock_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    json_mock_resp: Mapped[str] = mapped_column(Text)
    job_position: Mapped[str] = mapped_column(String(255))
    job_desc: Mapped[str] = mapped_column(Text)
    job_experience: Mapped[str] = mapped_column(String(32))
    created_by: Mapped[str] = mapped_column(String(255), index=True)
    created_at: Mapped[str] = mapped_column(String(10), default=lambda: format_created_at())

    def __repr__(self) -> str:
        return f"<MockInterview id={self.id} mock_id={self.mock_id!r}>"


class UserAnswer(Base):
    """One graded answer to one interview question.

    ``mock_id_ref`` points at ``MockInterview.mock_id``; there is no foreign
    key, so referential integrity is kept by the repository.
    """

    __tablename__ = "user_answers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    mock_id_ref: Mapped[str] = mapped_column(String(64), index=True)
    question: Mapped[str] = mapped_column(Text)
    correct_ans: Mapped[str | None] = mapped_column(Text, nullable=True)
    user_ans: Mapped[str] = mapped_column(Text)
    feedback: Mapped[str] = mapped_column(Text)
    rating: Mapped[float] = mapped_column()
    user_email: Mapped[str] = mapped_column(String(255), index=True)
    created_at: Mapped[str] = mapped_column(String(10), default=lambda: format_created_at())

    def __repr__(self) -> str:
        return f"<UserAnswer id={self.id} mock={self.mock_id_ref!r} rating={self.rating}>"
