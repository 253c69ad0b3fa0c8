"""
CRUD repository for the MockMate tables.

``InterviewRepository`` receives an ``AsyncSession`` and provides all
data-access methods.  It calls ``flush()`` rather than ``commit()`` so
that transaction boundaries are controlled by the caller (typically
:func:`get_session`).  Every query is an equality match on an interview
identifier or an owner email.
"""

import json
import logging
import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import InterviewNotFoundError
from src.core.models import InterviewQuestion
from src.core.utils import format_created_at
from src.services.storage.models_db import MockInterview, UserAnswer

logger = logging.getLogger(__name__)


class InterviewRepository:
    """Data-access layer for mock interviews and graded answers.

    Args:
        session: An active SQLAlchemy ``AsyncSession``.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Interviews
    # ------------------------------------------------------------------

    async def create_interview(
        self,
        user_email: str,
        job_position: str,
        job_desc: str,
        job_experience: int | str,
        questions: list[InterviewQuestion],
        mock_id: str | None = None,
    ) -> MockInterview:
        """Store a generated interview and return it."""
        interview = MockInterview(
            mock_id=mock_id or str(uuid.uuid4()),
            json_mock_resp=json.dumps([q.model_dump() for q in questions]),
            job_position=job_position,
            job_desc=job_desc,
            job_experience=str(job_experience),
            created_by=user_email,
            created_at=format_created_at(),
        )
        self._session.add(interview)
        await self._session.flush()
        return interview

    async def find_interview(self, mock_id: str) -> MockInterview | None:
        """Return the interview with *mock_id*, or ``None``."""
        stmt = select(MockInterview).where(MockInterview.mock_id == mock_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_interview(self, mock_id: str) -> MockInterview:
        """Return an interview or raise :class:`InterviewNotFoundError`."""
        interview = await self.find_interview(mock_id)
        if interview is None:
            raise InterviewNotFoundError(mock_id)
        return interview

    async def list_interviews(self, user_email: str) -> list[MockInterview]:
        """Return every interview owned by *user_email*, most recent first."""
        stmt = (
            select(MockInterview)
            .where(MockInterview.created_by == user_email)
            .order_by(MockInterview.id.desc())
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def delete_interview(self, mock_id: str) -> int:
        """Delete an interview together with its answers.

        Returns:
            Number of answer rows removed alongside the interview.
        """
        interview = await self.get_interview(mock_id)
        result = await self._session.execute(
            delete(UserAnswer).where(UserAnswer.mock_id_ref == mock_id)
        )
        await self._session.delete(interview)
        await self._session.flush()
        logger.info("Deleted interview %s (%d answers)", mock_id, result.rowcount)
        return result.rowcount

    # ------------------------------------------------------------------
    # Answers
    # ------------------------------------------------------------------

    async def create_user_answer(
        self,
        mock_id_ref: str,
        question: str,
        correct_ans: str | None,
        user_ans: str,
        feedback: str,
        rating: float,
        user_email: str,
        created_at: str | None = None,
    ) -> UserAnswer:
        """Insert one graded answer."""
        answer = UserAnswer(
            mock_id_ref=mock_id_ref,
            question=question,
            correct_ans=correct_ans,
            user_ans=user_ans,
            feedback=feedback,
            rating=rating,
            user_email=user_email,
            created_at=created_at or format_created_at(),
        )
        self._session.add(answer)
        await self._session.flush()
        return answer

    async def list_user_answers(
        self,
        mock_id: str,
        user_email: str | None = None,
    ) -> list[UserAnswer]:
        """Return answers for an interview in submission order."""
        stmt = (
            select(UserAnswer)
            .where(UserAnswer.mock_id_ref == mock_id)
            .order_by(UserAnswer.id.asc())
        )
        if user_email is not None:
            stmt = stmt.where(UserAnswer.user_email == user_email)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
