"""
Mock interview REST endpoints.

List, create (LLM question generation), fetch and delete interviews.
Owner-scoped routes read the user from the ``X-User-Email`` header.
"""

import logging

from fastapi import APIRouter, Depends

from src.api.dependencies import get_llm, get_session_context
from src.core.config import get_settings
from src.core.exceptions import InterviewNotFoundError
from src.core.models import (
    DeleteInterviewResponse,
    InterviewCreate,
    InterviewResponse,
    SessionContext,
)
from src.services.llm import BaseLLM
from src.services.questions import QuestionGenerator
from src.services.storage.database import get_session
from src.services.storage.repository import InterviewRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/interviews", tags=["interviews"])


def _to_response(interview) -> InterviewResponse:
    """Convert an ORM MockInterview to its API response model."""
    return InterviewResponse(
        id=interview.id,
        mock_id=interview.mock_id,
        json_mock_resp=interview.json_mock_resp,
        job_position=interview.job_position,
        job_desc=interview.job_desc,
        job_experience=interview.job_experience,
        created_by=interview.created_by,
        created_at=interview.created_at,
    )


@router.get("", response_model=list[InterviewResponse])
async def list_interviews(ctx: SessionContext = Depends(get_session_context)):
    """List the caller's interviews, most recent first."""
    async with get_session() as session:
        repo = InterviewRepository(session)
        interviews = await repo.list_interviews(ctx.user_email)
    return [_to_response(i) for i in interviews]


@router.post("", response_model=InterviewResponse, status_code=201)
async def create_interview(
    body: InterviewCreate,
    ctx: SessionContext = Depends(get_session_context),
    llm: BaseLLM = Depends(get_llm),
):
    """Generate a question set for a job and store it as a new interview."""
    count = body.question_count or get_settings().question_count
    questions = await QuestionGenerator(llm).generate(
        job_position=body.job_position,
        job_desc=body.job_desc,
        job_experience=body.job_experience,
        count=count,
    )
    async with get_session() as session:
        repo = InterviewRepository(session)
        interview = await repo.create_interview(
            user_email=ctx.user_email,
            job_position=body.job_position,
            job_desc=body.job_desc,
            job_experience=body.job_experience,
            questions=questions,
        )
    logger.info("Created interview %s with %d questions", interview.mock_id, len(questions))
    return _to_response(interview)


@router.get("/{mock_id}", response_model=InterviewResponse)
async def get_interview(mock_id: str):
    """Fetch one interview by its route identifier."""
    async with get_session() as session:
        interview = await InterviewRepository(session).get_interview(mock_id)
    return _to_response(interview)


@router.delete("/{mock_id}", response_model=DeleteInterviewResponse)
async def delete_interview(
    mock_id: str,
    ctx: SessionContext = Depends(get_session_context),
):
    """Delete one of the caller's interviews and its answers."""
    async with get_session() as session:
        repo = InterviewRepository(session)
        interview = await repo.get_interview(mock_id)
        if interview.created_by != ctx.user_email:
            raise InterviewNotFoundError(mock_id)
        answers_deleted = await repo.delete_interview(mock_id)
    return DeleteInterviewResponse(mock_id=mock_id, answers_deleted=answers_deleted)
