"""
Answer REST endpoints.

Grades a spoken answer with the LLM and stores it, and lists the graded
answers of an interview for the feedback page.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_llm, get_session_context
from src.core.models import AnswerSubmit, SessionContext, UserAnswerResponse
from src.services.feedback import AnswerGrader
from src.services.llm import BaseLLM
from src.services.storage.database import get_session
from src.services.storage.repository import InterviewRepository

router = APIRouter(prefix="/interviews/{mock_id}/answers", tags=["answers"])


def _to_response(answer) -> UserAnswerResponse:
    return UserAnswerResponse(
        id=answer.id,
        mock_id_ref=answer.mock_id_ref,
        question=answer.question,
        correct_ans=answer.correct_ans,
        user_ans=answer.user_ans,
        feedback=answer.feedback,
        rating=answer.rating,
        user_email=answer.user_email,
        created_at=answer.created_at,
    )


@router.post("", response_model=UserAnswerResponse, status_code=201)
async def submit_answer(
    mock_id: str,
    body: AnswerSubmit,
    ctx: SessionContext = Depends(get_session_context),
    llm: BaseLLM = Depends(get_llm),
):
    """Grade the answer to one question and store it.

    Nothing is written unless the LLM reply parses and validates.
    """
    async with get_session() as session:
        repo = InterviewRepository(session)
        interview = await repo.get_interview(mock_id)
        answer = await AnswerGrader(llm).submit_answer(
            repo,
            ctx,
            interview,
            question_index=body.question_index,
            user_answer=body.user_answer,
        )
    return _to_response(answer)


@router.get("", response_model=list[UserAnswerResponse])
async def list_answers(
    mock_id: str,
    ctx: SessionContext = Depends(get_session_context),
):
    """List the caller's graded answers for an interview, in question order."""
    async with get_session() as session:
        repo = InterviewRepository(session)
        await repo.get_interview(mock_id)
        answers = await repo.list_user_answers(mock_id, user_email=ctx.user_email)
    return [_to_response(a) for a in answers]
