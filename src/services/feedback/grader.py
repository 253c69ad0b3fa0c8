"""
Answer grading service.

Sends an interview question and the user's transcribed answer to the
configured LLM, validates the JSON rating/feedback it returns, and stores
the graded answer.  A record is written only after the response has been
parsed and validated; every failure before that leaves the store untouched.
"""

import json
import logging
from numbers import Real

from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from src.core.exceptions import (
    EmptyAnswerError,
    FeedbackError,
    FeedbackFormatError,
    FeedbackParseError,
    QuestionIndexError,
)
from src.core.models import FeedbackResult, SessionContext
from src.core.utils import format_created_at, strip_code_fences
from src.services.llm.base import BaseLLM
from src.services.questions import parse_question_list
from src.services.storage.models_db import MockInterview, UserAnswer
from src.services.storage.repository import InterviewRepository

logger = logging.getLogger(__name__)

MAX_RATING = 10


def build_feedback_prompt(question: str, user_answer: str) -> str:
    """Build the grading prompt for one question/answer pair."""
    return (
        f"Question: {question}, User Answer: {user_answer}. "
        "Please give a rating out of 10 and feedback on improvement in JSON format "
        '{ "rating": <number>, "feedback": <text> }'
    )


def _coerce_rating(value) -> float:
    """Return *value* as a float rating, or raise FeedbackFormatError."""
    if isinstance(value, bool):
        raise FeedbackFormatError(f"Rating must be a number, got {value!r}")
    if isinstance(value, Real):
        rating = float(value)
    elif isinstance(value, str):
        try:
            rating = float(value.strip())
        except ValueError as exc:
            raise FeedbackFormatError(f"Rating must be a number, got {value!r}") from exc
    else:
        raise FeedbackFormatError(f"Rating must be a number, got {value!r}")

    if not 0 <= rating <= MAX_RATING:
        raise FeedbackFormatError(f"Rating {rating} outside 0-{MAX_RATING}")
    return rating


def parse_feedback_response(raw: str) -> FeedbackResult:
    """Turn a raw LLM reply into a validated :class:`FeedbackResult`.

    Code-fence markers are stripped before decoding, so a fenced reply parses
    exactly like an unfenced one.

    Raises:
        FeedbackParseError: The reply is not valid JSON.
        FeedbackFormatError: ``rating`` or ``feedback`` is missing or unusable.
    """
    text = strip_code_fences(raw)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FeedbackParseError(f"Failed to parse feedback response: {text[:200]}") from exc

    if not isinstance(data, dict):
        raise FeedbackFormatError("Feedback response is not a JSON object")

    rating = data.get("rating")
    feedback = data.get("feedback")
    if rating is None or rating == "" or not feedback:
        raise FeedbackFormatError()

    return FeedbackResult(rating=_coerce_rating(rating), feedback=str(feedback).strip())


class AnswerGrader:
    """Grades answers with an LLM and persists the graded result."""

    def __init__(self, llm: BaseLLM) -> None:
        self._llm = llm

    @retry(
        stop=stop_after_attempt(2),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
        retry=retry_if_exception_type((ConnectionError, TimeoutError)),
        reraise=True,
    )
    async def _call_llm(self, prompt: str) -> str:
        """Call LLM with retry for transient failures."""
        return await self._llm.generate(prompt, json_mode=True)

    async def grade(self, question: str, user_answer: str) -> FeedbackResult:
        """Rate one answer.

        Raises:
            EmptyAnswerError: The answer is blank after trimming.
            FeedbackError: The LLM call failed.
            FeedbackParseError / FeedbackFormatError: The reply was unusable.
        """
        if not user_answer or not user_answer.strip():
            raise EmptyAnswerError()

        prompt = build_feedback_prompt(question, user_answer)
        try:
            raw_response = await self._call_llm(prompt)
        except Exception as exc:
            raise FeedbackError(f"LLM call failed: {exc}") from exc

        try:
            return parse_feedback_response(raw_response)
        except FeedbackError:
            logger.warning("Unusable feedback response: %r", raw_response[:200])
            raise

    async def submit_answer(
        self,
        repo: InterviewRepository,
        ctx: SessionContext,
        interview: MockInterview,
        question_index: int,
        user_answer: str,
    ) -> UserAnswer:
        """Grade the answer to question *question_index* and store it.

        Returns:
            The persisted ``UserAnswer``.
        """
        questions = parse_question_list(interview.json_mock_resp)
        if not 0 <= question_index < len(questions):
            raise QuestionIndexError(question_index, len(questions))
        target = questions[question_index]

        result = await self.grade(target.question, user_answer)

        answer = await repo.create_user_answer(
            mock_id_ref=interview.mock_id,
            question=target.question,
            correct_ans=target.answer,
            user_ans=user_answer,
            feedback=result.feedback,
            rating=result.rating,
            user_email=ctx.user_email,
            created_at=format_created_at(),
        )
        logger.info(
            "Stored answer %s for interview %s question %d (rating %.1f)",
            answer.id,
            interview.mock_id,
            question_index,
            result.rating,
        )
        return answer
