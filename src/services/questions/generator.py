"""
Interview question generation.

Asks the LLM for a set of question/answer pairs tailored to a job position,
description and experience level, and decodes the JSON list it returns.
"""

import json
import logging

from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from src.core.exceptions import QuestionGenerationError
from src.core.models import InterviewQuestion
from src.core.utils import strip_code_fences
from src.services.llm.base import BaseLLM

logger = logging.getLogger(__name__)


def _field(item: dict, name: str) -> str:
    """Read *name* from a question dict, ignoring key case."""
    for key, value in item.items():
        if key.lower() == name:
            return "" if value is None else str(value)
    return ""


def parse_question_list(raw: str) -> list[InterviewQuestion]:
    """Decode a JSON-encoded question list.

    Accepts code-fenced text and ``Question``/``Answer`` keys in any case.

    Raises:
        ValueError: The text is not a JSON list of question objects.
    """
    data = json.loads(strip_code_fences(raw))
    if isinstance(data, dict):
        # Some models wrap the list: {"questions": [...]}
        lists = [v for v in data.values() if isinstance(v, list)]
        if len(lists) != 1:
            raise ValueError("Expected a JSON list of questions")
        data = lists[0]
    if not isinstance(data, list):
        raise ValueError("Expected a JSON list of questions")

    questions = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError(f"Question entry is not an object: {item!r}")
        question = _field(item, "question").strip()
        if not question:
            raise ValueError(f"Question entry has no question text: {item!r}")
        questions.append(InterviewQuestion(question=question, answer=_field(item, "answer")))
    return questions


def build_question_prompt(
    job_position: str,
    job_desc: str,
    job_experience: int,
    count: int,
) -> str:
    """Build the question-generation prompt."""
    return (
        f"Job position: {job_position}, Job Description: {job_desc}, "
        f"Years of Experience: {job_experience}. "
        f"Depending on the job position, job description and years of experience, "
        f"give us {count} interview questions along with answers in JSON format. "
        'Return a JSON list of objects with "question" and "answer" fields.'
    )


class QuestionGenerator:
    """Generates interview questions with an LLM provider."""

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

    async def generate(
        self,
        job_position: str,
        job_desc: str,
        job_experience: int,
        count: int = 5,
    ) -> list[InterviewQuestion]:
        """Return *count* generated questions (the model may return fewer).

        Raises:
            QuestionGenerationError: The LLM failed or returned no usable list.
        """
        prompt = build_question_prompt(job_position, job_desc, job_experience, count)
        try:
            raw_response = await self._call_llm(prompt)
        except Exception as exc:
            raise QuestionGenerationError(f"LLM call failed: {exc}") from exc

        try:
            questions = parse_question_list(raw_response)
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError subclass
            logger.warning("Unusable question list from LLM: %r", raw_response[:200])
            raise QuestionGenerationError(f"Invalid question list from LLM: {exc}") from exc

        if not questions:
            raise QuestionGenerationError("LLM returned no questions")
        return questions[:count]
