"""Tests for answer grading: prompt building, reply validation, persistence."""

import json

import pytest

from src.core.exceptions import (
    EmptyAnswerError,
    FeedbackError,
    FeedbackFormatError,
    FeedbackParseError,
    QuestionIndexError,
)
from src.core.models import SessionContext
from src.services.feedback import AnswerGrader, build_feedback_prompt, parse_feedback_response

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _make_interview(repository, sample_questions):
    return await repository.create_interview(
        user_email="ada@example.com",
        job_position="Frontend Developer",
        job_desc="JavaScript",
        job_experience=2,
        questions=sample_questions,
    )


# ---------------------------------------------------------------------------
# build_feedback_prompt
# ---------------------------------------------------------------------------


class TestBuildFeedbackPrompt:
    def test_embeds_question_and_answer(self):
        prompt = build_feedback_prompt("What is a closure?", "A function and its scope")
        assert prompt.startswith("Question: What is a closure?, User Answer: A function and its scope.")
        assert "rating out of 10" in prompt
        assert '"rating"' in prompt and '"feedback"' in prompt


# ---------------------------------------------------------------------------
# parse_feedback_response
# ---------------------------------------------------------------------------


class TestParseFeedbackResponse:
    def test_plain_json(self):
        result = parse_feedback_response('{"rating": 8, "feedback": "Solid answer."}')
        assert result.rating == 8.0
        assert result.feedback == "Solid answer."

    @pytest.mark.parametrize(
        "fenced",
        [
            '```json\n{"rating": 8, "feedback": "Solid answer."}\n```',
            '```\n{"rating": 8, "feedback": "Solid answer."}\n```',
        ],
    )
    def test_fenced_reply_parses_like_unfenced(self, fenced):
        plain = parse_feedback_response('{"rating": 8, "feedback": "Solid answer."}')
        assert parse_feedback_response(fenced) == plain

    def test_zero_rating_is_accepted(self):
        result = parse_feedback_response('{"rating": 0, "feedback": "Off topic."}')
        assert result.rating == 0.0

    def test_numeric_string_rating(self):
        assert parse_feedback_response('{"rating": "6.5", "feedback": "ok"}').rating == 6.5

    def test_invalid_json_raises_parse_error(self):
        with pytest.raises(FeedbackParseError):
            parse_feedback_response("Rating: 7/10, nice work")

    @pytest.mark.parametrize(
        "payload",
        [
            {"feedback": "No rating"},
            {"rating": 5},
            {"rating": 5, "feedback": ""},
            {"rating": "", "feedback": "text"},
            {"rating": None, "feedback": "text"},
        ],
    )
    def test_missing_fields_raise_format_error(self, payload):
        with pytest.raises(FeedbackFormatError):
            parse_feedback_response(json.dumps(payload))

    @pytest.mark.parametrize("rating", [11, -1, "ten", True])
    def test_unusable_rating_raises_format_error(self, rating):
        with pytest.raises(FeedbackFormatError):
            parse_feedback_response(json.dumps({"rating": rating, "feedback": "x"}))

    def test_non_object_raises_format_error(self):
        with pytest.raises(FeedbackFormatError):
            parse_feedback_response("[1, 2, 3]")


# ---------------------------------------------------------------------------
# AnswerGrader.grade
# ---------------------------------------------------------------------------


class TestGrade:
    async def test_returns_parsed_feedback(self, mock_llm):
        result = await AnswerGrader(mock_llm).grade("What is REST?", "An architectural style")
        assert result.rating == 7.0
        assert result.feedback == "Mention trade-offs."
        prompt = mock_llm.generate.call_args.args[0]
        assert "What is REST?" in prompt
        assert "An architectural style" in prompt

    @pytest.mark.parametrize("answer", ["", "   ", "\n\t"])
    async def test_blank_answer_rejected_without_llm_call(self, mock_llm, answer):
        with pytest.raises(EmptyAnswerError):
            await AnswerGrader(mock_llm).grade("Q?", answer)
        mock_llm.generate.assert_not_called()

    async def test_llm_failure_wrapped(self, mock_llm):
        mock_llm.generate.side_effect = RuntimeError("quota exceeded")
        with pytest.raises(FeedbackError, match="quota exceeded"):
            await AnswerGrader(mock_llm).grade("Q?", "answer")


# ---------------------------------------------------------------------------
# AnswerGrader.submit_answer
# ---------------------------------------------------------------------------


class TestSubmitAnswer:
    async def test_stores_exactly_one_record(self, mock_llm, repository, sample_questions, ctx):
        interview = await _make_interview(repository, sample_questions)

        answer = await AnswerGrader(mock_llm).submit_answer(
            repository, ctx, interview, question_index=1, user_answer="It runs callbacks"
        )

        stored = await repository.list_user_answers(interview.mock_id)
        assert [a.id for a in stored] == [answer.id]
        assert answer.question == "Explain the event loop."
        assert answer.correct_ans == "It schedules callbacks."
        assert answer.user_ans == "It runs callbacks"
        assert answer.rating == 7.0
        assert answer.feedback == "Mention trade-offs."
        assert answer.user_email == ctx.user_email
        assert answer.mock_id_ref == interview.mock_id

    @pytest.mark.parametrize("answer", ["", "    "])
    async def test_blank_answer_writes_nothing(self, mock_llm, repository, sample_questions, ctx, answer):
        interview = await _make_interview(repository, sample_questions)
        with pytest.raises(EmptyAnswerError):
            await AnswerGrader(mock_llm).submit_answer(repository, ctx, interview, 0, answer)
        assert await repository.list_user_answers(interview.mock_id) == []

    @pytest.mark.parametrize(
        ("reply", "error"),
        [
            ("not json at all", FeedbackParseError),
            ('{"rating": 4}', FeedbackFormatError),
            ('{"feedback": "no rating"}', FeedbackFormatError),
        ],
    )
    async def test_bad_reply_writes_nothing(
        self, mock_llm, repository, sample_questions, ctx, reply, error
    ):
        interview = await _make_interview(repository, sample_questions)
        mock_llm.generate.return_value = reply
        with pytest.raises(error):
            await AnswerGrader(mock_llm).submit_answer(repository, ctx, interview, 0, "answer")
        assert await repository.list_user_answers(interview.mock_id) == []

    async def test_question_index_out_of_range(self, mock_llm, repository, sample_questions, ctx):
        interview = await _make_interview(repository, sample_questions)
        with pytest.raises(QuestionIndexError):
            await AnswerGrader(mock_llm).submit_answer(repository, ctx, interview, 3, "answer")
        mock_llm.generate.assert_not_called()

    async def test_other_user_answer_recorded_under_their_email(
        self, mock_llm, repository, sample_questions
    ):
        interview = await _make_interview(repository, sample_questions)
        bob = SessionContext(user_email="bob@example.com")
        answer = await AnswerGrader(mock_llm).submit_answer(repository, bob, interview, 2, "REST")
        assert answer.user_email == "bob@example.com"
