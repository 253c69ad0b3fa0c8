"""Tests for interview question generation and question-list decoding."""

import json

import pytest

from src.core.exceptions import QuestionGenerationError
from src.services.questions import QuestionGenerator, parse_question_list
from src.services.questions.generator import build_question_prompt


class TestParseQuestionList:
    def test_plain_list(self, sample_questions_json, sample_questions):
        assert parse_question_list(sample_questions_json) == sample_questions

    def test_fenced_list(self, sample_questions_json, sample_questions):
        assert parse_question_list(f"```json\n{sample_questions_json}\n```") == sample_questions

    def test_capitalized_keys(self):
        raw = json.dumps([{"Question": "Why Python?", "Answer": "Readability"}])
        [question] = parse_question_list(raw)
        assert question.question == "Why Python?"
        assert question.answer == "Readability"

    def test_missing_answer_defaults_to_empty(self):
        [question] = parse_question_list('[{"question": "Q?"}]')
        assert question.answer == ""

    def test_wrapped_list_is_unwrapped(self):
        raw = json.dumps({"questions": [{"question": "Q?", "answer": "A"}]})
        assert [q.question for q in parse_question_list(raw)] == ["Q?"]

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            '{"a": 1}',
            '"just a string"',
            '[{"answer": "no question"}]',
            '["bare string"]',
        ],
    )
    def test_invalid_lists_raise_value_error(self, raw):
        with pytest.raises(ValueError):
            parse_question_list(raw)


class TestBuildQuestionPrompt:
    def test_includes_job_details_and_count(self):
        prompt = build_question_prompt("Data Engineer", "Spark, Airflow", 4, 7)
        assert "Data Engineer" in prompt
        assert "Spark, Airflow" in prompt
        assert "Years of Experience: 4" in prompt
        assert "give us 7 interview questions" in prompt


class TestQuestionGenerator:
    async def test_generates_questions(self, mock_llm, sample_questions_json, sample_questions):
        mock_llm.generate.return_value = sample_questions_json
        questions = await QuestionGenerator(mock_llm).generate("Dev", "Python", 2, count=5)
        assert questions == sample_questions

    async def test_truncates_to_count(self, mock_llm, sample_questions_json):
        mock_llm.generate.return_value = sample_questions_json
        questions = await QuestionGenerator(mock_llm).generate("Dev", "Python", 2, count=2)
        assert len(questions) == 2

    async def test_unusable_reply_raises(self, mock_llm):
        mock_llm.generate.return_value = "Sorry, I cannot help with that."
        with pytest.raises(QuestionGenerationError):
            await QuestionGenerator(mock_llm).generate("Dev", "Python", 2)

    async def test_empty_list_raises(self, mock_llm):
        mock_llm.generate.return_value = "[]"
        with pytest.raises(QuestionGenerationError, match="no questions"):
            await QuestionGenerator(mock_llm).generate("Dev", "Python", 2)

    async def test_llm_failure_raises(self, mock_llm):
        mock_llm.generate.side_effect = RuntimeError("boom")
        with pytest.raises(QuestionGenerationError):
            await QuestionGenerator(mock_llm).generate("Dev", "Python", 2)
