"""
Feedback module - LLM grading of interview answers.
"""

from src.services.feedback.grader import (
    AnswerGrader,
    build_feedback_prompt,
    parse_feedback_response,
)

__all__ = ["AnswerGrader", "build_feedback_prompt", "parse_feedback_response"]
