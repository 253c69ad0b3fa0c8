"""
Questions module - Interview question generation and decoding.
"""

from src.services.questions.generator import QuestionGenerator, parse_question_list

__all__ = ["QuestionGenerator", "parse_question_list"]
