"""
State of one running interview: its questions and which one is active.
"""

import logging
from enum import StrEnum
from typing import Protocol

from src.core.models import InterviewQuestion
from src.services.questions import parse_question_list
from src.ui.api_client import APIError

logger = logging.getLogger(__name__)


class InterviewSource(Protocol):
    def get_interview(self, mock_id: str) -> dict: ...


class SessionStatus(StrEnum):
    loading = "loading"
    empty = "empty"
    ready = "ready"


class InterviewSession:
    """Loads an interview by its route identifier and tracks navigation.

    Navigation never leaves ``[0, len(questions) - 1]``.  At the last
    question the only forward action is ending the interview.
    """

    def __init__(self, source: InterviewSource, mock_id: str) -> None:
        self._source = source
        self.mock_id = mock_id
        self.interview: dict | None = None
        self.questions: list[InterviewQuestion] = []
        self.active_index = 0
        self.status = SessionStatus.loading

    def load(self) -> SessionStatus:
        """Fetch the interview and decode its questions.

        A missing interview or an undecodable question list leaves the
        session empty; the error is only logged.
        """
        self.status = SessionStatus.loading
        try:
            record = self._source.get_interview(self.mock_id)
            questions = parse_question_list(record["json_mock_resp"])
        except APIError as exc:
            logger.error("Failed to fetch interview details for %s: %s", self.mock_id, exc.message)
        except (KeyError, ValueError) as exc:
            logger.error("Failed to decode questions of interview %s: %s", self.mock_id, exc)
        else:
            self.questions = questions
            self.interview = record
        finally:
            self.status = SessionStatus.ready if self.questions else SessionStatus.empty
        return self.status

    @property
    def active_question(self) -> InterviewQuestion | None:
        if not self.questions:
            return None
        return self.questions[self.active_index]

    @property
    def has_previous(self) -> bool:
        return self.active_index > 0

    @property
    def has_next(self) -> bool:
        return self.active_index < len(self.questions) - 1

    @property
    def is_last(self) -> bool:
        return bool(self.questions) and not self.has_next

    def previous(self) -> None:
        if self.has_previous:
            self.active_index -= 1

    def next(self) -> None:
        if self.has_next:
            self.active_index += 1

    def select(self, index: int) -> None:
        if 0 <= index < len(self.questions):
            self.active_index = index

    def on_answer_save(self, _record: dict | None = None) -> None:
        """Advance after a saved answer; stays put on the last question."""
        if self.has_next:
            self.active_index += 1

    @property
    def feedback_key(self) -> str | None:
        """Identifier of the feedback view reached by ending the interview."""
        return self.interview["mock_id"] if self.interview else None
