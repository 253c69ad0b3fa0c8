"""
View controllers - UI state machines driven by the Streamlit pages.
"""

from src.ui.controllers.answer_recorder import AnswerRecorder
from src.ui.controllers.interview_list import InterviewList
from src.ui.controllers.interview_session import InterviewSession, SessionStatus

__all__ = ["AnswerRecorder", "InterviewList", "InterviewSession", "SessionStatus"]
