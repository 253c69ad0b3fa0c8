"""
Storage module - persistence of mock interviews and graded answers.
"""

from src.services.storage.database import get_session, init_db
from src.services.storage.models_db import MockInterview, UserAnswer
from src.services.storage.repository import InterviewRepository

__all__ = ["InterviewRepository", "MockInterview", "UserAnswer", "get_session", "init_db"]
