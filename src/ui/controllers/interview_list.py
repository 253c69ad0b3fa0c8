"""
Dashboard list of the user's past interviews.

Failures never propagate to the page: they are logged, shown as a
notification, and the list keeps its previous contents.
"""

import logging
from typing import Protocol

from src.core.models import SessionContext
from src.ui.api_client import APIError
from src.ui.notify import Notifier

logger = logging.getLogger(__name__)


class InterviewStore(Protocol):
    def list_interviews(self, user_email: str) -> list[dict]: ...

    def delete_interview(self, mock_id: str, user_email: str) -> dict: ...


class InterviewList:
    """Holds the signed-in user's interviews, most recent first.

    Args:
        store: Backend access (normally the ``APIClient``).
        notifier: Where failures are reported.
        optimistic_delete: Drop a row locally before the backend confirms
            the delete. The row stays dropped if the delete then fails.
    """

    def __init__(
        self,
        store: InterviewStore,
        notifier: Notifier,
        optimistic_delete: bool = True,
    ) -> None:
        self._store = store
        self._notifier = notifier
        self._optimistic_delete = optimistic_delete
        self._ctx: SessionContext | None = None
        self.items: list[dict] = []

    def load(self, ctx: SessionContext | None) -> list[dict]:
        """Fetch the interviews owned by ``ctx``; does nothing when signed out."""
        if ctx is None:
            return self.items
        self._ctx = ctx
        try:
            self.items = self._store.list_interviews(ctx.user_email)
        except APIError as exc:
            logger.error("Failed to fetch interview list: %s", exc.message)
            self._notifier.error("Failed to fetch interview list", exc.message)
        return self.items

    def _remove_local(self, mock_id: str) -> None:
        self.items = [i for i in self.items if i.get("mock_id") != mock_id]

    def delete(self, mock_id: str) -> bool:
        """Delete an interview.

        Returns:
            True when the backend confirmed the delete.
        """
        if self._ctx is None:
            self._notifier.error("Sign in to delete interviews")
            return False

        if self._optimistic_delete:
            self._remove_local(mock_id)

        try:
            self._store.delete_interview(mock_id, self._ctx.user_email)
        except APIError as exc:
            logger.error("Error deleting interview %s: %s", mock_id, exc.message)
            self._notifier.error("Failed to delete interview", exc.message)
            return False

        if not self._optimistic_delete:
            self._remove_local(mock_id)
        return True
