"""
Backend client for the Streamlit pages.

Streamlit reruns the page script synchronously, so this wraps a plain
``httpx.Client``.  Every failure becomes an :class:`APIError` whose
``message`` can be shown to the user as-is.
"""

import logging

import httpx
import streamlit as st

logger = logging.getLogger(__name__)

_START_HINT = "Start it with: `uvicorn src.api.app:app --reload --port 8000`"
# Calls that wait on the LLM or on Whisper.
_LLM_TIMEOUT = 120.0


class APIError(Exception):
    """A failed backend call.

    ``category`` is one of ``connection``, ``timeout``, ``http``, ``network``
    or ``unknown``.  For ``http`` failures ``code`` and ``status_code`` come
    from the backend's ``{detail, code, timestamp}`` error envelope, which
    lets the recorder tell a bad LLM reply apart from a storage failure.
    """

    def __init__(
        self,
        message: str,
        category: str = "unknown",
        code: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category
        self.code = code
        self.status_code = status_code


def _from_status_error(exc: httpx.HTTPStatusError) -> APIError:
    response = exc.response
    try:
        envelope = response.json()
    except ValueError:
        envelope = {}
    if not isinstance(envelope, dict):
        envelope = {}
    return APIError(
        str(envelope.get("detail") or response.text or exc),
        category="http",
        code=envelope.get("code"),
        status_code=response.status_code,
    )


class APIClient:
    """MockMate REST calls.  Owner-scoped calls send ``X-User-Email``."""

    def __init__(self, base_url: str = "http://localhost:8000") -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(base_url=self._base_url, timeout=30.0)

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = getattr(self._client, method)(path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            error = _from_status_error(exc)
            logger.debug("%s %s -> %s %s", method.upper(), path, error.status_code, error.code)
            raise error from None
        except httpx.ConnectError:
            raise APIError(f"Backend server is not running. {_START_HINT}", "connection") from None
        except httpx.TimeoutException:
            raise APIError("The backend took too long to answer. Try again.", "timeout") from None
        except httpx.HTTPError as exc:
            raise APIError(f"Network error: {exc}", "network") from None
        return response

    def _json(self, method: str, path: str, **kwargs):
        response = self._request(method, path, **kwargs)
        try:
            return response.json()
        except ValueError:
            logger.error("%s %s returned a non-JSON body", method.upper(), path)
            raise APIError("The backend sent an unreadable response.", "unknown") from None

    @staticmethod
    def _user(user_email: str) -> dict:
        return {"X-User-Email": user_email}

    # -- health --

    def health_check(self) -> dict:
        return self._json("get", "/health")

    def check_connection(self) -> tuple[bool, str]:
        """``(True, "Connected")`` or ``(False, <reason>)``."""
        try:
            self.health_check()
        except APIError as exc:
            return False, exc.message
        return True, "Connected"

    # -- interviews --

    def list_interviews(self, user_email: str) -> list[dict]:
        return self._json("get", "/api/v1/interviews", headers=self._user(user_email))

    def get_interview(self, mock_id: str) -> dict:
        return self._json("get", f"/api/v1/interviews/{mock_id}")

    def create_interview(
        self,
        user_email: str,
        job_position: str,
        job_desc: str,
        job_experience: int,
    ) -> dict:
        """Ask the backend to generate and store a new interview."""
        body = {
            "job_position": job_position,
            "job_desc": job_desc,
            "job_experience": job_experience,
        }
        return self._json(
            "post",
            "/api/v1/interviews",
            json=body,
            headers=self._user(user_email),
            timeout=_LLM_TIMEOUT,
        )

    def delete_interview(self, mock_id: str, user_email: str) -> dict:
        return self._json(
            "delete", f"/api/v1/interviews/{mock_id}", headers=self._user(user_email)
        )

    # -- answers --

    def submit_answer(
        self,
        mock_id: str,
        question_index: int,
        user_answer: str,
        user_email: str,
    ) -> dict:
        """Grade and store one answer; returns the stored answer record."""
        return self._json(
            "post",
            f"/api/v1/interviews/{mock_id}/answers",
            json={"question_index": question_index, "user_answer": user_answer},
            headers=self._user(user_email),
            timeout=_LLM_TIMEOUT,
        )

    def list_answers(self, mock_id: str, user_email: str) -> list[dict]:
        return self._json(
            "get", f"/api/v1/interviews/{mock_id}/answers", headers=self._user(user_email)
        )

    # -- transcription --

    def transcribe(self, audio: bytes, language: str | None = None) -> dict:
        params = {"language": language} if language else None
        return self._json(
            "post",
            "/api/v1/transcribe",
            content=audio,
            params=params,
            headers={"Content-Type": "application/octet-stream"},
            timeout=_LLM_TIMEOUT,
        )


@st.cache_resource
def get_api_client(base_url: str = "http://localhost:8000") -> APIClient:
    """One client per backend URL, shared across reruns and sessions."""
    return APIClient(base_url=base_url)
