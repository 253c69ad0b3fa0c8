"""UI utility functions."""

import streamlit as st

from src.core.config import get_settings
from src.core.models import SessionContext
from src.ui.api_client import APIClient, get_api_client
from src.ui.controllers import AnswerRecorder, InterviewList, InterviewSession
from src.ui.notify import StreamlitNotifier


def current_client() -> APIClient:
    return get_api_client(st.session_state.get("api_base_url", get_settings().api_base_url))


def current_context() -> SessionContext | None:
    """Session context for the signed-in user, or ``None`` when signed out."""
    email = (st.session_state.get("user_email") or "").strip()
    return SessionContext(user_email=email) if email else None


def interview_list() -> InterviewList:
    """Return the dashboard list controller, reloading when the user changes."""
    ctx = current_context()
    controller = st.session_state.get("interview_list")
    if controller is None:
        controller = InterviewList(
            current_client(),
            StreamlitNotifier(),
            optimistic_delete=get_settings().optimistic_delete,
        )
        st.session_state.interview_list = controller
    user = ctx.user_email if ctx else None
    if st.session_state.get("_list_user") != user:
        st.session_state._list_user = user
        controller.items = []
        controller.load(ctx)
    return controller


def release_recorder() -> None:
    """Close the current recorder, releasing the camera."""
    recorder: AnswerRecorder | None = st.session_state.pop("recorder", None)
    if recorder is not None:
        recorder.close()


def open_interview(mock_id: str | None) -> None:
    """Make *mock_id* the active interview for the interview and feedback pages."""
    if st.session_state.get("active_mock_id") != mock_id:
        release_recorder()
        st.session_state.pop("interview_session", None)
    st.session_state.active_mock_id = mock_id


def interview_session(mock_id: str) -> InterviewSession:
    session: InterviewSession | None = st.session_state.get("interview_session")
    if session is None or session.mock_id != mock_id:
        release_recorder()
        session = InterviewSession(current_client(), mock_id)
        with st.spinner("Loading interview details..."):
            session.load()
        st.session_state.interview_session = session
    return session
