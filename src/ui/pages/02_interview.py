"""
Interview page: walk through the questions and record an answer to each.
"""

# Ensure project root is on sys.path (Streamlit page files need this).
import sys as _sys
from pathlib import Path as _Path

_r = str(_Path(__file__).resolve().parents[3])
_r in _sys.path or _sys.path.insert(0, _r)  # noqa: E702,I001

import streamlit as st  # noqa: E402

from src.ui.capabilities import (  # noqa: E402
    detect_camera_capability,
    detect_speech_capability,
)
from src.ui.components.question_panel import render_question_panel  # noqa: E402
from src.ui.components.recorder_panel import render_recorder_panel  # noqa: E402
from src.ui.controllers import AnswerRecorder, SessionStatus  # noqa: E402
from src.ui.notify import StreamlitNotifier  # noqa: E402
from src.ui.utils import (  # noqa: E402
    current_client,
    current_context,
    interview_session,
    open_interview,
    release_recorder,
)

mock_id = st.query_params.get("mock_id") or st.session_state.get("active_mock_id")
if not mock_id:
    st.info("Pick an interview on the dashboard to start.")
    st.stop()
open_interview(mock_id)

session = interview_session(mock_id)

if session.status is SessionStatus.empty:
    st.warning("No interview questions found.")
    st.stop()

client = current_client()
recorder: AnswerRecorder | None = st.session_state.get("recorder")
if recorder is None:
    recorder = AnswerRecorder(
        client,
        StreamlitNotifier(),
        speech=detect_speech_capability(client),
        camera=detect_camera_capability(),
        ctx=current_context(),
        on_answer_save=session.on_answer_save,
    )
    st.session_state.recorder = recorder

st.header(session.interview.get("job_position", "Interview"))

col_questions, col_recorder = st.columns(2)
with col_questions:
    render_question_panel(session)
with col_recorder:
    render_recorder_panel(recorder, session)

# -- Navigation --
col_prev, col_next, col_end = st.columns(3)
with col_prev:
    if session.has_previous and st.button("Previous Question", use_container_width=True):
        session.previous()
        st.rerun()
with col_next:
    if session.has_next and st.button("Next Question", use_container_width=True):
        session.next()
        st.rerun()
with col_end:
    if session.is_last and st.button("End Interview", type="primary", use_container_width=True):
        release_recorder()
        st.session_state.active_mock_id = session.feedback_key
        st.switch_page("pages/03_feedback.py")
