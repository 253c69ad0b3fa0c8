"""
Recorder panel: webcam preview, record toggle, transcript box, save button.
"""

import hashlib

import streamlit as st

from src.ui.controllers import AnswerRecorder, InterviewSession


def _render_webcam(recorder: AnswerRecorder) -> None:
    with st.container(border=True):
        if recorder.webcam_enabled and recorder.stream is not None:
            frame = recorder.stream.read_frame()
            if frame is not None:
                st.image(frame, channels="RGB", use_container_width=True)
            else:
                st.caption("Waiting for camera frames...")
            if st.button("Disable Webcam", use_container_width=True):
                recorder.disable_webcam()
                st.rerun()
        else:
            st.markdown("\U0001f4f7 Webcam is off")
            if st.button("Enable Webcam", use_container_width=True):
                recorder.enable_webcam()
                st.rerun()


def _render_audio_capture(recorder: AnswerRecorder) -> None:
    """Feed each newly recorded clip to the recorder exactly once."""
    audio = st.audio_input("Speak your answer")
    if audio is None:
        return
    clip = audio.getvalue()
    digest = hashlib.sha1(clip).hexdigest()
    if st.session_state.get("_last_clip") == digest:
        return
    st.session_state._last_clip = digest
    recorder.capture(clip)
    st.rerun()


def render_recorder_panel(recorder: AnswerRecorder, session: InterviewSession) -> None:
    """Render the answer recorder for the active question of *session*."""
    _render_webcam(recorder)

    label = "⏹ Stop Recording" if recorder.is_recording else "\U0001f3a4 Record Answer"
    if st.button(label, use_container_width=True):
        recorder.toggle_recording()
        st.rerun()

    if recorder.is_recording:
        _render_audio_capture(recorder)

    recorder.user_answer = st.text_area(
        "Your answer",
        value=recorder.user_answer,
        placeholder="Your answer will appear here...",
        height=130,
    )

    if st.button(
        "Save Answer",
        type="primary",
        disabled=recorder.loading or not recorder.user_answer.strip(),
        use_container_width=True,
    ):
        with st.spinner("Saving your answer..."):
            recorder.submit(session.interview["mock_id"], session.active_index)
        st.rerun()
