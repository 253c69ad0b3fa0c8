"""
Dashboard page: create a new mock interview and browse past ones.
"""

# Ensure project root is on sys.path (Streamlit page files need this).
import sys as _sys
from pathlib import Path as _Path

_r = str(_Path(__file__).resolve().parents[3])
_r in _sys.path or _sys.path.insert(0, _r)  # noqa: E702,I001

import streamlit as st  # noqa: E402

from src.ui.api_client import APIError  # noqa: E402
from src.ui.components.interview_card import render_interview_grid  # noqa: E402
from src.ui.utils import (  # noqa: E402
    current_client,
    current_context,
    interview_list,
    open_interview,
)

client = current_client()
ctx = current_context()

st.header("Dashboard")
st.caption("Create and start your AI mock interview")

if ctx is None:
    st.warning("Enter your email in the sidebar to see your interviews.")
    st.stop()

# -- New interview --
with st.expander("+ Add New", expanded=False):
    with st.form("new_interview"):
        job_position = st.text_input("Job Role/Job Position", placeholder="Ex. Full Stack Developer")
        job_desc = st.text_area(
            "Job Description/Tech Stack (In Short)",
            placeholder="Ex. React, Angular, NodeJs, MySql etc",
        )
        job_experience = st.number_input(
            "Years of experience", min_value=0, max_value=60, value=1, step=1
        )
        submitted = st.form_submit_button("Start Interview", type="primary")

    if submitted:
        if not job_position.strip() or not job_desc.strip():
            st.error("Job position and description are required.")
        else:
            with st.spinner("Generating interview questions..."):
                try:
                    created = client.create_interview(
                        ctx.user_email, job_position, job_desc, int(job_experience)
                    )
                except APIError as exc:
                    st.error(f"Failed to create interview: {exc.message}")
                    created = None
            if created is not None:
                # Force a list reload on the next dashboard visit.
                st.session_state.pop("_list_user", None)
                open_interview(created["mock_id"])
                st.switch_page("pages/02_interview.py")

# -- Previous interviews --
controller = interview_list()

col_title, col_refresh = st.columns([6, 1])
with col_title:
    st.subheader("Previous Mock Interviews")
with col_refresh:
    if st.button("Refresh", key="dashboard_refresh"):
        controller.load(ctx)
        st.rerun()


def _start(mock_id: str) -> None:
    open_interview(mock_id)
    st.switch_page("pages/02_interview.py")


def _feedback(mock_id: str) -> None:
    open_interview(mock_id)
    st.switch_page("pages/03_feedback.py")


def _delete(mock_id: str) -> None:
    if controller.delete(mock_id):
        st.session_state["_delete_toast"] = "Interview deleted"
    if st.session_state.get("active_mock_id") == mock_id:
        open_interview(None)
    st.rerun()


if "_delete_toast" in st.session_state:
    st.success(st.session_state.pop("_delete_toast"))

render_interview_grid(controller.items, _start, _feedback, _delete)
