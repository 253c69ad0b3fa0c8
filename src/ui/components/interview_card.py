"""
Interview card display component for the dashboard list.
"""

from collections.abc import Callable

import streamlit as st


def render_interview_card(
    interview: dict,
    on_start: Callable[[str], None],
    on_feedback: Callable[[str], None],
    on_delete: Callable[[str], None],
) -> None:
    """Render one past interview with Start / Feedback / Delete actions."""
    mock_id = interview["mock_id"]

    with st.container(border=True):
        st.markdown(f"**{interview.get('job_position', 'Interview')}**")
        st.caption(f"{interview.get('job_experience', '?')} years of experience")
        st.caption(f"Created at: {interview.get('created_at', '')}")

        col_feedback, col_start, col_delete = st.columns(3)
        with col_feedback:
            if st.button("Feedback", key=f"feedback_{mock_id}", use_container_width=True):
                on_feedback(mock_id)
        with col_start:
            if st.button(
                "Start", key=f"start_{mock_id}", type="primary", use_container_width=True
            ):
                on_start(mock_id)
        with col_delete:
            if st.button("Delete", key=f"delete_{mock_id}", use_container_width=True):
                on_delete(mock_id)


def render_interview_grid(
    interviews: list[dict],
    on_start: Callable[[str], None],
    on_feedback: Callable[[str], None],
    on_delete: Callable[[str], None],
    columns: int = 3,
) -> None:
    """Lay interview cards out in a grid, most recent first."""
    if not interviews:
        st.info("No mock interviews yet.")
        return

    for row_start in range(0, len(interviews), columns):
        cols = st.columns(columns)
        for col, interview in zip(cols, interviews[row_start : row_start + columns]):
            with col:
                render_interview_card(interview, on_start, on_feedback, on_delete)
