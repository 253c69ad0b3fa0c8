"""
Question panel: question tabs plus the active question text.
"""

import streamlit as st

from src.ui.controllers import InterviewSession


def render_question_panel(session: InterviewSession) -> None:
    """Render the questions of *session*, highlighting the active one."""
    with st.container(border=True):
        cols = st.columns(min(len(session.questions), 5))
        for index in range(len(session.questions)):
            with cols[index % len(cols)]:
                button_type = "primary" if index == session.active_index else "secondary"
                if st.button(
                    f"Question #{index + 1}",
                    key=f"question_tab_{index}",
                    type=button_type,
                    use_container_width=True,
                ):
                    session.select(index)
                    st.rerun()

        question = session.active_question
        if question is not None:
            st.markdown(f"#### {question.question}")

        st.info(
            "Click **Record Answer** when you are ready to answer. When you "
            "save, you get feedback and a rating for your answer, and the "
            "next question opens."
        )
