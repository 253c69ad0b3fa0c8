"""
Feedback page: ratings and improvement notes for each answered question.
"""

# Ensure project root is on sys.path (Streamlit page files need this).
import sys as _sys
from pathlib import Path as _Path

_r = str(_Path(__file__).resolve().parents[3])
_r in _sys.path or _sys.path.insert(0, _r)  # noqa: E702,I001

import streamlit as st  # noqa: E402

from src.ui.api_client import APIError  # noqa: E402
from src.ui.utils import current_client, current_context  # noqa: E402

client = current_client()
ctx = current_context()

mock_id = st.query_params.get("mock_id") or st.session_state.get("active_mock_id")
if not mock_id:
    st.info("Pick an interview on the dashboard to see its feedback.")
    st.stop()
if ctx is None:
    st.warning("Enter your email in the sidebar to see your feedback.")
    st.stop()

try:
    answers = client.list_answers(mock_id, ctx.user_email)
except APIError as exc:
    st.error(f"Failed to load feedback: {exc.message}")
    st.stop()

if not answers:
    st.info("No interview feedback record found.")
    if st.button("Go Home"):
        st.switch_page("pages/01_dashboard.py")
    st.stop()

st.header("Congratulations!")
st.subheader("Here is your interview feedback")

overall = sum(a["rating"] for a in answers) / len(answers)
st.markdown(f"Your overall interview rating: **{overall:.1f}/10**")
st.caption(
    "Find below each interview question with the correct answer, your "
    "answer and feedback for improvement."
)

for answer in answers:
    with st.expander(answer["question"]):
        st.markdown(f"**Rating:** {answer['rating']:g}")
        st.markdown(f"**Your Answer:** {answer['user_ans']}")
        if answer.get("correct_ans"):
            st.markdown(f"**Correct Answer:** {answer['correct_ans']}")
        st.markdown(f"**Feedback:** {answer['feedback']}")

if st.button("Go Home", type="primary"):
    st.switch_page("pages/01_dashboard.py")
