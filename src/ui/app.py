"""
MockMate Streamlit UI.

``streamlit run src/ui/app.py`` (the FastAPI backend must be running).
"""

# Streamlit puts src/ui/ first on sys.path; the ``src.*`` imports need the repo root.
import sys as _sys
from pathlib import Path as _Path

_r = str(_Path(__file__).resolve().parents[2])
_r in _sys.path or _sys.path.insert(0, _r)  # noqa: E702,I001

import streamlit as st  # noqa: E402

from src.core.config import get_settings  # noqa: E402
from src.core.utils import configure_logging  # noqa: E402
from src.ui.utils import current_client, release_recorder  # noqa: E402

settings = get_settings()
configure_logging(settings.log_level)

st.set_page_config(page_title="MockMate", page_icon="\U0001f3a4", layout="wide")

# Per-browser-session state shared by all pages.
st.session_state.setdefault("api_base_url", settings.api_base_url)
st.session_state.setdefault("user_email", "")
st.session_state.setdefault("active_mock_id", None)

with st.sidebar:
    st.title("\U0001f3a4 MockMate")
    st.caption("Practice interviews, get AI feedback")
    st.divider()

    # The email is the session identity sent with every owner-scoped call.
    st.session_state.user_email = st.text_input(
        "Your email",
        value=st.session_state.user_email,
        placeholder="you@example.com",
        help="Interviews and answers are stored under this address.",
    )
    st.session_state.api_base_url = st.text_input(
        "Backend API URL",
        value=st.session_state.api_base_url,
        help="URL of the MockMate FastAPI backend",
    )

    connected, status = current_client().check_connection()
    (st.success if connected else st.error)(f"Backend: {status}")

dashboard_page = st.Page(
    "pages/01_dashboard.py", title="Dashboard", icon="\U0001f4cb", default=True
)
interview_page = st.Page(
    "pages/02_interview.py", title="Interview", icon="\U0001f3a4", url_path="interview"
)
feedback_page = st.Page(
    "pages/03_feedback.py", title="Feedback", icon="\U0001f4ca", url_path="feedback"
)

page = st.navigation([dashboard_page, interview_page, feedback_page])

# Any page other than the interview gives the camera back.
if page.url_path != interview_page.url_path:
    release_recorder()

page.run()
