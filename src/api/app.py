"""
MockMate backend.

Backs the Streamlit UI.  Run it with ``uvicorn src.api.app:app --reload``.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.middleware.error_handler import register_error_handlers
from src.api.routes import answers, interviews, transcribe
from src.core.config import get_settings
from src.core.models import HealthResponse
from src.core.utils import configure_logging
from src.services.storage.database import close_db, init_db
from src.services.transcription import stt_enabled


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create tables on startup, dispose the DB engine on shutdown."""
    configure_logging(get_settings().log_level)
    await init_db()
    yield
    await close_db()


def create_app() -> FastAPI:
    """Build the backend app with its middleware and routers."""
    app = FastAPI(
        title="MockMate",
        description="Mock-interview practice with AI-graded spoken answers.",
        version="0.1.0",
        lifespan=lifespan,
    )

    settings = get_settings()
    # The Streamlit origin must be listed for browser calls.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Also tells the UI whether to offer answer recording.
    @app.get("/health", response_model=HealthResponse, tags=["system"])
    async def health() -> HealthResponse:
        return HealthResponse(
            timestamp=datetime.now(UTC),
            stt_available=stt_enabled(get_settings().whisper_provider),
        )

    for router in (interviews.router, answers.router, transcribe.router):
        app.include_router(router, prefix="/api/v1")
    return app


app = create_app()
