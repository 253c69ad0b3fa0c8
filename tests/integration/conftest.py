"""Integration test fixtures for MockMate.

Provides an async HTTP client wired to an in-memory SQLite database with
real repository operations and a mocked LLM.
"""

import json
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.api.dependencies import get_llm
from src.services.llm.base import BaseLLM
from src.services.storage import database

USER = {"X-User-Email": "ada@example.com"}


@pytest.fixture
def api_llm(sample_questions_json):
    """Mock LLM that answers question-generation and grading prompts."""
    llm = AsyncMock(spec=BaseLLM)

    async def generate(prompt: str, **kwargs) -> str:
        if prompt.startswith("Question:"):
            return '```json\n{"rating": 8, "feedback": "Clear and concise."}\n```'
        return sample_questions_json

    llm.generate.side_effect = generate
    return llm


@pytest.fixture
def app(api_llm):
    """Create a fresh FastAPI application instance with the mocked LLM."""
    app = create_app()
    app.dependency_overrides[get_llm] = lambda: api_llm
    return app


@pytest.fixture
async def async_client(app, db_engine):
    """AsyncClient backed by the in-memory test engine.

    Injects the test engine into the database module so that all routes
    use the same in-memory SQLite with tables already created.
    """
    database._engine = db_engine
    database._session_factory = None
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    database.reset_engine()


@pytest.fixture
async def interview(async_client) -> dict:
    """An interview created through the API for ada@example.com."""
    resp = await async_client.post(
        "/api/v1/interviews",
        json={"job_position": "Backend Developer", "job_desc": "Python", "job_experience": 3},
        headers=USER,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert len(json.loads(body["json_mock_resp"])) == 3
    return body
