"""
MockMate settings, read from the environment and an optional ``.env`` file.

Both the backend and the Streamlit UI call ``get_settings()``.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """MockMate application settings loaded from environment / .env file.

    Attributes:
        llm_provider: Which LLM backend grades answers ("gemini", "claude" or "ollama").
        whisper_provider: STT backend ("local" for faster-whisper, "none" to disable).
        database_url: Async SQLAlchemy connection string.
        optimistic_delete: Remove interviews from the dashboard list before the
            backend confirms the delete.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- LLM Provider ---
    llm_provider: str = "gemini"

    # Gemini (Google Generative AI) settings
    gemini_api_key: str = ""  # Required when llm_provider="gemini"
    gemini_model: str = "gemini-1.5-flash"

    # Claude (Anthropic API) settings
    claude_api_key: str = ""
    claude_model: str = "claude-sonnet-4-20250514"

    # Ollama (local LLM) settings
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.2"

    # --- Speech-to-text ---
    whisper_provider: str = "local"  # "local" = faster-whisper, "none" = recording disabled
    whisper_model: str = "base"  # Model size: tiny, base, small, medium, large-v3
    speech_language: str = "en-US"  # BCP-47 tag; the primary subtag is passed to Whisper

    # --- Interviews ---
    question_count: int = 5  # Questions generated per new mock interview
    optimistic_delete: bool = True

    # --- Application ---
    app_host: str = "0.0.0.0"  # Bind address for the FastAPI server
    app_port: int = 8000
    api_base_url: str = "http://localhost:8000"  # Used by the Streamlit UI
    cors_origins: list[str] = ["http://localhost:8501", "http://localhost:3000"]
    log_level: str = "INFO"

    # --- Storage ---
    database_url: str = "sqlite+aiosqlite:///data/mockmate.db"


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process; tests patch this function."""
    return Settings()
