from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # App config
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_url: str = "http://localhost:8000"  # base URL the Streamlit UI calls
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8501",
    ]
    log_level: str = "INFO"

    # Transcript source
    transcript_languages: list[str] = ["en"]

    # Thread shaping
    max_segment_length: int = 270
    truncation_suffix: str = "..."
    thread_marker: str = "🧵 Thread: "
    default_thread_length: int = 5
    min_thread_length: int = 3  # UI slider bounds only; the API accepts any value >= 1
    max_thread_length: int = 15

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
