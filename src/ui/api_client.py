"""HTTP client wrapper for the Thread Generator FastAPI backend."""

from __future__ import annotations

import httpx
import streamlit as st

from src.config import settings

API_URL = settings.api_url


def check_health() -> bool:
    """Return True if the API server responds to /health."""
    try:
        r = httpx.get(f"{API_URL}/health", timeout=5.0)
        return r.status_code == 200
    except httpx.ConnectError:
        return False


def _error_message(response: httpx.Response) -> str:
    """Pull the API's ``error`` field out of a failed response, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP {response.status_code}"


def generate_thread(youtube_url: str, thread_length: int) -> dict:  # type: ignore[type-arg]
    """Ask the API to build a thread; returns ``{}`` after reporting any failure."""
    try:
        r = httpx.post(
            f"{API_URL}/api/generate-thread",
            json={"youtubeUrl": youtube_url, "threadLength": thread_length},
            timeout=60.0,
        )
    except httpx.HTTPError as e:
        st.error(f"Failed to generate thread: {e}")
        return {}

    if r.is_error:
        st.error(_error_message(r))
        return {}
    return r.json()  # type: ignore[no-any-return]
