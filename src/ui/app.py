"""Thread Generator -- Streamlit UI.

Single page: paste a YouTube URL, pick a thread length, get ready-to-copy
posts.
"""

from __future__ import annotations

import streamlit as st

from src.config import settings
from src.ui.api_client import check_health, generate_thread
from src.ui.formatting import format_copy_all

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(page_title="X Thread Generator", layout="centered")

st.session_state.setdefault("youtube_url", "")
st.session_state.setdefault("thread_length", settings.default_thread_length)
st.session_state.setdefault("threads", [])


def _reset() -> None:
    """Clear the form and results (runs before widgets are re-rendered)."""
    st.session_state["youtube_url"] = ""
    st.session_state["thread_length"] = settings.default_thread_length
    st.session_state["threads"] = []


# ---------------------------------------------------------------------------
# Sidebar -- API status
# ---------------------------------------------------------------------------
with st.sidebar:
    st.title("X Thread Generator")
    st.markdown("---")

    api_healthy = check_health()
    if api_healthy:
        st.markdown(":green_circle: API connected")
    else:
        st.markdown(":red_circle: API unreachable")

# ---------------------------------------------------------------------------
# Input form
# ---------------------------------------------------------------------------
st.header("X Thread Generator")
st.write("Transform YouTube videos into engaging X threads.")

youtube_url: str = st.text_input(
    "YouTube Video URL",
    placeholder="https://www.youtube.com/watch?v=...",
    key="youtube_url",
)

thread_length: int = st.slider(
    "Thread Length (posts)",
    min_value=settings.min_thread_length,
    max_value=settings.max_thread_length,
    key="thread_length",
)

col_generate, col_reset = st.columns([4, 1])

with col_generate:
    generate_clicked = st.button(
        "Generate Thread",
        type="primary",
        disabled=not youtube_url.strip(),
    )

with col_reset:
    if st.session_state["threads"]:
        st.button("Reset", on_click=_reset)

if generate_clicked:
    if not api_healthy:
        st.error("Cannot generate: the API server is not reachable.")
    else:
        with st.spinner("Generating..."):
            result = generate_thread(youtube_url, thread_length)
        # Error case is already handled inside generate_thread via st.error
        if result:
            st.session_state["threads"] = result.get("threads", [])
            st.rerun()

# ---------------------------------------------------------------------------
# Thread display
# ---------------------------------------------------------------------------
threads: list[str] = st.session_state["threads"]
if threads:
    st.subheader("Generated Thread")

    with st.expander("Copy all"):
        st.code(format_copy_all(threads), language=None)

    for i, text in enumerate(threads, 1):
        with st.container(border=True):
            st.markdown(f"**{i}/{len(threads)}**")
            # st.code renders a built-in copy-to-clipboard button
            st.code(text, language=None, wrap_lines=True)
            if i < len(threads):
                st.caption("🧵 Thread continues...")
