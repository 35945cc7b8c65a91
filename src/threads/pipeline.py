"""End-to-end thread pipeline: validate -> extract ID -> fetch transcript -> segment."""

from __future__ import annotations

import logging

from src.thread_config import ThreadConfig
from src.threads.errors import InvalidThreadLengthError, InvalidUrlError, MissingInputError
from src.threads.segmenting import build_thread
from src.threads.transcript import fetch_transcript
from src.threads.video_id import extract_video_id

logger = logging.getLogger(__name__)


def generate_thread(
    youtube_url: str | None,
    thread_length: int,
    config: ThreadConfig | None = None,
) -> list[str]:
    """Full pipeline: URL -> video ID -> transcript -> thread segments.

    Args:
        youtube_url: Video URL or bare 11-character video ID.
        thread_length: Requested number of segments.
        config: Builder configuration; defaults to one built from settings.

    Returns:
        Ordered, non-empty list of thread segments.

    Raises:
        MissingInputError: *youtube_url* is empty or missing.
        InvalidThreadLengthError: *thread_length* is below 1.
        InvalidUrlError: No video ID could be recognized in *youtube_url*.
        TranscriptUnavailableError: The transcript source failed.
    """
    if not youtube_url:
        raise MissingInputError()

    if thread_length < 1:
        raise InvalidThreadLengthError(f"Thread length must be at least 1, got {thread_length}")

    # 1. Extract ID
    video_id = extract_video_id(youtube_url)
    if video_id is None:
        raise InvalidUrlError()

    # 2. Fetch transcript
    transcript = fetch_transcript(video_id)

    # 3. Segment
    threads = build_thread(transcript, thread_length, config or ThreadConfig.from_settings())
    logger.info(
        "Generated %d segments for video %s (requested %d)",
        len(threads),
        video_id,
        thread_length,
    )
    return threads
