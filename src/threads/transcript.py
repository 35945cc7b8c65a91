"""Fetch YouTube captions and flatten them into a single transcript string."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from youtube_transcript_api import YouTubeTranscriptApi

from src.config import settings
from src.threads.errors import TranscriptUnavailableError

logger = logging.getLogger(__name__)


def fetch_transcript(video_id: str, languages: Sequence[str] | None = None) -> str:
    """Return the caption text of *video_id* as one space-joined string.

    Timestamps are discarded. A single attempt is made; there are no retries.

    Raises:
        TranscriptUnavailableError: Captions disabled or missing, video
            unavailable, or any other failure of the transcript source.
    """
    langs = list(languages or settings.transcript_languages)
    try:
        fetched = YouTubeTranscriptApi().fetch(video_id, languages=langs)
        return " ".join(snippet.text for snippet in fetched)
    except Exception as exc:
        # The source fails in many ways (no captions, blocked IP, private video);
        # callers only need to know the transcript could not be obtained.
        logger.warning("Transcript fetch failed for video %s: %s", video_id, exc)
        raise TranscriptUnavailableError() from exc
