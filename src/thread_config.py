"""Thread configuration: the ThreadConfig dataclass used by the segment builder."""

from __future__ import annotations

from dataclasses import dataclass

from src.config import Settings, settings

EMPTY_TRANSCRIPT_MESSAGE = "Unable to generate thread from this video."
NO_SEGMENTS_MESSAGE = "Unable to generate meaningful threads from this video."


@dataclass(frozen=True)
class ThreadConfig:
    """Immutable configuration for building a thread from a transcript.

    Defaults mirror the historical post-length limit: segments longer than
    ``max_length`` are cut to ``max_length - len(ellipsis)`` characters and
    the ellipsis is appended (267 + 3 = 270).
    """

    max_length: int = 270
    ellipsis: str = "..."
    marker: str = "🧵 Thread: "
    empty_transcript_message: str = EMPTY_TRANSCRIPT_MESSAGE
    no_segments_message: str = NO_SEGMENTS_MESSAGE

    def __post_init__(self) -> None:
        if self.max_length <= len(self.ellipsis):
            msg = (
                f"max_length ({self.max_length}) must be greater than the "
                f"ellipsis length ({len(self.ellipsis)})"
            )
            raise ValueError(msg)

    @classmethod
    def from_settings(cls, app_settings: Settings | None = None) -> ThreadConfig:
        """Build a config from application settings (defaults to the global ones)."""
        s = app_settings or settings
        return cls(
            max_length=s.max_segment_length,
            ellipsis=s.truncation_suffix,
            marker=s.thread_marker,
        )
