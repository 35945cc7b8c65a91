"""Sentence splitting and bucketing of a transcript into thread segments."""

from __future__ import annotations

import re

from src.thread_config import ThreadConfig

_SENTENCE_END_RE = re.compile(r"[.!?]+")

DEFAULT_CONFIG = ThreadConfig()


def split_sentences(transcript: str) -> list[str]:
    """Split *transcript* on runs of ``.``, ``!`` and ``?``.

    Each piece is stripped of surrounding whitespace and empty pieces are
    dropped. Order is preserved.
    """
    pieces = (piece.strip() for piece in _SENTENCE_END_RE.split(transcript))
    return [piece for piece in pieces if piece]


def _truncate(text: str, config: ThreadConfig) -> str:
    if len(text) <= config.max_length:
        return text
    return text[: config.max_length - len(config.ellipsis)] + config.ellipsis


def build_thread(
    transcript: str,
    target_count: int,
    config: ThreadConfig = DEFAULT_CONFIG,
) -> list[str]:
    """Bucket the sentences of *transcript* into at most *target_count* segments.

    Sentences are divided evenly (floor division, at least one per segment);
    the last segment takes every remaining sentence. Segments over
    ``config.max_length`` are truncated with ``config.ellipsis``, and the
    first segment of a multi-segment thread is prefixed with
    ``config.marker``.

    When *target_count* exceeds the number of sentences, trailing segments
    come out empty and are dropped, so fewer than *target_count* segments
    may be returned.

    Args:
        transcript: Raw transcript text.
        target_count: Requested number of segments (must be >= 1).
        config: Length limit, ellipsis, marker and placeholder messages.

    Returns:
        Ordered list of segments; never empty.

    Raises:
        ValueError: If *target_count* is less than 1.
    """
    if target_count < 1:
        msg = f"target_count must be >= 1, got {target_count}"
        raise ValueError(msg)

    sentences = split_sentences(transcript)
    if not sentences:
        return [config.empty_transcript_message]

    per_segment = max(1, len(sentences) // target_count)
    segments: list[str] = []

    for i in range(target_count):
        start = i * per_segment
        if start >= len(sentences):
            # Every remaining bucket, the last included, would be empty.
            break
        end = len(sentences) if i == target_count - 1 else (i + 1) * per_segment

        text = _truncate(". ".join(sentences[start:end]).strip(), config)

        if i == 0 and target_count > 1:
            text = f"{config.marker}{text}"

        if text:
            segments.append(text)

    return segments or [config.no_segments_message]
