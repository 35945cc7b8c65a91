"""Text helpers for presenting a generated thread."""

from __future__ import annotations


def number_segments(threads: list[str]) -> list[str]:
    """Prefix each segment with its ``i/n`` position, e.g. ``"2/5 ..."``."""
    total = len(threads)
    return [f"{i}/{total} {text}" for i, text in enumerate(threads, 1)]


def format_copy_all(threads: list[str]) -> str:
    """Join numbered segments with blank lines, ready to paste in one go."""
    return "\n\n".join(number_segments(threads))
