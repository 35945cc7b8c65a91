"""Tests for the YouTube transcript source (library calls are mocked)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from src.threads.errors import ErrorKind, TranscriptUnavailableError
from src.threads.transcript import fetch_transcript


def _snippet(text: str) -> MagicMock:
    return MagicMock(text=text, start=0.0, duration=1.0)


class TestFetchTranscript:
    def test_joins_snippet_text(self) -> None:
        api = MagicMock()
        api.fetch.return_value = [_snippet("hello there."), _snippet("general"), _snippet("kenobi!")]

        with patch("src.threads.transcript.YouTubeTranscriptApi", return_value=api):
            text = fetch_transcript("abc123XYZ_q")

        assert text == "hello there. general kenobi!"
        api.fetch.assert_called_once_with("abc123XYZ_q", languages=["en"])

    def test_explicit_languages(self) -> None:
        api = MagicMock()
        api.fetch.return_value = [_snippet("hola")]

        with patch("src.threads.transcript.YouTubeTranscriptApi", return_value=api):
            fetch_transcript("abc123XYZ_q", languages=("es", "en"))

        api.fetch.assert_called_once_with("abc123XYZ_q", languages=["es", "en"])

    def test_empty_transcript(self) -> None:
        api = MagicMock()
        api.fetch.return_value = []

        with patch("src.threads.transcript.YouTubeTranscriptApi", return_value=api):
            assert fetch_transcript("abc123XYZ_q") == ""

    def test_failure_is_remapped(self) -> None:
        api = MagicMock()
        cause = RuntimeError("Subtitles are disabled for this video")
        api.fetch.side_effect = cause

        with (
            patch("src.threads.transcript.YouTubeTranscriptApi", return_value=api),
            pytest.raises(TranscriptUnavailableError) as exc_info,
        ):
            fetch_transcript("abc123XYZ_q")

        assert exc_info.value.kind is ErrorKind.TRANSCRIPT_UNAVAILABLE
        assert exc_info.value.__cause__ is cause
        assert "captions" in exc_info.value.message
