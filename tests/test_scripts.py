"""Tests for the generate_thread command-line script."""

from __future__ import annotations

import importlib.util
import pathlib
from unittest.mock import patch

import pytest

from src.threads.errors import InvalidUrlError

SCRIPT_PATH = pathlib.Path(__file__).parent.parent / "scripts" / "generate_thread.py"

_spec = importlib.util.spec_from_file_location("generate_thread_script", SCRIPT_PATH)
assert _spec is not None and _spec.loader is not None
script = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(script)


class TestRun:
    def test_transcript_file(
        self, tmp_path: pathlib.Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        transcript = tmp_path / "talk.txt"
        transcript.write_text("Hello world. This is great! Another point.", encoding="utf-8")

        assert script.run(None, 3, str(transcript)) == 0

        out = capsys.readouterr().out
        assert out.strip() == (
            "1/3 🧵 Thread: Hello world\n\n2/3 This is great\n\n3/3 Another point"
        )

    def test_missing_transcript_file(
        self, tmp_path: pathlib.Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert script.run(None, 3, str(tmp_path / "does_not_exist.txt")) == 1
        assert capsys.readouterr().err.startswith("ERROR:")

    def test_invalid_length_with_transcript_file(
        self, tmp_path: pathlib.Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        transcript = tmp_path / "talk.txt"
        transcript.write_text("One. Two.", encoding="utf-8")

        assert script.run(None, 0, str(transcript)) == 1
        assert capsys.readouterr().err.startswith("ERROR:")

    def test_pipeline_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.object(script, "generate_thread", side_effect=InvalidUrlError()):
            assert script.run("not a url", 3) == 1
        assert capsys.readouterr().err.strip() == "ERROR: Invalid YouTube URL"
