"""Error taxonomy for thread generation.

Every failure surfaced to a caller is a :class:`ThreadGenerationError`
carrying a machine-readable :class:`ErrorKind`, a user-facing message and the
HTTP status class the API should answer with.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of thread generation failures."""

    MISSING_INPUT = "missing_input"
    INVALID_URL = "invalid_url"
    INVALID_THREAD_LENGTH = "invalid_thread_length"
    TRANSCRIPT_UNAVAILABLE = "transcript_unavailable"
    UNEXPECTED = "unexpected"


class ThreadGenerationError(Exception):
    """Base class for errors reported back to the caller."""

    kind: ErrorKind = ErrorKind.UNEXPECTED
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingInputError(ThreadGenerationError):
    kind = ErrorKind.MISSING_INPUT
    status_code = 400
    default_message = "YouTube URL is required"


class InvalidUrlError(ThreadGenerationError):
    kind = ErrorKind.INVALID_URL
    status_code = 400
    default_message = "Invalid YouTube URL"


class InvalidThreadLengthError(ThreadGenerationError):
    kind = ErrorKind.INVALID_THREAD_LENGTH
    status_code = 400
    default_message = "Thread length must be at least 1"


class TranscriptUnavailableError(ThreadGenerationError):
    kind = ErrorKind.TRANSCRIPT_UNAVAILABLE
    status_code = 400
    default_message = (
        "Unable to fetch transcript. The video might not have captions available."
    )


class UnexpectedError(ThreadGenerationError):
    """Any failure that is not one of the client-caused kinds above."""
