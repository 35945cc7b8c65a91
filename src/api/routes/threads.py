"""Thread endpoint: turn a YouTube video's transcript into a post thread."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter

from src.api.models import ErrorResponse, ThreadRequest, ThreadResponse
from src.threads.errors import ThreadGenerationError, UnexpectedError
from src.threads.pipeline import generate_thread

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/api/generate-thread",
    response_model=ThreadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(request: ThreadRequest) -> ThreadResponse:
    """Generate a thread from the captions of the requested video.

    - 400: URL missing or unrecognized, thread length below 1, or captions
      unavailable.
    - 500: anything else.
    """
    try:
        # The transcript fetch is blocking network I/O; keep it off the event loop.
        threads = await asyncio.to_thread(
            generate_thread, request.youtube_url, request.thread_length
        )
    except ThreadGenerationError:
        raise
    except Exception as exc:
        logger.exception("Error generating thread for %r", request.youtube_url)
        raise UnexpectedError() from exc

    return ThreadResponse(threads=threads)
