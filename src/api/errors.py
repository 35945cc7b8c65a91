"""Exception handlers mapping thread generation errors to JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse
from src.threads.errors import ThreadGenerationError

logger = logging.getLogger(__name__)


def install_error_handlers(app: FastAPI) -> None:
    """Register the handler that renders ThreadGenerationError as ``{"error": ...}``."""

    @app.exception_handler(ThreadGenerationError)
    async def _handle_thread_error(request: Request, exc: ThreadGenerationError) -> JSONResponse:
        logger.info(
            "API_ERROR path=%s kind=%s status=%d msg=%s",
            request.url.path,
            exc.kind.value,
            exc.status_code,
            exc.message,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message).model_dump(),
        )
