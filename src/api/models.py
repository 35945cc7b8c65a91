"""Pydantic request/response schemas for the Thread Generator API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.config import settings


class ThreadRequest(BaseModel):
    """Request body for the /api/generate-thread endpoint.

    Field names follow the browser client's camelCase keys; snake_case
    names are accepted as well.
    """

    model_config = ConfigDict(populate_by_name=True)

    youtube_url: str | None = Field(default=None, alias="youtubeUrl")
    thread_length: int = Field(default=settings.default_thread_length, alias="threadLength")


class ThreadResponse(BaseModel):
    """Response body for a successfully generated thread."""

    threads: list[str]


class ErrorResponse(BaseModel):
    """Body returned for every handled failure."""

    error: str
