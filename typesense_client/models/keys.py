"""API key models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class APIKey(BaseModel):
    """A Typesense API key.

    ``value`` holds the secret and is only returned in full by the create
    call; later reads return whatever the service sends (usually a prefix).
    """

    id: int
    value: str | None = None
    actions: list[str] = Field(default_factory=list)
    collections: list[str] = Field(default_factory=list)
    description: str = ""


class APIKeyCreateRequest(BaseModel):
    """Body of POST /keys."""

    description: str
    actions: list[str]
    collections: list[str]


class APIErrorResponse(BaseModel):
    """Generic error payload returned by the service on 400 responses."""

    message: str


__all__ = [
    "APIKey",
    "APIKeyCreateRequest",
    "APIErrorResponse",
]
