"""Shared response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    success: bool = True


class ClearedResponse(BaseModel):
    success: bool = True
    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    environment: str
    database: str


class ArticleResponse(BaseModel):
    id: int
    title: str
    content: str
    image: str | None = None
    created_at: datetime | None = None
