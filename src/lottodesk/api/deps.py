"""Dependencies shared by API routes."""

from __future__ import annotations

from fastapi import HTTPException, Request, UploadFile

from lottodesk.core import database
from lottodesk.core.config import Settings
from lottodesk.core.exceptions import LotteryError
from lottodesk.services.uploads import IncomingFile, UploadStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[no-any-return]


def require_database(request: Request) -> None:
    """Answer 503 up front when there is no database to talk to."""
    settings = get_settings(request)
    if not settings.database_configured:
        raise HTTPException(
            status_code=503,
            detail="Database not configured. Set ORACLE_DSN to enable tickets and draws.",
        )
    if not database.is_pool_ready():
        raise HTTPException(status_code=503, detail="Database unavailable")


def get_upload_store(request: Request) -> UploadStore:
    return UploadStore(get_settings(request).upload_path)


def as_incoming(upload: UploadFile | None) -> IncomingFile | None:
    """Browsers send an empty part when no file was chosen; treat it as absent."""
    if upload is None or not upload.filename:
        return None
    return IncomingFile(file=upload.file, filename=upload.filename)


def to_http(error: LotteryError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.detail)
