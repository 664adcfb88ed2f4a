"""Admin page route — serves the static admin UI file when it is deployed."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

from lottodesk.api.deps import get_settings

router = APIRouter(tags=["admin"])


@router.get("/admin", include_in_schema=False)
def admin_page(request: Request) -> FileResponse:
    page = get_settings(request).admin_page_path
    if not page.is_file():
        raise HTTPException(status_code=404, detail="Admin page not installed")
    return FileResponse(page, media_type="text/html")
