"""Article routes — /api/articles."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from lottodesk.api.deps import as_incoming, get_upload_store, require_database, to_http
from lottodesk.api.schemas.common import ArticleResponse
from lottodesk.core.exceptions import LotteryError

router = APIRouter(prefix="/api/articles", tags=["articles"], dependencies=[Depends(require_database)])


def _get_article_service(request: Request):  # type: ignore[no-untyped-def]
    from lottodesk.core.database import get_pool
    from lottodesk.repositories.article_repository import ArticleRepository
    from lottodesk.services.articles import ArticleService

    return ArticleService(
        article_repo=ArticleRepository(get_pool()),
        upload_store=get_upload_store(request),
    )


@router.get("", response_model=list[ArticleResponse])
def list_articles(request: Request) -> list[dict[str, Any]]:
    try:
        return _get_article_service(request).list_articles()
    except LotteryError as e:
        raise to_http(e) from e


@router.post("", response_model=ArticleResponse)
def create_article(
    request: Request,
    title: str | None = Form(default=None),
    content: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
) -> dict[str, Any]:
    """Publish an article with an optional image."""
    try:
        service = _get_article_service(request)
        return service.create_article(title=title, content=content, image=as_incoming(image))
    except LotteryError as e:
        raise to_http(e) from e
