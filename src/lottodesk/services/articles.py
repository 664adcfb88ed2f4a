"""Article service — admin-posted news with an optional image."""

from __future__ import annotations

import logging
from typing import Any

from lottodesk.core.constants import ARTICLE_IMAGE_FIELD
from lottodesk.core.exceptions import StorageError, ValidationError
from lottodesk.services.uploads import IncomingFile

logger = logging.getLogger(__name__)


class ArticleService:
    def __init__(self, article_repo: Any, upload_store: Any) -> None:
        self.article_repo = article_repo
        self.upload_store = upload_store

    def list_articles(self) -> list[dict[str, Any]]:
        return self.article_repo.list_newest_first()

    def create_article(
        self,
        *,
        title: str | None,
        content: str | None,
        image: IncomingFile | None = None,
    ) -> dict[str, Any]:
        """Validate, store the image, insert. The image is removed if the insert fails."""
        if not title or not content:
            raise ValidationError("Title and content are required")

        image_ref = None
        if image is not None:
            image_ref = self.upload_store.save(image.file, image.filename, ARTICLE_IMAGE_FIELD)

        try:
            article_id = self.article_repo.create(title=title, content=content, image=image_ref)
        except StorageError:
            self.upload_store.discard(image_ref)
            raise

        logger.info("Article %d created", article_id)
        return {"id": article_id, "title": title, "content": content, "image": image_ref}
