"""Article repository — data access for the ``articles`` table."""

from __future__ import annotations

from typing import Any

from lottodesk.repositories.base import BaseRepository


class ArticleRepository(BaseRepository):
    def __init__(self, pool: Any) -> None:
        super().__init__(pool=pool, table_name="articles")

    def create(self, *, title: str, content: str, image: str | None) -> int:
        return self.insert({"title": title, "content": content, "image": image})

    def list_newest_first(self) -> list[dict[str, Any]]:
        return self.find_where(order_by="created_at DESC, id DESC")
