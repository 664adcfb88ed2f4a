"""Winning-numbers repository — data access for the ``winning_numbers`` table."""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any

from lottodesk.repositories.base import BaseRepository

DEACTIVATE_ALL_SQL = "UPDATE winning_numbers SET is_active = 0 WHERE is_active = 1"
LOCK_SQL = "LOCK TABLE winning_numbers IN EXCLUSIVE MODE"


class WinningNumbersRepository(BaseRepository):
    """Draw rows with a single active flag."""

    def __init__(self, pool: Any) -> None:
        super().__init__(pool=pool, table_name="winning_numbers")

    @staticmethod
    def _to_record(row: dict[str, Any]) -> dict[str, Any]:
        """Decode the JSON numbers column and normalise Oracle types."""
        record = dict(row)
        if isinstance(record.get("numbers"), str):
            record["numbers"] = json.loads(record["numbers"])
        if isinstance(record.get("draw_date"), datetime):
            record["draw_date"] = record["draw_date"].date()
        if "is_active" in record:
            record["is_active"] = bool(record["is_active"])
        return record

    def replace_active(self, numbers: list[int], draw_date: date, draw_time: str) -> int:
        """Deactivate every row and insert a new active one, atomically.

        The exclusive table lock serialises concurrent callers; readers keep
        seeing the previous active row until the commit.
        """
        with self.transaction() as cur:
            self._timed_execute(cur, LOCK_SQL)
            self._timed_execute(cur, DEACTIVATE_ALL_SQL)
            return self._insert_returning_id(
                cur,
                {
                    "numbers": json.dumps(numbers),
                    "draw_date": draw_date,
                    "draw_time": draw_time,
                    "is_active": 1,
                },
            )

    def find_active(self) -> dict[str, Any] | None:
        """The active row with the latest created_at, or ``None``."""
        rows = self.find_where({"is_active": 1}, order_by="created_at DESC, id DESC", limit=1)
        return self._to_record(rows[0]) if rows else None

    def deactivate_all(self) -> int:
        return self.update_where({"is_active": 0}, filters={"is_active": 1})
