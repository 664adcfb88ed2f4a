"""Winning-numbers service — the single active draw.

Each draw row goes ``active → deactivated`` exactly once and is never
reactivated or deleted. Setting new numbers supersedes the current draw in
one transaction, so readers always see either the old draw or the new one.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any

from lottodesk.core.constants import CLEARED_MESSAGE, DEFAULT_DRAW_TIME, PICK_COUNT
from lottodesk.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

_DRAW_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)(?::([0-5]\d))?$")


def normalize_draw_time(value: str) -> str:
    """Accept ``HH:MM`` or ``HH:MM:SS`` and return ``HH:MM:SS``."""
    match = _DRAW_TIME_RE.match(value.strip())
    if match is None:
        raise ValidationError(f"Invalid draw time: {value!r} (expected HH:MM or HH:MM:SS)")
    hours, minutes, seconds = match.groups()
    return f"{hours}:{minutes}:{seconds or '00'}"


class WinningNumbersService:
    """Set, read and clear the current winning numbers."""

    def __init__(self, winning_repo: Any, default_draw_time: str = DEFAULT_DRAW_TIME) -> None:
        self.winning_repo = winning_repo
        self.default_draw_time = normalize_draw_time(default_draw_time)

    def set_winning_numbers(
        self,
        *,
        numbers: list[int] | None,
        draw_date: date | None,
        draw_time: str | None = None,
    ) -> dict[str, Any]:
        """Replace the active draw with new numbers.

        Element values are not range-checked; only the count is enforced.
        Nothing is written when validation fails.
        """
        if not isinstance(numbers, list) or len(numbers) != PICK_COUNT:
            raise ValidationError(f"Must provide exactly {PICK_COUNT} numbers")
        if draw_date is None:
            raise ValidationError("Must provide draw date")

        time_value = normalize_draw_time(draw_time) if draw_time else self.default_draw_time
        draw_id = self.winning_repo.replace_active(list(numbers), draw_date, time_value)
        logger.info("Winning numbers %s set for %s %s (id=%d)", numbers, draw_date, time_value, draw_id)

        return {
            "success": True,
            "id": draw_id,
            "numbers": list(numbers),
            "draw_date": draw_date,
            "draw_time": time_value,
        }

    def get_latest_active(self) -> dict[str, Any] | None:
        """The current draw, or ``None`` when nothing is active."""
        row = self.winning_repo.find_active()
        if row is None:
            return None
        return {
            "id": row["id"],
            "numbers": row["numbers"],
            "draw_date": row["draw_date"],
            "draw_time": row["draw_time"],
            "created_at": row.get("created_at"),
        }

    def clear_active(self) -> dict[str, Any]:
        """Deactivate every draw. Safe to call when nothing is active."""
        cleared = self.winning_repo.deactivate_all()
        logger.info("Cleared winning numbers (%d row(s) deactivated)", cleared)
        return {"success": True, "message": CLEARED_MESSAGE}
