"""Ticket repository — data access for the ``tickets`` table."""

from __future__ import annotations

from typing import Any

from lottodesk.core.constants import (
    TICKET_STATUS_CONFIRMED,
    TICKET_STATUS_PENDING,
    TICKET_STATUS_REJECTED,
)
from lottodesk.repositories.base import BaseRepository

NEWEST_FIRST = "purchase_date DESC, id DESC"


class TicketRepository(BaseRepository):
    """Inserts, status updates and listings for submitted tickets."""

    def __init__(self, pool: Any) -> None:
        super().__init__(pool=pool, table_name="tickets")

    def create(self, *, phone: str, selected_numbers: str, receipt_image: str | None) -> int:
        """Insert a pending ticket; *selected_numbers* is stored verbatim."""
        return self.insert(
            {
                "user_phone": phone,
                "selected_numbers": selected_numbers,
                "status": TICKET_STATUS_PENDING,
                "receipt_image": receipt_image,
            }
        )

    def list_all(self, status: str | None = None) -> list[dict[str, Any]]:
        """All tickets, newest first, optionally restricted to one status."""
        filters = {"status": status} if status else None
        return self.find_where(filters, order_by=NEWEST_FIRST)

    def list_by_phone(self, phone: str) -> list[dict[str, Any]]:
        return self.find_where({"user_phone": phone}, order_by=NEWEST_FIRST)

    def mark_confirmed(self, ticket_id: int) -> int:
        """Set status=confirmed and stamp confirmation_date. Returns rows affected."""
        return self.update_where(
            {"status": TICKET_STATUS_CONFIRMED},
            filters={"id": ticket_id},
            raw_assignments={"confirmation_date": "SYSTIMESTAMP"},
        )

    def mark_rejected(self, ticket_id: int) -> int:
        return self.update_where({"status": TICKET_STATUS_REJECTED}, filters={"id": ticket_id})
