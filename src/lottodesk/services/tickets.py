"""Ticket service — submission, listing, and admin confirm/reject.

Tickets are created ``pending`` and moved to ``confirmed`` or ``rejected`` by
an administrator. Status updates are unconditional and report success even
when no row matched, which keeps the admin UI's contract intact; a missing
id is only logged.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from lottodesk.core.constants import (
    PHONE_MAX_BYTES,
    PICK_COUNT,
    PICK_MAX,
    PICK_MIN,
    RECEIPT_FIELD,
    TICKET_STATUS_PENDING,
)
from lottodesk.core.exceptions import StorageError, ValidationError
from lottodesk.core.logging import mask_phone
from lottodesk.services.uploads import IncomingFile

logger = logging.getLogger(__name__)


def parse_picks(raw: str) -> list[Any]:
    """Decode the JSON-encoded picks sent by the client.

    Only the shape is checked (a JSON array); element count and range are
    the client's responsibility unless strict validation is enabled.
    """
    try:
        picks = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Numbers must be a JSON-encoded array") from exc
    if not isinstance(picks, list):
        raise ValidationError("Numbers must be a JSON-encoded array")
    return picks


def check_picks_strict(picks: list[Any]) -> None:
    """Require exactly four integers in [1, 50]."""
    if len(picks) != PICK_COUNT:
        raise ValidationError(f"Must provide exactly {PICK_COUNT} numbers")
    for n in picks:
        if isinstance(n, bool) or not isinstance(n, int) or not PICK_MIN <= n <= PICK_MAX:
            raise ValidationError(f"Numbers must be integers between {PICK_MIN} and {PICK_MAX}")


class TicketService:
    """Ticket lifecycle over a ticket repository and an upload store."""

    def __init__(
        self,
        ticket_repo: Any,
        upload_store: Any,
        *,
        strict_numbers: bool = False,
    ) -> None:
        self.ticket_repo = ticket_repo
        self.upload_store = upload_store
        self.strict_numbers = strict_numbers

    # ── Submit ──────────────────────────────────────────────────────

    def submit(
        self,
        *,
        phone: str | None,
        numbers: str | None,
        receipt: IncomingFile | None = None,
    ) -> dict[str, Any]:
        """Create a pending ticket.

        Validation happens before the receipt is stored, so a rejected
        submission leaves neither a row nor a file behind.
        """
        if not phone or not numbers:
            raise ValidationError("Phone and numbers are required")
        if len(phone.encode("utf-8")) > PHONE_MAX_BYTES:
            raise ValidationError("Phone number is too long")

        picks = parse_picks(numbers)
        if self.strict_numbers:
            check_picks_strict(picks)

        receipt_ref = None
        if receipt is not None:
            receipt_ref = self.upload_store.save(receipt.file, receipt.filename, RECEIPT_FIELD)

        try:
            ticket_id = self.ticket_repo.create(
                phone=phone, selected_numbers=numbers, receipt_image=receipt_ref
            )
        except StorageError:
            self.upload_store.discard(receipt_ref)
            raise

        logger.info("Ticket %d submitted by %s", ticket_id, mask_phone(phone))
        return {
            "id": ticket_id,
            "phone": phone,
            "numbers": picks,
            "status": TICKET_STATUS_PENDING,
            "receipt": receipt_ref,
        }

    # ── Queries ─────────────────────────────────────────────────────

    @staticmethod
    def _decode(row: dict[str, Any]) -> dict[str, Any]:
        ticket = dict(row)
        try:
            ticket["selected_numbers"] = json.loads(ticket["selected_numbers"])
        except (TypeError, ValueError) as exc:
            raise StorageError(
                f"Ticket {ticket.get('id')} has unreadable selected_numbers"
            ) from exc
        return ticket

    def list_tickets(self, status: str | None = None) -> list[dict[str, Any]]:
        """All tickets (or one status), newest first, picks decoded."""
        return [self._decode(row) for row in self.ticket_repo.list_all(status=status)]

    def list_by_phone(self, phone: str) -> list[dict[str, Any]]:
        return [self._decode(row) for row in self.ticket_repo.list_by_phone(phone)]

    # ── Admin actions ───────────────────────────────────────────────

    def confirm(self, ticket_id: int) -> dict[str, Any]:
        affected = self.ticket_repo.mark_confirmed(ticket_id)
        self._log_action("confirm", ticket_id, affected)
        return {"success": True}

    def reject(self, ticket_id: int) -> dict[str, Any]:
        affected = self.ticket_repo.mark_rejected(ticket_id)
        self._log_action("reject", ticket_id, affected)
        return {"success": True}

    @staticmethod
    def _log_action(action: str, ticket_id: int, affected: int) -> None:
        if affected == 0:
            logger.warning("%s: no ticket with id %d", action, ticket_id)
        else:
            logger.info("Ticket %d: %s", ticket_id, action)
