"""Ticket routes — submission by players, review by administrators."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from lottodesk.api.deps import as_incoming, get_settings, get_upload_store, require_database, to_http
from lottodesk.api.schemas.common import SuccessResponse
from lottodesk.api.schemas.tickets import TicketResponse, TicketSubmitted
from lottodesk.core.exceptions import LotteryError

router = APIRouter(prefix="/api", tags=["tickets"], dependencies=[Depends(require_database)])


def _get_ticket_service(request: Request):  # type: ignore[no-untyped-def]
    from lottodesk.core.database import get_pool
    from lottodesk.repositories.ticket_repository import TicketRepository
    from lottodesk.services.tickets import TicketService

    return TicketService(
        ticket_repo=TicketRepository(get_pool()),
        upload_store=get_upload_store(request),
        strict_numbers=get_settings(request).strict_ticket_numbers,
    )


@router.post("/tickets", response_model=TicketSubmitted)
def submit_ticket(
    request: Request,
    phone: str | None = Form(default=None),
    numbers: str | None = Form(default=None, description="JSON-encoded array, e.g. [7,15,23,42]"),
    receipt: UploadFile | None = File(default=None),
) -> dict[str, Any]:
    """Submit a ticket with an optional payment receipt image."""
    try:
        service = _get_ticket_service(request)
        return service.submit(phone=phone, numbers=numbers, receipt=as_incoming(receipt))
    except LotteryError as e:
        raise to_http(e) from e


@router.get("/tickets", response_model=list[TicketResponse])
def list_tickets(request: Request, status: str | None = None) -> list[dict[str, Any]]:
    """List tickets newest first, optionally filtered by status."""
    try:
        return _get_ticket_service(request).list_tickets(status=status)
    except LotteryError as e:
        raise to_http(e) from e


@router.get("/user-tickets/{phone}", response_model=list[TicketResponse])
def list_user_tickets(request: Request, phone: str) -> list[dict[str, Any]]:
    """List one player's tickets by phone number."""
    try:
        return _get_ticket_service(request).list_by_phone(phone)
    except LotteryError as e:
        raise to_http(e) from e


@router.put("/tickets/{ticket_id}/confirm", response_model=SuccessResponse)
def confirm_ticket(request: Request, ticket_id: int) -> dict[str, Any]:
    """Mark a ticket as paid and confirmed."""
    try:
        return _get_ticket_service(request).confirm(ticket_id)
    except LotteryError as e:
        raise to_http(e) from e


@router.put("/tickets/{ticket_id}/reject", response_model=SuccessResponse)
def reject_ticket(request: Request, ticket_id: int) -> dict[str, Any]:
    try:
        return _get_ticket_service(request).reject(ticket_id)
    except LotteryError as e:
        raise to_http(e) from e
