"""Ticket schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class TicketSubmitted(BaseModel):
    """Response body for a freshly submitted ticket."""

    id: int
    phone: str
    numbers: list[Any]
    status: str = "pending"
    receipt: str | None = None


class TicketResponse(BaseModel):
    """A stored ticket with its picks decoded."""

    id: int
    user_phone: str
    selected_numbers: list[Any]
    status: str
    receipt_image: str | None = None
    purchase_date: datetime | None = None
    confirmation_date: datetime | None = None
