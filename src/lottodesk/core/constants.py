"""Domain constants for LottoDesk."""

from __future__ import annotations

# ── Tickets ─────────────────────────────────────────────────────────
TICKET_STATUSES: list[str] = ["pending", "confirmed", "rejected"]
TICKET_STATUS_PENDING = "pending"
TICKET_STATUS_CONFIRMED = "confirmed"
TICKET_STATUS_REJECTED = "rejected"

PICK_COUNT = 4  # Numbers per ticket and per draw
PICK_MIN = 1
PICK_MAX = 50

PHONE_MAX_BYTES = 4000  # user_phone column width

# ── Draws ───────────────────────────────────────────────────────────
DEFAULT_DRAW_TIME = "20:00:00"
CLEARED_MESSAGE = "All winning numbers cleared"

# ── Uploads ─────────────────────────────────────────────────────────
UPLOAD_URL_PREFIX = "uploads"
RECEIPT_FIELD = "receipt"
ARTICLE_IMAGE_FIELD = "image"
