"""Synthetic data factories for testing — generates realistic fake data."""

from __future__ import annotations

import json
import random
from datetime import UTC, date, datetime, timedelta
from typing import Any

from faker import Faker

from lottodesk.core.constants import PICK_COUNT, PICK_MAX, PICK_MIN, TICKET_STATUSES

fake = Faker()
Faker.seed(42)
random.seed(42)


def build_picks() -> list[int]:
    """Four distinct numbers in [1, 50], as the player UI produces them."""
    return sorted(random.sample(range(PICK_MIN, PICK_MAX + 1), PICK_COUNT))


def build_phone() -> str:
    return fake.numerify("09########")


# ── Ticket rows (as returned by the repository) ─────────────────────


def build_ticket_row(**overrides: Any) -> dict[str, Any]:
    status = overrides.get("status", random.choice(TICKET_STATUSES))
    purchased = datetime.now(UTC) - timedelta(minutes=random.randint(1, 10_000))
    data: dict[str, Any] = {
        "id": random.randint(1, 100_000),
        "user_phone": build_phone(),
        "selected_numbers": json.dumps(build_picks()),
        "status": status,
        "receipt_image": f"uploads/receipt-{fake.unix_time():.0f}-{random.randint(0, 10**9)}.jpg",
        "purchase_date": purchased,
        "confirmation_date": purchased + timedelta(hours=1) if status == "confirmed" else None,
    }
    data.update(overrides)
    return data


def build_ticket_batch(count: int = 5, **overrides: Any) -> list[dict[str, Any]]:
    return [build_ticket_row(**overrides) for _ in range(count)]


# ── Winning-number rows ─────────────────────────────────────────────


def build_winning_row(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": random.randint(1, 1_000),
        "numbers": build_picks(),
        "draw_date": date.today() + timedelta(days=random.randint(0, 7)),
        "draw_time": "20:00:00",
        "created_at": datetime.now(UTC),
        "is_active": True,
    }
    data.update(overrides)
    return data
