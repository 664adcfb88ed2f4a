"""Winning-numbers routes — /api/winning-numbers.

Administrators set or clear the current draw; anyone can read it.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from lottodesk.api.deps import get_settings, require_database, to_http
from lottodesk.api.schemas.common import ClearedResponse
from lottodesk.api.schemas.winning_numbers import (
    WinningNumbersCreate,
    WinningNumbersResponse,
    WinningNumbersSet,
)
from lottodesk.core.exceptions import LotteryError

router = APIRouter(
    prefix="/api/winning-numbers",
    tags=["winning-numbers"],
    dependencies=[Depends(require_database)],
)


def _get_winning_service(request: Request):  # type: ignore[no-untyped-def]
    from lottodesk.core.database import get_pool
    from lottodesk.repositories.winning_numbers_repository import WinningNumbersRepository
    from lottodesk.services.winning_numbers import WinningNumbersService

    return WinningNumbersService(
        winning_repo=WinningNumbersRepository(get_pool()),
        default_draw_time=get_settings(request).default_draw_time,
    )


@router.post("", response_model=WinningNumbersSet)
def set_winning_numbers(request: Request, body: WinningNumbersCreate) -> dict[str, Any]:
    """Replace the current draw (admin)."""
    try:
        service = _get_winning_service(request)
        return service.set_winning_numbers(
            numbers=body.numbers, draw_date=body.draw_date, draw_time=body.draw_time
        )
    except LotteryError as e:
        raise to_http(e) from e


@router.get("/latest", response_model=WinningNumbersResponse | None)
def get_latest(request: Request) -> dict[str, Any] | None:
    """The active draw, or ``null`` when none is set."""
    try:
        return _get_winning_service(request).get_latest_active()
    except LotteryError as e:
        raise to_http(e) from e


@router.delete("/clear", response_model=ClearedResponse)
def clear_winning_numbers(request: Request) -> dict[str, Any]:
    """Deactivate the current draw (admin)."""
    try:
        return _get_winning_service(request).clear_active()
    except LotteryError as e:
        raise to_http(e) from e
