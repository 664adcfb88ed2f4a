"""Winning-numbers schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WinningNumbersCreate(BaseModel):
    """Request body for setting winning numbers.

    Count and presence are checked by the service so that a wrong count or
    a missing date yields a 400 with a readable message.
    """

    model_config = ConfigDict(populate_by_name=True)

    numbers: list[int] | None = None
    draw_date: date | None = Field(default=None, alias="drawDate")
    draw_time: str | None = Field(default=None, alias="drawTime")

    @field_validator("draw_date", "draw_time", mode="before")
    @classmethod
    def _blank_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class WinningNumbersSet(BaseModel):
    success: bool = True
    id: int
    numbers: list[int]
    draw_date: date
    draw_time: str


class WinningNumbersResponse(BaseModel):
    """The current draw."""

    id: int
    numbers: list[int]
    draw_date: date
    draw_time: str
    created_at: datetime | None = None
