"""Domain errors carrying an HTTP status hint for the route layer."""

from __future__ import annotations


class LotteryError(Exception):
    """Base error with HTTP status hint."""

    status_code = 500

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(detail)


class ValidationError(LotteryError):
    """Missing or malformed required input."""

    status_code = 400


class StorageError(LotteryError):
    """Any failure reported by the relational store.

    The driver message is kept verbatim in ``detail``.
    """

    status_code = 500


class DatabaseUnavailableError(LotteryError):
    """No database configured, or the pool never came up."""

    status_code = 503
