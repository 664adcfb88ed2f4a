"""Logging setup: text or JSON output, secret redaction, phone masking."""

from __future__ import annotations

import json
import logging
import re
from datetime import UTC, datetime
from typing import Any

# Keys whose values are never logged
SECRET_KEY_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"password", re.IGNORECASE),
    re.compile(r"secret", re.IGNORECASE),
    re.compile(r"token", re.IGNORECASE),
    re.compile(r"authorization", re.IGNORECASE),
    re.compile(r"dsn", re.IGNORECASE),
]

# Keys whose values are phone numbers and get masked instead
PHONE_KEY_PATTERN = re.compile(r"phone", re.IGNORECASE)

REDACTED = "***REDACTED***"

_STANDARD_RECORD_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "correlation_id"}


def mask_phone(phone: str | None) -> str:
    """Keep the last four digits of a phone number: ``0912345678`` → ``******5678``."""
    if not phone:
        return ""
    visible = phone[-4:]
    return "*" * max(len(phone) - 4, 0) + visible


def is_secret_key(key: str) -> bool:
    return any(p.search(key) for p in SECRET_KEY_PATTERNS)


def redact_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Recursively redact secrets and mask phone numbers in a dictionary."""
    result: dict[str, Any] = {}
    for key, value in data.items():
        if is_secret_key(key):
            result[key] = REDACTED
        elif PHONE_KEY_PATTERN.search(key) and isinstance(value, str):
            result[key] = mask_phone(value)
        elif isinstance(value, dict):
            result[key] = redact_dict(value)
        elif isinstance(value, list):
            result[key] = [redact_dict(item) if isinstance(item, dict) else item for item in value]
        else:
            result[key] = value
    return result


def redact_string(text: str) -> str:
    """Redact ``password=...`` style secrets and mask phone numbers in free text."""
    text = re.sub(
        r"((?:password|secret|token)[\s=:]+)\S+",
        r"\1" + REDACTED,
        text,
        flags=re.IGNORECASE,
    )
    # user/oracle DSNs of the form user/password@host
    text = re.sub(r"(\w+/)[^@\s]+(@)", r"\1" + REDACTED + r"\2", text)
    text = re.sub(
        r"(/user-tickets/)([^/\s?]+)",
        lambda m: m.group(1) + mask_phone(m.group(2)),
        text,
    )
    return re.sub(
        r"(phone[\s=:]+)(\+?\d[\d\-\s]{3,}\d)",
        lambda m: m.group(1) + mask_phone(m.group(2)),
        text,
        flags=re.IGNORECASE,
    )


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_string(record.getMessage()),
        }

        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            entry["correlation_id"] = correlation_id

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = {
                "type": type(record.exc_info[1]).__name__,
                "message": redact_string(str(record.exc_info[1])),
            }

        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_KEYS}
        if extras:
            entry["extra"] = redact_dict(extras)

        return json.dumps(entry, default=str)


class RedactingFormatter(logging.Formatter):
    """Human-readable formatter that runs the same redaction as the JSON one."""

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        super().__init__(
            fmt=fmt or "%(asctime)s [%(levelname)s] %(name)s [%(correlation_id)s]: %(message)s",
            datefmt=datefmt or "%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = "-"
        return redact_string(super().format(record))


class CorrelationFilter(logging.Filter):
    """Stamp every record with the current request's correlation id."""

    def filter(self, record: logging.LogRecord) -> bool:
        from lottodesk.core.context import get_correlation_id

        record.correlation_id = get_correlation_id() or "-"
        return True


def setup_logging(level: str = "INFO", log_format: str = "text") -> None:
    """Configure application-wide logging.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: "json" for structured output, "text" for human-readable.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if log_format == "json" else RedactingFormatter())
    handler.addFilter(CorrelationFilter())
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("watchfiles").setLevel(logging.WARNING)
