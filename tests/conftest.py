"""Shared pytest fixtures and test configuration."""

from __future__ import annotations

import os
import sys
from collections.abc import Generator
from typing import Any
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

# Ensure src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))


class MockVar:
    """Stand-in for an oracledb bind variable used with RETURNING ... INTO."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def getvalue(self) -> Any:
        return [self._value] if self._value is not None else []


class MockCursor:
    """Mock Oracle cursor supporting context manager and common operations."""

    def __init__(self) -> None:
        self.description: list[tuple[str, ...]] | None = None
        self._rows: list[tuple[Any, ...]] = []
        self._execute_log: list[tuple[str, dict[str, Any] | None]] = []
        self.rowcount: int = 0
        self.returning_id: int | None = 1
        self.raise_on_execute: Exception | None = None

    def execute(self, sql: str, params: dict[str, Any] | None = None) -> None:
        self._execute_log.append((sql, params))
        if self.raise_on_execute is not None:
            raise self.raise_on_execute

    def fetchall(self) -> list[tuple[Any, ...]]:
        return self._rows

    def fetchone(self) -> tuple[Any, ...] | None:
        return self._rows[0] if self._rows else None

    def var(self, type_: Any) -> MockVar:
        return MockVar(self.returning_id)

    @property
    def statements(self) -> list[str]:
        return [sql for sql, _ in self._execute_log]

    def __enter__(self) -> MockCursor:
        return self

    def __exit__(self, *args: Any) -> None:
        pass


class MockConnection:
    """Mock Oracle connection supporting context manager."""

    def __init__(self) -> None:
        self._cursor = MockCursor()
        self._committed = False
        self._rolled_back = False
        self._closed = False

    def cursor(self) -> MockCursor:
        return self._cursor

    def commit(self) -> None:
        self._committed = True

    def rollback(self) -> None:
        self._rolled_back = True

    def close(self) -> None:
        self._closed = True

    def __enter__(self) -> MockConnection:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class MockPool:
    """Mock Oracle connection pool."""

    def __init__(self) -> None:
        self._connection = MockConnection()

    def acquire(self) -> MockConnection:
        return self._connection

    def close(self, force: bool = False) -> None:
        pass


@pytest.fixture
def mock_pool() -> MockPool:
    """Provide a mock Oracle connection pool."""
    return MockPool()


@pytest.fixture
def mock_connection(mock_pool: MockPool) -> MockConnection:
    return mock_pool._connection


@pytest.fixture
def mock_cursor(mock_connection: MockConnection) -> MockCursor:
    return mock_connection._cursor


@pytest.fixture
def patch_db_pool(mock_pool: MockPool) -> Generator[MockPool, None, None]:
    """Patch the database module to use mock pool."""
    with patch("lottodesk.core.database._pool", mock_pool):
        yield mock_pool


@pytest.fixture
def settings(tmp_path):  # type: ignore[no-untyped-def]
    """Testing settings with a configured DSN and a temporary upload dir."""
    from lottodesk.core.config import Settings

    return Settings(
        _env_file=None,
        app_env="testing",
        oracle_dsn="localhost:1521/FREEPDB1",
        upload_dir=str(tmp_path / "uploads"),
        static_dir=str(tmp_path / "public"),
    )


@pytest.fixture
def app(patch_db_pool: MockPool, settings):  # type: ignore[no-untyped-def]
    """Create a FastAPI test app with mocked database."""
    from lottodesk.main import create_app

    return create_app(settings=settings)


@pytest.fixture
def client(app):  # type: ignore[no-untyped-def]
    """Create a test client."""
    return TestClient(app)


# ── Helper for setting up mock query results ─────────────────────────


def set_mock_query_result(
    cursor: MockCursor,
    columns: list[str],
    rows: list[tuple[Any, ...]],
) -> None:
    """Configure mock cursor to return specific query results."""
    cursor.description = [(col.upper(),) for col in columns]
    cursor._rows = rows
    cursor.rowcount = len(rows)
