"""Base repository: pooled connections, timing, and driver-error translation."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import oracledb

from lottodesk.core.exceptions import StorageError

logger = logging.getLogger(__name__)

SLOW_QUERY_THRESHOLD_MS = 100  # Log queries slower than this


class BaseRepository:
    """Shared SQL plumbing over a python-oracledb connection pool.

    Entity repositories configure ``table_name`` and use the helpers below.
    Every ``oracledb.Error`` raised while a connection is held surfaces as
    :class:`StorageError` carrying the driver message.
    """

    def __init__(self, pool: Any, table_name: str, id_column: str = "id") -> None:
        self.pool = pool
        self.table_name = table_name
        self.id_column = id_column

    # ── helpers ──────────────────────────────────────────────────────

    @contextmanager
    def _connection(self) -> Iterator[Any]:
        """Acquire a pooled connection; release it and translate driver errors."""
        try:
            conn = self.pool.acquire()
        except oracledb.Error as exc:
            logger.error("Could not acquire connection for %s: %s", self.table_name, exc)
            raise StorageError(str(exc)) from exc
        try:
            yield conn
        except oracledb.Error as exc:
            logger.error("Database error on %s: %s", self.table_name, exc)
            raise StorageError(str(exc)) from exc
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator[Any]:
        """Yield a cursor whose statements commit together or roll back together."""
        with self._connection() as conn:
            try:
                with conn.cursor() as cur:
                    yield cur
                conn.commit()
            except Exception:
                conn.rollback()
                raise

    @staticmethod
    def _log_query(sql: str, elapsed_ms: float) -> None:
        """Log query timing; warn if above slow-query threshold."""
        if elapsed_ms > SLOW_QUERY_THRESHOLD_MS:
            logger.warning("SLOW QUERY (%.1fms): %s", elapsed_ms, sql[:200])
        else:
            logger.debug("Query (%.1fms): %s", elapsed_ms, sql[:200])

    def _timed_execute(self, cur: Any, sql: str, params: dict[str, Any] | None = None) -> None:
        start = time.perf_counter()
        cur.execute(sql, params or {})
        self._log_query(sql, (time.perf_counter() - start) * 1000)

    @staticmethod
    def _convert_row(columns: list[str], row: tuple[Any, ...]) -> dict[str, Any]:
        """Zip a result row into a dict, reading CLOB values into ``str``."""
        return {
            col: value.read() if isinstance(value, oracledb.LOB) else value
            for col, value in zip(columns, row, strict=True)
        }

    @staticmethod
    def _build_where(filters: dict[str, Any], prefix: str = "w_") -> tuple[str, dict[str, Any]]:
        """Build ``WHERE a = :w_a AND b = :w_b`` and its bind dict from *filters*."""
        if not filters:
            return "", {}
        clauses: list[str] = []
        params: dict[str, Any] = {}
        for col, val in filters.items():
            bind_name = f"{prefix}{col}"
            clauses.append(f"{col} = :{bind_name}")
            params[bind_name] = val
        return "WHERE " + " AND ".join(clauses), params

    def _insert_returning_id(self, cur: Any, data: dict[str, Any]) -> int:
        """INSERT *data* on *cur* and return the identity value Oracle assigned."""
        columns = ", ".join(data)
        placeholders = ", ".join(f":{k}" for k in data)
        sql = (
            f"INSERT INTO {self.table_name} ({columns}) VALUES ({placeholders}) "
            f"RETURNING {self.id_column} INTO :out_id"
        )
        out_id = cur.var(oracledb.DB_TYPE_NUMBER)
        self._timed_execute(cur, sql, {**data, "out_id": out_id})
        value = out_id.getvalue()
        if isinstance(value, list):
            value = value[0] if value else None
        if value is None:
            raise StorageError(f"INSERT into {self.table_name} returned no id")
        return int(value)

    # ── read ─────────────────────────────────────────────────────────

    def find_where(
        self,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Return rows matching every column in *filters*, optionally ordered."""
        where_clause, params = self._build_where(filters or {})
        sql = f"SELECT * FROM {self.table_name} {where_clause}".rstrip()
        if order_by:
            sql += f" ORDER BY {order_by}"
        if limit is not None:
            sql += " FETCH FIRST :lim ROWS ONLY"
            params["lim"] = limit

        with self._connection() as conn, conn.cursor() as cur:
            self._timed_execute(cur, sql, params)
            columns = [col[0].lower() for col in (cur.description or [])]
            return [self._convert_row(columns, row) for row in cur.fetchall()]

    # ── write ────────────────────────────────────────────────────────

    def insert(self, data: dict[str, Any]) -> int:
        """Insert a row and return its generated id."""
        with self.transaction() as cur:
            return self._insert_returning_id(cur, data)

    def update_where(
        self,
        data: dict[str, Any],
        filters: dict[str, Any] | None = None,
        raw_assignments: dict[str, str] | None = None,
    ) -> int:
        """UPDATE matching rows. Returns rows affected.

        *raw_assignments* maps columns to SQL expressions such as
        ``SYSTIMESTAMP`` that must not be bound as parameters.
        """
        if not data and not raw_assignments:
            raise ValueError("No data provided for update")

        assignments = [f"{k} = :s_{k}" for k in data]
        assignments += [f"{k} = {expr}" for k, expr in (raw_assignments or {}).items()]
        params: dict[str, Any] = {f"s_{k}": v for k, v in data.items()}
        where_clause, where_params = self._build_where(filters or {})
        params.update(where_params)

        sql = f"UPDATE {self.table_name} SET {', '.join(assignments)} {where_clause}".rstrip()
        with self.transaction() as cur:
            self._timed_execute(cur, sql, params)
            return int(cur.rowcount)
