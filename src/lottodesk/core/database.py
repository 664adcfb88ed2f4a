"""Oracle database connection pool management."""

from __future__ import annotations

import logging

import oracledb

from lottodesk.core.config import Settings
from lottodesk.core.exceptions import DatabaseUnavailableError

logger = logging.getLogger(__name__)

# Module-level pool reference
_pool: oracledb.ConnectionPool | None = None


async def init_pool(settings: Settings) -> oracledb.ConnectionPool:
    """Create and return the Oracle connection pool."""
    global _pool
    if _pool is not None:
        return _pool

    if not settings.database_configured:
        raise DatabaseUnavailableError("Database not configured")

    logger.info("Creating Oracle connection pool: %s", settings.oracle_dsn)
    _pool = oracledb.create_pool(
        user=settings.oracle_user,
        password=settings.oracle_password,
        dsn=settings.oracle_dsn,
        min=settings.oracle_pool_min,
        max=settings.oracle_pool_max,
        increment=settings.oracle_pool_increment,
    )
    logger.info(
        "Oracle connection pool created (min=%d, max=%d)",
        settings.oracle_pool_min,
        settings.oracle_pool_max,
    )
    return _pool


async def close_pool() -> None:
    """Close the Oracle connection pool."""
    global _pool
    if _pool is not None:
        _pool.close(force=True)
        _pool = None
        logger.info("Oracle connection pool closed")


def is_pool_ready() -> bool:
    return _pool is not None


def get_pool() -> oracledb.ConnectionPool:
    """Get the current connection pool. Raises if not initialized."""
    if _pool is None:
        raise DatabaseUnavailableError("Database unavailable: connection pool not initialized")
    return _pool


def get_connection() -> oracledb.Connection:
    """Acquire a connection from the pool."""
    return get_pool().acquire()
