"""Schema DDL and idempotent startup migration for the Oracle store."""

from __future__ import annotations

import logging

import oracledb

logger = logging.getLogger(__name__)


TICKETS_DDL = """
CREATE TABLE tickets (
    id                  NUMBER GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
    user_phone          VARCHAR2(4000) NOT NULL,
    selected_numbers    CLOB NOT NULL,
    status              VARCHAR2(20) DEFAULT 'pending'
                        CHECK (status IN ('pending','confirmed','rejected')),
    receipt_image       VARCHAR2(500),
    purchase_date       TIMESTAMP DEFAULT SYSTIMESTAMP,
    confirmation_date   TIMESTAMP
)
"""

WINNING_NUMBERS_DDL = """
CREATE TABLE winning_numbers (
    id                  NUMBER GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
    numbers             VARCHAR2(100) NOT NULL,
    draw_date           DATE NOT NULL,
    draw_time           VARCHAR2(8) DEFAULT '20:00:00',
    created_at          TIMESTAMP DEFAULT SYSTIMESTAMP,
    is_active           NUMBER(1) DEFAULT 1
)
"""

ARTICLES_DDL = """
CREATE TABLE articles (
    id                  NUMBER GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
    title               VARCHAR2(500) NOT NULL,
    content             CLOB NOT NULL,
    image               VARCHAR2(500),
    created_at          TIMESTAMP DEFAULT SYSTIMESTAMP
)
"""

ALL_TABLE_DDLS: list[tuple[str, str]] = [
    ("tickets", TICKETS_DDL),
    ("winning_numbers", WINNING_NUMBERS_DDL),
    ("articles", ARTICLES_DDL),
]

INDEX_DDLS: list[str] = [
    "CREATE INDEX idx_tickets_status ON tickets(status)",
    "CREATE INDEX idx_tickets_phone ON tickets(user_phone)",
    "CREATE INDEX idx_tickets_purchase ON tickets(purchase_date)",
    "CREATE INDEX idx_winning_active ON winning_numbers(is_active, created_at)",
]

# ORA-00955: name already used; ORA-01408: column list already indexed
_INDEX_EXISTS_CODES = (955, 1408)


def table_exists(conn: oracledb.Connection, table_name: str) -> bool:
    """Check if a table exists in the current schema."""
    with conn.cursor() as cur:
        cur.execute(
            "SELECT COUNT(*) FROM user_tables WHERE table_name = :name",
            {"name": table_name.upper()},
        )
        row = cur.fetchone()
        return bool(row and row[0] > 0)


def ensure_schema(conn: oracledb.Connection) -> list[str]:
    """Create missing tables and indexes. Returns list of actions taken."""
    actions: list[str] = []

    for table_name, ddl in ALL_TABLE_DDLS:
        if not table_exists(conn, table_name):
            with conn.cursor() as cur:
                cur.execute(ddl)
            actions.append(f"Created table: {table_name}")
            logger.info("Created table: %s", table_name)

    for idx_sql in INDEX_DDLS:
        try:
            with conn.cursor() as cur:
                cur.execute(idx_sql)
        except oracledb.DatabaseError as e:
            error_obj = e.args[0] if e.args else None
            if getattr(error_obj, "code", None) in _INDEX_EXISTS_CODES:
                continue
            raise
        idx_name = idx_sql.split("INDEX ")[1].split(" ON")[0]
        actions.append(f"Created index: {idx_name}")

    conn.commit()
    return actions
