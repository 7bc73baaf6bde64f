from __future__ import annotations

import logging
from typing import Optional

import mysql.connector

from ..core.exceptions import StorageError
from ..database.mysql_base import db_cursor, fetchone

logger = logging.getLogger(__name__)

KV_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    k VARCHAR(191) NOT NULL PRIMARY KEY,
    v LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
)
"""


class MySQLKeyValueStorage:
    """Key-value storage backed by a single `kv_store` table."""

    def __init__(self, conn):
        self._conn = conn

    def ensure_schema(self) -> None:
        try:
            with db_cursor(self._conn, dictionary=False) as (_, cur):
                cur.execute(KV_SCHEMA)
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot create kv_store table: {e}") from e
        logger.info("kv_store table ready")

    def get(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn) as (_, cur):
                cur.execute("SELECT v FROM kv_store WHERE k = %s", (key,))
                row = fetchone(cur)
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot read key {key!r}: {e}") from e
        return None if row is None else str(row["v"])

    def set(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO kv_store (k, v) VALUES (%s, %s)
                    ON DUPLICATE KEY UPDATE v = VALUES(v)
                    """,
                    (key, value),
                )
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot write key {key!r}: {e}") from e
