from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from pathlib import Path

from .base import sha1_key

logger = logging.getLogger(__name__)


class SqliteByteStore:
    def __init__(self, db_path: str | Path, *, timeout_seconds: float = 5.0) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0.")

        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.timeout_seconds = timeout_seconds
        self._init_schema()

    def write(self, key: str, data: bytes) -> None:
        query = """
        INSERT INTO blobs (key, data)
        VALUES (?, ?)
        ON CONFLICT(key) DO UPDATE SET
            data=excluded.data,
            updated_at=CURRENT_TIMESTAMP
        """
        with closing(self._connect()) as conn, conn:
            conn.execute(query, (key, sqlite3.Binary(data)))

        logger.info("sqlite_store set key=%s size=%d", sha1_key(key), len(data))

    def read(self, key: str) -> bytes | None:
        query = "SELECT data FROM blobs WHERE key = ?"
        with closing(self._connect()) as conn:
            row = conn.execute(query, (key,)).fetchone()

        if row is None:
            logger.info("sqlite_store miss key=%s", sha1_key(key))
            return None
        return bytes(row["data"])

    def clear(self, key: str) -> None:
        with closing(self._connect()) as conn, conn:
            conn.execute("DELETE FROM blobs WHERE key = ?", (key,))

        logger.info("sqlite_store clear key=%s", sha1_key(key))

    def _init_schema(self) -> None:
        schema_path = Path(__file__).with_name("schema.sql")
        schema = schema_path.read_text(encoding="utf-8")
        with closing(self._connect()) as conn, conn:
            conn.executescript(schema)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path, timeout=self.timeout_seconds)
        conn.row_factory = sqlite3.Row
        return conn
