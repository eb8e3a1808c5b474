"""SQLite persistence layer for PollChat.

The server keeps one append-only log of chat messages. Each row gets the next
integer id on insert; reading returns every row in ascending id order.

Design goals:
  - Zero extra dependencies (uses stdlib sqlite3)
  - Safe for multi-request use (single process): guarded by a lock
  - Create the database file and table on first use

The DB file location is controlled by Config.SQLITE_DB_FILE.
"""

from __future__ import annotations

import sqlite3
import threading
from pathlib import Path
from typing import List

from PollChat.core.logging import get_logger
from PollChat.core.message.protocol import Message

logger = get_logger(__name__)

MEMORY_DB = ":memory:"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS messages (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  message TEXT NOT NULL
);
"""


class MessageLog:
    """An append-only message log on SQLite."""

    def __init__(self, db_path: str):
        self.db_path = db_path if db_path == MEMORY_DB else str(Path(db_path))
        self._lock = threading.RLock()
        self._conn = self._connect()
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        if self.db_path != MEMORY_DB:
            path = Path(self.db_path)
            if path.exists():
                logger.info("Using existing database %s", path)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                logger.info("Creating database %s", path)
        # Requests may be served from uvicorn's worker threads
        conn = sqlite3.connect(self.db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self) -> None:
        with self._lock:
            if self.db_path != MEMORY_DB:
                self._conn.execute("PRAGMA journal_mode=WAL")
            self._conn.executescript(SCHEMA_SQL)
            self._conn.commit()

    def append(self, text: str) -> Message:
        """
        Store a message and return it with its new id.

        Args:
            text: Message text

        Returns:
            Message: The stored message
        """
        with self._lock:
            cur = self._conn.execute("INSERT INTO messages(message) VALUES(?)", (text,))
            self._conn.commit()
            msg_id = int(cur.lastrowid)
        return Message(id=msg_id, text=text)

    def read_all(self) -> List[Message]:
        """Return every stored message, oldest first."""
        with self._lock:
            rows = self._conn.execute("SELECT id, message FROM messages ORDER BY id ASC").fetchall()
        return [Message(id=int(row["id"]), text=row["message"]) for row in rows]

    def __len__(self) -> int:
        with self._lock:
            return int(self._conn.execute("SELECT COUNT(*) FROM messages").fetchone()[0])

    def close(self) -> None:
        with self._lock:
            self._conn.close()
