"""Key/value stores backing the album and user preferences."""

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from ..utils.config import ensure_album_dir
from ..utils.error_handler import StorageError
from ..utils.log import get_logger


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryKeyValueStore:
    """Process-local store; used by tests and as a scratch backend."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqliteKeyValueStore:
    """SQLite table of string values keyed by name."""

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        self.logger = get_logger(__name__)
        self.db_path = ensure_album_dir(str(db_path) if db_path else None)
        self._init_database()

    def _init_database(self):
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS kv (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TEXT NOT NULL
                    )
                """
                )
                conn.commit()
            self.logger.info("Key/value store initialized", db_path=str(self.db_path))
        except sqlite3.Error as e:
            self.logger.error("Error initializing database", error=str(e))
            raise StorageError("Could not initialize album database", {"db_path": str(self.db_path)}) from e

    def get(self, key: str) -> Optional[str]:
        try:
            with sqlite3.connect(self.db_path) as conn:
                row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            self.logger.error("Error reading key", key=key, error=str(e))
            raise StorageError(f"Could not read {key}", {"key": key}) from e

        self.logger.debug("Key read", key=key, hit=row is not None)
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        now = datetime.now().isoformat()
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.execute(
                    """
                    INSERT OR REPLACE INTO kv (key, value, updated_at)
                    VALUES (?, ?, ?)
                """,
                    (key, value, now),
                )
                conn.commit()
        except sqlite3.Error as e:
            self.logger.error("Error writing key", key=key, error=str(e))
            raise StorageError(f"Could not write {key}", {"key": key}) from e

        self.logger.debug("Key written", key=key, size=len(value))
