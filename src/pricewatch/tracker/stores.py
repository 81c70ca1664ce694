"""Stores for the last observed price of each item."""

from __future__ import annotations

import sqlite3
from pathlib import Path


class SqliteStateStore:
    """Persist last seen prices in a SQLite key/value table."""

    def __init__(self, database_path: Path) -> None:
        self._database_path = database_path
        self._initialise()

    def _initialise(self) -> None:
        self._database_path.parent.mkdir(parents=True, exist_ok=True)
        with sqlite3.connect(self._database_path) as connection:
            connection.execute(
                """
                CREATE TABLE IF NOT EXISTS prices (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
                """
            )
            connection.commit()

    def get(self, key: str) -> str | None:
        with sqlite3.connect(self._database_path) as connection:
            row = connection.execute(
                "SELECT value FROM prices WHERE key = ?", (key,)
            ).fetchone()
        return row[0] if row else None

    def put(self, key: str, value: str) -> None:
        with sqlite3.connect(self._database_path) as connection:
            connection.execute(
                """
                INSERT INTO prices (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, value),
            )
            connection.commit()


class MemoryStateStore:
    """Process-local store, used by tests and one-off CLI runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def put(self, key: str, value: str) -> None:
        self._values[key] = value


__all__ = ["MemoryStateStore", "SqliteStateStore"]
