"""
Local key-value storage for the session record.
"""

import asyncio
import sqlite3
from typing import Dict, Optional

from ...config import DatabaseConfig, get_settings


class KeyValueStore:
    """Async string key-value store interface."""

    async def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    async def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    async def delete(self, key: str) -> None:
        raise NotImplementedError

    async def set_many(self, values: Dict[str, str]) -> None:
        """Write several keys so that readers see all of them or none."""
        raise NotImplementedError


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed store for tests and ephemeral runs."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def set_many(self, values: Dict[str, str]) -> None:
        self._data.update(values)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._data)


class SQLiteKeyValueStore(KeyValueStore):
    """Persistent key-value store backed by a SQLite file."""

    def __init__(self, db_path: Optional[str] = None, config: Optional[DatabaseConfig] = None):
        self.config = config or DatabaseConfig(kv_db_path=db_path or get_settings().kv_db_path)
        self.db_path = self.config.kv_db_path
        self._lock = asyncio.Lock()
        self._ready = False

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path, timeout=self.config.connection_timeout)

    async def _ensure_table(self) -> None:
        """Ensure the kv table exists."""
        if self._ready:
            return

        def _create_table():
            conn = self._connect()
            try:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS kv (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL
                    )
                    """
                )
                conn.commit()
            finally:
                conn.close()

        await asyncio.to_thread(_create_table)
        self._ready = True

    async def get(self, key: str) -> Optional[str]:
        await self._ensure_table()

        async with self._lock:
            def _fetch() -> Optional[str]:
                conn = self._connect()
                try:
                    cur = conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
                    row = cur.fetchone()
                finally:
                    conn.close()
                return row[0] if row else None

            return await asyncio.to_thread(_fetch)

    async def set(self, key: str, value: str) -> None:
        await self.set_many({key: value})

    async def set_many(self, values: Dict[str, str]) -> None:
        await self._ensure_table()

        async with self._lock:
            def _write() -> None:
                conn = self._connect()
                try:
                    conn.executemany(
                        "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                        list(values.items()),
                    )
                    conn.commit()
                finally:
                    conn.close()

            await asyncio.to_thread(_write)

    async def delete(self, key: str) -> None:
        await self._ensure_table()

        async with self._lock:
            def _delete() -> None:
                conn = self._connect()
                try:
                    conn.execute("DELETE FROM kv WHERE key = ?", (key,))
                    conn.commit()
                finally:
                    conn.close()

            await asyncio.to_thread(_delete)
