"""Async SQLite key-value store with WAL mode and schema initialization."""

from datetime import UTC, datetime

import aiosqlite

from mojicount.db.schema import SCHEMA_SQL


class Database:
    """Thin async wrapper around aiosqlite exposing the kv_store table."""

    def __init__(self, connection: aiosqlite.Connection) -> None:
        self._conn = connection

    @classmethod
    async def connect(cls, path: str = "mojicount.db") -> "Database":
        """Open ``path`` (or ":memory:"), enable WAL, and create tables."""
        conn = await aiosqlite.connect(path)
        conn.row_factory = aiosqlite.Row
        await conn.execute("PRAGMA journal_mode=WAL")
        await conn.execute("PRAGMA busy_timeout=5000")
        db = cls(conn)
        await db._ensure_schema()
        return db

    async def _ensure_schema(self) -> None:
        """Create tables if they don't exist. Idempotent."""
        await self._conn.executescript(SCHEMA_SQL)
        await self._conn.commit()

    async def fetchone(self, sql: str, params: tuple | None = None) -> aiosqlite.Row | None:
        cursor = await self._conn.execute(sql, params or ())
        return await cursor.fetchone()

    async def get_value(self, key: str) -> str | None:
        row = await self.fetchone("SELECT value FROM kv_store WHERE key = ?", (key,))
        return row["value"] if row is not None else None

    async def set_value(self, key: str, value: str) -> None:
        await self._conn.execute(
            """INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
               ON CONFLICT(key) DO UPDATE SET
                   value = excluded.value,
                   updated_at = excluded.updated_at""",
            (key, value, datetime.now(UTC).isoformat()),
        )
        await self._conn.commit()

    async def delete_keys(self, *keys: str) -> None:
        if not keys:
            return
        placeholders = ", ".join("?" for _ in keys)
        await self._conn.execute(
            f"DELETE FROM kv_store WHERE key IN ({placeholders})", keys
        )
        await self._conn.commit()

    async def close(self) -> None:
        """Close the database connection."""
        await self._conn.close()
