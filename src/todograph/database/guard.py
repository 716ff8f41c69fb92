"""Exclusive access to the single database connection."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiosqlite

from .errors import StoreError

logger = logging.getLogger(__name__)


class ConnectionGuard:
    """Owns the one live connection and serializes every use of it.

    All callers share the same connection. ``acquire()`` hands it out to one
    caller at a time; others suspend on the lock until the holder's
    ``async with`` block exits, whichever way it exits.
    """

    def __init__(self, conn: aiosqlite.Connection | None = None) -> None:
        self._conn = conn
        self._lock = asyncio.Lock()

    @property
    def connection(self) -> aiosqlite.Connection | None:
        """The guarded connection, or None if not attached."""
        return self._conn

    def attach(self, conn: aiosqlite.Connection) -> None:
        """Hand a freshly opened connection to the guard."""
        self._conn = conn

    async def close(self) -> None:
        """Wait for the current holder, then close and drop the connection."""
        async with self._lock:
            conn, self._conn = self._conn, None
            if conn is not None:
                await conn.close()

    def locked(self) -> bool:
        """Return True if some caller currently holds the connection."""
        return self._lock.locked()

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        """Acquire exclusive use of the connection.

        Raises:
            StoreError: If no connection is attached.
        """
        async with self._lock:
            if self._conn is None:
                raise StoreError("acquire", "Database not connected")
            yield self._conn

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """Acquire the connection and wrap the block in a transaction.

        Commits when the block completes, rolls back when it raises.
        """
        async with self.acquire() as conn:
            try:
                yield conn
            except BaseException:
                await conn.rollback()
                raise
            await conn.commit()
