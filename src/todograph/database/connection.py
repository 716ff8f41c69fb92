"""Database connection management and schema migration at connect time.

Provides the base ConnectionMixin with the connection lifecycle. The one
connection is owned by a ConnectionGuard and every operation runs through
an OperationExecutor.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any, TextIO

import aiosqlite

from .errors import StoreError
from .executor import DEFAULT_MAX_WORKERS, OperationExecutor
from .guard import ConnectionGuard
from .migrations import run_migrations

logger = logging.getLogger(__name__)

# Default database path
DEFAULT_DB_PATH = Path("todograph.db")


class ConnectionMixin:
    """Base mixin providing database connection management.

    Opens the aiosqlite connection, applies pending migrations, and hands
    the connection to the guard.
    """

    def __init__(
        self,
        db_path: str | Path | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        migration_output: TextIO | None = None,
    ) -> None:
        """Initialize database connection state.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for testing.
                     Defaults to todograph.db in the current working directory.
            max_workers: Maximum number of operations in flight at once.
            migration_output: Stream for migration progress. Defaults to stderr.
        """
        if db_path is None:
            self.db_path: str | Path = DEFAULT_DB_PATH
        elif isinstance(db_path, str):
            self.db_path = Path(db_path) if db_path != ":memory:" else db_path
        else:
            self.db_path = db_path
        self._guard = ConnectionGuard()
        self._executor = OperationExecutor(max_workers)
        self._migration_output = migration_output
        self.applied_migrations: list[str] = []

    async def __aenter__(self) -> ConnectionMixin:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    @property
    def is_connected(self) -> bool:
        """True while the guard holds an open connection."""
        return self._guard.connection is not None

    async def connect(self) -> None:
        """Open the database (creating the file if absent) and migrate it.

        Raises:
            StoreError: If the database file cannot be opened or is not
                a SQLite database.
            MigrationError: If a migration cannot be applied.
        """
        if self.is_connected:
            return

        db_path = str(self.db_path)
        if db_path != ":memory:":
            resolved_path = Path(db_path).resolve()
            logger.info("Database: %s (exists: %s)", resolved_path, resolved_path.exists())

        try:
            conn = await aiosqlite.connect(db_path)
        except Exception as e:
            raise StoreError("connect", f"Unable to open database at {db_path}") from e

        try:
            self.applied_migrations = await run_migrations(conn, output=self._migration_output)
        except sqlite3.Error as e:
            await conn.close()
            raise StoreError("connect", f"Unable to read database at {db_path}") from e
        except BaseException:
            await conn.close()
            raise

        self._guard.attach(conn)
        logger.info("Database ready (%d migration(s) applied)", len(self.applied_migrations))

    async def close(self) -> None:
        """Close database connection."""
        await self._guard.close()
