"""Dependency initialization and management for the API store singleton.

This module manages the module-level TodoGraphDB singleton during
application lifespan (startup/shutdown).
"""

from __future__ import annotations

import logging

from todograph.database import DEFAULT_MAX_WORKERS, StoreError, TodoGraphDB

logger = logging.getLogger(__name__)

# Module-level singleton
_db: TodoGraphDB | None = None


def get_db_dep() -> TodoGraphDB:
    """Get the TodoGraphDB singleton.

    Returns:
        The initialized TodoGraphDB instance.

    Raises:
        RuntimeError: If dependencies are not initialized.
    """
    if _db is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies() first.")
    return _db


async def init_dependencies(db_path: str, max_workers: int = DEFAULT_MAX_WORKERS) -> None:
    """Open the store singleton and bring its schema up to date.

    This function is idempotent - calling it multiple times will reuse the
    existing singleton rather than creating a new one.

    Args:
        db_path: Path to the SQLite database file.
        max_workers: Maximum number of store operations in flight.

    Raises:
        ValueError: If db_path is empty.
        StoreError: If the database cannot be opened.
        MigrationError: If a migration fails.
    """
    global _db

    if _db is not None:
        return

    if not db_path:
        raise ValueError("db_path cannot be empty")

    db = TodoGraphDB(db_path=db_path, max_workers=max_workers)
    try:
        await db.connect()
    except StoreError:
        logger.error("Unable to open database at %s", db_path)
        raise
    _db = db


async def shutdown_dependencies() -> None:
    """Close and reset the store singleton.

    This function is safe to call multiple times - it's a no-op if already
    shut down or never initialized.
    """
    global _db

    if _db is not None:
        await _db.close()
        _db = None
