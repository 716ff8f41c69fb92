"""Async SQLite store for todos and dependency edges.

This package provides the persistence layer: versioned migrations, the
guarded single connection, and the store operations. All operations are
async using aiosqlite for non-blocking I/O.
"""

from __future__ import annotations

from .connection import DEFAULT_DB_PATH
from .core import TodoGraphDB
from .errors import FatalStoreError, MigrationError, StoreError, log_error_chain
from .executor import DEFAULT_MAX_WORKERS, OperationExecutor
from .guard import ConnectionGuard
from .migrations import Migration, load_migrations, run_migrations

__all__ = [
    "DEFAULT_DB_PATH",
    "DEFAULT_MAX_WORKERS",
    "ConnectionGuard",
    "FatalStoreError",
    "Migration",
    "MigrationError",
    "OperationExecutor",
    "StoreError",
    "TodoGraphDB",
    "load_migrations",
    "log_error_chain",
    "run_migrations",
]
