"""Bounded execution of store operations off the event loop.

Every store operation is an awaitable whose SQLite work runs on the
connection's dedicated worker thread (aiosqlite), so the event loop only
awaits completion. ``OperationExecutor`` bounds how many operations may be
in flight at once and gives every operation the same error translation.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from collections.abc import Awaitable, Callable
from typing import TypeVar

from .errors import FatalStoreError, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_WORKERS = 4


class OperationExecutor:
    """Runs store operations with a fixed number of worker slots.

    Callers beyond ``max_workers`` suspend until a slot frees up; no extra
    capacity is ever created.
    """

    def __init__(self, max_workers: int = DEFAULT_MAX_WORKERS) -> None:
        if max_workers < 1:
            msg = f"max_workers must be at least 1, got {max_workers}"
            raise ValueError(msg)
        self.max_workers = max_workers
        self._slots = asyncio.Semaphore(max_workers)
        self._in_flight = 0

    @property
    def in_flight(self) -> int:
        """Number of operations currently holding a slot."""
        return self._in_flight

    async def run(self, name: str, operation: Callable[[], Awaitable[T]]) -> T:
        """Run ``operation`` in a worker slot and return its result.

        Args:
            name: Operation name, used in errors and logs.
            operation: Zero-argument callable returning the awaitable to run.

        Returns:
            Whatever the operation returns.

        Raises:
            StoreError: If the operation fails at the storage layer.
            FatalStoreError: If the operation raises anything else.
        """
        async with self._slots:
            self._in_flight += 1
            try:
                return await operation()
            except StoreError:
                raise
            except sqlite3.Error as e:
                logger.warning("Store operation %s failed: %s", name, e)
                raise StoreError(name) from e
            except Exception as e:
                logger.critical("Store operation %s raised unexpectedly", name, exc_info=True)
                raise FatalStoreError(name) from e
            finally:
                self._in_flight -= 1
