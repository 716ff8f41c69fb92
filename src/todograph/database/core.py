"""Composed TodoGraphDB class.

Combines the mixin classes into the final TodoGraphDB that provides the
complete store API.
"""

from __future__ import annotations

from typing import Any

from .connection import ConnectionMixin
from .deps import DepMixin
from .todos import TodoMixin


class TodoGraphDB(ConnectionMixin, TodoMixin, DepMixin):
    """Async SQLite store for todos and their dependency edges.

    Every operation holds the single connection exclusively for its whole
    duration, so operations never interleave.

    Usage:
        async with TodoGraphDB("todograph.db") as db:
            await db.create_todo("buy milk")
            snapshot = await db.get_all()
    """

    async def __aenter__(self) -> TodoGraphDB:
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
