"""Dependency edge operations.

Provides the DepMixin. Edges are stored as given: duplicates are allowed
and neither end is checked against the todos table.
"""

from __future__ import annotations

import logging

from .executor import OperationExecutor
from .guard import ConnectionGuard
from .validation import require_id

logger = logging.getLogger(__name__)


class DepMixin:
    """Mixin providing dependency edge creation and deletion."""

    _guard: ConnectionGuard
    _executor: OperationExecutor

    async def create_dep(self, from_id: int, to_id: int) -> None:
        """Add an edge from one todo id to another.

        Args:
            from_id: Id of the todo the edge starts at.
            to_id: Id of the todo the edge points to.

        Raises:
            ValueError: If either id is not an integer.
            StoreError: If the insert fails.
        """
        require_id(from_id, "from")
        require_id(to_id, "to")

        async def operation() -> None:
            async with self._guard.transaction() as conn:
                await conn.execute(
                    "INSERT INTO deps (id_from, id_to) VALUES (?, ?)",
                    (from_id, to_id),
                )

        await self._executor.run("create_dep", operation)

    async def delete_dep(self, from_id: int, to_id: int) -> None:
        """Delete every edge matching the (from, to) pair.

        Deleting a pair that has no edges succeeds and changes nothing.

        Raises:
            ValueError: If either id is not an integer.
            StoreError: If the delete fails.
        """
        require_id(from_id, "from")
        require_id(to_id, "to")

        async def operation() -> None:
            async with self._guard.transaction() as conn:
                cursor = await conn.execute(
                    "DELETE FROM deps WHERE id_from = ? AND id_to = ?",
                    (from_id, to_id),
                )
                logger.debug("Deleted %d edge(s) %s -> %s", cursor.rowcount, from_id, to_id)

        await self._executor.run("delete_dep", operation)
