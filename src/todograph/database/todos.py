"""Todo creation, modification and the full snapshot read.

Provides the TodoMixin with the todo-related database methods.
"""

from __future__ import annotations

import logging

from ..models import Dep, GetAll, Todo
from .executor import OperationExecutor
from .guard import ConnectionGuard
from .validation import require_flag, require_id, require_name

logger = logging.getLogger(__name__)


class TodoMixin:
    """Mixin providing the snapshot read and todo mutations."""

    _guard: ConnectionGuard
    _executor: OperationExecutor

    # =========================================================================
    # Queries
    # =========================================================================

    async def get_all(self) -> GetAll:
        """Get every todo and every dependency edge.

        Both tables are read while holding the connection, so the result is
        a single consistent snapshot.

        Returns:
            GetAll with todos ordered by id and deps in insertion order.
            Both lists are empty for a fresh database.
        """

        async def operation() -> GetAll:
            async with self._guard.acquire() as conn:
                async with conn.execute("SELECT id, name, done FROM todos ORDER BY id") as cursor:
                    todos = [Todo.from_row(row) for row in await cursor.fetchall()]
                async with conn.execute("SELECT id_from, id_to FROM deps ORDER BY id") as cursor:
                    deps = [Dep.from_row(row) for row in await cursor.fetchall()]
            return GetAll(todos=todos, deps=deps)

        return await self._executor.run("get_all", operation)

    # =========================================================================
    # Mutations
    # =========================================================================

    async def create_todo(self, name: str) -> None:
        """Create a todo with the given name, not yet done.

        The id is assigned by the database and is not returned.

        Args:
            name: Name of the new todo.

        Raises:
            ValueError: If name is not a non-blank string.
            StoreError: If the insert fails.
        """
        require_name(name)

        async def operation() -> None:
            async with self._guard.transaction() as conn:
                cursor = await conn.execute("INSERT INTO todos (name) VALUES (?)", (name,))
                logger.debug("Created todo %s", cursor.lastrowid)

        await self._executor.run("create_todo", operation)

    async def modify_todo(self, todo_id: int, name: str, done: bool) -> None:
        """Set both the name and the done flag of a todo.

        A todo_id that matches no row is not an error; nothing changes.

        Args:
            todo_id: Id of the todo to update.
            name: New name.
            done: New completion flag.

        Raises:
            ValueError: If any argument has the wrong type or name is blank.
            StoreError: If the update fails.
        """
        require_id(todo_id, "id")
        require_name(name)
        require_flag(done, "done")

        async def operation() -> None:
            async with self._guard.transaction() as conn:
                cursor = await conn.execute(
                    "UPDATE todos SET name = ?, done = ? WHERE id = ?",
                    (name, done, todo_id),
                )
                if cursor.rowcount == 0:
                    logger.debug("modify_todo: no todo with id %s", todo_id)

        await self._executor.run("modify_todo", operation)
