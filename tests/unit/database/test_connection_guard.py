"""Connection guard tests.

Verifies that the single connection is handed out to one caller at a time,
that every exit path releases it, and that concurrent store operations do
not lose writes.
"""

from __future__ import annotations

import asyncio

import aiosqlite
import pytest

from todograph.database import ConnectionGuard, StoreError, TodoGraphDB


@pytest.fixture
async def guard():
    """Guard around a bare in-memory connection with one table."""
    conn = await aiosqlite.connect(":memory:")
    await conn.execute("CREATE TABLE items (value TEXT NOT NULL)")
    await conn.commit()
    guard = ConnectionGuard(conn)
    yield guard
    await guard.close()


async def _count(guard: ConnectionGuard) -> int:
    async with guard.acquire() as conn:
        async with conn.execute("SELECT COUNT(*) FROM items") as cursor:
            row = await cursor.fetchone()
    assert row is not None
    return int(row[0])


class TestExclusiveAcquisition:
    """Mutual exclusion."""

    @pytest.mark.asyncio
    async def test_second_caller_waits_for_release(self, guard: ConnectionGuard) -> None:
        order: list[str] = []
        first_holding = asyncio.Event()
        release_first = asyncio.Event()

        async def first() -> None:
            async with guard.acquire():
                order.append("first acquired")
                first_holding.set()
                await release_first.wait()
                order.append("first released")

        async def second() -> None:
            await first_holding.wait()
            async with guard.acquire():
                order.append("second acquired")

        first_task = asyncio.create_task(first())
        second_task = asyncio.create_task(second())
        await first_holding.wait()
        await asyncio.sleep(0.01)

        assert guard.locked()
        assert order == ["first acquired"]

        release_first.set()
        await asyncio.gather(first_task, second_task)

        assert order == ["first acquired", "first released", "second acquired"]

    @pytest.mark.asyncio
    async def test_lock_released_after_error(self, guard: ConnectionGuard) -> None:
        with pytest.raises(RuntimeError, match="boom"):
            async with guard.acquire():
                raise RuntimeError("boom")

        assert not guard.locked()
        assert await _count(guard) == 0

    @pytest.mark.asyncio
    async def test_acquire_without_connection_raises(self) -> None:
        guard = ConnectionGuard()

        with pytest.raises(StoreError, match="not connected"):
            async with guard.acquire():
                pass

        assert not guard.locked()


class TestTransaction:
    """Commit and rollback around a guarded block."""

    @pytest.mark.asyncio
    async def test_commits_on_success(self, guard: ConnectionGuard) -> None:
        async with guard.transaction() as conn:
            await conn.execute("INSERT INTO items (value) VALUES ('kept')")

        assert await _count(guard) == 1

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self, guard: ConnectionGuard) -> None:
        with pytest.raises(ValueError):
            async with guard.transaction() as conn:
                await conn.execute("INSERT INTO items (value) VALUES ('dropped')")
                raise ValueError("abort")

        assert await _count(guard) == 0
        assert not guard.locked()


class TestConcurrentStoreOperations:
    """Many operations issued at once against one store."""

    @pytest.mark.asyncio
    async def test_concurrent_creates_lose_no_writes(self, db: TodoGraphDB) -> None:
        n = 25
        names = [f"todo-{i}" for i in range(n)]

        await asyncio.gather(*(db.create_todo(name) for name in names))

        todos = (await db.get_all()).todos
        assert len(todos) == n
        assert len({t.id for t in todos}) == n
        assert sorted(t.name for t in todos) == sorted(names)

    @pytest.mark.asyncio
    async def test_mixed_concurrent_operations(self, db: TodoGraphDB) -> None:
        await db.create_todo("a")
        await db.create_todo("b")

        await asyncio.gather(
            db.create_dep(1, 2),
            db.create_dep(2, 1),
            db.modify_todo(1, "a", True),
            db.create_todo("c"),
            db.get_all(),
        )

        result = await db.get_all()
        assert len(result.todos) == 3
        assert len(result.deps) == 2
        assert result.todos[0].done is True

    @pytest.mark.slow
    @pytest.mark.asyncio
    async def test_many_concurrent_creates_on_file_database(self, tmp_path) -> None:
        n = 500
        async with TodoGraphDB(tmp_path / "stress.db", max_workers=8) as db:
            await asyncio.gather(*(db.create_todo(f"todo-{i}") for i in range(n)))
            todos = (await db.get_all()).todos

        assert len({t.id for t in todos}) == n
