"""Shared fixtures for database unit tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from todograph.database import TodoGraphDB


@pytest.fixture
async def db():
    """In-memory database with schema migrated."""
    async with TodoGraphDB(":memory:", migration_output=io.StringIO()) as database:
        yield database


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    """Path for a database file that does not exist yet."""
    return tmp_path / "todograph.db"
