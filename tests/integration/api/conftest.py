"""Shared fixtures for API integration tests.

Runs the real app, lifespan included, against a temporary database file.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from todograph.api import create_app
from todograph.config import Settings

USERNAME = "user"
PASSWORD = "pass"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a fresh database file."""
    return Settings(
        database_path=str(tmp_path / "api.db"),
        username=USERNAME,
        password=PASSWORD,
        max_workers=2,
    )


@pytest.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """Started application; shut down after the test."""
    application = create_app(settings)
    async with LifespanManager(application) as manager:
        yield manager.app  # type: ignore[misc]


@pytest.fixture
async def anon_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Client that sends no credentials."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Client authenticated with the configured credentials."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        auth=(USERNAME, PASSWORD),
    ) as client:
        yield client
