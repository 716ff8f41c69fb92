"""Integration tests for basic auth, static assets and health routes."""

from __future__ import annotations

from pathlib import Path

import pytest
from asgi_lifespan import LifespanManager
from httpx import AsyncClient

from todograph.api import create_app, dependencies
from todograph.config import Settings


class TestBasicAuth:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/all", "/", "/main.js"])
    async def test_missing_credentials_challenged(
        self, anon_client: AsyncClient, path: str
    ) -> None:
        response = await anon_client.get(path)

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == 'Basic realm="todograph"'

    @pytest.mark.asyncio
    async def test_wrong_password_rejected(self, anon_client: AsyncClient) -> None:
        response = await anon_client.get("/api/all", auth=("user", "wrong"))

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_mutations_require_auth(self, anon_client: AsyncClient) -> None:
        response = await anon_client.post("/api/new-todo", json={"name": "sneaky"})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_raw_authorization_header_accepted(
        self, anon_client: AsyncClient, settings: Settings
    ) -> None:
        response = await anon_client.get(
            "/api/all", headers={"Authorization": settings.authorization()}
        )

        assert response.status_code == 200


class TestStaticAssets:
    @pytest.mark.asyncio
    async def test_index_served_at_root(self, client: AsyncClient) -> None:
        response = await client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"] == "text/html; charset=utf-8"
        assert "<title>todograph</title>" in response.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("path", "content_type"),
        [
            ("/main.js", "application/javascript"),
            ("/main.css", "text/css; charset=utf-8"),
        ],
    )
    async def test_asset_content_types(
        self, client: AsyncClient, path: str, content_type: str
    ) -> None:
        response = await client.get(path)

        assert response.status_code == 200
        assert response.headers["content-type"] == content_type

    @pytest.mark.asyncio
    async def test_missing_asset_404(self, client: AsyncClient) -> None:
        response = await client.get("/nope.js")

        assert response.status_code == 404


class TestHealth:
    @pytest.mark.asyncio
    async def test_health_needs_no_auth(self, anon_client: AsyncClient) -> None:
        response = await anon_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestLifespan:
    @pytest.mark.asyncio
    async def test_startup_migrates_and_shutdown_closes(self, tmp_path: Path) -> None:
        db_path = tmp_path / "life.db"
        app = create_app(Settings(database_path=str(db_path), username="u", password="p"))

        async with LifespanManager(app):
            db = dependencies.get_db_dep()
            assert db.is_connected
            assert db.applied_migrations == ["0001", "0002"]

        assert db_path.exists()
        assert not db.is_connected
        with pytest.raises(RuntimeError, match="not initialized"):
            dependencies.get_db_dep()

    @pytest.mark.asyncio
    async def test_startup_fails_on_unopenable_database(self, tmp_path: Path) -> None:
        app = create_app(
            Settings(database_path=str(tmp_path / "no" / "such.db"), username="u", password="p")
        )

        with pytest.raises(Exception):
            async with LifespanManager(app):
                pass

        with pytest.raises(RuntimeError, match="not initialized"):
            dependencies.get_db_dep()
