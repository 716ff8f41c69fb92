"""FastAPI application factory with lifespan dependency management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from todograph import __version__
from todograph.api.dependencies import init_dependencies, shutdown_dependencies
from todograph.api.middleware import register_error_handlers
from todograph.api.routes import register_routes
from todograph.api.static_files import mount_static
from todograph.config import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifespan (startup and shutdown).

    The store is opened and migrated before the first request is accepted;
    if that fails, startup fails and the server does not serve.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during the application's running state.
    """
    settings: Settings = app.state.settings
    await init_dependencies(settings.database_path, settings.max_workers)
    try:
        yield
    finally:
        await shutdown_dependencies()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Server settings. Defaults to ``Settings.from_env()``.

    Returns:
        A configured FastAPI application with lifespan management.
    """
    if settings is None:
        settings = Settings.from_env()
    if not settings.username or not settings.password:
        logger.warning("Username or password is empty; basic auth will accept empty credentials")

    app = FastAPI(
        title="todograph",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_error_handlers(app)
    register_routes(app)
    mount_static(app)

    return app
