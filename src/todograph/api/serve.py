"""Server runner module for the todograph API.

Provides a run_server utility that configures and starts uvicorn with the
app factory.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Iterator

import uvicorn

from todograph.config import Settings


@contextmanager
def _temporary_env(values: dict[str, str]) -> Iterator[None]:
    """Temporarily set environment variables, restoring original state on exit."""
    saved = {name: os.environ.get(name) for name in values}
    os.environ.update(values)
    try:
        yield
    finally:
        for name, old_value in saved.items():
            if old_value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = old_value


def run_server(
    settings: Settings,
    log_level: str = "info",
    reload: bool = False,
    **kwargs: Any,
) -> None:
    """Run the todograph API server.

    The settings are passed to the app factory through ``TODOGRAPH_*``
    environment variables, so the factory also works under reload.

    Args:
        settings: Server settings.
        log_level: The log level for uvicorn. Defaults to 'info'.
        reload: Whether to enable auto-reload. Defaults to False.
        **kwargs: Additional keyword arguments to forward to uvicorn.run.
    """
    with _temporary_env(settings.to_env()):
        uvicorn.run(
            "todograph.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level=log_level,
            reload=reload,
            **kwargs,
        )
