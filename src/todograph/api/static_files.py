"""Static file serving for the bundled front end."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import FileResponse

from todograph.api.auth import require_auth

logger = logging.getLogger(__name__)

CONTENT_TYPES: dict[str, str] = {
    ".css": "text/css; charset=utf-8",
    ".html": "text/html; charset=utf-8",
    ".js": "application/javascript",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def find_static_dir() -> Path:
    """Locate the static asset directory.

    Checks TODOGRAPH_STATIC_DIR env var first, then falls back to the
    ``static/`` directory shipped inside the package.
    """
    env_dir = os.environ.get("TODOGRAPH_STATIC_DIR")
    if env_dir:
        p = Path(env_dir)
        if p.is_dir():
            return p
        logger.warning("TODOGRAPH_STATIC_DIR %s is not a directory; using bundled assets", env_dir)
    return Path(__file__).resolve().parent.parent / "static"


def content_type_for(path: str) -> str:
    """Infer the content type from a file name's extension."""
    ext = Path(path).suffix.lower()
    content_type = CONTENT_TYPES.get(ext)
    if content_type is None:
        logger.warning("Unknown extension for static file: %r", ext or None)
        return DEFAULT_CONTENT_TYPE
    return content_type


def resolve_asset(static_dir: Path, path: str) -> Path | None:
    """Map a request path to a file inside ``static_dir``.

    Returns:
        The file path, or None if it does not exist or escapes the directory.
    """
    root = static_dir.resolve()
    candidate = (root / path).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


def mount_static(app: FastAPI) -> None:
    """Serve the bundled front end at ``/`` and ``/{path}``.

    Must be called after the API routes are registered: the catch-all route
    only sees paths nothing else matched.

    Args:
        app: The FastAPI application instance.
    """
    static_dir = find_static_dir()

    def _serve(path: str) -> FileResponse:
        asset = resolve_asset(static_dir, path)
        if asset is None:
            raise HTTPException(status_code=404, detail="Not found")
        return FileResponse(str(asset), media_type=content_type_for(asset.name))

    @app.get("/", dependencies=[Depends(require_auth)], include_in_schema=False)
    async def index() -> FileResponse:
        """Serve index.html."""
        return _serve("index.html")

    @app.get("/{path:path}", dependencies=[Depends(require_auth)], include_in_schema=False)
    async def asset(path: str) -> FileResponse:
        """Serve a bundled asset by path."""
        return _serve(path)
