"""Route registration for FastAPI app.

Wires the route modules (health, todos, deps) to the FastAPI app with the
correct URL prefixes. Everything under ``/api`` requires basic auth.
"""

from __future__ import annotations

from fastapi import Depends, FastAPI

from todograph.api.auth import require_auth
from todograph.api.routes import deps, health, todos


def register_routes(app: FastAPI) -> None:
    """Register all route modules to the FastAPI app.

    This function is idempotent - calling it multiple times on the same app
    will not duplicate routes.

    Args:
        app: The FastAPI application instance.
    """
    # Guard against duplicate registration
    if getattr(app.state, "routes_registered", False):
        return

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(
        todos.router, prefix="/api", tags=["todos"], dependencies=[Depends(require_auth)]
    )
    app.include_router(
        deps.router, prefix="/api", tags=["deps"], dependencies=[Depends(require_auth)]
    )

    app.state.routes_registered = True
