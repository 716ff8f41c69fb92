"""HTTP basic authentication for every non-health route."""

from __future__ import annotations

import secrets

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from todograph.config import Settings

REALM = "todograph"

_basic = HTTPBasic(realm=REALM, auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=401,
        detail="Unauthorized",
        headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
    )


def require_auth(
    request: Request,
    credentials: HTTPBasicCredentials | None = Depends(_basic),
) -> str:
    """Check the request's basic-auth credentials against the settings.

    Returns:
        The authenticated username.

    Raises:
        HTTPException: 401 with a ``WWW-Authenticate`` challenge when the
            header is missing or the credentials do not match.
    """
    settings: Settings = request.app.state.settings
    if credentials is None:
        raise _unauthorized()

    username_ok = secrets.compare_digest(
        credentials.username.encode(), settings.username.encode()
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode(), settings.password.encode()
    )
    if not (username_ok and password_ok):
        raise _unauthorized()
    return credentials.username
