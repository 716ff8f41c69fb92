"""Process configuration for the todograph server.

Settings come from ``TODOGRAPH_*`` environment variables; the CLI fills
those in from its options before starting the server.
"""

from __future__ import annotations

import base64
import logging
import os
from dataclasses import dataclass

from .database import DEFAULT_DB_PATH, DEFAULT_MAX_WORKERS

logger = logging.getLogger(__name__)

DB_PATH_ENV_VAR = "TODOGRAPH_DB_PATH"
HOST_ENV_VAR = "TODOGRAPH_HOST"
PORT_ENV_VAR = "TODOGRAPH_PORT"
USERNAME_ENV_VAR = "TODOGRAPH_USERNAME"
PASSWORD_ENV_VAR = "TODOGRAPH_PASSWORD"
MAX_WORKERS_ENV_VAR = "TODOGRAPH_MAX_WORKERS"

DEFAULT_HOST = "::"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class Settings:
    """Server configuration."""

    database_path: str = str(DEFAULT_DB_PATH)
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    username: str = ""
    password: str = ""
    max_workers: int = DEFAULT_MAX_WORKERS

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables.

        Raises:
            ValueError: If a numeric variable is not an integer in range.
        """
        return cls(
            database_path=os.environ.get(DB_PATH_ENV_VAR) or str(DEFAULT_DB_PATH),
            host=os.environ.get(HOST_ENV_VAR) or DEFAULT_HOST,
            port=_int_from_env(PORT_ENV_VAR, DEFAULT_PORT, 0, 65535),
            username=os.environ.get(USERNAME_ENV_VAR, ""),
            password=os.environ.get(PASSWORD_ENV_VAR, ""),
            max_workers=_int_from_env(MAX_WORKERS_ENV_VAR, DEFAULT_MAX_WORKERS, 1, 64),
        )

    def authorization(self) -> str:
        """Gets the ``Authorization`` header value to accept."""
        creds = f"{self.username}:{self.password}".encode()
        return "Basic " + base64.b64encode(creds).decode("ascii")

    def to_env(self) -> dict[str, str]:
        """Render the settings as ``TODOGRAPH_*`` environment variables."""
        return {
            DB_PATH_ENV_VAR: self.database_path,
            HOST_ENV_VAR: self.host,
            PORT_ENV_VAR: str(self.port),
            USERNAME_ENV_VAR: self.username,
            PASSWORD_ENV_VAR: self.password,
            MAX_WORKERS_ENV_VAR: str(self.max_workers),
        }


def _int_from_env(name: str, default: int, low: int, high: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from e
    if not low <= value <= high:
        msg = f"{name} must be between {low} and {high}, got {value}"
        raise ValueError(msg)
    return value
