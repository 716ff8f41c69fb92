"""Storage exception classes and error-chain logging."""

from __future__ import annotations

import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Raised when a store operation fails at the storage layer.

    The underlying cause (usually a ``sqlite3.Error``) is kept as
    ``__cause__``.
    """

    def __init__(self, operation: str, message: str | None = None) -> None:
        self.operation = operation
        super().__init__(message or f"Store operation '{operation}' failed")


class FatalStoreError(StoreError):
    """Raised when an operation fails with a non-database exception."""

    def __init__(self, operation: str) -> None:
        super().__init__(operation, f"Store operation '{operation}' failed unexpectedly")


class MigrationError(RuntimeError):
    """Raised when a schema migration cannot be applied."""

    def __init__(self, version: str, name: str) -> None:
        self.version = version
        self.name = name
        super().__init__(f"Failed to apply migration {version} ({name})")


def iter_error_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield an exception followed by each of its causes."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def log_error_chain(exc: BaseException, log: logging.Logger | None = None) -> None:
    """Log an error, including its causes.

    A single error is logged as-is; a chain is logged one line per error,
    with every line after the first prefixed by ``caused by:``.
    """
    log = log or logger
    chain = list(iter_error_chain(exc))
    if len(chain) <= 1:
        log.error("%s", exc)
        return

    for index, err in enumerate(chain):
        if index == 0:
            log.error("           %s", err)
        else:
            log.error("caused by: %s", err)
