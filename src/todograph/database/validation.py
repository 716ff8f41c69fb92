"""Input checks shared by the store operations."""

from __future__ import annotations

from typing import Any

# SQLite stores INTEGER values as signed 64-bit.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def require_id(value: Any, field: str) -> int:
    """Return ``value`` if it is an integer id SQLite can store.

    Raises:
        ValueError: If value is not an int (bools are rejected) or is out
            of the signed 64-bit range.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{field} must be an integer, got {type(value).__name__}"
        raise ValueError(msg)
    if not MIN_ID <= value <= MAX_ID:
        msg = f"{field} must be between {MIN_ID} and {MAX_ID}, got {value}"
        raise ValueError(msg)
    return value


def require_name(value: Any) -> str:
    """Return ``value`` if it is a non-blank string.

    Raises:
        ValueError: If value is not a string or is empty/whitespace.
    """
    if not isinstance(value, str):
        msg = f"name must be a string, got {type(value).__name__}"
        raise ValueError(msg)
    if not value.strip():
        raise ValueError("name must not be empty or whitespace")
    return value


def require_flag(value: Any, field: str) -> bool:
    """Return ``value`` if it is a bool.

    Raises:
        ValueError: If value is not a bool.
    """
    if not isinstance(value, bool):
        msg = f"{field} must be a boolean, got {type(value).__name__}"
        raise ValueError(msg)
    return value
