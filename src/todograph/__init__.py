"""todograph.

A single-user todo tracker that stores todos and directed dependency edges
between them in SQLite and serves them over HTTP.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .database import FatalStoreError, MigrationError, StoreError, TodoGraphDB
from .models import Dep, GetAll, Todo

__all__ = [
    "Dep",
    "FatalStoreError",
    "GetAll",
    "MigrationError",
    "StoreError",
    "Todo",
    "TodoGraphDB",
    "__version__",
]
