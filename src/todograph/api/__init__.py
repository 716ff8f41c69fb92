"""todograph REST API package.

This package provides a FastAPI-based REST API exposing the todo and
dependency store, plus the bundled front end, behind basic auth.
"""

from todograph.api.app import create_app

__all__ = ["create_app"]
