"""Error handler middleware for FastAPI application."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from todograph.api.models import ErrorResponse
from todograph.database import StoreError, log_error_chain

logger = logging.getLogger(__name__)


async def _value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Handle ValueError exceptions.

    Args:
        request: The request that caused the exception.
        exc: The ValueError exception.

    Returns:
        JSONResponse with 400 status and ErrorResponse body.
    """
    error_message = str(exc) if exc.args else ""
    error_response = ErrorResponse(detail=error_message)
    return JSONResponse(
        status_code=400,
        content=error_response.model_dump(),
    )


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Handle storage failures.

    The full cause chain is logged; the client only sees a generic message.
    """
    logger.error("%s %s failed", request.method, request.url.path)
    log_error_chain(exc, logger)
    error_response = ErrorResponse(detail="Internal server error")
    return JSONResponse(
        status_code=500,
        content=error_response.model_dump(),
    )


async def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions.

    Args:
        request: The request that caused the exception.
        exc: The exception.

    Returns:
        JSONResponse with 500 status and sanitized error message.
    """
    logger.exception("Unhandled error for %s %s", request.method, request.url.path)
    # Sanitized response - never leak internal error details
    error_response = ErrorResponse(detail="Internal server error")
    return JSONResponse(
        status_code=500,
        content=error_response.model_dump(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers for the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(ValueError, _value_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StoreError, _store_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _generic_exception_handler)
