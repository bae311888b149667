"""
Global Exception Handlers for FastAPI Application.

This module provides the handlers for errors that escape the routers:

- ``IntegrityError`` from the database (duplicate unique value, unknown
  foreign key) becomes a 409 response.
- Every other unhandled exception is logged with its request context and
  becomes a 500 response carrying an error ID.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from dhivyuga.core.logging_config import get_logger

logger = get_logger(__name__)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """
    Translate a database constraint violation into a conflict response.

    Args:
        request: The HTTP request that caused the exception
        exc: The integrity error raised by SQLAlchemy

    Returns:
        JSONResponse with status 409
    """
    logger.warning(
        f"Integrity error in {request.method} {request.url.path}: {exc.orig}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(
        status_code=409,
        content={
            "detail": "The request conflicts with existing data (duplicate value or unknown reference)",
            "error_type": type(exc).__name__,
        },
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
