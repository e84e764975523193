"""Mapping of errors to HTTP responses.

Every error body has the shape ``{"error": reason}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from remark.domain.error import (
    AttachmentProcessingError,
    ClientInputError,
    NotFoundError,
    StoreError,
)
from remark.interface.error import MalformedRequestError


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_client_input_error(request: Request, exc: Exception) -> JSONResponse:
    """Rejected input: 400 with the reason."""
    logfire.warn(
        "Request rejected",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Path, query or body values FastAPI could not parse: 400."""
    fields = ", ".join(
        ".".join(str(part) for part in error.get("loc", ())) for error in exc.errors()
    )
    logfire.warn("Request validation failed", path=request.url.path, fields=fields)
    return _error(status.HTTP_400_BAD_REQUEST, f"Invalid fields: {fields}")


async def handle_not_found(request: Request, exc: Exception) -> JSONResponse:
    """Missing resource: 404."""
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


async def handle_server_error(request: Request, exc: Exception) -> JSONResponse:
    """Store or attachment processing failure: 500 with the message."""
    logfire.error(
        "Request failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(ClientInputError, handle_client_input_error)
    app.add_exception_handler(MalformedRequestError, handle_client_input_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(StoreError, handle_server_error)
    app.add_exception_handler(AttachmentProcessingError, handle_server_error)
