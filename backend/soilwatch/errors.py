"""API error types and the handlers that render them as JSON envelopes.

Every failure reaches the client as ``{"message": ..., "token": null}``.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Error del servidor"


class ApiError(Exception):
    """Base class for errors returned to API clients."""
    
    status_code = 500
    
    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationFailed(ApiError):
    """Missing or malformed input."""
    status_code = 400


class Unauthenticated(ApiError):
    """No credentials were presented."""
    status_code = 401


class WrongPassword(ApiError):
    status_code = 401


class Forbidden(ApiError):
    """Credentials were presented but are not valid."""
    status_code = 403


class NotFound(ApiError):
    status_code = 404


class Conflict(ApiError):
    """A unique field is already taken."""
    status_code = 409


class InternalError(ApiError):
    status_code = 500


def error_body(message: str, detail: Optional[str] = None, expose_detail: bool = False) -> dict:
    """Build the JSON error envelope."""
    body = {"message": message, "token": None}
    if expose_detail and detail:
        body["error"] = detail
    return body


def register_exception_handlers(app: FastAPI, expose_detail: bool = False):
    """Install handlers converting every failure into the error envelope."""
    
    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.message, exc.detail, expose_detail),
        )
    
    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected malformed request to {request.url.path}")
        return JSONResponse(
            status_code=400,
            content=error_body("Datos inválidos", str(exc.errors()), expose_detail),
        )
    
    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        logger.exception(f"Database error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=error_body(SERVER_ERROR_MESSAGE, str(exc), expose_detail),
        )
    
    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=error_body(SERVER_ERROR_MESSAGE, str(exc), expose_detail),
        )
