"""
Global error handling for the FastAPI application.
Renders domain exceptions and uncaught errors in one response shape.
"""

import logging
import traceback
from typing import Any, Dict

from fastapi import FastAPI, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from taskflow.domain.models.base import (
    AuthenticationError,
    DomainException,
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific classes first
DOMAIN_ERROR_STATUS = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND, "Not Found"),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN, "Forbidden"),
    (DuplicateEntityError, status.HTTP_409_CONFLICT, "Conflict"),
    (ValidationError, status.HTTP_400_BAD_REQUEST, "Bad Request"),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED, "Unauthorized"),
)


def format_domain_error(exc: DomainException) -> Dict[str, Any]:
    """Map a domain exception to the error response body."""
    for exc_type, status_code, error in DOMAIN_ERROR_STATUS:
        if isinstance(exc, exc_type):
            break
    else:
        status_code, error = status.HTTP_400_BAD_REQUEST, "Bad Request"

    error_response = {
        "error": error,
        "message": exc.message,
        "code": exc.code,
        "status_code": status_code,
    }
    if isinstance(exc, ValidationError) and exc.field:
        error_response["details"] = {"field": exc.field}
    return error_response


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Exception handler for every DomainException raised by a service."""
    error_response = format_domain_error(exc)
    logger.info(
        f"{request.method} {request.url.path} failed with {exc.code}: {exc.message}"
    )

    headers = None
    if error_response["status_code"] == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=error_response["status_code"],
        content=error_response,
        headers=headers
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    def __init__(self, app, debug: bool = False):
        super().__init__(app)
        self.debug = debug

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Log the exception with traceback and return a 500 response.
        """
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                "request_path": request.url.path,
                "request_method": request.method,
                "client_host": request.client.host if request.client else None
            }
        )

        error_response: Dict[str, Any] = {
            "error": "Internal Server Error",
            "message": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR
        }

        # In debug mode, add more information
        if self.debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response
        )
