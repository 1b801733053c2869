"""
Error handling for the FastAPI application.
Maps domain exceptions to HTTP responses and catches everything else.
"""

import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from taskboard.domain.models.base import (
    AuthenticationError,
    AuthorizationError,
    DomainException,
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

AUTH_HEADERS = {"WWW-Authenticate": "Bearer"}

STATUS_BY_EXCEPTION = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateEntityError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]

ERROR_CODE_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: "VALIDATION_ERROR",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    status.HTTP_409_CONFLICT: "CONFLICT",
}


def error_body(error: str, message: str, details: Optional[Any] = None) -> Dict[str, Any]:
    """Build the JSON error body shared by every error response."""
    body: Dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        body["details"] = details
    return body


def status_for(exc: DomainException) -> int:
    for exc_type, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def unauthorized_response(message: str = "Authentication required") -> JSONResponse:
    """Standard 401 response with a bearer challenge."""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=error_body("UNAUTHORIZED", message),
        headers=AUTH_HEADERS,
    )


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Translate a domain exception into its HTTP response."""
    status_code = status_for(exc)
    if isinstance(exc, AuthenticationError):
        return unauthorized_response(exc.message)

    logger.debug(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    details = {"field": exc.field} if isinstance(exc, ValidationError) and exc.field else None
    return JSONResponse(
        status_code=status_code,
        content=error_body(exc.code, exc.message, details),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters as 400 VALIDATION_ERROR."""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", "Invalid value"),
        }
        for error in exc.errors()
    ]
    message = errors[0]["message"] if errors else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VALIDATION_ERROR", message, errors),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep framework-raised HTTP errors in the same body shape."""
    error = ERROR_CODE_BY_STATUS.get(exc.status_code, "HTTP_ERROR")
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        message = f"The path {request.url.path} was not found"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(error, message),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install all exception handlers on the application."""
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)


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
            return await call_next(request)
        except Exception as exc:
            return self.handle_exception(request, exc)

    def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Log the failure and return a generic 500 response.
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

        content = error_body("INTERNAL_ERROR", "An unexpected error occurred")

        # In development, add more debug information
        if self.debug:
            content["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=content
        )
