"""
Exception taxonomy and global exception handlers for the FastAPI application.
Serializes exceptions into structured logs and JSON error bodies.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from typing import Any


logger = logging.getLogger(__name__)


class AppException(Exception):
    """Base application exception."""
    def __init__(self, message: str, status_code: int = 500, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class DataSourceError(AppException):
    """The remote data source failed or returned an unusable payload."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, status_code=status.HTTP_502_BAD_GATEWAY, details=details)


class LeaveRequestError(AppException):
    """A leave request was rejected before reaching the data source."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, details=details)


def _error_response(request: Request, status_code: int, message: str, details: Any = None) -> JSONResponse:
    """JSON error body shared by every handler."""
    body = {"message": message, "path": request.url.path}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": body})


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle engine exceptions. Data source failures log at error level."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "details": exc.details,
        },
    )
    return _error_response(request, exc.status_code, exc.message, exc.details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(
        f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
    )
    return _error_response(request, exc.status_code, str(exc.detail))


def _serialize_validation_errors(errors: list) -> list:
    """Drop the input echo and stringify exception contexts."""
    serialized = []
    for error in errors:
        item = {key: value for key, value in error.items() if key not in ("input", "url")}
        if isinstance(item.get("ctx"), dict):
            item["ctx"] = {key: str(value) for key, value in item["ctx"].items()}
        serialized.append(item)
    return serialized


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _serialize_validation_errors(exc.errors())
    logger.warning(
        f"Rejected request body on {request.url.path}",
        extra={"errors": errors},
    )
    return _error_response(request, status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error", errors)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unexpected failures; the traceback goes to the log only."""
    logger.exception(
        f"Unhandled exception: {exc!r}",
        extra={"path": request.url.path},
    )
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
