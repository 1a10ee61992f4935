"""Classified API errors and the central error reporter.

Handlers never write failure responses themselves: they raise one of the
``ApiError`` kinds below and the exception handlers registered by
``register_error_handlers`` turn it into a JSON body.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

LOG = logging.getLogger(__name__)


class ApiError(Exception):
    """Error carrying an HTTP status code and a client-facing message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    """Client sent insufficient or invalid input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    """Target id does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ApiError):
    """Uniqueness violation detected before writing."""

    status_code = status.HTTP_409_CONFLICT


class DataStoreError(ApiError):
    """Any other persistence failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def store_message(exc: Exception) -> str:
    """Underlying driver message of a SQLAlchemy error, passed through unchanged."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def error_body(status_code: int, message: str) -> dict:
    """JSON body shared by every failure response."""
    return {"success": False, "status": status_code, "message": message}


def _report(request: Request, status_code: int, message: str) -> JSONResponse:
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    LOG.log(level, "%s %s -> %d: %s", request.method, request.url.path, status_code, message)
    return JSONResponse(status_code=status_code, content=error_body(status_code, message))


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into 'field: reason; ...'."""
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Route ApiError, request-shape and routing failures through one JSON error path."""

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        return _report(request, exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _report(request, status.HTTP_400_BAD_REQUEST, _describe_validation_errors(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        response = _report(request, exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response
