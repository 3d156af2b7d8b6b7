"""Error Handlers — global exception handlers for the taskdesk API.

Invariants:
    - TaskDeskError → its own envelope and http_status
    - RequestValidationError → 400 VALIDATION_ERROR with one detail per field
    - Exception (catch-all) → 500, never leaks internal details
    - Client errors log at WARNING, storage/internal errors at ERROR

Design Decisions:
    - Three-layer handler: domain (TaskDeskError), validation (Pydantic), catch-all (Exception)
    - Validation details use the same {field, message} shape as FieldValidationError
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from taskdesk.core.errors import TaskDeskError, ErrorSeverity

logger = logging.getLogger(__name__)

_REQUEST_PARTS = ("body", "path", "query", "header", "cookie")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(TaskDeskError, handle_taskdesk_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_taskdesk_error(request: Request, exc: TaskDeskError):
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "user_id": exc.context.user_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
):
    logger.warning(
        f"Validation error on {request.url.path}: {exc.errors()}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=build_validation_error_response(exc.errors()),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    """Catch-all. Never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": "internal",
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def _field_name(loc) -> str:
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in _REQUEST_PARTS:
        parts = parts[1:]
    return ".".join(parts)


def build_validation_error_response(errors) -> dict:
    """Build structured validation error response from pydantic error dicts."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": _field_name(e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in errors
            ],
        },
    }
