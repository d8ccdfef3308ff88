"""Error Handlers — every failure leaves the API in the same {"error": {...}} envelope.

Invariants:
    - DatingError → its own status and to_response() body
    - RequestValidationError → 400 with one entry per offending field
    - Starlette HTTPException (unknown route, wrong method) → its status, same envelope
    - Anything else → 500 without internal details
    - 4xx logged at WARNING, 5xx at ERROR, both tagged with path and acting user
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dating_api.core.errors import DatingError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DatingError, dating_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def _envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **fields,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **fields,
        },
    }


def _log(
    request: Request, status_code: int, message: str, exc_info: bool = False, **extra,
) -> None:
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(
        level,
        message,
        extra={
            "path": request.url.path,
            "user_id": request.headers.get("X-User-Id"),
            **extra,
        },
        exc_info=exc_info,
    )


async def dating_error_handler(request: Request, exc: DatingError):
    _log(request, exc.http_status, f"{type(exc).__name__}: {exc.message}",
         **exc.log_fields())
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    _log(request, 400, f"Validation error: {exc.errors()}", error_code="VALIDATION_ERROR")
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=details,
        ),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    _log(request, exc.status_code, f"HTTP {exc.status_code}: {exc.detail}",
         error_code="HTTP_ERROR")
    category = (
        ErrorCategory.RESOURCE_NOT_FOUND
        if exc.status_code == status.HTTP_404_NOT_FOUND
        else ErrorCategory.VALIDATION
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=_envelope(
            "HTTP_ERROR", str(exc.detail), category, ErrorSeverity.WARNING,
        ),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    """Catch-all — never leaks internal details."""
    _log(
        request, 500, f"Unhandled exception: {exc}",
        exc_info=True, error_code="INTERNAL_ERROR",
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )
