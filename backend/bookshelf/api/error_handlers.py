"""Error Handlers — global exception handlers for the Bookshelf API.

Invariants:
    - BookshelfError → structured JSON with error code, message, severity, details
    - RequestValidationError (body rejected by BookCreate, or unparseable) → 400
      VALIDATION_ERROR with the ordered per-field message list
    - Starlette HTTPException (unknown route, wrong method) → same envelope, original status
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four handler layers registered from one function, called by main.py
    - 4xx logged at warning, 5xx at error with traceback
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookshelf.core.errors import (
    BookshelfError,
    BookValidationError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
)
from bookshelf.schemas.book import validation_messages

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bookshelf_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_bookshelf_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(BookshelfError)
    async def bookshelf_error_handler(request: Request, exc: BookshelfError):
        """Handle all Bookshelf domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.http_status,
            "isbn": exc.context.isbn,
        }
        if exc.http_status >= 500:
            logger.error(f"BookshelfError: {exc.message}", extra=extra)
        else:
            logger.warning(f"BookshelfError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request-parsing error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle bodies rejected by BookCreate (or not parseable as JSON)."""
        isbn = request.path_params.get("isbn")
        error = BookValidationError(
            validation_messages(exc.errors()), ErrorContext(isbn=isbn),
        )
        logger.warning(
            f"Rejected book payload: {'; '.join(error.details)}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "error_code": error.code,
                "isbn": isbn,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register framework HTTP error handler (404 route, 405 method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Wrap framework HTTP errors in the standard envelope."""
        logger.warning(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        category = (
            ErrorCategory.RESOURCE_NOT_FOUND
            if exc.status_code == status.HTTP_404_NOT_FOUND
            else ErrorCategory.INTERNAL
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_envelope(
                f"HTTP_{exc.status_code}", str(exc.detail),
                category, ErrorSeverity.ERROR,
            ),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )


def _envelope(
    code: str, message: str,
    category: ErrorCategory, severity: ErrorSeverity,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "details": [],
        },
    }
