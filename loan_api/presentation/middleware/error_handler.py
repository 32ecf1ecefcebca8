"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from loan_api.domain.exceptions import (
    DomainException,
    InternalError,
    ValidationError,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _describe_request_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI request errors into one caller-facing message."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed request bodies and query strings."""
        return JSONResponse(
            status_code=400,
            content={
                "error": "VALIDATION_ERROR",
                "message": _describe_request_errors(exc),
                "request_id": get_request_id(),
            },
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """Handle domain validation errors."""
        return JSONResponse(
            status_code=400,
            content={
                "error": exc.code,
                "message": exc.message,
                "request_id": get_request_id(),
            },
        )

    @app.exception_handler(InternalError)
    async def internal_error_handler(
        request: Request,
        exc: InternalError,
    ) -> JSONResponse:
        """Handle dependency failures without exposing their detail."""
        logger.error(
            "internal_error",
            request_id=get_request_id(),
            message=exc.message,
            cause=type(exc.__cause__).__name__ if exc.__cause__ else None,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": exc.code,
                "message": "Unable to process request. Please try again later.",
                "request_id": get_request_id(),
            },
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(
            status_code=400,
            content={
                "error": exc.code,
                "message": exc.message,
                "request_id": get_request_id(),
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": get_request_id(),
            },
        )
