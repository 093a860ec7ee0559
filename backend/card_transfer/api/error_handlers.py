"""Error Handlers: global exception handlers for the card-transfer API.

Invariants:
    - CardTransferError -> structured JSON with error code, message, severity, transfer context
    - RequestValidationError -> field-level error details
    - Exception (catch-all) -> never leaks internal details
    - Recoverable domain errors (insufficient funds) log at WARNING, the rest at ERROR
    - Each rejected transfer is logged exactly once, here, with masked card numbers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from card_transfer.core.domain_types import mask_card_number
from card_transfer.core.errors import CardTransferError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_card_transfer_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_card_transfer_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(CardTransferError)
    async def card_transfer_error_handler(request: Request, exc: CardTransferError):
        """Handle all card-transfer domain/infrastructure errors."""
        level = logging.WARNING if exc.recoverable else logging.ERROR
        logger.log(
            level,
            f"CardTransferError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                **_context_fields(exc),
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _context_fields(exc: CardTransferError) -> dict:
    """Masked transfer fields from the error context, for the log line."""
    ctx = exc.context
    fields = {"amount": ctx.amount, "total": ctx.total}
    if ctx.source is not None:
        fields["source"] = mask_card_number(ctx.source)
    if ctx.destination is not None:
        fields["destination"] = mask_card_number(ctx.destination)
    return {k: v for k, v in fields.items() if v is not None}


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
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


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
