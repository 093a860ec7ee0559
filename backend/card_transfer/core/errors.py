"""Error Hierarchy: typed, categorized exceptions for all card-transfer failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope, including the would-have-been total
    - Card numbers in messages are masked (last four digits only)

Design Decisions:
    - Single hierarchy with CardTransferError base: FastAPI global handler catches all
    - The evaluator returns domain errors as values (TransferOutcome.error);
      only the shell raises them
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from card_transfer.core.domain_types import mask_card_number


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Transfer context attached to an error for observability and UI explanations."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    source: str | None = None
    destination: str | None = None
    amount: int | None = None
    total: int | None = None
    debug_info: dict[str, Any] | None = None


class CardTransferError(Exception):
    """Base exception for all card-transfer errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "recoverable": self.recoverable,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "source": _masked(self.context.source),
                    "destination": _masked(self.context.destination),
                    "amount": self.context.amount,
                    "total": self.context.total,
                },
            }
        }


def _masked(number: str | None) -> str | None:
    return mask_card_number(number) if number is not None else None


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidAmountError(CardTransferError):
    """Caller supplied a zero or negative transfer amount."""
    def __init__(self, amount: int, context: ErrorContext | None = None):
        super().__init__(
            f"Transfer amount must be positive, got {amount}",
            "INVALID_AMOUNT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.amount = amount


class CardNotFoundError(CardTransferError):
    """Identifier carries the bank's issuer prefix but no such card exists."""
    def __init__(self, number: str, context: ErrorContext | None = None):
        super().__init__(
            f"Card {mask_card_number(number)} is numbered by this bank but not found",
            "CARD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.number = number


class InsufficientFundsError(CardTransferError):
    """Source card balance does not cover amount plus commission."""
    def __init__(self, total: int, context: ErrorContext | None = None):
        super().__init__(
            f"Not enough money on card to transfer {total} (amount plus commission)",
            "INSUFFICIENT_FUNDS", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 422,
        )
        self.total = total


class ResourceNotFoundError(CardTransferError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CardTransferError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
