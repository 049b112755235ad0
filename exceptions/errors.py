"""
Custom exception classes for the offer builder.

Construction errors are raised; structural validation problems are
reported through ValidationResult instead.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "UNKNOWN_TRANSACTION_TYPE")
        message: Human-readable message
        status_code: HTTP-style status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to a serializable error payload."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


# ===================
# OFFER ERRORS
# ===================

class UnknownTransactionTypeError(ValidationError):
    """Transaction type has no entry in the mapping table."""

    def __init__(self, transaction_type: str):
        self.transaction_type = transaction_type
        super().__init__(
            code="UNKNOWN_TRANSACTION_TYPE",
            message=f"Unknown transaction type: {transaction_type}",
            details={"transaction_type": transaction_type}
        )


class InvalidPriceError(ValidationError):
    """Price cannot be coerced to a number."""

    def __init__(self, price: Any, transaction_type: Optional[str] = None):
        super().__init__(
            code="INVALID_PRICE",
            message=f"Invalid price: {price}",
            details={"price": str(price), "transaction_type": transaction_type}
        )
