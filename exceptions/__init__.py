"""
Custom exceptions module.

Exports the AppError hierarchy used by the offer builder.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    ValidationError,

    # Offers
    UnknownTransactionTypeError,
    InvalidPriceError,
)

__all__ = [
    # Base
    "AppError",
    "ValidationError",

    # Offers
    "UnknownTransactionTypeError",
    "InvalidPriceError",
]
