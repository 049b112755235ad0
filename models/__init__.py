"""
Pydantic models for validation and serialization.
"""

from models.base import (
    BaseSchema,
    JsonLdSchema,
)
from models.transaction import (
    OfferAvailability,
    PaymentMethod,
    SchemaType,
    TransactionMapping,
    TransactionConfig,
    ValidationResult,
    TransactionTypeInfo,
)
from models.product import ProductItem
from models.offer import (
    PriceSpecification,
    Seller,
    ItemOffered,
    SchemaOffer,
    ActivityPubAttachment,
)

__all__ = [
    # Base
    "BaseSchema",
    "JsonLdSchema",

    # Transactions
    "OfferAvailability",
    "PaymentMethod",
    "SchemaType",
    "TransactionMapping",
    "TransactionConfig",
    "ValidationResult",
    "TransactionTypeInfo",

    # Products
    "ProductItem",

    # Offers
    "PriceSpecification",
    "Seller",
    "ItemOffered",
    "SchemaOffer",
    "ActivityPubAttachment",
]
