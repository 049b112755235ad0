"""
Transaction schemas: mapping table entries, caller configs and
validation results.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from models.base import BaseSchema


class OfferAvailability(str, Enum):
    """Schema.org ItemAvailability values used by offers."""
    IN_STOCK = "InStock"
    OUT_OF_STOCK = "OutOfStock"
    PRE_ORDER = "PreOrder"
    SOLD_OUT = "SoldOut"
    ONLINE_ONLY = "OnlineOnly"
    LIMITED_AVAILABILITY = "LimitedAvailability"
    DISCONTINUED = "Discontinued"


class PaymentMethod(str, Enum):
    """Accepted payment method tags."""
    CASH = "Cash"
    CREDIT_CARD = "CreditCard"
    CRYPTOCURRENCY = "Cryptocurrency"
    BANK_TRANSFER = "BankTransfer"
    PAYMENT_SERVICE = "PaymentService"
    SUBSCRIPTION = "Subscription"
    DONATION = "Donation"
    EXCHANGE = "Exchange"


class SchemaType(str, Enum):
    """Semantic action class of a transaction type."""
    OFFER = "Offer"
    DONATE_ACTION = "DonateAction"
    BUY_ACTION = "BuyAction"
    RESERVE_ACTION = "ReserveAction"


class TransactionMapping(BaseSchema):
    """
    Commerce rules for one transaction type.

    Entries are immutable; the flags are independent of each other.
    """
    model_config = ConfigDict(frozen=True)

    transaction_type: str = Field(..., min_length=1)
    schema_type: SchemaType
    payment_methods: tuple[PaymentMethod, ...] = ()
    default_availability: OfferAvailability
    requires_external_url: bool = False
    is_monetary: bool = False
    is_cryptocurrency: bool = False
    is_subscription: bool = False
    is_donation: bool = False


class TransactionConfig(BaseSchema):
    """
    One configured payment option on a product.

    Required: type
    Optional: everything else. Construction does not check the URL and
    price invariants; call validate_transaction() for that.
    """

    type: str = Field(
        ...,
        description="Transaction type identifier",
        examples=["stripe", "monero", "inquiry"]
    )
    enabled: bool = Field(
        False,
        description="Whether this option is included in build_all_offers()"
    )
    url: Optional[str] = Field(None, description="External checkout/listing URL")
    label: Optional[str] = Field(None, description="Offer name override")
    description: Optional[str] = None
    priority: Optional[Union[int, float]] = Field(
        None,
        description="Higher sorts first; absent is 0"
    )
    price: Optional[Union[int, float, str]] = Field(
        None,
        description="Number or numeric string, kept as supplied"
    )
    currency: Optional[str] = None
    availability: Optional[OfferAvailability] = None


class ValidationResult(BaseModel):
    """Accumulated structural validation errors for a transaction."""
    valid: bool
    errors: list[str] = Field(default_factory=list)


class TransactionTypeInfo(BaseModel):
    """Summary row for one supported transaction type."""
    type: str
    display_name: str
    is_monetary: bool
    is_donation: bool
    is_subscription: bool
    requires_external_url: bool
