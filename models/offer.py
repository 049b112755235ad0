"""
Schema.org Offer output records and the ActivityPub attachment.

Serialize with to_json_ld() / to_json(); absent fields are omitted rather
than emitted as null.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from config.offers import SCHEMA_CONTEXT
from models.base import JsonLdSchema
from models.transaction import OfferAvailability, PaymentMethod


class PriceSpecification(JsonLdSchema):
    """Price block nested in an offer."""

    schema_type: Literal["PriceSpecification", "UnitPriceSpecification"] = Field(
        "PriceSpecification",
        alias="@type"
    )
    price: float
    price_currency: str
    value_added_tax_included: Optional[bool] = None
    valid_from: Optional[str] = None
    valid_through: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None


class Seller(JsonLdSchema):
    """Party making the offer."""

    schema_type: Literal["Person", "Organization"] = Field("Organization", alias="@type")
    name: str
    url: Optional[str] = None


class ItemOffered(JsonLdSchema):
    """The product the offer is for."""

    schema_type: Literal["Product", "Service", "CreativeWork"] = Field("Product", alias="@type")
    name: str
    description: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None


class SchemaOffer(JsonLdSchema):
    """
    Schema.org Offer for one transaction option.

    Pricing fields are only present for monetary transaction types.
    transaction_type is kept so the offer can be projected back through
    the mapping table.
    """

    context: Literal["https://schema.org"] = Field(SCHEMA_CONTEXT, alias="@context")
    schema_type: Literal["Offer"] = Field("Offer", alias="@type")
    id: str = Field(..., alias="@id")
    name: str
    description: Optional[str] = None
    url: Optional[str] = None
    price: Optional[Union[int, float, str]] = None
    price_currency: Optional[str] = None
    price_specification: Optional[PriceSpecification] = None
    availability: OfferAvailability
    availability_starts: Optional[str] = None
    availability_ends: Optional[str] = None
    seller: Optional[Seller] = None
    item_offered: Optional[ItemOffered] = None
    accepted_payment_method: Optional[list[PaymentMethod]] = None
    transaction_type: str
    external_url: Optional[str] = None
    requires_action: Optional[str] = None


class ActivityPubAttachment(BaseModel):
    """PropertyValue entry for an ActivityPub actor/post attachment list."""

    type: Literal["PropertyValue"] = "PropertyValue"
    name: str
    value: str
