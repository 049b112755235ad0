"""
Transaction mapping table for all 15 transaction types.

Each entry declares how a commerce/interaction channel maps onto
Schema.org: payment methods, default availability and the
monetary/crypto/subscription/donation flags.
"""

from types import MappingProxyType
from typing import Optional

from models.transaction import (
    OfferAvailability,
    PaymentMethod,
    SchemaType,
    TransactionMapping,
)

_CARD_CHECKOUT = (PaymentMethod.CREDIT_CARD, PaymentMethod.PAYMENT_SERVICE)
_DONATION = (PaymentMethod.DONATION, PaymentMethod.PAYMENT_SERVICE)


def _entries(*mappings: TransactionMapping) -> MappingProxyType:
    return MappingProxyType({m.transaction_type: m for m in mappings})


TRANSACTION_MAPPINGS: MappingProxyType = _entries(
    TransactionMapping(
        transaction_type="inquiry",
        schema_type=SchemaType.OFFER,
        payment_methods=(),
        default_availability=OfferAvailability.IN_STOCK,
    ),
    TransactionMapping(
        transaction_type="ebay",
        schema_type=SchemaType.OFFER,
        payment_methods=_CARD_CHECKOUT,
        default_availability=OfferAvailability.ONLINE_ONLY,
        requires_external_url=True,
        is_monetary=True,
    ),
    TransactionMapping(
        transaction_type="etsy",
        schema_type=SchemaType.OFFER,
        payment_methods=_CARD_CHECKOUT,
        default_availability=OfferAvailability.ONLINE_ONLY,
        requires_external_url=True,
        is_monetary=True,
    ),
    TransactionMapping(
        transaction_type="amazon",
        schema_type=SchemaType.OFFER,
        payment_methods=_CARD_CHECKOUT,
        default_availability=OfferAvailability.ONLINE_ONLY,
        requires_external_url=True,
        is_monetary=True,
    ),
    TransactionMapping(
        transaction_type="snail-mail",
        schema_type=SchemaType.OFFER,
        payment_methods=(PaymentMethod.CASH, PaymentMethod.BANK_TRANSFER),
        default_availability=OfferAvailability.IN_STOCK,
        is_monetary=True,
    ),
    TransactionMapping(
        transaction_type="monero",
        schema_type=SchemaType.OFFER,
        payment_methods=(PaymentMethod.CRYPTOCURRENCY,),
        default_availability=OfferAvailability.IN_STOCK,
        is_monetary=True,
        is_cryptocurrency=True,
    ),
    TransactionMapping(
        transaction_type="stripe",
        schema_type=SchemaType.OFFER,
        payment_methods=_CARD_CHECKOUT,
        default_availability=OfferAvailability.IN_STOCK,
        is_monetary=True,
    ),
    TransactionMapping(
        transaction_type="polar",
        schema_type=SchemaType.OFFER,
        payment_methods=(PaymentMethod.SUBSCRIPTION, PaymentMethod.PAYMENT_SERVICE),
        default_availability=OfferAvailability.ONLINE_ONLY,
        requires_external_url=True,
        is_monetary=True,
        is_subscription=True,
    ),
    TransactionMapping(
        transaction_type="talar",
        schema_type=SchemaType.OFFER,
        payment_methods=(PaymentMethod.BANK_TRANSFER, PaymentMethod.PAYMENT_SERVICE),
        default_availability=OfferAvailability.IN_STOCK,
        is_monetary=True,
    ),
    TransactionMapping(
        transaction_type="repository",
        schema_type=SchemaType.OFFER,
        payment_methods=(),
        default_availability=OfferAvailability.ONLINE_ONLY,
        requires_external_url=True,
    ),
    TransactionMapping(
        transaction_type="documentation",
        schema_type=SchemaType.OFFER,
        payment_methods=(),
        default_availability=OfferAvailability.ONLINE_ONLY,
        requires_external_url=True,
    ),
    TransactionMapping(
        transaction_type="booking",
        schema_type=SchemaType.RESERVE_ACTION,
        payment_methods=(PaymentMethod.PAYMENT_SERVICE, PaymentMethod.CREDIT_CARD),
        default_availability=OfferAvailability.LIMITED_AVAILABILITY,
        requires_external_url=True,
        is_monetary=True,
    ),
    TransactionMapping(
        transaction_type="liberapay",
        schema_type=SchemaType.DONATE_ACTION,
        payment_methods=_DONATION,
        default_availability=OfferAvailability.ONLINE_ONLY,
        requires_external_url=True,
        is_monetary=True,
        is_subscription=True,
        is_donation=True,
    ),
    TransactionMapping(
        transaction_type="kofi",
        schema_type=SchemaType.DONATE_ACTION,
        payment_methods=_DONATION,
        default_availability=OfferAvailability.ONLINE_ONLY,
        requires_external_url=True,
        is_monetary=True,
        is_donation=True,
    ),
    TransactionMapping(
        transaction_type="contribute-to-consume",
        schema_type=SchemaType.OFFER,
        payment_methods=(PaymentMethod.EXCHANGE,),
        default_availability=OfferAvailability.IN_STOCK,
    ),
)


def get_transaction_mapping(transaction_type: str) -> Optional[TransactionMapping]:
    """Get the mapping for a transaction type, or None if unknown."""
    return TRANSACTION_MAPPINGS.get(transaction_type)


def requires_external_url(transaction_type: str) -> bool:
    """Check if transaction type requires an external URL."""
    mapping = TRANSACTION_MAPPINGS.get(transaction_type)
    return mapping.requires_external_url if mapping else False


def is_monetary(transaction_type: str) -> bool:
    """Check if transaction type carries a price."""
    mapping = TRANSACTION_MAPPINGS.get(transaction_type)
    return mapping.is_monetary if mapping else False


def get_supported_transaction_types() -> list[str]:
    """All supported transaction types, in table order."""
    return list(TRANSACTION_MAPPINGS)
