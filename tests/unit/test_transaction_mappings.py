"""
Unit tests for the transaction mapping table.

Run: pytest tests/unit/test_transaction_mappings.py -v
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from config.transaction_mappings import (
    TRANSACTION_MAPPINGS,
    get_transaction_mapping,
    requires_external_url,
    is_monetary,
    get_supported_transaction_types,
)
from models.transaction import (
    OfferAvailability,
    PaymentMethod,
    SchemaType,
)

ALL_TYPES = [
    "inquiry", "ebay", "etsy", "amazon", "snail-mail", "monero", "stripe",
    "polar", "talar", "repository", "documentation", "booking", "liberapay",
    "kofi", "contribute-to-consume",
]

# type: (schema_type, monetary, crypto, subscription, donation, requires_url)
EXPECTED_FLAGS = {
    "inquiry": (SchemaType.OFFER, False, False, False, False, False),
    "ebay": (SchemaType.OFFER, True, False, False, False, True),
    "etsy": (SchemaType.OFFER, True, False, False, False, True),
    "amazon": (SchemaType.OFFER, True, False, False, False, True),
    "snail-mail": (SchemaType.OFFER, True, False, False, False, False),
    "monero": (SchemaType.OFFER, True, True, False, False, False),
    "stripe": (SchemaType.OFFER, True, False, False, False, False),
    "polar": (SchemaType.OFFER, True, False, True, False, True),
    "talar": (SchemaType.OFFER, True, False, False, False, False),
    "repository": (SchemaType.OFFER, False, False, False, False, True),
    "documentation": (SchemaType.OFFER, False, False, False, False, True),
    "booking": (SchemaType.RESERVE_ACTION, True, False, False, False, True),
    "liberapay": (SchemaType.DONATE_ACTION, True, False, True, True, True),
    "kofi": (SchemaType.DONATE_ACTION, True, False, False, True, True),
    "contribute-to-consume": (SchemaType.OFFER, False, False, False, False, False),
}


class TestMappingTable:
    """Tests for TRANSACTION_MAPPINGS contents."""

    def test_contains_exactly_fifteen_entries(self):
        """Should define one mapping per supported type."""
        assert len(TRANSACTION_MAPPINGS) == 15
        assert set(TRANSACTION_MAPPINGS) == set(ALL_TYPES)

    @pytest.mark.parametrize("transaction_type", ALL_TYPES)
    def test_entry_key_matches_transaction_type(self, transaction_type):
        """Each mapping's transaction_type equals its key."""
        mapping = get_transaction_mapping(transaction_type)

        assert mapping is not None
        assert mapping.transaction_type == transaction_type

    @pytest.mark.parametrize("transaction_type,expected", EXPECTED_FLAGS.items())
    def test_entry_flags(self, transaction_type, expected):
        """Flags match the published table."""
        schema_type, monetary, crypto, subscription, donation, needs_url = expected
        mapping = TRANSACTION_MAPPINGS[transaction_type]

        assert mapping.schema_type == schema_type
        assert mapping.is_monetary is monetary
        assert mapping.is_cryptocurrency is crypto
        assert mapping.is_subscription is subscription
        assert mapping.is_donation is donation
        assert mapping.requires_external_url is needs_url

    def test_crypto_entries_are_monetary(self):
        """Every cryptocurrency type is also monetary."""
        for mapping in TRANSACTION_MAPPINGS.values():
            if mapping.is_cryptocurrency:
                assert mapping.is_monetary

    def test_inquiry_has_no_payment_methods(self):
        assert TRANSACTION_MAPPINGS["inquiry"].payment_methods == ()

    def test_monero_uses_cryptocurrency(self):
        assert TRANSACTION_MAPPINGS["monero"].payment_methods == (PaymentMethod.CRYPTOCURRENCY,)

    def test_contribute_to_consume_uses_exchange(self):
        assert TRANSACTION_MAPPINGS["contribute-to-consume"].payment_methods == (
            PaymentMethod.EXCHANGE,
        )

    def test_booking_defaults_to_limited_availability(self):
        assert (
            TRANSACTION_MAPPINGS["booking"].default_availability
            == OfferAvailability.LIMITED_AVAILABILITY
        )

    def test_table_is_read_only(self):
        """Entries can't be added, replaced or mutated."""
        with pytest.raises(TypeError):
            TRANSACTION_MAPPINGS["new"] = TRANSACTION_MAPPINGS["stripe"]

        with pytest.raises(PydanticValidationError):
            TRANSACTION_MAPPINGS["stripe"].is_monetary = False

        assert TRANSACTION_MAPPINGS["stripe"].is_monetary is True


class TestLookupHelpers:
    """Tests for the module-level accessors."""

    def test_get_transaction_mapping_unknown_returns_none(self):
        assert get_transaction_mapping("paypal") is None

    def test_requires_external_url(self):
        assert requires_external_url("ebay") is True
        assert requires_external_url("stripe") is False

    def test_requires_external_url_unknown_is_false(self):
        assert requires_external_url("paypal") is False

    def test_is_monetary(self):
        assert is_monetary("stripe") is True
        assert is_monetary("inquiry") is False

    def test_is_monetary_unknown_is_false(self):
        assert is_monetary("paypal") is False

    def test_supported_types_in_table_order(self):
        """Should list all 15 types, deterministically."""
        types = get_supported_transaction_types()

        assert types == ALL_TYPES
        assert types == get_supported_transaction_types()
