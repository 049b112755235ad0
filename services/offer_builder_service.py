"""
Offer builder service.

Turns a product's transaction configs into Schema.org Offers, projects
offers into ActivityPub attachments and validates transaction configs
against the mapping table.

Per-type behaviour comes from static tables (config.transaction_mappings,
config.offers), never from subclasses.
"""

import math
from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Union

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from config.instrumentation import get_tracer
from config.offers import (
    CRYPTO_CURRENCIES,
    DEFAULT_ACTION,
    PRODUCT_PATH,
    REQUIRED_ACTIONS,
    SUPPORTED_CURRENCIES,
    TRANSACTION_DISPLAY_NAMES,
)
from config.settings import Settings, get_settings
from config.transaction_mappings import TRANSACTION_MAPPINGS
from exceptions import InvalidPriceError, UnknownTransactionTypeError
from models.offer import (
    ActivityPubAttachment,
    ItemOffered,
    PriceSpecification,
    SchemaOffer,
    Seller,
)
from models.product import ProductItem
from models.transaction import (
    PaymentMethod,
    TransactionConfig,
    TransactionMapping,
    TransactionTypeInfo,
    ValidationResult,
)

logger = structlog.get_logger(__name__)

_URL_ADAPTER = TypeAdapter(AnyUrl)

ProductInput = Union[ProductItem, dict[str, Any]]
TransactionInput = Union[TransactionConfig, dict[str, Any]]


def _parse_price(price: Union[int, float, str]) -> Optional[float]:
    """Price as a finite float, or None if it isn't numeric."""
    if isinstance(price, bool):
        return None
    try:
        value = float(price)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def _format_price(price: Union[int, float, str]) -> str:
    """Render a price the way it was written (10.0 -> "10")."""
    if isinstance(price, float) and price.is_integer():
        return str(int(price))
    return str(price)


def _is_enabled(transaction: TransactionInput) -> bool:
    """enabled must be literally True; "yes", 1 and friends don't count."""
    if isinstance(transaction, Mapping):
        return transaction.get("enabled") is True
    return getattr(transaction, "enabled", None) is True


def _as_product(product: ProductInput) -> ProductItem:
    if isinstance(product, ProductItem):
        return product
    return ProductItem.model_validate(product)


def _as_transaction(transaction: TransactionInput) -> TransactionConfig:
    if isinstance(transaction, TransactionConfig):
        return transaction
    return TransactionConfig.model_validate(transaction)


class OfferBuilderService:
    """
    Offer construction and validation.

    Handles:
    1. Building one offer per transaction config
    2. Building all enabled offers for a product, by priority
    3. Projecting offers into ActivityPub attachments
    4. Structural validation of transaction configs

    Spans go to the tracer passed in, else the configured tracer
    (config.configure), else a no-op tracer.
    """

    def __init__(
        self,
        tracer: Optional[trace.Tracer] = None,
        app_settings: Optional[Settings] = None,
    ):
        self._tracer = tracer
        self.settings = app_settings or get_settings()

    @property
    def tracer(self) -> trace.Tracer:
        return self._tracer or get_tracer()

    @contextmanager
    def _span(self, name: str, attributes: dict[str, Any]) -> Iterator[trace.Span]:
        """
        Run a block inside a span.

        OK status on normal exit; on error the exception is recorded,
        status set to ERROR and the exception re-raised. The span is
        ended exactly once either way.
        """
        with self.tracer.start_as_current_span(
            name,
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            for key, value in attributes.items():
                span.set_attribute(key, value)
            try:
                yield span
            except Exception as e:
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, str(e)))
                raise
            span.set_status(Status(StatusCode.OK))

    def _base_url(self, base_url: Optional[str]) -> str:
        return base_url if base_url is not None else self.settings.normalized_base_url

    # ===================
    # CONSTRUCTION
    # ===================

    def build_offer(
        self,
        product: ProductInput,
        transaction: TransactionInput,
        base_url: Optional[str] = None,
    ) -> SchemaOffer:
        """
        Build a Schema.org Offer for one transaction config.

        Args:
            product: Product the offer is for
            transaction: Transaction config (type must be in the mapping table)
            base_url: Site root; defaults to settings.base_url

        Returns:
            A new SchemaOffer

        Raises:
            UnknownTransactionTypeError: If transaction.type has no mapping
            InvalidPriceError: If a monetary price is not numeric
        """
        product = _as_product(product)
        transaction = _as_transaction(transaction)
        base_url = self._base_url(base_url)

        with self._span(
            "OfferBuilderService.build_offer",
            {"transaction.type": transaction.type, "product.slug": product.slug},
        ):
            logger.debug(
                "building_offer",
                transaction_type=transaction.type,
                product_slug=product.slug
            )

            mapping = TRANSACTION_MAPPINGS.get(transaction.type)
            if mapping is None:
                logger.warning(
                    "offer_build_failed",
                    transaction_type=transaction.type,
                    product_slug=product.slug,
                    reason="unknown_transaction_type"
                )
                raise UnknownTransactionTypeError(transaction.type)

            fm = product.frontmatter
            product_name = product.display_name
            product_url = f"{base_url}/{PRODUCT_PATH}/{product.slug}"

            offer = SchemaOffer(
                id=f"{product_url}#offer-{transaction.type}",
                name=transaction.label or f"{product_name} - {transaction.type}",
                description=transaction.description,
                url=transaction.url or product_url,
                availability=transaction.availability or mapping.default_availability,
                accepted_payment_method=list(mapping.payment_methods),
                transaction_type=transaction.type,
                seller=Seller(name=self.settings.seller_name, url=base_url),
                item_offered=ItemOffered(
                    name=product_name,
                    description=fm.get("description"),
                    url=product_url,
                    image=fm.get("image"),
                ),
            )

            # Zero counts as "no price": the check is on truthiness
            if mapping.is_monetary and transaction.price:
                currency = transaction.currency or self.settings.default_currency
                offer.price = transaction.price
                offer.price_currency = currency
                offer.price_specification = self._build_price_spec(
                    transaction.price,
                    currency,
                    mapping
                )

            if transaction.url:
                offer.external_url = transaction.url

            if not mapping.is_monetary:
                offer.requires_action = self.get_required_action(transaction.type)

            logger.debug("offer_built", offer_id=offer.id)
            return offer

    def build_all_offers(
        self,
        product: ProductInput,
        base_url: Optional[str] = None,
    ) -> list[SchemaOffer]:
        """
        Build offers for every enabled transaction on a product.

        Offers are ordered by priority, highest first; equal priorities keep
        their frontmatter order. The first failing transaction aborts the
        whole call.

        Args:
            product: Product whose frontmatter["transactions"] is read
            base_url: Site root; defaults to settings.base_url

        Returns:
            List of SchemaOffer (empty when nothing is configured or enabled)
        """
        product = _as_product(product)

        with self._span(
            "OfferBuilderService.build_all_offers",
            {"product.slug": product.slug},
        ) as span:
            transactions = product.frontmatter.get("transactions") or []

            # Disabled entries are never parsed, so they can't fail the call
            enabled = sorted(
                (_as_transaction(t) for t in transactions if _is_enabled(t)),
                key=lambda t: t.priority or 0,
                reverse=True
            )

            offers = [self.build_offer(product, t, base_url) for t in enabled]

            span.set_attribute("offers.count", len(offers))
            logger.info(
                "offers_built",
                product_slug=product.slug,
                configured=len(transactions),
                count=len(offers)
            )
            return offers

    def _build_price_spec(
        self,
        price: Union[int, float, str],
        currency: str,
        mapping: TransactionMapping,
    ) -> PriceSpecification:
        """Price block; crypto prices are unit prices and carry no VAT flag."""
        value = _parse_price(price)
        if value is None:
            raise InvalidPriceError(price, mapping.transaction_type)

        if mapping.is_cryptocurrency:
            return PriceSpecification(
                schema_type="UnitPriceSpecification",
                price=value,
                price_currency=currency,
            )

        return PriceSpecification(
            schema_type="PriceSpecification",
            price=value,
            price_currency=currency,
            value_added_tax_included=False,
        )

    # ===================
    # PROJECTION
    # ===================

    def offer_to_activitypub_attachment(
        self,
        offer: Union[SchemaOffer, dict[str, Any]],
    ) -> ActivityPubAttachment:
        """
        Project an offer into an ActivityPub PropertyValue.

        value is the offer name, then " - {price} {currency}" for priced
        monetary offers, then " ({external url})" when there is one.
        """
        if not isinstance(offer, SchemaOffer):
            offer = SchemaOffer.model_validate(offer)

        mapping = TRANSACTION_MAPPINGS.get(offer.transaction_type)
        value = offer.name

        if mapping and mapping.is_monetary and offer.price:
            value += f" - {_format_price(offer.price)} {offer.price_currency}"

        if offer.external_url:
            value += f" ({offer.external_url})"

        return ActivityPubAttachment(
            name=self.get_transaction_display_name(offer.transaction_type),
            value=value,
        )

    # ===================
    # VALIDATION
    # ===================

    def validate_transaction(self, transaction: TransactionInput) -> ValidationResult:
        """
        Check a transaction config against its mapping.

        Unknown types stop at a single error; every other problem is
        accumulated. Never raises for invalid configs.

        Returns:
            ValidationResult with valid=True only if no errors were found
        """
        transaction = _as_transaction(transaction)

        with self._span(
            "OfferBuilderService.validate_transaction",
            {"transaction.type": transaction.type},
        ) as span:
            errors = self._collect_errors(transaction)

            span.set_attribute("validation.error_count", len(errors))
            logger.debug(
                "transaction_validated",
                transaction_type=transaction.type,
                error_count=len(errors)
            )
            return ValidationResult(valid=not errors, errors=errors)

    def _collect_errors(self, transaction: TransactionConfig) -> list[str]:
        errors: list[str] = []

        mapping = TRANSACTION_MAPPINGS.get(transaction.type)
        if mapping is None:
            return [f"Unknown transaction type: {transaction.type}"]

        if mapping.requires_external_url and not transaction.url:
            errors.append(
                f'Transaction type "{transaction.type}" requires an external URL'
            )

        if transaction.url:
            try:
                _URL_ADAPTER.validate_python(transaction.url)
            except PydanticValidationError:
                errors.append(f"Invalid URL format: {transaction.url}")

        if mapping.is_monetary and not transaction.price:
            errors.append(
                f'Monetary transaction type "{transaction.type}" requires a price'
            )

        if transaction.price is not None:
            value = _parse_price(transaction.price)
            if value is None or value < 0:
                errors.append(f"Invalid price: {transaction.price}")

        if mapping.is_monetary and transaction.currency:
            if transaction.currency not in SUPPORTED_CURRENCIES:
                errors.append(
                    f"Invalid currency: {transaction.currency}. "
                    f"Must be one of: {', '.join(SUPPORTED_CURRENCIES)}"
                )

        if mapping.is_cryptocurrency and transaction.currency:
            if transaction.currency not in CRYPTO_CURRENCIES:
                errors.append(
                    "Cryptocurrency transaction requires crypto currency "
                    f"({', '.join(CRYPTO_CURRENCIES)}), got: {transaction.currency}"
                )

        return errors

    # ===================
    # LOOKUPS
    # ===================

    def get_payment_methods(self, transaction_type: str) -> list[PaymentMethod]:
        """Payment methods for a type (empty for unknown types)."""
        mapping = TRANSACTION_MAPPINGS.get(transaction_type)
        return list(mapping.payment_methods) if mapping else []

    def get_required_action(self, transaction_type: str) -> str:
        return REQUIRED_ACTIONS.get(transaction_type, DEFAULT_ACTION)

    def get_transaction_display_name(self, transaction_type: str) -> str:
        return TRANSACTION_DISPLAY_NAMES.get(transaction_type, transaction_type)

    def get_all_transaction_types(self) -> list[TransactionTypeInfo]:
        """One summary row per mapping, in table order."""
        return [
            TransactionTypeInfo(
                type=transaction_type,
                display_name=self.get_transaction_display_name(transaction_type),
                is_monetary=mapping.is_monetary,
                is_donation=mapping.is_donation,
                is_subscription=mapping.is_subscription,
                requires_external_url=mapping.requires_external_url,
            )
            for transaction_type, mapping in TRANSACTION_MAPPINGS.items()
        ]


# Singleton instance
_offer_builder_service: Optional[OfferBuilderService] = None


def get_offer_builder_service() -> OfferBuilderService:
    """Get or create OfferBuilderService instance."""
    global _offer_builder_service
    if _offer_builder_service is None:
        _offer_builder_service = OfferBuilderService()
    return _offer_builder_service
