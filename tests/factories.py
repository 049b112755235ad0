"""
Test data factories.

Uses factory pattern to generate consistent test data.
"""

from typing import Optional

from models.product import ProductItem
from models.transaction import TransactionConfig


class TransactionFactory:
    """
    Factory for creating transaction config data.

    Usage:
        # Create with defaults (enabled stripe at 10 USD)
        tx = TransactionFactory.create()

        # Create with overrides
        tx = TransactionFactory.create(type="monero", currency="XMR")

        # Non-monetary
        tx = TransactionFactory.create_inquiry()
    """

    @classmethod
    def create(
        cls,
        type: str = "stripe",
        enabled: bool = True,
        price=10,
        currency: Optional[str] = "USD",
        **overrides
    ) -> dict:
        """
        Create a single transaction dict, as it appears in frontmatter.

        Keys whose value is None are left out.
        """
        data = {
            "type": type,
            "enabled": enabled,
            "price": price,
            "currency": currency,
            **overrides,
        }
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def create_config(cls, **kwargs) -> TransactionConfig:
        """Same as create(), validated into a TransactionConfig."""
        return TransactionConfig.model_validate(cls.create(**kwargs))

    @classmethod
    def create_inquiry(cls, **overrides) -> dict:
        overrides.setdefault("price", None)
        overrides.setdefault("currency", None)
        return cls.create(type="inquiry", **overrides)

    @classmethod
    def create_ebay(cls, **overrides) -> dict:
        overrides.setdefault("url", "https://www.ebay.com/itm/123")
        return cls.create(type="ebay", price=25, **overrides)

    @classmethod
    def create_monero(cls, **overrides) -> dict:
        overrides.setdefault("price", 0.5)
        overrides.setdefault("currency", "XMR")
        return cls.create(type="monero", **overrides)


class ProductFactory:
    """
    Factory for creating product data.

    Usage:
        product = ProductFactory.create(slug="widget")
        product = ProductFactory.create(transactions=[TransactionFactory.create()])
    """

    _counter = 0

    @classmethod
    def _next_counter(cls) -> int:
        cls._counter += 1
        return cls._counter

    @classmethod
    def create(
        cls,
        slug: Optional[str] = None,
        title: Optional[str] = None,
        frontmatter: Optional[dict] = None,
        transactions: Optional[list] = None,
    ) -> dict:
        """
        Create a single product dict.

        Args:
            slug: Product slug (auto-generated if not provided)
            title: Product title (auto-generated if not provided)
            frontmatter: Frontmatter mapping
            transactions: Stored under frontmatter["transactions"] if given
        """
        counter = cls._next_counter()
        frontmatter = dict(frontmatter or {})
        if transactions is not None:
            frontmatter["transactions"] = transactions

        return {
            "slug": slug or f"test-product-{counter}",
            "title": title or f"Test Product {counter}",
            "frontmatter": frontmatter,
        }

    @classmethod
    def create_item(cls, **kwargs) -> ProductItem:
        """Same as create(), validated into a ProductItem."""
        return ProductItem.model_validate(cls.create(**kwargs))
