"""
Product schema consumed by the offer builder.
"""

from typing import Any

from pydantic import Field

from models.base import BaseSchema


class ProductItem(BaseSchema):
    """
    A product page and its free-form frontmatter.

    Recognized frontmatter keys: name, description, image, transactions.
    """

    slug: str = Field(
        ...,
        min_length=1,
        description="URL-safe identifier",
        examples=["my-item"]
    )
    title: str = Field(..., description="Display fallback when frontmatter has no name")
    frontmatter: dict[str, Any] = Field(default_factory=dict)

    @property
    def display_name(self) -> str:
        """frontmatter name if set, else title."""
        return self.frontmatter.get("name") or self.title
