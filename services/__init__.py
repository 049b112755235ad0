"""
Business logic services.

Each service handles one domain area.
"""

from services.offer_builder_service import (
    OfferBuilderService,
    get_offer_builder_service,
)

__all__ = [
    "OfferBuilderService",
    "get_offer_builder_service",
]
