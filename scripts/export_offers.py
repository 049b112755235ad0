"""
Export Schema.org offers for a product file.

Reads a product JSON document ({"slug", "title", "frontmatter"}) and prints
its offers as JSON-LD together with their ActivityPub attachments.

Usage:
    python scripts/export_offers.py product.json
    python scripts/export_offers.py product.json --base-url https://example.org --validate
"""

import argparse
import json
import os
import sys
from typing import Optional

# Allow imports from the project root when running as a script
_root_dir = os.path.join(os.path.dirname(__file__), "..")
sys.path.insert(0, _root_dir)

import structlog

from config import configure_logging
from exceptions import AppError
from models.product import ProductItem
from services.offer_builder_service import get_offer_builder_service

logger = structlog.get_logger(__name__)


def export_offers(
    product: ProductItem,
    base_url: Optional[str] = None,
    validate: bool = False
) -> int:
    """
    Print offers for one product.

    Returns:
        Process exit code (1 if validation or construction failed)
    """
    service = get_offer_builder_service()

    if validate:
        failed = False
        for transaction in product.frontmatter.get("transactions") or []:
            result = service.validate_transaction(transaction)
            if not result.valid:
                failed = True
                for error in result.errors:
                    print(f"  ✗ {error}", file=sys.stderr)
        if failed:
            logger.error("validation_failed", product_slug=product.slug)
            return 1

    try:
        offers = service.build_all_offers(product, base_url)
    except AppError as e:
        logger.error("export_failed", product_slug=product.slug, code=e.code, error=e.message)
        print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        return 1

    print(json.dumps(
        {
            "offers": [offer.to_json_ld() for offer in offers],
            "attachments": [
                service.offer_to_activitypub_attachment(offer).model_dump()
                for offer in offers
            ],
        },
        indent=2,
        ensure_ascii=False,
    ))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Print Schema.org offers and ActivityPub attachments for a product."
    )
    parser.add_argument(
        "product_file",
        help="Path to a product JSON file",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Site root for offer ids (default: BASE_URL setting)",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate every transaction first and stop on errors",
    )
    args = parser.parse_args()

    configure_logging()

    with open(args.product_file, encoding="utf-8") as f:
        product = ProductItem.model_validate(json.load(f))

    return export_offers(product, args.base_url, args.validate)


if __name__ == "__main__":
    sys.exit(main())
