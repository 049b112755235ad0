"""
Shared test fixtures.
"""

import sys
from pathlib import Path

# Add project root to Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

import pytest
from typing import Generator

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from config.instrumentation import reset_config
from config.settings import Settings
from services.offer_builder_service import OfferBuilderService
from tests.factories import ProductFactory, TransactionFactory

BASE_URL = "https://tinyland.dev"


# ===================
# ISOLATION
# ===================

@pytest.fixture(autouse=True)
def clean_config() -> Generator:
    """Every test starts and ends with an empty tracer config."""
    reset_config()
    yield
    reset_config()


# ===================
# TRACING
# ===================

@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    """
    Collects finished spans.

    Usage:
        def test_something(traced_service, span_exporter):
            traced_service.build_offer(...)
            spans = span_exporter.get_finished_spans()
    """
    return InMemorySpanExporter()


@pytest.fixture
def tracer(span_exporter):
    """SDK tracer wired to the in-memory exporter (not installed globally)."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider.get_tracer("tests")


# ===================
# SERVICES
# ===================

@pytest.fixture
def test_settings() -> Settings:
    """Settings with explicit values, independent of the environment."""
    return Settings(
        base_url=BASE_URL,
        seller_name="Tinyland",
        default_currency="USD",
        environment="development",
    )


@pytest.fixture
def service(test_settings) -> OfferBuilderService:
    """OfferBuilderService with the default (no-op) tracer."""
    return OfferBuilderService(app_settings=test_settings)


@pytest.fixture
def traced_service(tracer, test_settings) -> OfferBuilderService:
    """OfferBuilderService recording spans to span_exporter."""
    return OfferBuilderService(tracer=tracer, app_settings=test_settings)


# ===================
# DATA
# ===================

@pytest.fixture
def sample_product():
    """Product with name, description and image in frontmatter."""
    return ProductFactory.create_item(
        slug="my-item",
        title="My Item",
        frontmatter={
            "name": "My Great Item",
            "description": "A great item",
            "image": "/images/my-item.png",
        },
    )


@pytest.fixture
def stripe_transaction():
    """Priced, enabled Stripe transaction."""
    return TransactionFactory.create_config(
        type="stripe",
        price=29.99,
        currency="USD",
        enabled=True,
    )
