"""
Configuration module.

Exports:
    settings: Application settings instance
    get_settings: Function to get settings
    configure / get_config / reset_config: Tracer configuration slot
    get_tracer: Configured tracer or no-op
    configure_logging: structlog setup for entry points
"""

from config.settings import settings, get_settings, Settings
from config.instrumentation import (
    OfferBuilderConfig,
    configure,
    get_config,
    reset_config,
    get_tracer,
)
from config.logging import configure_logging

__all__ = [
    # Settings
    "settings",
    "get_settings",
    "Settings",

    # Instrumentation
    "OfferBuilderConfig",
    "configure",
    "get_config",
    "reset_config",
    "get_tracer",

    # Logging
    "configure_logging",
]
