"""
Tracer configuration for the offer builder.

Spans go through the OpenTelemetry API, so any SDK tracer can be injected.
Without one, the builder uses the API's NoOpTracer.

Services take a tracer in their constructor; the process-wide slot below is
the fallback for callers that want to set instrumentation once at startup
(or in test setup). Last write wins, no locking.
"""

from dataclasses import dataclass, fields, replace
from typing import Optional

from opentelemetry import trace


@dataclass
class OfferBuilderConfig:
    """Process-wide offer builder configuration."""
    tracer: Optional[trace.Tracer] = None


_config = OfferBuilderConfig()


def configure(**overrides) -> None:
    """
    Merge overrides into the process-wide config.

    Usage:
        configure(tracer=provider.get_tracer("offers"))

    Raises:
        TypeError: If an override names an unknown field
    """
    global _config
    known = {f.name for f in fields(OfferBuilderConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown config option(s): {', '.join(sorted(unknown))}")
    _config = replace(_config, **overrides)


def get_config() -> OfferBuilderConfig:
    """Return a copy of the current config."""
    return replace(_config)


def reset_config() -> None:
    """Clear the config back to defaults (for test isolation)."""
    global _config
    _config = OfferBuilderConfig()


def get_tracer() -> trace.Tracer:
    """Configured tracer, or a no-op tracer when none is set."""
    return _config.tracer or trace.NoOpTracer()
