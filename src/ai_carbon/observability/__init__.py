"""ai_carbon observability: event-driven structured logging.

Public API:
    emit(event)     — Fire-and-forget event emission (no-op if not configured)
    configure(cfg)  — Initialize emitter + subscribers (call once at startup)
    reset()         — Reset for testing

Logging (swappable formatter x destination):
    get_logger(name)             — Get a structured logger
    register_destination(n, cls) — Register custom LogDestination

The calculator imports `emit` and fires typed events. It doesn't know
about logs. Subscribers handle routing.
"""

from ai_carbon.observability.config import ObservabilityConfig
from ai_carbon.observability.emitter import configure, emit, is_configured, reset
from ai_carbon.observability.events import (
    BatchCompleted,
    CalculationRejected,
    EmissionCalculated,
)
from ai_carbon.observability.logging import (
    LogDestination,
    LogFormatter,
    get_logger,
    register_destination,
)

__all__ = [
    # Core API
    "emit",
    "configure",
    "is_configured",
    "reset",
    "ObservabilityConfig",
    # Logging (swappable)
    "get_logger",
    "LogFormatter",
    "LogDestination",
    "register_destination",
    # Events
    "EmissionCalculated",
    "BatchCompleted",
    "CalculationRejected",
]
