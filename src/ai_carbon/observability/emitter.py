"""Singleton emitter: configure once, emit everywhere.

The global emit() function is the only API modules need.
It's a no-op when not configured (zero overhead in tests).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ai_carbon.observability.config import ObservabilityConfig

from pyventus.events import EventEmitter

_emitter: EventEmitter | None = None
_configured: bool = False


def emit(event: Any) -> None:
    """Fire-and-forget event emission. No-op if not configured."""
    if _emitter is not None:
        _emitter.emit(event)


def configure(config: ObservabilityConfig | None = None) -> EventEmitter:
    """Initialize the global emitter and register subscribers.

    Called once at startup (CLI entry, test setup).
    Idempotent -- second call returns existing emitter.
    """
    global _emitter, _configured

    if _configured and _emitter is not None:
        return _emitter

    from ai_carbon.observability.config import ObservabilityConfig

    cfg = config or ObservabilityConfig()

    from ai_carbon.observability.logging import get_logger, setup_logging

    setup_logging(cfg)

    from pyventus.core.processing.asyncio import AsyncIOProcessingService

    from ai_carbon.observability.linker import CarbonEventLinker

    _emitter = EventEmitter(
        event_linker=CarbonEventLinker,
        event_processor=AsyncIOProcessingService(),
    )

    from ai_carbon.observability.subscribers.structlog_sub import (
        register_structlog_subscriber,
    )

    register_structlog_subscriber()

    get_logger("ai_carbon").debug(
        "observability.configured",
        formatter=cfg.log_formatter,
        destination=cfg.log_destination,
        log_level=cfg.log_level,
    )

    _configured = True
    return _emitter


def is_configured() -> bool:
    return _configured


def reset() -> None:
    """Reset for testing."""
    global _emitter, _configured

    from ai_carbon.observability.logging import shutdown_logging

    from ai_carbon.observability.linker import CarbonEventLinker

    shutdown_logging()
    CarbonEventLinker.remove_all()

    _emitter = None
    _configured = False
