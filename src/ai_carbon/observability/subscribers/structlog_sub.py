"""Routes all events to structured log lines via the configured LogFormatter.

Always-on subscriber. Called by emitter.configure() on every startup.
"""

from __future__ import annotations

from dataclasses import asdict

from ai_carbon.observability.events import (
    BatchCompleted,
    CalculationRejected,
    EmissionCalculated,
)
from ai_carbon.observability.linker import CarbonEventLinker
from ai_carbon.observability.logging import get_logger


def _get_logger():
    """Lazy logger -- always reflects the active formatter, not stale import-time state."""
    return get_logger("ai_carbon.events")


def _to_dict(event: object) -> dict:
    return asdict(event)  # type: ignore[arg-type]


def register_structlog_subscriber() -> None:
    """Register log handlers for all events on CarbonEventLinker.

    Called once per configure(); reset() clears the linker.
    """

    @CarbonEventLinker.on(EmissionCalculated)
    def _log_emission_calculated(event: EmissionCalculated) -> None:
        _get_logger().debug("emission.calculated", **_to_dict(event))

    @CarbonEventLinker.on(BatchCompleted)
    def _log_batch_completed(event: BatchCompleted) -> None:
        _get_logger().info("batch.completed", **_to_dict(event))

    @CarbonEventLinker.on(CalculationRejected)
    def _log_calculation_rejected(event: CalculationRejected) -> None:
        _get_logger().warning("calculation.rejected", **_to_dict(event))
