"""Typed event dataclasses for ai_carbon observability.

All events are frozen (immutable) dataclasses. The calculator emits these;
it doesn't know about logs. Subscribers handle routing.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EmissionCalculated:
    """Emitted after every successful single calculation."""

    provider: str
    model: str
    region: str | None
    input_tokens: int
    output_tokens: int
    cache_creation_tokens: int
    cache_read_tokens: int
    reasoning: bool
    co2_grams: float
    energy_wh: float
    water_liters: float
    timestamp: str


@dataclass(frozen=True)
class BatchCompleted:
    calls: int
    total_co2_grams: float
    workers: int  # 1 = sequential
    latency_ms: float


@dataclass(frozen=True)
class CalculationRejected:
    provider: str
    model: str
    error: str
    error_type: str  # exception class name
