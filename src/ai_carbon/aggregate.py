"""Aggregation, ranking and per-unit conversions over EmissionResults.

Depends only on the shape of EmissionResult, never on calculator
internals.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from ai_carbon.types import (
    AggregatedImpact,
    CarbonEquivalents,
    EmissionResult,
    ImpactPerDollar,
    RankedResult,
)


def aggregate(results: Sequence[EmissionResult]) -> AggregatedImpact:
    """Sum impacts over results. Per-token averages are 0 for no tokens."""
    co2 = sum(r.co2_grams for r in results)
    energy = sum(r.energy_wh for r in results)
    water = sum(r.water_liters for r in results)
    tokens = sum(r.total_tokens for r in results)

    return AggregatedImpact(
        co2_grams=co2,
        energy_wh=energy,
        water_liters=water,
        total_tokens=tokens,
        calls=len(results),
        average_co2_per_token=co2 / tokens if tokens > 0 else 0.0,
        average_energy_per_token=energy / tokens if tokens > 0 else 0.0,
    )


def rank_results(results: Sequence[EmissionResult]) -> list[RankedResult]:
    """Sort ascending by CO2 and score each entry as max_co2 / own_co2.

    The heaviest emitter scores 1.0. A zero-emission entry scores inf,
    unless every entry is zero, in which case all score 1.0.
    """
    if not results:
        return []
    ordered = sorted(results, key=lambda r: r.co2_grams)
    max_co2 = ordered[-1].co2_grams

    ranked = []
    for r in ordered:
        if r.co2_grams > 0:
            score = max_co2 / r.co2_grams
        else:
            score = 1.0 if max_co2 == 0 else math.inf
        ranked.append(RankedResult(result=r, efficiency=score))
    return ranked


def calculate_equivalents(co2_grams: float) -> CarbonEquivalents:
    """Convert CO2 grams to human-friendly equivalents.

    Reference values:
    - 1 km driving = 120g CO2
    - 1 phone charge = 10g CO2
    - 1 tree absorbs 48g CO2/day
    - 1 Google search = 0.2g CO2
    """
    co2_grams = max(co2_grams, 0.0)
    return CarbonEquivalents(
        car_km=co2_grams / 120,
        phone_charges=round(co2_grams / 10),
        tree_days=co2_grams / 48,
        google_searches=round(co2_grams / 0.2),
    )


def impact_per_dollar(result: EmissionResult, cost_usd: float) -> ImpactPerDollar | None:
    """Impact normalized by spend. None for a non-positive cost."""
    if cost_usd <= 0:
        return None
    return ImpactPerDollar(
        co2_grams_per_dollar=result.co2_grams / cost_usd,
        energy_wh_per_dollar=result.energy_wh / cost_usd,
        water_liters_per_dollar=result.water_liters / cost_usd,
    )
