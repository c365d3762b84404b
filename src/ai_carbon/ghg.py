"""Regulatory carbon disclosure exports.

Formats:
    GHG Protocol -- Scope 3 Category 1 (Purchased Goods and Services)
"""

from __future__ import annotations

from ai_carbon.config import EMISSION_FACTOR_SOURCES, METHODOLOGY_DESCRIPTION
from ai_carbon.types import AggregatedImpact, GhgProtocolExport


def export_ghg_protocol(
    summary: AggregatedImpact,
    reporting_period: str,
) -> GhgProtocolExport:
    """Export to GHG Protocol Scope 3 Category 1 format.

    Args:
        summary: Aggregated impact over the period.
        reporting_period: e.g. "2026-Q1" or "2026".
    """
    intensity = (
        summary.co2_grams / summary.total_tokens * 1_000_000
        if summary.total_tokens > 0
        else 0.0
    )
    return GhgProtocolExport(
        reporting_period=reporting_period,
        emissions_tco2eq=summary.co2_grams / 1_000_000,
        calls=summary.calls,
        total_tokens=summary.total_tokens,
        intensity_per_million_tokens=intensity,
        methodology=METHODOLOGY_DESCRIPTION,
        emission_factor_sources=list(EMISSION_FACTOR_SOURCES),
    )
