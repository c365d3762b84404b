"""Human-readable rendering of EmissionResults."""

from __future__ import annotations

from ai_carbon.types import EmissionResult


def _body(result: EmissionResult) -> str:
    tokens = f"{result.regular_tokens}"
    if result.cache_creation_tokens:
        tokens += f" (+{result.cache_creation_tokens} cache writes)"
    if result.cache_read_tokens:
        tokens += f" (+{result.cache_read_tokens} cache reads)"

    return (
        f"• CO2: {result.co2_grams:.2f}g\n"
        f"• Energy: {result.energy_wh:.2f}Wh\n"
        f"• Water: {result.water_liters:.3f}L\n"
        f"• Tokens: {tokens}"
    )


def format_emission_result(result: EmissionResult) -> str:
    """Multi-line summary headed by provider and model."""
    return f"{result.provider.upper()} {result.model} Impact:\n{_body(result)}"


def format_impact(result: EmissionResult) -> str:
    """Multi-line summary headed by model only (single-provider form)."""
    return f"{result.model} Impact:\n{_body(result)}"
