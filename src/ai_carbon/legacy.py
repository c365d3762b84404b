"""Single-provider (Claude 4) API.

Kept for callers of the original Claude-only package. Every function
delegates to the multi-provider path with provider="claude", so results
are numerically identical to calculate_impact() for the same inputs.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from types import MappingProxyType

from ai_carbon.aggregate import aggregate, impact_per_dollar
from ai_carbon.calculator import calculate_batch, calculate_impact
from ai_carbon.config import CLAUDE, INFRASTRUCTURE, MODEL_SPECS, REGIONAL_FACTORS
from ai_carbon.formatting import format_impact
from ai_carbon.registry import lookup
from ai_carbon.types import (
    AggregatedImpact,
    EmissionConfig,
    EmissionResult,
    ImpactPerDollar,
    ModelComparison,
    ModelSpec,
)

SONNET = "claude-4-sonnet"
OPUS = "claude-4-opus"


@dataclass(frozen=True)
class CalculationOptions:
    """Claude-only calculation options."""

    model: str
    input_tokens: int
    output_tokens: int
    cache_creation_tokens: int | None = None
    cache_read_tokens: int | None = None
    reasoning: bool = False
    region: str | None = None  # accepted, ignored: always the default region

    def to_config(self) -> EmissionConfig:
        return EmissionConfig(
            provider=CLAUDE,
            model=self.model,
            input_tokens=self.input_tokens,
            output_tokens=self.output_tokens,
            cache_creation_tokens=self.cache_creation_tokens,
            cache_read_tokens=self.cache_read_tokens,
            reasoning=self.reasoning,
            region=None,
        )


def calculate_claude4_impact(options: CalculationOptions) -> EmissionResult:
    """Calculate environmental impact for a Claude 4 API call."""
    return calculate_impact(options.to_config())


def calculate_batch_impact(calculations: Sequence[CalculationOptions]) -> list[EmissionResult]:
    return calculate_batch([o.to_config() for o in calculations])


def aggregate_impacts(impacts: Sequence[EmissionResult]) -> AggregatedImpact:
    return aggregate(impacts)


def compare_models(
    input_tokens: int,
    output_tokens: int,
    reasoning: bool = False,
) -> ModelComparison:
    """Compare Sonnet and Opus at the same token counts.

    opus_multiplier is rounded to 2 decimals; 0.0 when Sonnet emits nothing.
    """
    sonnet = calculate_claude4_impact(
        CalculationOptions(SONNET, input_tokens, output_tokens, reasoning=reasoning)
    )
    opus = calculate_claude4_impact(
        CalculationOptions(OPUS, input_tokens, output_tokens, reasoning=reasoning)
    )
    multiplier = round(opus.co2_grams / sonnet.co2_grams, 2) if sonnet.co2_grams > 0 else 0.0
    return ModelComparison(sonnet=sonnet, opus=opus, opus_multiplier=multiplier)


def calculate_large_workload_example() -> EmissionResult:
    """A month of heavy agentic coding: mostly cache reads."""
    return calculate_claude4_impact(
        CalculationOptions(
            model=SONNET,
            input_tokens=35_240,
            output_tokens=506_176,
            cache_creation_tokens=25_361_509,
            cache_read_tokens=417_330_728,
        )
    )


def get_claude_model_info(model: str) -> ModelSpec:
    return lookup(CLAUDE, model)


def calculate_impact_per_dollar(
    impact: EmissionResult, estimated_cost_usd: float
) -> ImpactPerDollar | None:
    return impact_per_dollar(impact, estimated_cost_usd)


_PROFILE = INFRASTRUCTURE[CLAUDE]
_DEFAULT_REGION = REGIONAL_FACTORS[CLAUDE][_PROFILE.default_region]

CONSTANTS = MappingProxyType(
    {
        "MODEL_SPECS": MODEL_SPECS[CLAUDE],
        "INFRASTRUCTURE": MappingProxyType(
            {
                "pue": _PROFILE.pue,
                "carbon_intensity": _DEFAULT_REGION.carbon_intensity,
                "wue": _PROFILE.wue,
            }
        ),
        "CACHE_MULTIPLIERS": MappingProxyType(
            {
                "creation": _PROFILE.cache_creation_multiplier,
                "retrieval": _PROFILE.cache_read_multiplier,
            }
        ),
        "REASONING_MULTIPLIER": _PROFILE.reasoning_multiplier,
    }
)

__all__ = [
    "CONSTANTS",
    "CalculationOptions",
    "aggregate_impacts",
    "calculate_batch_impact",
    "calculate_claude4_impact",
    "calculate_impact_per_dollar",
    "calculate_large_workload_example",
    "compare_models",
    "format_impact",
    "get_claude_model_info",
]
