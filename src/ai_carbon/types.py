"""Environmental impact types for AI inference calls.

Units: CO2 in grams, energy in watt-hours, water in liters, unless a field
name says otherwise. All records are frozen; nothing is mutated after
construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


def _utc_now() -> str:
    return datetime.now(UTC).isoformat()


# ---------------------------------------------------------------------------
# Static table records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ModelSpec:
    """Energy profile for one model.

    energy_per_token is in joules per token.
    """

    name: str
    energy_per_token: float
    architecture: str
    description: str = ""
    estimated_parameters: str | None = None  # display string, e.g. "~200B"
    parameter_count: float | None = None
    use_case: str | None = None
    builtin_reasoning: bool = False  # reasoning cost already in energy_per_token


@dataclass(frozen=True)
class RegionalFactor:
    """Grid and facility characteristics for one datacenter region."""

    region: str
    carbon_intensity: float  # kg CO2 / kWh
    renewable_fraction: float  # 0..1
    adjustment: float = 1.0  # regional infrastructure overhead


@dataclass(frozen=True)
class InfrastructureProfile:
    """Per-provider datacenter constants and cost-model multipliers.

    Multipliers left at None are not modeled by that provider.
    """

    provider: str
    default_region: str
    pue: float
    wue: float  # liters / kWh
    reasoning_multiplier: float
    output_token_multiplier: float = 1.0
    cache_creation_multiplier: float | None = None
    cache_read_multiplier: float | None = None
    hardware_efficiency: float = 1.0
    upstream_emissions_factor: float = 0.0


# ---------------------------------------------------------------------------
# Calculation input / output
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EmissionConfig:
    """One inference call to estimate."""

    provider: str
    model: str
    input_tokens: int
    output_tokens: int
    cache_creation_tokens: int | None = None
    cache_read_tokens: int | None = None
    reasoning: bool = False
    region: str | None = None


@dataclass(frozen=True)
class EmissionResult:
    """Impact of a single inference call."""

    provider: str
    model: str
    co2_grams: float
    energy_wh: float
    water_liters: float
    input_tokens: int
    output_tokens: int
    cache_creation_tokens: int | None = None  # None when absent or zero
    cache_read_tokens: int | None = None
    reasoning: bool = False
    region: str | None = None
    timestamp: str = field(default_factory=_utc_now)

    @property
    def regular_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    @property
    def total_tokens(self) -> int:
        return (
            self.input_tokens
            + self.output_tokens
            + (self.cache_creation_tokens or 0)
            + (self.cache_read_tokens or 0)
        )


@dataclass(frozen=True)
class RankedResult:
    """An EmissionResult annotated with its efficiency score within a set."""

    result: EmissionResult
    efficiency: float

    @property
    def provider(self) -> str:
        return self.result.provider

    @property
    def model(self) -> str:
        return self.result.model

    @property
    def co2_grams(self) -> float:
        return self.result.co2_grams


# ---------------------------------------------------------------------------
# Derived / reporting records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AggregatedImpact:
    """Totals over a sequence of results."""

    co2_grams: float
    energy_wh: float
    water_liters: float
    total_tokens: int
    calls: int
    average_co2_per_token: float
    average_energy_per_token: float


@dataclass(frozen=True)
class ModelComparison:
    """Sonnet vs Opus at the same token counts."""

    sonnet: EmissionResult
    opus: EmissionResult
    opus_multiplier: float


@dataclass(frozen=True)
class ImpactPerDollar:
    co2_grams_per_dollar: float
    energy_wh_per_dollar: float
    water_liters_per_dollar: float


@dataclass(frozen=True)
class CarbonEquivalents:
    """Human-friendly equivalents for CO2 emissions."""

    car_km: float
    phone_charges: int
    tree_days: float
    google_searches: int


@dataclass(frozen=True)
class GhgScopeBreakdown:
    """GHG Protocol scope split for one call.

    Scope 1 is zero for purchased cloud inference. Scope 2 is the
    operational electricity figure; scope 3 covers upstream hardware
    and supply chain.
    """

    result: EmissionResult
    scope1_grams: float
    scope2_grams: float
    scope3_grams: float

    @property
    def total_grams(self) -> float:
        return self.scope1_grams + self.scope2_grams + self.scope3_grams


@dataclass(frozen=True)
class GhgProtocolExport:
    """GHG Protocol Scope 3 Category 1 export."""

    reporting_period: str
    scope: int = 3
    category: int = 1
    category_name: str = "Purchased Goods and Services"
    emissions_tco2eq: float = 0.0
    calls: int = 0
    total_tokens: int = 0
    intensity_per_million_tokens: float = 0.0
    methodology: str = ""
    emission_factor_sources: list[str] = field(default_factory=list)
