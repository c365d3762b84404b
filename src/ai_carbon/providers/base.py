"""Emission calculator protocol and the shared calculation skeleton.

A provider is plain data (model table, region table, infrastructure
profile) plus an EnergyModel: the one step where providers diverge.
Everything else (validation, unit conversion, PUE, grid intensity,
water, result shaping) is shared.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Integral
from typing import Callable, Protocol, runtime_checkable

from ai_carbon.config import JOULES_PER_KWH
from ai_carbon.errors import InvalidTokenCountError, UnknownModelError
from ai_carbon.types import (
    EmissionConfig,
    EmissionResult,
    InfrastructureProfile,
    ModelSpec,
    RegionalFactor,
)

# (config, spec, profile) -> joules at the hardware, before PUE
EnergyModel = Callable[[EmissionConfig, ModelSpec, InfrastructureProfile], float]


@runtime_checkable
class EmissionCalculator(Protocol):
    """Capability every provider calculator offers."""

    provider: str

    def calculate_emissions(self, config: EmissionConfig) -> EmissionResult:
        """Estimate CO2, energy and water for one call."""
        ...

    def supported_models(self) -> list[str]: ...

    def regional_factors(self) -> Mapping[str, RegionalFactor]: ...

    def model_info(self, model: str) -> ModelSpec: ...


def validate_tokens(config: EmissionConfig) -> None:
    """Reject negative, non-integer or non-finite token counts.

    Floats are rejected outright, which covers nan and inf.
    """
    for name in ("input_tokens", "output_tokens", "cache_creation_tokens", "cache_read_tokens"):
        value = getattr(config, name)
        if value is None and name.startswith("cache_"):
            continue
        if isinstance(value, bool) or not isinstance(value, Integral) or value < 0:
            raise InvalidTokenCountError(name, value)


def _present(count: int | None) -> int | None:
    return count if count else None


@dataclass(frozen=True)
class ProviderCalculator:
    """EmissionCalculator composed from static tables and an energy model."""

    provider: str
    models: Mapping[str, ModelSpec]
    regions: Mapping[str, RegionalFactor]
    profile: InfrastructureProfile
    energy_model: EnergyModel

    def supported_models(self) -> list[str]:
        return list(self.models)

    def regional_factors(self) -> Mapping[str, RegionalFactor]:
        return self.regions

    def model_info(self, model: str) -> ModelSpec:
        spec = self.models.get(model)
        if spec is None:
            raise UnknownModelError(self.provider, model, self.models)
        return spec

    def region_factor(self, region: str | None) -> RegionalFactor:
        if region is not None and region in self.regions:
            return self.regions[region]
        return self.regions[self.profile.default_region]

    def calculate_emissions(self, config: EmissionConfig) -> EmissionResult:
        validate_tokens(config)
        spec = self.model_info(config.model)
        factor = self.region_factor(config.region)

        joules = self.energy_model(config, spec, self.profile)

        energy_kwh = (joules / JOULES_PER_KWH) * self.profile.pue * factor.adjustment
        co2_kg = energy_kwh * factor.carbon_intensity * (1 - factor.renewable_fraction)
        water_liters = energy_kwh * self.profile.wue

        return EmissionResult(
            provider=self.provider,
            model=config.model,
            co2_grams=co2_kg * 1000,
            energy_wh=energy_kwh * 1000,
            water_liters=water_liters,
            input_tokens=config.input_tokens,
            output_tokens=config.output_tokens,
            cache_creation_tokens=_present(config.cache_creation_tokens),
            cache_read_tokens=_present(config.cache_read_tokens),
            reasoning=config.reasoning,
            region=factor.region,
        )
