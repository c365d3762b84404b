"""Lookups over the static tables in ai_carbon.config.

Matching is exact. A missing provider or model is an error; a missing
region silently resolves to the provider's default region.
"""

from __future__ import annotations

from collections.abc import Mapping

from ai_carbon.config import INFRASTRUCTURE, MODEL_SPECS, PROVIDERS, REGIONAL_FACTORS
from ai_carbon.errors import UnknownModelError, UnknownProviderError
from ai_carbon.types import InfrastructureProfile, ModelSpec, RegionalFactor


def _require_provider(provider: str) -> None:
    if provider not in INFRASTRUCTURE:
        raise UnknownProviderError(provider, PROVIDERS)


def lookup(provider: str, model: str) -> ModelSpec:
    """Return the ModelSpec for (provider, model)."""
    _require_provider(provider)
    models = MODEL_SPECS[provider]
    spec = models.get(model)
    if spec is None:
        raise UnknownModelError(provider, model, models)
    return spec


def lookup_region(provider: str, region: str | None = None) -> RegionalFactor:
    """Return the RegionalFactor for region, or the provider default."""
    _require_provider(provider)
    factors = REGIONAL_FACTORS[provider]
    if region is not None and region in factors:
        return factors[region]
    return factors[INFRASTRUCTURE[provider].default_region]


def get_infrastructure(provider: str) -> InfrastructureProfile:
    _require_provider(provider)
    return INFRASTRUCTURE[provider]


def models_for(provider: str) -> Mapping[str, ModelSpec]:
    _require_provider(provider)
    return MODEL_SPECS[provider]


def regions_for(provider: str) -> Mapping[str, RegionalFactor]:
    _require_provider(provider)
    return REGIONAL_FACTORS[provider]
