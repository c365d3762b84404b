"""Per-provider emission calculators.

Provides:
    get_calculator(provider) -- the EmissionCalculator for a provider id
    CALCULATORS              -- read-only provider -> calculator mapping
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ai_carbon.config import PROVIDERS
from ai_carbon.errors import UnknownProviderError
from ai_carbon.providers import claude, gemini, openai
from ai_carbon.providers.base import (
    EmissionCalculator,
    EnergyModel,
    ProviderCalculator,
    validate_tokens,
)

CALCULATORS: Mapping[str, EmissionCalculator] = MappingProxyType(
    {
        claude.calculator.provider: claude.calculator,
        openai.calculator.provider: openai.calculator,
        gemini.calculator.provider: gemini.calculator,
    }
)


def get_calculator(provider: str) -> EmissionCalculator:
    """Return the calculator for provider, or raise UnknownProviderError."""
    calc = CALCULATORS.get(provider)
    if calc is None:
        raise UnknownProviderError(provider, PROVIDERS)
    return calc


__all__ = [
    "CALCULATORS",
    "EmissionCalculator",
    "EnergyModel",
    "ProviderCalculator",
    "get_calculator",
    "validate_tokens",
]
