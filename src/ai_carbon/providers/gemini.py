"""Gemini: balanced cost model on TPUs.

Input and output tokens are weighted equally. All computed energy is
scaled by the accelerator efficiency bonus.
"""

from __future__ import annotations

from ai_carbon.config import GEMINI, INFRASTRUCTURE, MODEL_SPECS, REGIONAL_FACTORS
from ai_carbon.providers.base import ProviderCalculator
from ai_carbon.types import EmissionConfig, InfrastructureProfile, ModelSpec


def gemini_energy_joules(
    config: EmissionConfig,
    spec: ModelSpec,
    profile: InfrastructureProfile,
) -> float:
    joules = (config.input_tokens + config.output_tokens) * spec.energy_per_token
    if config.reasoning:
        joules *= profile.reasoning_multiplier
    return joules * profile.hardware_efficiency


calculator = ProviderCalculator(
    provider=GEMINI,
    models=MODEL_SPECS[GEMINI],
    regions=REGIONAL_FACTORS[GEMINI],
    profile=INFRASTRUCTURE[GEMINI],
    energy_model=gemini_energy_joules,
)
