"""OpenAI: decode-weighted cost model.

Output tokens are memory-bandwidth bound during decode and carry a
higher multiplier than input (prefill). No cache modeling. Models with
built-in reasoning already price it into energy_per_token and never get
the generic reasoning multiplier on top.
"""

from __future__ import annotations

from ai_carbon.config import INFRASTRUCTURE, MODEL_SPECS, OPENAI, REGIONAL_FACTORS
from ai_carbon.providers.base import ProviderCalculator
from ai_carbon.types import EmissionConfig, InfrastructureProfile, ModelSpec


def openai_energy_joules(
    config: EmissionConfig,
    spec: ModelSpec,
    profile: InfrastructureProfile,
) -> float:
    weighted_tokens = config.input_tokens + config.output_tokens * profile.output_token_multiplier
    joules = weighted_tokens * spec.energy_per_token
    if config.reasoning and not spec.builtin_reasoning:
        joules *= profile.reasoning_multiplier
    return joules


calculator = ProviderCalculator(
    provider=OPENAI,
    models=MODEL_SPECS[OPENAI],
    regions=REGIONAL_FACTORS[OPENAI],
    profile=INFRASTRUCTURE[OPENAI],
    energy_model=openai_energy_joules,
)
