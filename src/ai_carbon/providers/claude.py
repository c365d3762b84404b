"""Claude: cache-aware cost model.

Input and output tokens cost the same. Cache writes pay a full forward
pass plus storage overhead; cache reads are bandwidth-bound retrieval
with no transformer compute. Reasoning scales computation only, so cache
reads are added after the reasoning multiplier.
"""

from __future__ import annotations

from ai_carbon.config import CLAUDE, INFRASTRUCTURE, MODEL_SPECS, REGIONAL_FACTORS
from ai_carbon.providers.base import ProviderCalculator
from ai_carbon.types import EmissionConfig, InfrastructureProfile, ModelSpec


def claude_energy_joules(
    config: EmissionConfig,
    spec: ModelSpec,
    profile: InfrastructureProfile,
) -> float:
    per_token = spec.energy_per_token
    regular_tokens = config.input_tokens + config.output_tokens
    base = regular_tokens * per_token

    cache_write = (config.cache_creation_tokens or 0) * per_token * (
        profile.cache_creation_multiplier or 1.0
    )
    cache_read = (config.cache_read_tokens or 0) * per_token * (
        profile.cache_read_multiplier or 1.0
    )

    compute = base + cache_write
    if config.reasoning:
        compute *= profile.reasoning_multiplier

    return compute + cache_read


calculator = ProviderCalculator(
    provider=CLAUDE,
    models=MODEL_SPECS[CLAUDE],
    regions=REGIONAL_FACTORS[CLAUDE],
    profile=INFRASTRUCTURE[CLAUDE],
    energy_model=claude_energy_joules,
)
