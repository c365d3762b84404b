"""Static energy, regional and infrastructure tables.

Estimates are drawn from:
- Power Hungry Processing (Luccioni et al., 2024)
- Carbon Emissions and Large Neural Network Training (Patterson et al., 2022)
- Provider sustainability reports (AWS, Microsoft, Google) for PUE/WUE
- Electricity Maps / eGRID regional grid intensity

Tables are read-only mappings built once at import time.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ai_carbon.types import InfrastructureProfile, ModelSpec, RegionalFactor

JOULES_PER_KWH = 3_600_000

CLAUDE = "claude"
OPENAI = "openai"
GEMINI = "gemini"

PROVIDERS: tuple[str, ...] = (CLAUDE, OPENAI, GEMINI)


def _by_name(*specs: ModelSpec) -> Mapping[str, ModelSpec]:
    return MappingProxyType({s.name: s for s in specs})


def _by_region(*factors: RegionalFactor) -> Mapping[str, RegionalFactor]:
    return MappingProxyType({f.region: f for f in factors})


# ── Models ───────────────────────────────────────────────────────

MODEL_SPECS: Mapping[str, Mapping[str, ModelSpec]] = MappingProxyType(
    {
        CLAUDE: _by_name(
            ModelSpec(
                name="claude-4-sonnet",
                energy_per_token=0.0012,
                architecture="mixture-of-experts",
                description="Efficient model for everyday use (~200B parameters)",
                estimated_parameters="~200B",
                parameter_count=200e9,
                use_case="Efficient everyday tasks",
            ),
            ModelSpec(
                name="claude-4-opus",
                energy_per_token=0.0045,
                architecture="transformer-large",
                description="Most capable model, higher energy usage (~1T+ parameters)",
                estimated_parameters="~1T+",
                parameter_count=1e12,
                use_case="Research and complex reasoning",
            ),
            ModelSpec(
                name="claude-3-5-haiku",
                energy_per_token=0.0004,
                architecture="dense-transformer",
                description="Fast, lightweight model (~20B parameters)",
                estimated_parameters="~20B",
                parameter_count=20e9,
                use_case="High-volume, latency-sensitive tasks",
            ),
        ),
        OPENAI: _by_name(
            ModelSpec(
                name="gpt-4o",
                energy_per_token=0.0010,
                architecture="multimodal-transformer",
                description="Omni model balancing capability and cost (~200B parameters)",
                estimated_parameters="~200B",
                parameter_count=200e9,
                use_case="General-purpose multimodal tasks",
            ),
            ModelSpec(
                name="gpt-4o-mini",
                energy_per_token=0.0003,
                architecture="multimodal-transformer",
                description="Small omni model (~8B parameters)",
                estimated_parameters="~8B",
                parameter_count=8e9,
                use_case="Cheap, high-throughput tasks",
            ),
            ModelSpec(
                name="gpt-4",
                energy_per_token=0.0030,
                architecture="mixture-of-experts",
                description="Original GPT-4 (~1.76T parameters, sparse)",
                estimated_parameters="~1.76T",
                parameter_count=1.76e12,
                use_case="Complex reasoning (legacy)",
            ),
            ModelSpec(
                name="o1-preview",
                energy_per_token=0.0060,
                architecture="reasoning-transformer",
                description="Reasoning model with built-in chain-of-thought",
                estimated_parameters="~300B",
                parameter_count=300e9,
                use_case="Multi-step reasoning",
                builtin_reasoning=True,
            ),
            ModelSpec(
                name="o1-mini",
                energy_per_token=0.0025,
                architecture="reasoning-transformer",
                description="Smaller reasoning model with built-in chain-of-thought",
                estimated_parameters="~100B",
                parameter_count=100e9,
                use_case="Coding and STEM reasoning",
                builtin_reasoning=True,
            ),
        ),
        GEMINI: _by_name(
            ModelSpec(
                name="gemini-2.5-pro",
                energy_per_token=0.0015,
                architecture="sparse-mixture-of-experts",
                description="Flagship TPU-served model with long context",
                estimated_parameters="~500B",
                parameter_count=500e9,
                use_case="Complex reasoning and long-context analysis",
            ),
            ModelSpec(
                name="gemini-2.5-flash",
                energy_per_token=0.0004,
                architecture="sparse-mixture-of-experts",
                description="Fast, cost-efficient TPU-served model",
                estimated_parameters="~50B",
                parameter_count=50e9,
                use_case="High-volume everyday tasks",
            ),
            ModelSpec(
                name="gemini-1.5-pro",
                energy_per_token=0.0018,
                architecture="mixture-of-experts",
                description="Previous-generation flagship model",
                estimated_parameters="~600B",
                parameter_count=600e9,
                use_case="Long-context document analysis",
            ),
            ModelSpec(
                name="gemini-1.5-flash",
                energy_per_token=0.0005,
                architecture="mixture-of-experts",
                description="Previous-generation lightweight model",
                estimated_parameters="~30B",
                parameter_count=30e9,
                use_case="Summarization and chat",
            ),
        ),
    }
)

# Mid-tier model per provider used by compare/rank. An editorial choice,
# not the most efficient model available.
REFERENCE_MODELS: Mapping[str, str] = MappingProxyType(
    {
        CLAUDE: "claude-4-sonnet",
        OPENAI: "gpt-4o",
        GEMINI: "gemini-2.5-pro",
    }
)


# ── Regions ──────────────────────────────────────────────────────

REGIONAL_FACTORS: Mapping[str, Mapping[str, RegionalFactor]] = MappingProxyType(
    {
        # us-east-1 matches the original single-region constants exactly.
        CLAUDE: _by_region(
            RegionalFactor("us-east-1", carbon_intensity=0.385, renewable_fraction=0.0),
            RegionalFactor("us-west-2", carbon_intensity=0.136, renewable_fraction=0.60, adjustment=0.98),
            RegionalFactor("eu-west-1", carbon_intensity=0.316, renewable_fraction=0.40, adjustment=1.02),
            RegionalFactor("ap-southeast-1", carbon_intensity=0.408, renewable_fraction=0.05, adjustment=1.05),
        ),
        OPENAI: _by_region(
            RegionalFactor("eastus", carbon_intensity=0.379, renewable_fraction=0.20),
            RegionalFactor("westus2", carbon_intensity=0.136, renewable_fraction=0.55, adjustment=0.98),
            RegionalFactor("westeurope", carbon_intensity=0.328, renewable_fraction=0.45, adjustment=1.02),
            RegionalFactor("southeastasia", carbon_intensity=0.408, renewable_fraction=0.05, adjustment=1.05),
        ),
        GEMINI: _by_region(
            RegionalFactor("us-central1", carbon_intensity=0.410, renewable_fraction=0.70),
            RegionalFactor("us-east4", carbon_intensity=0.323, renewable_fraction=0.55, adjustment=1.02),
            RegionalFactor("europe-west4", carbon_intensity=0.283, renewable_fraction=0.65),
            RegionalFactor("asia-southeast1", carbon_intensity=0.408, renewable_fraction=0.04, adjustment=1.05),
        ),
    }
)


# ── Infrastructure ───────────────────────────────────────────────

INFRASTRUCTURE: Mapping[str, InfrastructureProfile] = MappingProxyType(
    {
        CLAUDE: InfrastructureProfile(
            provider=CLAUDE,
            default_region="us-east-1",
            pue=1.12,
            wue=1.8,
            reasoning_multiplier=2.5,
            cache_creation_multiplier=1.1,  # full forward pass + storage
            cache_read_multiplier=0.12,  # bandwidth-bound retrieval
            upstream_emissions_factor=0.15,
        ),
        OPENAI: InfrastructureProfile(
            provider=OPENAI,
            default_region="eastus",
            pue=1.18,
            wue=0.49,
            reasoning_multiplier=2.0,
            output_token_multiplier=4.5,  # decode is memory-bandwidth bound
            upstream_emissions_factor=0.18,
        ),
        GEMINI: InfrastructureProfile(
            provider=GEMINI,
            default_region="us-central1",
            pue=1.10,
            wue=1.1,
            reasoning_multiplier=1.8,
            hardware_efficiency=0.5,  # TPU
            upstream_emissions_factor=0.12,
        ),
    }
)


# Standardized "marginal" response: a short prompt with a ~400-token answer.
MARGINAL_INPUT_TOKENS = 50
MARGINAL_OUTPUT_TOKENS = 350

METHODOLOGY_DESCRIPTION = (
    "Per-token inference energy estimated from published research, scaled by "
    "provider datacenter PUE and regional grid adjustment. CO2 is location-based "
    "grid intensity net of the regional renewable share; water uses provider WUE. "
    "Purchased cloud inference is reported as Scope 3, Category 1 "
    "(Purchased Goods and Services)."
)

EMISSION_FACTOR_SOURCES = [
    "Power Hungry Processing (Luccioni et al., 2024)",
    "Carbon Emissions and Large Neural Network Training (Patterson et al., 2022)",
    "AWS, Microsoft and Google sustainability reports (PUE/WUE)",
    "Electricity Maps and EPA eGRID regional grid intensity",
]
