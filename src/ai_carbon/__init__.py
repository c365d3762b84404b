"""Environmental impact estimates for AI model inference.

Public API:
    calculate_impact(config) -- CO2/energy/water for one call
    calculate_batch(configs) -- order-preserving batch
    compare_providers(input_tokens, output_tokens) -- reference model per provider
    rank_by_efficiency(input_tokens, output_tokens) -- providers ranked by CO2
    aggregate(results) -- totals and per-token averages
    format_emission_result(result) -- human-readable summary
    export_ghg_protocol(summary, period) -- GHG Protocol Scope 3 export

The Claude-only API of the original package lives in ai_carbon.legacy.
"""

from ai_carbon.aggregate import (
    aggregate,
    calculate_equivalents,
    impact_per_dollar,
    rank_results,
)
from ai_carbon.calculator import (
    calculate_batch,
    calculate_ghg_scopes,
    calculate_impact,
    calculate_marginal_impact,
    compare_providers,
    get_model_info,
    get_regional_factors,
    get_supported_models,
    get_supported_providers,
    rank_by_efficiency,
)
from ai_carbon.config import (
    CLAUDE,
    GEMINI,
    INFRASTRUCTURE,
    MODEL_SPECS,
    OPENAI,
    PROVIDERS,
    REFERENCE_MODELS,
    REGIONAL_FACTORS,
)
from ai_carbon.errors import (
    CarbonError,
    InvalidTokenCountError,
    UnknownModelError,
    UnknownProviderError,
)
from ai_carbon.formatting import format_emission_result, format_impact
from ai_carbon.ghg import export_ghg_protocol
from ai_carbon.registry import get_infrastructure, lookup, lookup_region
from ai_carbon.types import (
    AggregatedImpact,
    CarbonEquivalents,
    EmissionConfig,
    EmissionResult,
    GhgProtocolExport,
    GhgScopeBreakdown,
    ImpactPerDollar,
    InfrastructureProfile,
    ModelComparison,
    ModelSpec,
    RankedResult,
    RegionalFactor,
)

__version__ = "0.2.0"

__all__ = [
    # Core functions
    "calculate_impact",
    "calculate_batch",
    "compare_providers",
    "rank_by_efficiency",
    "calculate_marginal_impact",
    "calculate_ghg_scopes",
    # Discovery
    "get_supported_providers",
    "get_supported_models",
    "get_model_info",
    "get_regional_factors",
    "lookup",
    "lookup_region",
    "get_infrastructure",
    # Aggregation / formatting
    "aggregate",
    "rank_results",
    "calculate_equivalents",
    "impact_per_dollar",
    "format_emission_result",
    "format_impact",
    "export_ghg_protocol",
    # Types
    "AggregatedImpact",
    "CarbonEquivalents",
    "EmissionConfig",
    "EmissionResult",
    "GhgProtocolExport",
    "GhgScopeBreakdown",
    "ImpactPerDollar",
    "InfrastructureProfile",
    "ModelComparison",
    "ModelSpec",
    "RankedResult",
    "RegionalFactor",
    # Errors
    "CarbonError",
    "UnknownProviderError",
    "UnknownModelError",
    "InvalidTokenCountError",
    # Tables
    "CLAUDE",
    "OPENAI",
    "GEMINI",
    "PROVIDERS",
    "MODEL_SPECS",
    "REGIONAL_FACTORS",
    "INFRASTRUCTURE",
    "REFERENCE_MODELS",
]
