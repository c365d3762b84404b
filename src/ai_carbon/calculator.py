"""Multi-provider dispatch.

Core functions:
    calculate_impact(config)             -- one call, routed by provider
    calculate_batch(configs)             -- order-preserving, fail-fast
    compare_providers(input, output)     -- reference model per provider
    rank_by_efficiency(input, output)    -- compare + rank ascending by CO2
    calculate_marginal_impact(p, m)      -- standardized 400-token response
    calculate_ghg_scopes(config)         -- GHG Protocol scope split
"""

from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

from ai_carbon.aggregate import rank_results
from ai_carbon.config import MARGINAL_INPUT_TOKENS, MARGINAL_OUTPUT_TOKENS, PROVIDERS
from ai_carbon.errors import CarbonError
from ai_carbon.observability import emit
from ai_carbon.observability.events import (
    BatchCompleted,
    CalculationRejected,
    EmissionCalculated,
)
from ai_carbon.providers import get_calculator
from ai_carbon.registry import get_infrastructure
from ai_carbon.settings import get_settings
from ai_carbon.types import (
    EmissionConfig,
    EmissionResult,
    GhgScopeBreakdown,
    ModelSpec,
    RankedResult,
    RegionalFactor,
)


def calculate_impact(config: EmissionConfig) -> EmissionResult:
    """Calculate the impact of one call with the provider's calculator."""
    emit_events = get_settings().emit_events
    try:
        result = get_calculator(config.provider).calculate_emissions(config)
    except CarbonError as e:
        if emit_events:
            emit(
                CalculationRejected(
                    provider=config.provider,
                    model=config.model,
                    error=str(e),
                    error_type=type(e).__name__,
                )
            )
        raise

    if emit_events:
        emit(
            EmissionCalculated(
                provider=result.provider,
                model=result.model,
                region=result.region,
                input_tokens=result.input_tokens,
                output_tokens=result.output_tokens,
                cache_creation_tokens=result.cache_creation_tokens or 0,
                cache_read_tokens=result.cache_read_tokens or 0,
                reasoning=result.reasoning,
                co2_grams=result.co2_grams,
                energy_wh=result.energy_wh,
                water_liters=result.water_liters,
                timestamp=result.timestamp,
            )
        )
    return result


def _fan_out(configs: Sequence[EmissionConfig], workers: int) -> list[EmissionResult]:
    """Run calculate_impact over a thread pool, joining in input order.

    The first failure cancels work not yet started and propagates.
    """
    pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ai-carbon")
    try:
        results = list(pool.map(calculate_impact, configs))
    except BaseException:
        pool.shutdown(wait=False, cancel_futures=True)
        raise
    pool.shutdown()
    return results


def calculate_batch(
    configs: Sequence[EmissionConfig],
    max_workers: int | None = None,
) -> list[EmissionResult]:
    """Calculate every config, preserving order.

    Args:
        configs: Calls to estimate. May be empty.
        max_workers: Thread-pool width. None uses Settings.batch_workers;
            0 or 1 runs sequentially.

    Raises the first CarbonError encountered; no partial list is returned.
    """
    if not configs:
        return []

    settings = get_settings()
    workers = settings.batch_workers if max_workers is None else max_workers
    start = time.perf_counter()

    width = min(workers, len(configs)) if workers > 1 else 1
    if width > 1:
        results = _fan_out(configs, width)
    else:
        results = [calculate_impact(c) for c in configs]

    if settings.emit_events:
        emit(
            BatchCompleted(
                calls=len(results),
                total_co2_grams=sum(r.co2_grams for r in results),
                workers=width,
                latency_ms=(time.perf_counter() - start) * 1000,
            )
        )
    return results


def compare_providers(
    input_tokens: int,
    output_tokens: int,
    reasoning: bool = False,
) -> dict[str, EmissionResult]:
    """One result per provider, each using that provider's reference model."""
    reference_models = get_settings().reference_models
    configs = [
        EmissionConfig(
            provider=provider,
            model=reference_models[provider],
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            reasoning=reasoning,
        )
        for provider in PROVIDERS
    ]
    results = calculate_batch(configs)
    return {r.provider: r for r in results}


def rank_by_efficiency(
    input_tokens: int,
    output_tokens: int,
    reasoning: bool = False,
) -> list[RankedResult]:
    """Compare providers and rank them from lowest to highest CO2."""
    comparison = compare_providers(input_tokens, output_tokens, reasoning)
    return rank_results(list(comparison.values()))


def get_supported_providers() -> list[str]:
    return list(PROVIDERS)


def get_supported_models(provider: str) -> list[str]:
    return get_calculator(provider).supported_models()


def get_model_info(provider: str, model: str) -> ModelSpec:
    return get_calculator(provider).model_info(model)


def get_regional_factors(provider: str) -> Mapping[str, RegionalFactor]:
    return get_calculator(provider).regional_factors()


def calculate_marginal_impact(provider: str, model: str) -> EmissionResult:
    """Impact of a standardized short exchange: 50 input, 350 output tokens."""
    return calculate_impact(
        EmissionConfig(
            provider=provider,
            model=model,
            input_tokens=MARGINAL_INPUT_TOKENS,
            output_tokens=MARGINAL_OUTPUT_TOKENS,
        )
    )


def calculate_ghg_scopes(config: EmissionConfig) -> GhgScopeBreakdown:
    """Split a call's footprint into GHG Protocol scopes 1-3.

    Scope 2 is the operational co2_grams figure; scope 3 adds the
    provider's upstream (hardware manufacturing, supply chain) share.
    """
    result = calculate_impact(config)
    upstream = get_infrastructure(config.provider).upstream_emissions_factor
    return GhgScopeBreakdown(
        result=result,
        scope1_grams=0.0,
        scope2_grams=result.co2_grams,
        scope3_grams=result.co2_grams * upstream,
    )
