"""Tests for ai_carbon.calculator -- dispatch, batch, comparison, events."""

from __future__ import annotations

import math
from unittest.mock import patch

import pytest

from ai_carbon import (
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
from ai_carbon.errors import InvalidTokenCountError, UnknownModelError, UnknownProviderError
from ai_carbon.observability.events import (
    BatchCompleted,
    CalculationRejected,
    EmissionCalculated,
)
from ai_carbon.settings import Settings
from ai_carbon.types import EmissionConfig


class TestCalculateImpact:
    def test_routes_by_provider(self, sonnet_config, gpt4o_config, gemini_config):
        assert calculate_impact(sonnet_config).provider == "claude"
        assert calculate_impact(gpt4o_config).provider == "openai"
        assert calculate_impact(gemini_config).provider == "gemini"

    def test_sonnet_values(self, sonnet_config):
        result = calculate_impact(sonnet_config)
        assert result.energy_wh == pytest.approx(5.6e-4)
        assert result.co2_grams == pytest.approx(2.156e-4)

    def test_unknown_provider(self):
        with pytest.raises(UnknownProviderError):
            calculate_impact(EmissionConfig("mistral", "large", 1, 1))

    def test_unknown_model(self):
        with pytest.raises(UnknownModelError):
            calculate_impact(EmissionConfig("claude", "claude-2", 1, 1))

    def test_emits_emission_calculated(self, cache_config):
        captured = []
        with patch("ai_carbon.calculator.emit", side_effect=captured.append):
            result = calculate_impact(cache_config)
        assert len(captured) == 1
        event = captured[0]
        assert isinstance(event, EmissionCalculated)
        assert event.co2_grams == result.co2_grams
        assert event.cache_creation_tokens == 2000
        assert event.cache_read_tokens == 5000
        assert event.region == "us-east-1"

    def test_emits_rejection_and_reraises(self):
        captured = []
        with patch("ai_carbon.calculator.emit", side_effect=captured.append):
            with pytest.raises(InvalidTokenCountError):
                calculate_impact(EmissionConfig("claude", "claude-4-sonnet", -1, 0))
        assert len(captured) == 1
        assert isinstance(captured[0], CalculationRejected)
        assert captured[0].error_type == "InvalidTokenCountError"

    def test_events_disabled(self, sonnet_config):
        captured = []
        with patch("ai_carbon.calculator.get_settings", return_value=Settings(emit_events=False)):
            with patch("ai_carbon.calculator.emit", side_effect=captured.append):
                calculate_impact(sonnet_config)
        assert captured == []


class TestCalculateBatch:
    def test_empty(self):
        assert calculate_batch([]) == []

    def test_preserves_order(self, sonnet_config, gpt4o_config, gemini_config):
        configs = [gemini_config, sonnet_config, gpt4o_config]
        results = calculate_batch(configs)
        assert [r.provider for r in results] == ["gemini", "claude", "openai"]

    def test_threaded_matches_sequential(self, sonnet_config, gpt4o_config, gemini_config):
        configs = [sonnet_config, gpt4o_config, gemini_config] * 5
        sequential = calculate_batch(configs, max_workers=0)
        threaded = calculate_batch(configs, max_workers=4)
        assert [r.co2_grams for r in threaded] == [r.co2_grams for r in sequential]
        assert [r.provider for r in threaded] == [r.provider for r in sequential]

    @pytest.mark.parametrize("workers", [0, 4])
    def test_fails_fast(self, sonnet_config, workers):
        configs = [sonnet_config, EmissionConfig("claude", "claude-9", 1, 1), sonnet_config]
        with pytest.raises(UnknownModelError):
            calculate_batch(configs, max_workers=workers)

    def test_emits_batch_completed(self, sonnet_config, gemini_config):
        captured = []
        with patch("ai_carbon.calculator.emit", side_effect=captured.append):
            results = calculate_batch([sonnet_config, gemini_config])
        batch_events = [e for e in captured if isinstance(e, BatchCompleted)]
        assert len(batch_events) == 1
        assert batch_events[0].calls == 2
        assert batch_events[0].workers == 1
        assert batch_events[0].total_co2_grams == pytest.approx(sum(r.co2_grams for r in results))

    def test_uses_settings_workers(self, sonnet_config):
        captured = []
        with patch("ai_carbon.calculator.get_settings", return_value=Settings(batch_workers=3)):
            with patch("ai_carbon.calculator.emit", side_effect=captured.append):
                calculate_batch([sonnet_config] * 4)
        batch = [e for e in captured if isinstance(e, BatchCompleted)][0]
        assert batch.workers == 3

    @pytest.mark.parametrize("count,requested,used", [(1, 8, 1), (2, 8, 2), (5, 0, 1), (5, 1, 1)])
    def test_reports_width_actually_used(self, sonnet_config, count, requested, used):
        captured = []
        with patch("ai_carbon.calculator.emit", side_effect=captured.append):
            calculate_batch([sonnet_config] * count, max_workers=requested)
        batch = [e for e in captured if isinstance(e, BatchCompleted)][0]
        assert batch.workers == used


class TestCompareAndRank:
    def test_compare_keys_in_provider_order(self):
        comparison = compare_providers(1000, 500)
        assert list(comparison) == ["claude", "openai", "gemini"]
        assert comparison["claude"].model == "claude-4-sonnet"
        assert comparison["openai"].model == "gpt-4o"
        assert comparison["gemini"].model == "gemini-2.5-pro"

    def test_compare_uses_reference_override(self):
        custom = Settings(reference_models={"claude": "claude-4-opus", "openai": "gpt-4o", "gemini": "gemini-2.5-pro"})
        with patch("ai_carbon.calculator.get_settings", return_value=custom):
            comparison = compare_providers(1000, 500)
        assert comparison["claude"].model == "claude-4-opus"

    def test_compare_reasoning_passed_through(self):
        plain = compare_providers(1000, 500)
        reasoned = compare_providers(1000, 500, reasoning=True)
        for provider in plain:
            assert reasoned[provider].reasoning is True
            assert reasoned[provider].co2_grams > plain[provider].co2_grams

    def test_rank_ascending(self):
        ranked = rank_by_efficiency(1000, 500)
        assert [r.provider for r in ranked] == ["gemini", "claude", "openai"]
        assert ranked[-1].efficiency == pytest.approx(1.0)
        assert ranked[0].efficiency > ranked[1].efficiency > 1.0

    def test_rank_zero_tokens(self):
        ranked = rank_by_efficiency(0, 0)
        assert all(r.efficiency == 1.0 for r in ranked)
        assert not any(math.isinf(r.efficiency) for r in ranked)


class TestDiscovery:
    def test_providers(self):
        assert get_supported_providers() == ["claude", "openai", "gemini"]

    def test_models(self):
        assert "o1-mini" in get_supported_models("openai")

    def test_models_unknown_provider(self):
        with pytest.raises(UnknownProviderError):
            get_supported_models("mistral")

    def test_model_info(self):
        info = get_model_info("claude", "claude-4-opus")
        assert info.energy_per_token == 0.0045

    def test_regional_factors(self):
        factors = get_regional_factors("gemini")
        assert factors["us-central1"].renewable_fraction == 0.70


class TestMarginalAndScopes:
    def test_marginal_impact_token_counts(self):
        result = calculate_marginal_impact("openai", "gpt-4o-mini")
        assert (result.input_tokens, result.output_tokens) == (50, 350)

    def test_ghg_scopes(self, sonnet_config):
        scopes = calculate_ghg_scopes(sonnet_config)
        assert scopes.scope1_grams == 0.0
        assert scopes.scope2_grams == scopes.result.co2_grams
        assert scopes.scope3_grams == pytest.approx(scopes.result.co2_grams * 0.15)
        assert scopes.total_grams == pytest.approx(scopes.result.co2_grams * 1.15)
