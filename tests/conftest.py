"""Shared fixtures.

Every test runs with settings isolated from the developer's
~/.ai-carbon/config.yaml and AI_CARBON_* environment, and with
observability reset afterwards.
"""

from __future__ import annotations

import os

import pytest

from ai_carbon.observability import reset
from ai_carbon.settings import reset_settings
from ai_carbon.types import EmissionConfig


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    monkeypatch.setattr("ai_carbon.settings._DEFAULT_PATH", tmp_path / "config.yaml")
    for key in list(os.environ):
        if key.startswith("AI_CARBON_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()
    reset()


# =============================================================================
# Config fixtures
# =============================================================================


@pytest.fixture
def sonnet_config() -> EmissionConfig:
    return EmissionConfig(
        provider="claude",
        model="claude-4-sonnet",
        input_tokens=1000,
        output_tokens=500,
    )


@pytest.fixture
def cache_config() -> EmissionConfig:
    return EmissionConfig(
        provider="claude",
        model="claude-4-sonnet",
        input_tokens=1000,
        output_tokens=500,
        cache_creation_tokens=2000,
        cache_read_tokens=5000,
    )


@pytest.fixture
def gpt4o_config() -> EmissionConfig:
    return EmissionConfig(
        provider="openai",
        model="gpt-4o",
        input_tokens=1000,
        output_tokens=500,
    )


@pytest.fixture
def gemini_config() -> EmissionConfig:
    return EmissionConfig(
        provider="gemini",
        model="gemini-2.5-pro",
        input_tokens=1000,
        output_tokens=500,
    )
