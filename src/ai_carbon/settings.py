"""Runtime settings: YAML config + env var overrides.

Priority: env var > YAML file > default.
Env vars use AI_CARBON_{SETTING_NAME} (e.g. AI_CARBON_BATCH_WORKERS=4).
Reference models use AI_CARBON_REFERENCE_{PROVIDER} (e.g.
AI_CARBON_REFERENCE_CLAUDE=claude-4-opus).
YAML file default: ~/.ai-carbon/config.yaml
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ai_carbon.config import PROVIDERS, REFERENCE_MODELS
from ai_carbon.registry import lookup

_TRUTHY = {"1", "true", "on", "yes"}
_FALSY = {"0", "false", "off", "no"}
_DEFAULT_PATH = Path("~/.ai-carbon/config.yaml").expanduser()


def _int_value(name: str, raw: Any, *, min_val: int = 0) -> int:
    """Parse a non-negative integer setting with a helpful error."""
    try:
        val = int(raw)
    except (TypeError, ValueError):
        raise ValueError(
            f"Invalid integer for {name}: {raw!r}. Expected a number."
        ) from None
    if val < min_val:
        raise ValueError(f"{name}={val} is below minimum {min_val}.")
    return val


def _bool_value(raw: Any, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        val = raw.lower()
        if val in _TRUTHY:
            return True
        if val in _FALSY:
            return False
    return default


@dataclass
class Settings:
    # Thread-pool width for calculate_batch / compare_providers.
    # 0 or 1 runs sequentially.
    batch_workers: int = 0
    # Fire EmissionCalculated/BatchCompleted events (no-op until configure()).
    emit_events: bool = True
    # Model used per provider by compare_providers / rank_by_efficiency.
    reference_models: dict[str, str] = field(default_factory=lambda: dict(REFERENCE_MODELS))

    def __post_init__(self) -> None:
        for provider, model in self.reference_models.items():
            lookup(provider, model)

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        """Load settings from YAML file, then override with env vars."""
        file_path = path or _DEFAULT_PATH
        raw: dict[str, Any] = {}
        if file_path.exists():
            loaded = yaml.safe_load(file_path.read_text()) or {}
            if isinstance(loaded, dict):
                raw = loaded

        batch_workers = _int_value("batch_workers", raw.get("batch_workers", 0))
        if "AI_CARBON_BATCH_WORKERS" in os.environ:
            batch_workers = _int_value(
                "AI_CARBON_BATCH_WORKERS", os.environ["AI_CARBON_BATCH_WORKERS"]
            )

        emit_events = _bool_value(raw.get("emit_events", True), True)
        if "AI_CARBON_EMIT_EVENTS" in os.environ:
            emit_events = _bool_value(os.environ["AI_CARBON_EMIT_EVENTS"], emit_events)

        reference_models = dict(REFERENCE_MODELS)
        file_refs = raw.get("reference_models")
        if isinstance(file_refs, dict):
            reference_models.update({str(k): str(v) for k, v in file_refs.items()})
        for provider in PROVIDERS:
            env_key = f"AI_CARBON_REFERENCE_{provider.upper()}"
            if env_key in os.environ:
                reference_models[provider] = os.environ[env_key]

        return cls(
            batch_workers=batch_workers,
            emit_events=emit_events,
            reference_models=reference_models,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "batch_workers": self.batch_workers,
            "emit_events": self.emit_events,
            "reference_models": dict(self.reference_models),
        }


# Singleton
_settings: Settings | None = None


def get_settings(path: Path | None = None) -> Settings:
    """Get the singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load(path)
    return _settings


def reset_settings() -> None:
    """Reset for testing."""
    global _settings
    _settings = None
