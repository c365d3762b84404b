"""Observability configuration, env-var driven.

All settings have safe defaults. Zero config required for basic
structured logging.

Logging architecture:
    LogFormatter (how records are structured) × LogDestination (where they go)

    Formatter: AI_CARBON_LOG_FORMATTER=structlog (default) | stdlib
    Destination: AI_CARBON_LOG_DESTINATION=stderr (default) | jsonl
    Renderer: AI_CARBON_LOG_FORMAT=json (default) | console
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class ObservabilityConfig:
    """Observability configuration, env-var driven."""

    log_formatter: str = field(
        default_factory=lambda: os.environ.get("AI_CARBON_LOG_FORMATTER", "structlog")
    )  # "structlog" | "stdlib"

    log_destination: str = field(
        default_factory=lambda: os.environ.get("AI_CARBON_LOG_DESTINATION", "stderr")
    )  # "stderr" | "jsonl"

    log_level: str = field(
        default_factory=lambda: os.environ.get("AI_CARBON_LOG_LEVEL", "INFO")
    )

    log_format: str = field(
        default_factory=lambda: os.environ.get("AI_CARBON_LOG_FORMAT", "json")
    )  # "json" | "console" (dev-friendly renderer)

    # JSONL file destination
    jsonl_path: str | None = field(
        default_factory=lambda: os.environ.get("AI_CARBON_LOG_PATH")
    )
