"""Tests for ai_carbon.observability -- emitter lifecycle, logging, subscribers."""

from __future__ import annotations

import json
import logging

import pytest

from ai_carbon import EmissionConfig, calculate_batch, calculate_impact
from ai_carbon.errors import UnknownModelError
from ai_carbon.observability import (
    EmissionCalculated,
    ObservabilityConfig,
    configure,
    emit,
    get_logger,
    is_configured,
    register_destination,
    reset,
)
from ai_carbon.observability.logging import (
    StdlibFormatter,
    StructlogFormatter,
    setup_logging,
)


def _jsonl_config(tmp_path, level="DEBUG") -> ObservabilityConfig:
    return ObservabilityConfig(
        log_formatter="stdlib",
        log_destination="jsonl",
        log_level=level,
        log_format="json",
        jsonl_path=str(tmp_path / "logs" / "events.jsonl"),
    )


def _read(tmp_path) -> list[dict]:
    path = tmp_path / "logs" / "events.jsonl"
    return [json.loads(line) for line in path.read_text().splitlines() if line]


class TestEmitterLifecycle:
    def test_emit_noop_before_configure(self):
        assert not is_configured()
        emit(EmissionCalculated("claude", "m", None, 1, 1, 0, 0, False, 0.0, 0.0, 0.0, "t"))

    def test_configure_idempotent(self, tmp_path):
        first = configure(_jsonl_config(tmp_path))
        assert is_configured()
        assert configure() is first

    def test_reset(self, tmp_path):
        before = list(logging.getLogger().handlers)
        configure(_jsonl_config(tmp_path))
        assert len(logging.getLogger().handlers) == len(before) + 1
        reset()
        assert not is_configured()
        assert logging.getLogger().handlers == before

    def test_stdlib_formatter_to_stderr(self, capsys, sonnet_config):
        configure(
            ObservabilityConfig(
                log_formatter="stdlib", log_destination="stderr", log_level="DEBUG", log_format="json"
            )
        )
        calculate_impact(sonnet_config)
        reset()
        lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
        configured = [r for r in lines if r["event"] == "observability.configured"]
        assert configured[0]["log_level"] == "DEBUG"
        assert any(r["event"] == "emission.calculated" for r in lines)


class TestEventLogging:
    """Events routed to JSONL via the stdlib formatter."""

    def test_emission_logged(self, tmp_path, sonnet_config):
        configure(_jsonl_config(tmp_path))
        calculate_impact(sonnet_config)
        reset()
        events = [r for r in _read(tmp_path) if r["event"] == "emission.calculated"]
        assert len(events) == 1
        assert events[0]["provider"] == "claude"
        assert events[0]["model"] == "claude-4-sonnet"
        assert events[0]["level"] == "debug"

    def test_batch_logged_at_info(self, tmp_path, sonnet_config, gemini_config):
        configure(_jsonl_config(tmp_path, level="INFO"))
        calculate_batch([sonnet_config, gemini_config])
        reset()
        records = _read(tmp_path)
        assert [r["event"] for r in records] == ["batch.completed"]
        assert records[0]["calls"] == 2

    def test_rejection_logged(self, tmp_path):
        configure(_jsonl_config(tmp_path))
        with pytest.raises(UnknownModelError):
            calculate_impact(EmissionConfig("openai", "gpt-9", 1, 1))
        reset()
        rejected = [r for r in _read(tmp_path) if r["event"] == "calculation.rejected"]
        assert len(rejected) == 1
        assert rejected[0]["level"] == "warning"
        assert rejected[0]["error_type"] == "UnknownModelError"

    def test_structlog_formatter_to_jsonl(self, tmp_path, gpt4o_config):
        cfg = _jsonl_config(tmp_path)
        cfg.log_formatter = "structlog"
        configure(cfg)
        calculate_impact(gpt4o_config)
        reset()
        records = _read(tmp_path)
        configured = [r for r in records if r["event"] == "observability.configured"]
        assert configured[0]["log_level"] == "DEBUG"
        emitted = [r for r in records if r["event"] == "emission.calculated"]
        assert emitted[0]["provider"] == "openai"
        assert emitted[0]["level"] == "debug"

    def test_no_duplicate_subscribers_across_cycles(self, tmp_path, sonnet_config):
        configure(_jsonl_config(tmp_path))
        reset()
        configure(_jsonl_config(tmp_path))
        calculate_impact(sonnet_config)
        reset()
        events = [r for r in _read(tmp_path) if r["event"] == "emission.calculated"]
        assert len(events) == 1


class TestLoggingSetup:
    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown log formatter"):
            setup_logging(ObservabilityConfig(log_formatter="nope"))

    def test_unknown_destination(self):
        with pytest.raises(ValueError, match="Unknown log destination"):
            setup_logging(ObservabilityConfig(log_destination="nope"))

    def test_custom_destination(self, tmp_path):
        seen = []

        class _ListHandler(logging.Handler):
            def emit(self, record):
                seen.append(record.getMessage())

        class _ListDestination:
            def __init__(self, config):
                self.config = config

            def create_handler(self, formatter):
                handler = _ListHandler()
                handler.setFormatter(formatter)
                return handler

            def shutdown(self):
                pass

        register_destination("list", _ListDestination)
        setup_logging(ObservabilityConfig(log_formatter="stdlib", log_destination="list"))
        get_logger("ai_carbon.test").info("hello", answer=42)
        reset()
        assert seen == ["hello"]

    def test_keyword_logger_accepts_any_field_name(self, tmp_path):
        setup_logging(_jsonl_config(tmp_path))
        get_logger("ai_carbon.test").warning("fields", level="custom", event_count=2)
        reset()
        record = _read(tmp_path)[0]
        assert record["event"] == "fields"
        assert record["level"] == "custom"
        assert record["event_count"] == 2

    def test_get_logger_before_setup(self):
        logger = get_logger("ai_carbon.test")
        logger.info("pre.setup", value=1)

    def test_formatters_satisfy_protocol(self):
        from ai_carbon.observability import LogFormatter

        assert isinstance(StructlogFormatter(), LogFormatter)
        assert isinstance(StdlibFormatter(), LogFormatter)

    def test_env_config(self, monkeypatch):
        monkeypatch.setenv("AI_CARBON_LOG_FORMATTER", "stdlib")
        monkeypatch.setenv("AI_CARBON_LOG_LEVEL", "WARNING")
        cfg = ObservabilityConfig()
        assert cfg.log_formatter == "stdlib"
        assert cfg.log_level == "WARNING"
