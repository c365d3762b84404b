"""Structured logging for ai_carbon: a formatter paired with a destination.

A LogFormatter decides how a record is rendered (structlog pipeline or
plain stdlib JSON). A LogDestination decides where the rendered line is
written (stderr or an append-only JSONL file). setup_logging() builds one
handler from the pair and installs it on the root logger, replacing only
the handler it installed previously.

    AI_CARBON_LOG_FORMATTER=structlog | stdlib
    AI_CARBON_LOG_DESTINATION=stderr | jsonl

Extra destinations can be added with register_destination(); the factory
receives the ObservabilityConfig.
"""

from __future__ import annotations

import json
import logging
import sys
from functools import partialmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ai_carbon.observability.config import ObservabilityConfig


@runtime_checkable
class LogFormatter(Protocol):
    def setup(self, config: ObservabilityConfig) -> logging.Formatter: ...

    def get_logger(self, name: str) -> Any: ...


@runtime_checkable
class LogDestination(Protocol):
    def create_handler(self, formatter: logging.Formatter) -> logging.Handler: ...

    def shutdown(self) -> None: ...


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


class StructlogFormatter:
    """Routes structlog through stdlib handlers via ProcessorFormatter."""

    def setup(self, config: ObservabilityConfig) -> logging.Formatter:
        import structlog

        if config.log_format == "console":
            renderer = structlog.dev.ConsoleRenderer()
        else:
            renderer = structlog.processors.JSONRenderer()

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                structlog.processors.format_exc_info,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )
        return structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )

    def get_logger(self, name: str) -> Any:
        import structlog

        return structlog.get_logger(name)


class StdlibFormatter:
    """No structlog: one JSON object per line, or a plain console line."""

    def setup(self, config: ObservabilityConfig) -> logging.Formatter:
        if config.log_format == "console":
            return logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        return _JsonLineFormatter()

    def get_logger(self, name: str) -> Any:
        return KeywordLogger(logging.getLogger(name))


class _JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line: dict[str, Any] = {
            "event": record.getMessage(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "timestamp": self.formatTime(record),
        }
        line.update(getattr(record, "fields", {}))
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, default=str)


class KeywordLogger:
    """stdlib logger taking structlog-style keyword fields.

    The fields ride on the record as ``record.fields``. Level and event are
    positional-only so fields may use any name, including ``level``.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _log(self, lvl: int, event: str, /, **fields: Any) -> None:
        self._logger.log(lvl, event, extra={"fields": fields})

    debug = partialmethod(_log, logging.DEBUG)
    info = partialmethod(_log, logging.INFO)
    warning = partialmethod(_log, logging.WARNING)
    error = partialmethod(_log, logging.ERROR)


# ---------------------------------------------------------------------------
# Destinations
# ---------------------------------------------------------------------------


class StderrDestination:
    def __init__(self, config: ObservabilityConfig | None = None) -> None:
        pass

    def create_handler(self, formatter: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        return handler

    def shutdown(self) -> None:
        pass


class JsonlFileDestination:
    """Append one line per record to AI_CARBON_LOG_PATH (default ai-carbon.jsonl)."""

    def __init__(self, config: ObservabilityConfig) -> None:
        self.path = Path(config.jsonl_path or "ai-carbon.jsonl")
        self._handler: logging.FileHandler | None = None

    def create_handler(self, formatter: logging.Formatter) -> logging.Handler:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._handler = logging.FileHandler(self.path, mode="a", encoding="utf-8")
        self._handler.setFormatter(formatter)
        return self._handler

    def shutdown(self) -> None:
        if self._handler is not None:
            self._handler.close()
            self._handler = None


_FORMATTERS: dict[str, Callable[[], LogFormatter]] = {
    "structlog": StructlogFormatter,
    "stdlib": StdlibFormatter,
}

_DESTINATIONS: dict[str, Callable[[ObservabilityConfig], LogDestination]] = {
    "stderr": StderrDestination,
    "jsonl": JsonlFileDestination,
}


def register_destination(
    name: str, factory: Callable[[ObservabilityConfig], LogDestination]
) -> None:
    """Make a destination selectable by name. Call before configure()."""
    _DESTINATIONS[name] = factory


def _pick(registry: dict[str, Callable[..., Any]], kind: str, name: str) -> Callable[..., Any]:
    try:
        return registry[name]
    except KeyError:
        raise ValueError(
            f"Unknown log {kind}: {name!r}. Available: {sorted(registry)}"
        ) from None


# ---------------------------------------------------------------------------
# Module state
# ---------------------------------------------------------------------------

_formatter: LogFormatter | None = None
_destination: LogDestination | None = None
_handler: logging.Handler | None = None


def setup_logging(config: ObservabilityConfig) -> None:
    """Install the configured formatter and destination on the root logger."""
    global _formatter, _destination, _handler

    formatter = _pick(_FORMATTERS, "formatter", config.log_formatter)()
    destination = _pick(_DESTINATIONS, "destination", config.log_destination)(config)

    shutdown_logging()
    handler = destination.create_handler(formatter.setup(config))

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(config.log_level.upper())

    _formatter, _destination, _handler = formatter, destination, handler


def get_logger(name: str = "ai_carbon") -> Any:
    """Logger from the active formatter; a KeywordLogger before setup."""
    if _formatter is not None:
        return _formatter.get_logger(name)
    return KeywordLogger(logging.getLogger(name))


def shutdown_logging() -> None:
    """Detach and close the handler installed by setup_logging()."""
    global _formatter, _destination, _handler
    if _handler is not None:
        logging.getLogger().removeHandler(_handler)
    if _destination is not None:
        _destination.shutdown()
    _formatter, _destination, _handler = None, None, None
