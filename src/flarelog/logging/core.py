"""
Core logging configuration and initialization logic.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable

import structlog
from structlog.typing import EventDict, WrappedLogger

from .sinks import BaseSink, LogFormat, StdioSink, StreamName

# =============================================================================
# Global State
# =============================================================================

_sinks: list[BaseSink] = []
_configured = False


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(_name=name or "root")


# =============================================================================
# Structlog Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add logger name to log event."""
    event_dict["logger"] = event_dict.pop("_name", "root")
    return event_dict


def rename_event_key(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename 'event' to 'message'."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def multi_sink_renderer(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Render log to all configured sinks. Returns empty to suppress default output."""
    for sink in _sinks:
        sink.emit(event_dict)
    return ""


# =============================================================================
# Configuration Logic
# =============================================================================


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


_NOP_FILE = _NopFile()


class SilentPrintLoggerFactory:
    """Logger factory that returns a logger writing to nowhere."""

    def __call__(self, *args: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=_NOP_FILE)


def _install_sinks(sinks: Iterable[BaseSink]) -> None:
    for sink in _sinks:
        sink.close()
    _sinks.clear()
    _sinks.extend(sinks)


def _configure_structlog(level: str) -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            add_timestamp,
            add_logger_name,
            rename_event_key,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            multi_sink_renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
        context_class=dict,
        logger_factory=SilentPrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(
    *,
    level: str = "INFO",
    fmt: LogFormat = "console",
    stream: StreamName = "stdout",
    sinks: Iterable[BaseSink] | None = None,
) -> None:
    """
    Configure the local logging pipeline.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Output format for the stdio sink (console, json)
        stream: Stream used by the stdio sink (stdout, stderr)
        sinks: Explicit sinks replacing the default stdio sink
    """
    global _configured

    if sinks is None:
        sinks = [StdioSink(fmt="json" if str(fmt).lower() == "json" else "console", stream_name=stream)]

    _install_sinks(sinks)
    _configure_structlog(level)
    _configured = True


def configure_logging_from_settings() -> None:
    """Configure the pipeline from ``flarelog.config.settings.logging``."""
    from flarelog.config import settings

    from .formatters import ConsoleFormatter

    log_settings = settings.logging
    ConsoleFormatter.configure(
        timestamp_format=log_settings.console_timestamp_format,
        logger_width=log_settings.console_logger_width,
        separator=log_settings.console_separator,
    )
    configure_logging(
        level=log_settings.level.value,
        fmt=log_settings.format.value,
        stream=log_settings.stream.value,
    )


def ensure_logging_configured() -> None:
    """Configure from settings unless ``configure_logging`` already ran."""
    if not _configured:
        configure_logging_from_settings()
