"""
Local Logging for flarelog.

Provides the console side of every log operation:
- stdio: Standard output/error (console/json format)

Design Pattern: Strategy Pattern for sink abstraction.
Library: structlog + orjson for JSON serialization.
"""

from .console import ConsoleSink, StructlogConsole
from .core import configure_logging, configure_logging_from_settings, get_logger
from .sinks import BaseSink, StdioSink

__all__ = [
    "BaseSink",
    "ConsoleSink",
    "StdioSink",
    "StructlogConsole",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
