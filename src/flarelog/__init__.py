"""
flarelog: named loggers that write to the console and forward to Logflare.

Each log call performs one synchronous console write and one fire-and-forget
HTTP POST to the Logflare ingestion API.
"""

from .exceptions import (
    ArgumentError,
    ConfigurationError,
    ErrorInputError,
    FlareLogError,
    LoggerNameError,
    MessageError,
    RequestError,
)
from .factory import (
    ErrorInput,
    Failure,
    HttpRequest,
    LoggerConfig,
    Message,
    NamedLogger,
    configure_from_settings,
    configure_logger,
)
from .formatting import format_message, is_truthy, render_display_name
from .remote import HttpxSender, shutdown

__version__ = "0.1.0"

__all__ = [
    "ArgumentError",
    "ConfigurationError",
    "ErrorInput",
    "ErrorInputError",
    "Failure",
    "FlareLogError",
    "HttpRequest",
    "HttpxSender",
    "LoggerConfig",
    "LoggerNameError",
    "Message",
    "MessageError",
    "NamedLogger",
    "RequestError",
    "configure_from_settings",
    "configure_logger",
    "format_message",
    "is_truthy",
    "render_display_name",
    "shutdown",
]
