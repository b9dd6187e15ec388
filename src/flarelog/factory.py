"""
Logger factory and named loggers.

Usage:
    from flarelog import configure_logger

    create_logger = configure_logger(application="shop", key="...", mode="production", source="...")
    log = create_logger("orders")

    log("Order placed.", {"id": 42}, {"retry": False, "priority": True})
    log.error(exc)
    log.request({"method": "GET", "url": "/orders"})
    log.append("refunds")("Refund issued.")  # "[orders] [refunds] Refund issued."

Every operation writes to the console sink first, then hands the payload to the
send capability and returns its pending result.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .config.logflare import DEFAULT_ENDPOINT, FlareLogSettings
from .exceptions import ConfigurationError, ErrorInputError, LoggerNameError, MessageError, RequestError
from .formatting import NAME_SEPARATOR, format_message, is_truthy, render_display_name
from .logging import ConsoleSink, StructlogConsole
from .remote import MISSING, HttpxSender, SendCapability, build_payload, build_url, send_remote

REQUIRED_PROPERTIES = ("application", "key", "mode", "source")

INFO = "info"
ERROR = "error"


# =============================================================================
# Value types
# =============================================================================


@dataclass(frozen=True)
class LoggerConfig:
    """Identity and collaborators shared by every logger of a factory."""

    application: str
    key: str
    mode: str
    source: str
    send: Optional[SendCapability] = field(default=None, compare=False)
    console: Optional[ConsoleSink] = field(default=None, compare=False)
    endpoint: str = DEFAULT_ENDPOINT

    def __post_init__(self) -> None:
        missing = [name for name in REQUIRED_PROPERTIES if not getattr(self, name)]
        if missing:
            raise ConfigurationError(missing=missing)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "LoggerConfig":
        known = {f.name for f in fields(cls)}
        missing = [name for name in REQUIRED_PROPERTIES if not options.get(name)]
        if missing:
            raise ConfigurationError(missing=missing)
        return cls(**{k: v for k, v in options.items() if k in known})

    @property
    def url(self) -> str:
        return build_url(self.key, self.source, self.endpoint)


@dataclass(frozen=True)
class Message:
    """Plain error message."""

    text: str


@dataclass(frozen=True)
class Failure:
    """Error with a message, a stack trace and a serialisable description."""

    message: str
    stack: Optional[str] = None
    error: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Failure":
        return cls(
            message=str(exc),
            stack="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            error={"type": type(exc).__name__, "message": str(exc), "args": list(exc.args)},
        )

    @classmethod
    def from_object(cls, obj: Any) -> "Failure":
        """Error-like mapping or object carrying ``message`` and optionally ``stack``."""
        if isinstance(obj, Mapping):
            error = dict(obj)
        else:
            error = {k: v for k, v in getattr(obj, "__dict__", {}).items() if not k.startswith("_")}
            error.setdefault("message", obj.message)
            if hasattr(obj, "stack"):
                error.setdefault("stack", obj.stack)
        stack = error.get("stack")
        return cls(
            message=str(error.get("message") or ""),
            stack=None if stack is None else str(stack),
            error=error,
        )

    def metadata(self) -> Dict[str, Any]:
        return {"stack": self.stack, "error": self.error}


ErrorInput = Union[Message, Failure]


@dataclass(frozen=True)
class HttpRequest:
    method: str = ""
    url: str = ""
    body: Any = None

    @classmethod
    def coerce(cls, request: Any) -> "HttpRequest":
        if isinstance(request, cls):
            return request
        if isinstance(request, Mapping):
            return cls(request.get("method") or "", request.get("url") or "", request.get("body"))
        return cls(
            getattr(request, "method", "") or "",
            str(getattr(request, "url", "") or ""),
            getattr(request, "body", None),
        )


def _to_error_input(value: Any) -> ErrorInput:
    if isinstance(value, (Message, Failure)):
        return value
    if isinstance(value, str):
        return Message(value)
    if isinstance(value, BaseException):
        return Failure.from_exception(value)
    if isinstance(value, Mapping) or hasattr(value, "message"):
        return Failure.from_object(value)
    raise TypeError(f"[log.error] Unsupported error input: {type(value).__name__}")


# =============================================================================
# Named logger
# =============================================================================


class NamedLogger:
    """Callable logger bound to a (possibly compound) name."""

    __slots__ = ("_name", "_display_name", "_config")

    def __init__(self, name: str, config: LoggerConfig):
        if not name:
            raise LoggerNameError("create_logger")
        self._name = name
        self._display_name = render_display_name(name)
        self._config = config

    @property
    def name(self) -> str:
        return self._name

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def config(self) -> LoggerConfig:
        return self._config

    def __repr__(self) -> str:
        return f"NamedLogger({self._name!r})"

    def _send(self, log_entry: str, level: str, data: Any = MISSING) -> Any:
        config = self._config
        payload = build_payload(
            log_entry,
            application=config.application,
            mode=config.mode,
            level=level,
            data=data,
        )
        return send_remote(config.send, config.url, payload)

    def __call__(self, message: Any = None, data: Any = None, notes: Optional[Mapping[str, Any]] = None) -> Any:
        if not is_truthy(message):
            raise MessageError()

        full_message = format_message(self._display_name, message, notes)

        if is_truthy(data):
            self._config.console.log(full_message, data)
            return self._send(full_message, INFO, data)

        self._config.console.log(full_message)
        return self._send(full_message, INFO)

    def error(self, message_or_error: Any = None, data: Any = None) -> Any:
        if not is_truthy(message_or_error):
            raise ErrorInputError()

        error_input = _to_error_input(message_or_error)

        if isinstance(error_input, Failure):
            message = format_message(self._display_name, error_input.message)
            metadata = error_input.metadata()
            self._config.console.error(message, metadata)
            return self._send(message, ERROR, metadata)

        if not error_input.text:
            raise ErrorInputError()

        message = format_message(self._display_name, error_input.text)

        if is_truthy(data):
            self._config.console.error(message, data)
            return self._send(message, ERROR, data)

        self._config.console.error(message)
        return self._send(message, ERROR)

    def request(self, request: Any = None) -> Any:
        if not is_truthy(request):
            raise RequestError()

        http_request = HttpRequest.coerce(request)
        message = format_message(self._display_name, f"{http_request.method} {http_request.url}")

        if is_truthy(http_request.body):
            self._config.console.log(message, http_request.body)
            return self._send(message, INFO, http_request.body)

        self._config.console.log(message)
        return self._send(message, INFO)

    def append(self, new_name: Any = None) -> "NamedLogger":
        if not new_name:
            raise LoggerNameError("log.append")
        return NamedLogger(f"{self._name}{NAME_SEPARATOR}{new_name}", self._config)


# =============================================================================
# Factory
# =============================================================================


CreateLogger = Callable[[str], NamedLogger]


def _with_defaults(config: LoggerConfig, timeout: float = 10.0) -> LoggerConfig:
    updates: dict[str, Any] = {}
    if config.send is None:
        updates["send"] = HttpxSender(timeout=timeout)
    if config.console is None:
        updates["console"] = StructlogConsole()
    return replace(config, **updates) if updates else config


def configure_logger(options: Union[LoggerConfig, Mapping[str, Any], None] = None, /, **overrides: Any) -> CreateLogger:
    """Validate identity options and return a ``create_logger(name)`` function.

    Args:
        options: ``LoggerConfig`` or mapping with application, key, mode,
            source and optionally send, console, endpoint
        **overrides: Same keys as ``options``; take precedence

    Raises:
        ConfigurationError: an identity property is missing or falsy
    """
    if isinstance(options, LoggerConfig):
        config = replace(options, **overrides) if overrides else options
    else:
        config = LoggerConfig.from_options({**(options or {}), **overrides})

    config = _with_defaults(config)

    def create_logger(name: Any = None) -> NamedLogger:
        if not name:
            raise LoggerNameError("create_logger")
        return NamedLogger(name, config)

    create_logger.config = config  # type: ignore[attr-defined]
    return create_logger


def configure_from_settings(settings: Optional[FlareLogSettings] = None, /, **overrides: Any) -> CreateLogger:
    """Build a factory from ``FLARELOG_*`` settings; ``overrides`` win."""
    if settings is None:
        from .config import settings as global_settings

        settings = global_settings.logflare

    options: dict[str, Any] = {**settings.identity(), "endpoint": settings.endpoint}
    options.update(overrides)
    config = LoggerConfig.from_options(options)
    return configure_logger(_with_defaults(config, timeout=settings.timeout))
