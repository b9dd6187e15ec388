"""
Console sinks used for the local write of every log operation.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .core import ensure_logging_configured, get_logger

CONSOLE_LOGGER_NAME = "flarelog.console"


@runtime_checkable
class ConsoleSink(Protocol):
    """Console-equivalent with an info channel and an error channel.

    Both channels take the formatted message and at most one extra
    structured argument.
    """

    def log(self, message: str, *extra: Any) -> None: ...

    def error(self, message: str, *extra: Any) -> None: ...


class StructlogConsole:
    """Routes ``log`` to ``info`` and ``error`` to ``error`` on a structlog logger.

    The extra argument, when given, is attached under the ``data`` key.
    """

    def __init__(self, name: str = CONSOLE_LOGGER_NAME):
        ensure_logging_configured()
        self._logger = get_logger(name)

    def log(self, message: str, *extra: Any) -> None:
        if extra:
            self._logger.info(message, data=extra[0])
        else:
            self._logger.info(message)

    def error(self, message: str, *extra: Any) -> None:
        if extra:
            self._logger.error(message, data=extra[0])
        else:
            self._logger.error(message)
