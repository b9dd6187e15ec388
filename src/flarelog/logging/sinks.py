"""
Local sink abstraction and the standard I/O implementation.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Literal, TextIO

from structlog.typing import EventDict

from .formatters import ConsoleFormatter
from .serializers import orjson_dumps

LogFormat = Literal["console", "json"]
StreamName = Literal["stdout", "stderr"]


# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for local sinks."""

    @abstractmethod
    def emit(self, event_dict: EventDict) -> None:
        """Emit a log event to the sink."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class StdioSink(BaseSink):
    """Standard I/O sink with configurable format.

    Args:
        fmt: Output format - "console" (human-readable) or "json"
        stream: Explicit output stream. When omitted the stream named by
            ``stream_name`` is looked up on ``sys`` at every write, so
            redirections made after configuration are honoured.
        stream_name: "stdout" or "stderr"
    """

    def __init__(self, fmt: LogFormat = "console", stream: TextIO | None = None, stream_name: StreamName = "stdout"):
        self._fmt = fmt
        self._stream = stream
        self._stream_name = stream_name

    @property
    def stream(self) -> TextIO:
        return self._stream or getattr(sys, self._stream_name)

    def emit(self, event_dict: EventDict) -> None:
        stream = self.stream
        if self._fmt == "json":
            output = orjson_dumps(event_dict)
        else:
            use_color = bool(getattr(stream, "isatty", lambda: False)())
            output = ConsoleFormatter.format(event_dict, use_color=use_color)

        stream.write(output + "\n")
        stream.flush()

    def close(self) -> None:
        pass
