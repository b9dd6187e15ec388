"""
flarelog error hierarchy.

Every error is raised synchronously at the offending call and usually points
at a programming mistake rather than a runtime condition. Remote send
failures are never translated into these types.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class FlareLogError(Exception):
    """Root of all flarelog errors.

    Carries a machine readable ``code`` and optional ``details``.
    """

    default_code = "flarelog_error"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code or self.default_code
        self.details = details or {}


class ConfigurationError(FlareLogError):
    """Factory setup without all required identity properties."""

    default_code = "configuration_error"

    def __init__(self, *, missing: list[str]) -> None:
        super().__init__(
            f"[configure_logger] Called without all required properties: {', '.join(missing)}.",
            details={"missing": list(missing)},
        )


class LoggerNameError(FlareLogError):
    """Logger creation or append without a name."""

    default_code = "missing_name"

    def __init__(self, caller: str = "create_logger") -> None:
        super().__init__(f"[{caller}] Called without a name.", details={"caller": caller})


# ================================
# Argument errors
# Missing required argument to a log operation
# ================================


class ArgumentError(FlareLogError):
    """Base class for missing log operation arguments."""

    pass


class MessageError(ArgumentError):
    default_code = "missing_message"

    def __init__(self) -> None:
        super().__init__("[log] Called without a message.")


class ErrorInputError(ArgumentError):
    default_code = "missing_error"

    def __init__(self) -> None:
        super().__init__("[log.error] Called without an error or message.")


class RequestError(ArgumentError):
    default_code = "missing_request"

    def __init__(self, reason: str = "Called without a request.") -> None:
        super().__init__(f"[log.request] {reason}")
