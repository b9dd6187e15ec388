"""
Remote forwarding of log entries to Logflare.

The send capability is called synchronously by every log operation. When it
returns an awaitable the work is dispatched fire-and-forget: scheduled on the
running event loop when there is one, otherwise driven to completion on a
small worker pool. Either way the caller gets back a future it may await or
ignore. Send errors are never caught here.
"""

from __future__ import annotations

import asyncio
import inspect
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Awaitable, Mapping, Optional, Protocol

import httpx

from flarelog.config.logflare import DEFAULT_ENDPOINT
from flarelog.logging import get_logger
from flarelog.logging.serializers import orjson_dumps

logger = get_logger(__name__)

HEADERS: Mapping[str, str] = {"Content-Type": "application/json; charset=UTF-8"}
METHOD = "POST"

MISSING: Any = object()


class SendCapability(Protocol):
    """Performs the HTTP request; may return an awaitable."""

    def __call__(self, url: str, *, method: str, headers: Mapping[str, str], body: str) -> Any: ...


def build_url(key: str, source: str, endpoint: str = DEFAULT_ENDPOINT) -> str:
    """Logflare ingestion URL; key and source are used verbatim."""
    return f"{endpoint}?api_key={key}&source={source}"


def build_payload(
    log_entry: str,
    *,
    application: str,
    mode: str,
    level: str,
    data: Any = MISSING,
) -> dict[str, Any]:
    """Build the JSON body. ``data`` appears in metadata only when supplied."""
    metadata: dict[str, Any] = {"application": application}
    if data is not MISSING:
        metadata["data"] = data
    metadata["level"] = level
    metadata["mode"] = mode
    return {"log_entry": log_entry, "metadata": metadata}


def serialize_payload(payload: Mapping[str, Any]) -> str:
    return orjson_dumps(payload)


# =============================================================================
# Default sender (httpx)
# =============================================================================


class HttpxSender:
    """Send capability backed by ``httpx.AsyncClient``.

    A fresh client is opened per request. The response is returned as is;
    status codes are not inspected.
    """

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout

    async def __call__(self, url: str, *, method: str, headers: Mapping[str, str], body: str) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.request(method, url, headers=dict(headers), content=body.encode("utf-8"))


# =============================================================================
# Fire-and-forget dispatch
# =============================================================================

_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="flarelog_send_")
        return _executor


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def _run_to_completion(awaitable: Awaitable[Any]) -> Any:
    return asyncio.run(_await(awaitable))


def dispatch(result: Any) -> Any:
    """Schedule an awaitable send result without waiting for it.

    Returns an ``asyncio.Future`` inside a running loop, a
    ``concurrent.futures.Future`` outside one, and non-awaitables unchanged.
    """
    if not inspect.isawaitable(result):
        return result

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        logger.debug("remote_send_dispatched", mode="thread")
        return _get_executor().submit(_run_to_completion, result)

    logger.debug("remote_send_dispatched", mode="task")
    return asyncio.ensure_future(result)


def send_remote(
    send: SendCapability,
    url: str,
    payload: Mapping[str, Any],
) -> Any:
    """Invoke ``send`` with the serialized payload and dispatch its result."""
    return dispatch(send(url, method=METHOD, headers=dict(HEADERS), body=serialize_payload(payload)))


def shutdown(wait: bool = True) -> None:
    """Release the worker pool used for dispatch outside an event loop."""
    global _executor
    with _executor_lock:
        executor, _executor = _executor, None
    if executor is not None:
        executor.shutdown(wait=wait)


__all__ = [
    "HEADERS",
    "METHOD",
    "HttpxSender",
    "SendCapability",
    "build_payload",
    "build_url",
    "dispatch",
    "send_remote",
    "serialize_payload",
    "shutdown",
]
