import typing as t
from unittest.mock import MagicMock

import orjson
import pytest

from flarelog import remote
from flarelog.logging import ConsoleSink


@pytest.fixture
def console() -> MagicMock:
    """Console sink double recording ``log`` and ``error`` calls."""
    return MagicMock(spec=ConsoleSink)


@pytest.fixture
def send() -> MagicMock:
    """Send capability double returning a non-awaitable result."""
    return MagicMock(return_value=None)


@pytest.fixture
def options(console, send) -> dict[str, t.Any]:
    return {
        "application": "string",
        "key": "string",
        "mode": "string",
        "source": "string",
        "send": send,
        "console": console,
    }


@pytest.fixture(autouse=True)
def release_dispatch_pool():
    yield
    remote.shutdown(wait=True)


def _sent_body(send: MagicMock, index: int = 0) -> dict[str, t.Any]:
    """Parse the JSON body passed to the send capability."""
    return orjson.loads(send.call_args_list[index].kwargs["body"])


@pytest.fixture
def sent_body() -> t.Callable[..., dict[str, t.Any]]:
    return _sent_body
