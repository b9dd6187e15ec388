"""
JSON serialization shared by the local sinks and the remote payload.

Any structured value encodes: non-``str`` dict keys, sets, datetimes and
unknown objects are handled by orjson options or ``default``; what orjson
still refuses (integers beyond 64 bits, unsupported key types) is rewritten
to strings before a second attempt.
"""

from __future__ import annotations

from typing import Any

import orjson

OPTIONS = orjson.OPT_NON_STR_KEYS | orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC

_INT64_MIN = -(2**63)
_UINT64_MAX = 2**64 - 1


def _default(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return list(value)
    return str(value)


def _to_jsonable(value: Any, _active: frozenset[int] = frozenset()) -> Any:
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, int):
        return value if _INT64_MIN <= value <= _UINT64_MAX else str(value)
    if isinstance(value, (str, float)):
        return value
    if id(value) in _active:
        return "<circular>"

    active = _active | {id(value)}
    if isinstance(value, dict):
        return {
            key if isinstance(key, str) else str(key): _to_jsonable(item, active) for key, item in value.items()
        }
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_jsonable(item, active) for item in value]
    return value


def orjson_dumps(v: Any) -> str:
    """Serialize ``v`` to a JSON string; never fails on structured data."""
    try:
        return orjson.dumps(v, default=_default, option=OPTIONS).decode()
    except orjson.JSONEncodeError:
        return orjson.dumps(_to_jsonable(v), default=_default, option=OPTIONS).decode()
