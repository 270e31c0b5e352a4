"""Redaction of fleet API bodies for DEBUG traces.

Used by :class:`printfleet._transport.HttpTransport` when
``api_trace_enabled`` is set.  The bodies worth guarding are the
``CreatePrinter`` payloads sent on create, update and connection test
(they carry the printer's ``apiKey``) and any server echo of a printer
record or auth token.  Keys match regardless of case and of
snake/camel spelling, so ``api_key`` and ``apiKey`` are both hidden.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "apikey",
        "password",
        "accesstoken",
        "refreshtoken",
        "token",
        "authorization",
        "cookie",
    }
)


def _is_sensitive(key: str) -> bool:
    return key.lower().replace("_", "") in _SENSITIVE_VALUE_KEYS


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if _is_sensitive(key):
                redacted[key] = "<redacted>"
            else:
                redacted[key] = redact_for_log(v, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    return repr(value)
