"""Shared helpers for fleet API endpoint modules.

It is internal to printfleet and may change at any time.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from printfleet.exceptions import FleetResponseError


def printer_path(prefix: str, printer_id: str, suffix: str = "") -> str:
    """Build ``{prefix}/{printer_id}{suffix}`` with the id URL-quoted."""
    return f"{prefix}/{quote(str(printer_id), safe='')}{suffix}"


def expect_dict(body: Any, *, endpoint: str) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise FleetResponseError(f"Expected a JSON object from {endpoint}, got {type(body).__name__}", endpoint=endpoint)
    return body


def expect_list(body: Any, *, endpoint: str) -> list[Any]:
    if not isinstance(body, list):
        raise FleetResponseError(f"Expected a JSON array from {endpoint}, got {type(body).__name__}", endpoint=endpoint)
    return body
