"""Job control endpoints."""

from __future__ import annotations

from typing import Any

from printfleet._api._common import printer_path
from printfleet._transport import Transport


async def stop_print_job(transport: Transport, printer_id: str) -> Any:
    return await transport.request("POST", printer_path("/api/printer", printer_id, "/job/stop"))
