"""Printer CRUD endpoints under ``/api/printer``."""

from __future__ import annotations

from typing import Any

from printfleet._api._common import expect_dict, expect_list, printer_path
from printfleet._transport import Transport
from printfleet.models.printer import Printer
from printfleet.models.requests import CreatePrinter

_PRINTER = "/api/printer"


async def fetch_printers(transport: Transport) -> list[Printer]:
    """Fetch every printer known to the server."""
    body = await transport.request("GET", _PRINTER)
    return [Printer.model_validate(item) for item in expect_list(body, endpoint=_PRINTER) if isinstance(item, dict)]


async def create_printer(transport: Transport, new_printer: CreatePrinter) -> Printer:
    body = await transport.request("POST", _PRINTER, json_body=new_printer.to_payload())
    return Printer.model_validate(expect_dict(body, endpoint=_PRINTER))


async def check_connection(transport: Transport, new_printer: CreatePrinter) -> Printer:
    """Ask the server to probe a printer without registering it."""
    endpoint = f"{_PRINTER}/test-connection"
    body = await transport.request("POST", endpoint, json_body=new_printer.to_payload())
    return Printer.model_validate(expect_dict(body, endpoint=endpoint))


async def update_printer(transport: Transport, printer_id: str, new_printer: CreatePrinter) -> Printer:
    endpoint = printer_path(_PRINTER, printer_id)
    body = await transport.request("PATCH", endpoint, json_body=new_printer.to_payload())
    return Printer.model_validate(expect_dict(body, endpoint=endpoint))


async def delete_printer(transport: Transport, printer_id: str) -> Any:
    return await transport.request("DELETE", printer_path(_PRINTER, printer_id))
