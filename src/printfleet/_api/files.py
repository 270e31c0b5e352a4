"""Printer file endpoints under ``/api/printer-files``."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from printfleet._api._common import expect_dict, printer_path
from printfleet._transport import Transport
from printfleet.models.files import ClearedFilesResult, PrinterFileList
from printfleet.models.results import BatchReprintResult

_FILES = "/api/printer-files"


async def fetch_files(transport: Transport, printer_id: str, recursive: bool) -> PrinterFileList:
    """Fetch the file inventory of one printer.

    Accepts both ``{"files": [...]}`` and a bare array.
    """
    endpoint = printer_path(_FILES, printer_id)
    body = await transport.request("GET", endpoint, params={"recursive": "true" if recursive else "false"})
    if isinstance(body, list):
        return PrinterFileList.model_validate(body)
    return PrinterFileList.model_validate(expect_dict(body, endpoint=endpoint))


async def delete_file(transport: Transport, printer_id: str, path: str) -> Any:
    return await transport.request("DELETE", printer_path(_FILES, printer_id), params={"path": path})


async def clear_files(transport: Transport, printer_id: str) -> ClearedFilesResult:
    """Remove all files; the response reports the ones that could not be removed."""
    endpoint = printer_path(_FILES, printer_id, "/clear")
    body = await transport.request("DELETE", endpoint)
    if body is None:
        return ClearedFilesResult()
    return ClearedFilesResult.model_validate(expect_dict(body, endpoint=endpoint))


async def batch_reprint_files(transport: Transport, printer_ids: Sequence[str]) -> BatchReprintResult:
    endpoint = f"{_FILES}/batch/reprint-files"
    body = await transport.request("POST", endpoint, json_body={"printerIds": list(printer_ids)})
    return BatchReprintResult.model_validate(body)


async def select_and_print_file(transport: Transport, printer_id: str, path: str, start_immediately: bool) -> Any:
    endpoint = printer_path(_FILES, printer_id, "/select")
    return await transport.request("POST", endpoint, json_body={"filePath": path, "print": start_immediately})
