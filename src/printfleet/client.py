"""High-level async HTTP client for the fleet server."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import aiohttp

from printfleet._api import files as _files_api
from printfleet._api import jobs as _jobs_api
from printfleet._api import printers as _printers_api
from printfleet._transport import HttpTransport, Transport
from printfleet.config import FleetConfig
from printfleet.exceptions import FleetError
from printfleet.models.files import ClearedFilesResult, PrinterFileList
from printfleet.models.printer import Printer
from printfleet.models.requests import CreatePrinter
from printfleet.models.results import BatchReprintResult

_logger = logging.getLogger(__name__)


class FleetApiClient:
    """Async client implementing the printer, file and job services.

    Usage::

        async with FleetApiClient(config) as api:
            printers = await api.list_printers()

    A ready :class:`Transport` may be passed instead of letting the client
    build one, which is how tests drive it without a network.
    """

    def __init__(
        self,
        config: FleetConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> FleetApiClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise FleetError("Client not initialized. Use 'async with FleetApiClient(...) as api:'")
        return self._transport

    # ------------------------------------------------------------------
    # PrinterService
    # ------------------------------------------------------------------

    async def list_printers(self) -> list[Printer]:
        return await _printers_api.fetch_printers(self._require_transport())

    async def create_printer(self, new_printer: CreatePrinter) -> Printer:
        return await _printers_api.create_printer(self._require_transport(), new_printer)

    async def update_printer(self, printer_id: str, new_printer: CreatePrinter) -> Printer:
        return await _printers_api.update_printer(self._require_transport(), printer_id, new_printer)

    async def test_connection(self, new_printer: CreatePrinter) -> Printer:
        return await _printers_api.check_connection(self._require_transport(), new_printer)

    async def delete_printer(self, printer_id: str) -> Any:
        return await _printers_api.delete_printer(self._require_transport(), printer_id)

    # ------------------------------------------------------------------
    # PrinterFileService
    # ------------------------------------------------------------------

    async def list_files(self, printer_id: str, recursive: bool) -> PrinterFileList:
        return await _files_api.fetch_files(self._require_transport(), printer_id, recursive)

    async def delete_file(self, printer_id: str, path: str) -> Any:
        return await _files_api.delete_file(self._require_transport(), printer_id, path)

    async def clear_files(self, printer_id: str) -> ClearedFilesResult:
        return await _files_api.clear_files(self._require_transport(), printer_id)

    async def batch_reprint_files(self, printer_ids: Sequence[str]) -> BatchReprintResult:
        _logger.debug("Batch reprint requested for %s", list(printer_ids))
        return await _files_api.batch_reprint_files(self._require_transport(), printer_ids)

    async def select_and_print_file(self, printer_id: str, path: str, start_immediately: bool) -> Any:
        return await _files_api.select_and_print_file(self._require_transport(), printer_id, path, start_immediately)

    # ------------------------------------------------------------------
    # PrinterJobService
    # ------------------------------------------------------------------

    async def stop_print_job(self, printer_id: str) -> Any:
        return await _jobs_api.stop_print_job(self._require_transport(), printer_id)
