"""Sync orchestrator for the printer fleet cache."""

from __future__ import annotations

import logging

from printfleet.dispatcher import JobCommandDispatcher
from printfleet.exceptions import FleetResponseError, FleetValidationError
from printfleet.models.files import PrinterFile, PrinterFileList, newest_first
from printfleet.models.printer import Printer
from printfleet.models.requests import CreatePrinter
from printfleet.models.results import BatchReprintResult, CommandResult
from printfleet.services import ConfirmationPrompt, PrinterFileService, PrinterJobService, PrinterService
from printfleet.state.files import FileBucketStore
from printfleet.state.printers import PrinterRef, PrinterStore
from printfleet.state.selection import SelectionSet

_logger = logging.getLogger(__name__)


def _require_id(printer_id: str | None, action: str) -> str:
    if not printer_id:
        raise FleetValidationError(f"No printerId was provided to {action}")
    return printer_id


class PrinterFleet:
    """Client-side authoritative cache of the remote printer fleet.

    Every remote action awaits the service first and only then writes
    the result into local state; nothing is predicted.  Concurrent
    actions resolve last-writer-wins.

    Usage::

        async with FleetApiClient(config) as api:
            fleet = PrinterFleet(api, api, api, confirm=ask_operator)
            await fleet.load_printers()
            result = await fleet.print_file(printer_id, "benchy.gcode")
    """

    def __init__(
        self,
        printer_service: PrinterService,
        file_service: PrinterFileService,
        job_service: PrinterJobService,
        *,
        confirm: ConfirmationPrompt,
    ) -> None:
        self._printer_service = printer_service
        self._file_service = file_service
        self.printers = PrinterStore()
        self.files = FileBucketStore()
        self.selection = SelectionSet()
        self.test_printer: Printer | None = None
        self._dispatcher = JobCommandDispatcher(
            self.printers,
            self.selection,
            file_service,
            job_service,
            confirm,
        )

    # ------------------------------------------------------------------
    # Printers
    # ------------------------------------------------------------------

    async def load_printers(self) -> list[Printer]:
        """Fetch the full printer list and replace the cached one.

        Printers missing from the new list lose their file bucket and
        their selection entry.
        """
        printers = await self._printer_service.list_printers()
        previous = {p.id for p in self.printers}
        self.printers.upsert_all(printers)
        for printer_id in previous.difference(p.id for p in printers):
            _logger.debug("Printer %s vanished on refresh, purging its files and selection", printer_id)
            self.files.drop(printer_id)
            self.selection.discard(printer_id)
        _logger.debug("Loaded %d printers", len(printers))
        return printers

    async def create_printer(self, new_printer: CreatePrinter) -> Printer:
        printer = await self._printer_service.create_printer(new_printer)
        self.printers.insert(printer)
        return printer

    async def create_test_printer(self, new_printer: CreatePrinter) -> Printer:
        """Run a connection test; the result is kept apart from the fleet."""
        printer = await self._printer_service.test_connection(new_printer)
        self.test_printer = printer
        return printer

    async def update_printer(self, printer_id: str, new_printer: CreatePrinter) -> Printer:
        _require_id(printer_id, "update")
        printer = await self._printer_service.update_printer(printer_id, new_printer)
        self.printers.replace(printer_id, printer)
        return printer

    async def delete_printer(self, printer_id: str) -> object:
        """Delete remotely, then drop the printer with its bucket and selection."""
        _require_id(printer_id, "delete")
        ack = await self._printer_service.delete_printer(printer_id)
        self.printers.remove(printer_id)
        self.files.drop(printer_id)
        self.selection.discard(printer_id)
        return ack

    def printer(self, printer_id: str | None) -> Printer | None:
        return self.printers.find(printer_id)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    async def load_printer_files(self, printer_id: str, recursive: bool = False) -> PrinterFileList:
        """Fetch the file inventory; returns the list, not the bucket."""
        _require_id(printer_id, "load files")
        file_list = await self._file_service.list_files(printer_id, recursive)
        ordered = newest_first(file_list.files)
        self.files.ingest(printer_id, ordered)
        return file_list.model_copy(update={"files": ordered})

    async def delete_printer_file(self, printer_id: str, path: str) -> list[PrinterFile] | None:
        _require_id(printer_id, "delete a file")
        await self._file_service.delete_file(printer_id, path)
        return self.files.remove_entry(printer_id, path)

    async def clear_printer_files(self, printer_id: str) -> list[PrinterFile]:
        """Clear all files; the bucket keeps only the files that failed to clear."""
        _require_id(printer_id, "clear files")
        result = await self._file_service.clear_files(printer_id)
        if result.failed_files is None:
            raise FleetResponseError("No failed files were returned", endpoint=f"clear files {printer_id}")
        self.files.replace_files(printer_id, result.failed_files)
        return list(result.failed_files)

    def printer_files(self, printer_id: str | None) -> list[PrinterFile] | None:
        return self.files.files(printer_id)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def toggle_selected_printer(self, printer: Printer) -> bool:
        return self.selection.toggle(printer)

    def clear_selected_printers(self) -> None:
        self.selection.clear()

    def is_selected_printer(self, printer_id: str | None) -> bool:
        return self.selection.contains(printer_id)

    @property
    def selected_printers(self) -> list[Printer]:
        """Selected printers that are still in the store, in selection order."""
        return [p for p in (self.printers.find(i) for i in self.selection.ids) if p is not None]

    # ------------------------------------------------------------------
    # View pointers
    # ------------------------------------------------------------------

    def set_side_nav_printer(self, printer: PrinterRef) -> None:
        self.printers.set_side_nav_printer(printer)

    def set_update_dialog_printer(self, printer: PrinterRef) -> None:
        self.printers.set_update_dialog_printer(printer)

    def set_maintenance_dialog_printer(self, printer: PrinterRef) -> None:
        self.printers.set_maintenance_dialog_printer(printer)

    # ------------------------------------------------------------------
    # Job commands
    # ------------------------------------------------------------------

    async def stop_job(self, printer_id: str | None) -> CommandResult:
        return await self._dispatcher.stop_job(printer_id)

    async def print_file(self, printer_id: str | None, path: str) -> CommandResult:
        return await self._dispatcher.print_file(printer_id, path)

    async def batch_reprint_files(self) -> BatchReprintResult:
        return await self._dispatcher.batch_reprint()
