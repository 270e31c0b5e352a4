"""Guarded job commands.

The dispatcher checks cached printer state before any job command goes
out.  A declined precondition is returned as a :class:`CommandResult`,
never raised, so callers can tell it apart from a remote failure.
"""

from __future__ import annotations

import inspect
import logging

from printfleet._constants import (
    PRINT_BLOCKED,
    PRINT_STATUS_UNKNOWN,
    STOP_JOB_CONFIRMATION,
    STOP_JOB_NOT_PRINTING,
    UNKNOWN_PRINTER,
)
from printfleet.exceptions import FleetValidationError
from printfleet.models._base import FlagState
from printfleet.models.results import BatchReprintResult, CommandOutcome, CommandResult
from printfleet.services import ConfirmationPrompt, PrinterFileService, PrinterJobService
from printfleet.state.printers import PrinterStore
from printfleet.state.selection import SelectionSet

_logger = logging.getLogger(__name__)


async def _ask(prompt: ConfirmationPrompt, message: str) -> bool:
    answer = prompt(message)
    if inspect.isawaitable(answer):
        answer = await answer
    return answer is True


class JobCommandDispatcher:
    """Validates printer state before issuing print/stop/batch commands.

    No local state is changed after a command is sent: printer flags are
    refreshed by the next full resync, not predicted here.
    """

    def __init__(
        self,
        printers: PrinterStore,
        selection: SelectionSet,
        file_service: PrinterFileService,
        job_service: PrinterJobService,
        confirm: ConfirmationPrompt,
    ) -> None:
        self._printers = printers
        self._selection = selection
        self._files = file_service
        self._jobs = job_service
        self._confirm = confirm

    async def stop_job(self, printer_id: str | None) -> CommandResult:
        """Stop the running job after the operator confirms."""
        printer = self._printers.find(printer_id)
        if printer is None:
            return CommandResult(printer_id=printer_id, outcome=CommandOutcome.SKIPPED, message=UNKNOWN_PRINTER)

        if printer.flags.printing is not FlagState.YES:
            _logger.info("Stop job declined for printer %s: not printing", printer.id)
            return CommandResult(printer_id=printer.id, outcome=CommandOutcome.BLOCKED, message=STOP_JOB_NOT_PRINTING)

        if not await _ask(self._confirm, STOP_JOB_CONFIRMATION):
            _logger.info("Stop job cancelled by operator for printer %s", printer.id)
            return CommandResult(printer_id=printer.id, outcome=CommandOutcome.CANCELLED)

        await self._jobs.stop_print_job(printer.id)
        _logger.debug("Stop job sent to printer %s", printer.id)
        return CommandResult(printer_id=printer.id, outcome=CommandOutcome.SENT)

    async def print_file(self, printer_id: str | None, path: str) -> CommandResult:
        """Select *path* on the printer and start it immediately.

        Declined when the printer is printing, unreachable, or has not
        reported its printing flag yet.
        """
        printer = self._printers.find(printer_id)
        if printer is None:
            return CommandResult(printer_id=printer_id, outcome=CommandOutcome.SKIPPED, message=UNKNOWN_PRINTER)

        if printer.flags.printing is FlagState.YES or not printer.reachable:
            _logger.info("Print declined for printer %s: printing or not reachable", printer.id)
            return CommandResult(printer_id=printer.id, outcome=CommandOutcome.BLOCKED, message=PRINT_BLOCKED)

        if printer.flags.printing is FlagState.UNKNOWN:
            _logger.info("Print declined for printer %s: status unknown", printer.id)
            return CommandResult(printer_id=printer.id, outcome=CommandOutcome.BLOCKED, message=PRINT_STATUS_UNKNOWN)

        await self._files.select_and_print_file(printer.id, path, True)
        _logger.debug("Select-and-print sent to printer %s path=%s", printer.id, path)
        return CommandResult(printer_id=printer.id, outcome=CommandOutcome.SENT)

    async def batch_reprint(self) -> BatchReprintResult:
        """Reprint the last file on every selected printer.

        The selection is cleared before the remote call resolves.  The
        aggregate result is logged and returned without per-printer
        interpretation.
        """
        printer_ids = list(self._selection.ids)
        if not printer_ids:
            raise FleetValidationError("No printers selected to reprint files")

        self._selection.clear()

        results = await self._files.batch_reprint_files(printer_ids)
        _logger.debug("Batch reprint for %d printers: %s", len(printer_ids), results.raw)
        return results
