"""Remote collaborator interfaces.

The state layer and orchestrator depend only on these protocols.
:class:`printfleet.client.FleetApiClient` implements all of them over
HTTP; tests pass lightweight doubles.
"""

from __future__ import annotations

from collections.abc import Awaitable, Sequence
from typing import Any, Protocol

from printfleet.models.files import ClearedFilesResult, PrinterFileList
from printfleet.models.printer import Printer
from printfleet.models.requests import CreatePrinter
from printfleet.models.results import BatchReprintResult


class PrinterService(Protocol):
    async def create_printer(self, new_printer: CreatePrinter) -> Printer:
        ...

    async def update_printer(self, printer_id: str, new_printer: CreatePrinter) -> Printer:
        ...

    async def test_connection(self, new_printer: CreatePrinter) -> Printer:
        ...

    async def list_printers(self) -> list[Printer]:
        ...

    async def delete_printer(self, printer_id: str) -> Any:
        ...


class PrinterFileService(Protocol):
    async def list_files(self, printer_id: str, recursive: bool) -> PrinterFileList:
        ...

    async def delete_file(self, printer_id: str, path: str) -> Any:
        ...

    async def clear_files(self, printer_id: str) -> ClearedFilesResult:
        ...

    async def batch_reprint_files(self, printer_ids: Sequence[str]) -> BatchReprintResult:
        ...

    async def select_and_print_file(self, printer_id: str, path: str, start_immediately: bool) -> Any:
        ...


class PrinterJobService(Protocol):
    async def stop_print_job(self, printer_id: str) -> Any:
        ...


class ConfirmationPrompt(Protocol):
    """Ask the operator a yes/no question.

    Implementations may answer synchronously or return an awaitable.
    """

    def __call__(self, message: str) -> bool | Awaitable[bool]:
        ...
