from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

import pytest

from printfleet.fleet import PrinterFleet
from printfleet.models.files import ClearedFilesResult, PrinterFileList
from printfleet.models.printer import Printer
from printfleet.models.requests import CreatePrinter
from printfleet.models.results import BatchReprintResult


def _printer_payload(
    printer_id: str,
    name: str,
    *,
    reachable: bool = True,
    printing: bool | None = False,
    operational: bool | None = True,
) -> dict[str, Any]:
    flags: dict[str, Any] = {}
    if printing is not None:
        flags["printing"] = printing
    if operational is not None:
        flags["operational"] = operational
    return {
        "id": printer_id,
        "printerName": name,
        "enabled": True,
        "printerURL": f"http://{printer_id}.local",
        "apiAccessibility": {"accessible": reachable, "retry": True, "reason": None},
        "printerState": {"flags": flags, "text": "Operational"},
    }


def make_printer_record(printer_id: str, name: str, **kwargs: Any) -> Printer:
    return Printer.model_validate(_printer_payload(printer_id, name, **kwargs))


@dataclass
class FakePrompt:
    answer: bool = True
    messages: list[str] = field(default_factory=list)

    def __call__(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer


@dataclass
class FakeFleetBackend:
    """In-memory double implementing every service protocol."""

    printers: list[dict[str, Any]] = field(default_factory=list)
    files: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    clear_response: dict[str, Any] = field(default_factory=lambda: {"failedFiles": []})
    reprint_gate: asyncio.Event | None = None
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def called(self, name: str) -> list[tuple[Any, ...]]:
        return [args for call, args in self.calls if call == name]

    async def list_printers(self) -> list[Printer]:
        self.calls.append(("list_printers", ()))
        return [Printer.model_validate(p) for p in self.printers]

    async def create_printer(self, new_printer: CreatePrinter) -> Printer:
        self.calls.append(("create_printer", (new_printer,)))
        return Printer.model_validate(_printer_payload(f"new-{new_printer.printer_name}", new_printer.printer_name))

    async def update_printer(self, printer_id: str, new_printer: CreatePrinter) -> Printer:
        self.calls.append(("update_printer", (printer_id, new_printer)))
        return Printer.model_validate(_printer_payload(printer_id, new_printer.printer_name))

    async def test_connection(self, new_printer: CreatePrinter) -> Printer:
        self.calls.append(("test_connection", (new_printer,)))
        return Printer.model_validate(_printer_payload("probe", new_printer.printer_name, printing=None, operational=None))

    async def delete_printer(self, printer_id: str) -> Any:
        self.calls.append(("delete_printer", (printer_id,)))
        return {"success": True}

    async def list_files(self, printer_id: str, recursive: bool) -> PrinterFileList:
        self.calls.append(("list_files", (printer_id, recursive)))
        return PrinterFileList.model_validate({"files": self.files.get(printer_id, [])})

    async def delete_file(self, printer_id: str, path: str) -> Any:
        self.calls.append(("delete_file", (printer_id, path)))
        return None

    async def clear_files(self, printer_id: str) -> ClearedFilesResult:
        self.calls.append(("clear_files", (printer_id,)))
        return ClearedFilesResult.model_validate(self.clear_response)

    async def batch_reprint_files(self, printer_ids: Sequence[str]) -> BatchReprintResult:
        self.calls.append(("batch_reprint_files", (list(printer_ids),)))
        if self.reprint_gate is not None:
            await self.reprint_gate.wait()
        return BatchReprintResult.model_validate({"success": True, "results": list(printer_ids)})

    async def select_and_print_file(self, printer_id: str, path: str, start_immediately: bool) -> Any:
        self.calls.append(("select_and_print_file", (printer_id, path, start_immediately)))
        return None

    async def stop_print_job(self, printer_id: str) -> Any:
        self.calls.append(("stop_print_job", (printer_id,)))
        return None


@pytest.fixture
def make_printer() -> Callable[..., Printer]:
    return make_printer_record


@pytest.fixture
def printer_payload() -> Callable[..., dict[str, Any]]:
    return _printer_payload


@pytest.fixture
def backend() -> FakeFleetBackend:
    return FakeFleetBackend()


@pytest.fixture
def prompt() -> FakePrompt:
    return FakePrompt()


@pytest.fixture
def fleet(backend: FakeFleetBackend, prompt: FakePrompt) -> PrinterFleet:
    return PrinterFleet(backend, backend, backend, confirm=prompt)
