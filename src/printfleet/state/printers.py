"""Canonical ordered printer list.

This is the only component allowed to hold :class:`Printer` records.
Other containers refer to printers by id and are reconciled by the
orchestrator when a printer goes away.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from printfleet.models._base import FlagState
from printfleet.models.printer import Printer

_logger = logging.getLogger(__name__)

PrinterRef = Printer | str | None


def _ref_id(ref: PrinterRef) -> str | None:
    if ref is None:
        return None
    if isinstance(ref, Printer):
        return ref.id
    return ref or None


class PrinterStore:
    """In-memory printer list, kept sorted by case-insensitive name.

    Equal names are ordered by ``id`` so that the order is total and
    deterministic for a given set of printers.

    View pointers (side panel, update dialog, maintenance dialog) hold
    printer ids.  Reading a pointer resolves it against the current list,
    so a pointer never returns a stale record.
    """

    def __init__(self) -> None:
        self._printers: list[Printer] = []
        self._side_nav_id: str | None = None
        self._update_dialog_id: str | None = None
        self._maintenance_dialog_id: str | None = None

    def _sort(self) -> None:
        self._printers.sort(key=lambda p: p.sort_key)

    def _index(self, printer_id: str) -> int:
        for index, printer in enumerate(self._printers):
            if printer.id == printer_id:
                return index
        return -1

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def upsert_all(self, printers: Iterable[Printer]) -> None:
        """Replace the whole list with *printers*.

        Duplicate ids collapse to the last occurrence.  The side panel
        pointer is unset when its printer is not part of the new list.
        """
        by_id: dict[str, Printer] = {}
        for printer in printers:
            by_id.pop(printer.id, None)
            by_id[printer.id] = printer
        self._printers = list(by_id.values())
        self._sort()

        if self._side_nav_id is not None and self._side_nav_id not in by_id:
            _logger.debug("Side panel printer %s vanished on refresh", self._side_nav_id)
            self._side_nav_id = None

    def insert(self, printer: Printer) -> None:
        """Add one printer; an existing record with the same id is replaced."""
        index = self._index(printer.id)
        if index != -1:
            _logger.debug("Printer %s already present, replacing on insert", printer.id)
            self._printers[index] = printer
        else:
            self._printers.append(printer)
        self._sort()

    def replace(self, printer_id: str, printer: Printer) -> bool:
        """Replace the record stored under *printer_id*.

        An absent id is a no-op and logs a warning, as is a record whose
        own id differs from *printer_id*.
        """
        index = self._index(printer_id)
        if index == -1:
            _logger.warning("Printer was not replaced as it did not occur in state: %s", printer_id)
            return False
        if printer.id != printer_id:
            _logger.warning("Printer was not replaced as its id %s does not match %s", printer.id, printer_id)
            return False
        self._printers[index] = printer
        self._sort()
        return True

    def remove(self, printer_id: str) -> bool:
        """Remove the printer with *printer_id*; absent ids log a warning."""
        index = self._index(printer_id)
        if index == -1:
            _logger.warning("Printer was not removed as it did not occur in state: %s", printer_id)
            return False
        del self._printers[index]

        if self._side_nav_id == printer_id:
            self._side_nav_id = None
        if self._update_dialog_id == printer_id:
            self._update_dialog_id = None
        if self._maintenance_dialog_id == printer_id:
            self._maintenance_dialog_id = None
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find(self, printer_id: str | None) -> Printer | None:
        if not printer_id:
            return None
        index = self._index(printer_id)
        return self._printers[index] if index != -1 else None

    @property
    def printers(self) -> tuple[Printer, ...]:
        """Snapshot of the current list, in sort order."""
        return tuple(self._printers)

    def online_printers(self) -> list[Printer]:
        return [p for p in self._printers if p.reachable]

    def printers_with_job(self) -> list[Printer]:
        """Printers with a confirmed running job.

        Printers whose flags were not reported yet are still connecting
        and are left out.
        """
        return [p for p in self._printers if p.flags.printing is FlagState.YES]

    def is_operational(self, printer_id: str | None) -> FlagState:
        printer = self.find(printer_id)
        return printer.flags.operational if printer is not None else FlagState.UNKNOWN

    def is_printing(self, printer_id: str | None) -> FlagState:
        printer = self.find(printer_id)
        return printer.flags.printing if printer is not None else FlagState.UNKNOWN

    def __len__(self) -> int:
        return len(self._printers)

    def __iter__(self) -> Iterator[Printer]:
        return iter(tuple(self._printers))

    def __contains__(self, printer_id: object) -> bool:
        return isinstance(printer_id, str) and self._index(printer_id) != -1

    # ------------------------------------------------------------------
    # View pointers
    # ------------------------------------------------------------------

    def set_side_nav_printer(self, printer: PrinterRef) -> None:
        self._side_nav_id = _ref_id(printer)

    def set_update_dialog_printer(self, printer: PrinterRef) -> None:
        self._update_dialog_id = _ref_id(printer)

    def set_maintenance_dialog_printer(self, printer: PrinterRef) -> None:
        self._maintenance_dialog_id = _ref_id(printer)

    @property
    def side_nav_printer(self) -> Printer | None:
        return self.find(self._side_nav_id)

    @property
    def update_dialog_printer(self) -> Printer | None:
        return self.find(self._update_dialog_id)

    @property
    def maintenance_dialog_printer(self) -> Printer | None:
        return self.find(self._maintenance_dialog_id)
