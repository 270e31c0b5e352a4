"""Operator selection for batch actions."""

from __future__ import annotations

from collections.abc import Iterator

from printfleet.models.printer import Printer


class SelectionSet:
    """Printer ids marked for batch operations.

    Only reachable printers can be added; removal is always allowed.
    Insertion order is kept so batch requests list printers in the order
    the operator picked them.
    """

    def __init__(self) -> None:
        self._ids: dict[str, None] = {}

    def toggle(self, printer: Printer) -> bool:
        """Flip *printer*'s membership and return whether it is now selected."""
        if printer.id in self._ids:
            del self._ids[printer.id]
            return False
        if printer.reachable:
            self._ids[printer.id] = None
            return True
        return False

    def discard(self, printer_id: str) -> None:
        self._ids.pop(printer_id, None)

    def clear(self) -> None:
        self._ids = {}

    def contains(self, printer_id: str | None) -> bool:
        return printer_id is not None and printer_id in self._ids

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(self._ids)

    def __contains__(self, printer_id: object) -> bool:
        return isinstance(printer_id, str) and printer_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._ids))

    def __len__(self) -> int:
        return len(self._ids)
