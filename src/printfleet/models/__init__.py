"""Data models for fleet API payloads."""

from printfleet.models._base import FileDate, Flag, FlagState, FleetBaseModel, parse_file_date, parse_flag
from printfleet.models.files import ClearedFilesResult, PrinterFile, PrinterFileList, newest_first
from printfleet.models.printer import Printer, PrinterFlags
from printfleet.models.requests import CreatePrinter
from printfleet.models.results import BatchReprintResult, CommandOutcome, CommandResult

__all__ = [
    "BatchReprintResult",
    "ClearedFilesResult",
    "CommandOutcome",
    "CommandResult",
    "CreatePrinter",
    "FileDate",
    "Flag",
    "FlagState",
    "FleetBaseModel",
    "Printer",
    "PrinterFile",
    "PrinterFileList",
    "PrinterFlags",
    "newest_first",
    "parse_file_date",
    "parse_flag",
]
