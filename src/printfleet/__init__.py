"""printfleet - Async client-side cache for a fleet of remote printers."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("printfleet")
except PackageNotFoundError:
    __version__ = "0+local"
from printfleet.client import FleetApiClient
from printfleet.config import FleetConfig
from printfleet.dispatcher import JobCommandDispatcher
from printfleet.exceptions import (
    FleetConfigError,
    FleetError,
    FleetResponseError,
    FleetTransportError,
    FleetValidationError,
)
from printfleet.fleet import PrinterFleet
from printfleet.models import (
    BatchReprintResult,
    ClearedFilesResult,
    CommandOutcome,
    CommandResult,
    CreatePrinter,
    FlagState,
    Printer,
    PrinterFile,
    PrinterFileList,
    PrinterFlags,
)
from printfleet.state import FileBucketStore, PrinterFileBucket, PrinterStore, SelectionSet

__all__ = [
    "__version__",
    "BatchReprintResult",
    "ClearedFilesResult",
    "CommandOutcome",
    "CommandResult",
    "CreatePrinter",
    "FileBucketStore",
    "FlagState",
    "FleetApiClient",
    "FleetConfig",
    "FleetConfigError",
    "FleetError",
    "FleetResponseError",
    "FleetTransportError",
    "FleetValidationError",
    "JobCommandDispatcher",
    "Printer",
    "PrinterFile",
    "PrinterFileBucket",
    "PrinterFileList",
    "PrinterFlags",
    "PrinterFleet",
    "PrinterStore",
    "SelectionSet",
]
