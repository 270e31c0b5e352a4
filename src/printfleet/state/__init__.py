"""State layer.

Local containers mirroring the remote fleet: the printer list, the
per-printer file buckets and the operator's selection.  None of them
talk to the network; the orchestrator feeds them remote results.
"""

from printfleet.state.files import FileBucketStore, PrinterFileBucket
from printfleet.state.printers import PrinterStore
from printfleet.state.selection import SelectionSet

__all__ = ["FileBucketStore", "PrinterFileBucket", "PrinterStore", "SelectionSet"]
