"""Per-printer file inventory cache."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from printfleet.models.files import PrinterFile, newest_first

_logger = logging.getLogger(__name__)


@dataclass
class PrinterFileBucket:
    """Most recently fetched file list for a single printer."""

    printer_id: str
    files: list[PrinterFile] = field(default_factory=list)


class FileBucketStore:
    """At most one bucket per printer id, created on first ingestion.

    Later ingestions update the existing bucket in place.
    """

    def __init__(self) -> None:
        self._buckets: dict[str, PrinterFileBucket] = {}

    def ingest(self, printer_id: str, files: list[PrinterFile]) -> PrinterFileBucket:
        """Store *files* newest first, creating the bucket if needed."""
        ordered = newest_first(files)
        bucket = self._buckets.get(printer_id)
        if bucket is None:
            bucket = PrinterFileBucket(printer_id=printer_id, files=ordered)
            self._buckets[printer_id] = bucket
        else:
            bucket.files = ordered
        return bucket

    def bucket(self, printer_id: str | None) -> PrinterFileBucket | None:
        if not printer_id:
            return None
        return self._buckets.get(printer_id)

    def files(self, printer_id: str | None) -> list[PrinterFile] | None:
        bucket = self.bucket(printer_id)
        return list(bucket.files) if bucket is not None else None

    def remove_entry(self, printer_id: str, path: str) -> list[PrinterFile] | None:
        """Drop the entry with *path* from the bucket.

        Missing buckets or entries log a warning and leave state untouched.
        Returns the bucket's files after removal, ``None`` without a bucket.
        """
        bucket = self._buckets.get(printer_id)
        if bucket is None:
            _logger.warning("Printer file list was nonexistent: %s", printer_id)
            return None

        for index, entry in enumerate(bucket.files):
            if entry.path == path:
                del bucket.files[index]
                break
        else:
            _logger.warning("File was not removed as it did not occur in state: %s", path)

        return list(bucket.files)

    def replace_files(self, printer_id: str, files: list[PrinterFile]) -> bool:
        """Overwrite an existing bucket's entries; never creates one."""
        bucket = self._buckets.get(printer_id)
        if bucket is None:
            _logger.debug("No file bucket for printer %s, nothing to replace", printer_id)
            return False
        bucket.files = newest_first(files)
        return True

    def drop(self, printer_id: str) -> bool:
        return self._buckets.pop(printer_id, None) is not None

    def __contains__(self, printer_id: object) -> bool:
        return printer_id in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)
