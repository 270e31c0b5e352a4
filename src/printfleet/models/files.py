"""Remote file inventory models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import Field, field_validator, model_validator

from printfleet.models._base import FileDate, FleetBaseModel

_UNDATED = datetime.min.replace(tzinfo=UTC)


class PrinterFile(FleetBaseModel):
    """A file or folder stored on a printer."""

    path: str
    date: FileDate = None
    """Upload/modification time, ``None`` when the printer did not report one."""

    @field_validator("path", mode="before")
    @classmethod
    def _coerce_path(cls, value: Any) -> str:
        return "" if value is None else str(value)


def newest_first(files: list[PrinterFile]) -> list[PrinterFile]:
    """Return *files* sorted descending by date; undated entries go last."""
    return sorted(
        files,
        key=lambda f: (f.date is not None, f.date or _UNDATED),
        reverse=True,
    )


class PrinterFileList(FleetBaseModel):
    """Response of the file inventory fetch."""

    files: list[PrinterFile] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_list(cls, values: Any) -> Any:
        if isinstance(values, list):
            return {"files": values, "raw": {"files": values}}
        return values


class ClearedFilesResult(FleetBaseModel):
    """Response of the "clear files" operation.

    ``failed_files`` is ``None`` when the server omitted the report,
    which callers must treat as a failed clear.
    """

    failed_files: list[PrinterFile] | None = None
