"""Printer model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from printfleet.models._base import Flag, FlagState, FleetBaseModel


class PrinterFlags(BaseModel):
    """Live status flags reported in ``printerState.flags``.

    A flag the server did not send is ``FlagState.UNKNOWN``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    operational: Flag = FlagState.UNKNOWN
    printing: Flag = FlagState.UNKNOWN


class Printer(FleetBaseModel):
    """A printer known to the fleet server.

    Fields are mapped from the ``/api/printer`` list entries.  The
    wire shape nests reachability under ``apiAccessibility.accessible``
    and the flags under ``printerState.flags``; both are flattened here.
    """

    id: str
    """Server-side printer identifier."""
    name: str = Field(default="", validation_alias=AliasChoices("printerName", "name"))
    """Display name."""
    enabled: bool = True
    """Whether the server keeps a connection to the printer."""
    printer_url: str = Field(default="", validation_alias=AliasChoices("printerURL", "printerUrl", "printer_url"))
    """Network address of the printer."""
    reachable: bool = False
    """Whether the printer API is currently accessible for commands."""
    flags: PrinterFlags = Field(default_factory=PrinterFlags)
    """Operational/printing flags, each tri-state."""

    @model_validator(mode="before")
    @classmethod
    def _flatten_state(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        merged = dict(values)
        merged.setdefault("raw", dict(values))

        if "reachable" not in merged:
            accessibility = merged.get("apiAccessibility")
            if isinstance(accessibility, dict):
                merged["reachable"] = bool(accessibility.get("accessible"))

        if "flags" not in merged:
            state = merged.get("printerState")
            flags = state.get("flags") if isinstance(state, dict) else None
            if isinstance(flags, dict):
                merged["flags"] = flags
        return merged

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> str:
        printer_id = str(value).strip() if value is not None else ""
        if not printer_id:
            raise ValueError("id must be non-empty")
        return printer_id

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @property
    def is_printing(self) -> bool:
        """``True`` only when the server confirmed a running job."""
        return self.flags.printing is FlagState.YES

    @property
    def is_operational(self) -> bool:
        return self.flags.operational is FlagState.YES

    @property
    def status_known(self) -> bool:
        """Whether the printing flag has been reported at all."""
        return self.flags.printing.known

    @property
    def sort_key(self) -> tuple[str, str]:
        """Case-insensitive name, falling back to ``id`` for equal names."""
        return (self.name.casefold(), self.id)
