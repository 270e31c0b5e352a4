"""Outcome models for job commands.

Guarded commands never raise for a declined precondition; they return a
:class:`CommandResult` the caller inspects instead.  Remote failures
still propagate as exceptions.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from printfleet.models._base import FleetBaseModel


class CommandOutcome(enum.StrEnum):
    """What happened to a guarded job command."""

    SENT = "sent"
    """The remote call was issued and completed."""
    BLOCKED = "blocked"
    """A local precondition declined the command."""
    CANCELLED = "cancelled"
    """The operator answered no to the confirmation prompt."""
    SKIPPED = "skipped"
    """The printer id was empty or unknown; nothing was attempted."""


class CommandResult(BaseModel):
    """Result of :meth:`JobCommandDispatcher.stop_job` / ``print_file``."""

    model_config = ConfigDict(frozen=True)

    printer_id: str | None
    outcome: CommandOutcome
    message: str = ""

    @property
    def sent(self) -> bool:
        return self.outcome is CommandOutcome.SENT

    @property
    def declined(self) -> bool:
        return self.outcome is not CommandOutcome.SENT


class BatchReprintResult(FleetBaseModel):
    """Aggregate result of a batch reprint.

    The server's per-printer breakdown is not interpreted; the full
    payload is available in ``raw``.
    """

    success: bool | None = None
    results: list[Any] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _accept_any_shape(cls, values: Any) -> Any:
        if values is None:
            return {"raw": {}}
        if isinstance(values, list):
            return {"results": values, "raw": {"results": values}}
        if not isinstance(values, dict):
            return {"raw": {"value": values}}
        return values
