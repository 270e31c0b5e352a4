"""Request bodies sent to the fleet server."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CreatePrinter(BaseModel):
    """Body for create, update and test-connection requests."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    printer_name: str = Field(alias="printerName")
    printer_url: str = Field(alias="printerURL")
    api_key: str = Field(default="", alias="apiKey")
    enabled: bool = True

    def to_payload(self) -> dict[str, Any]:
        """Serialize using the wire (camelCase) field names."""
        return self.model_dump(by_alias=True)
