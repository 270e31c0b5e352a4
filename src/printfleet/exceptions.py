"""Custom exception hierarchy for printfleet."""

from __future__ import annotations


class FleetError(Exception):
    """Base exception for all printfleet errors."""


class FleetConfigError(FleetError):
    """Invalid or missing configuration."""


class FleetValidationError(FleetError, ValueError):
    """A required argument was missing or empty.

    Raised synchronously, before any remote call is made, so callers can
    tell a rejected request apart from a failed remote call.
    """


class FleetTransportError(FleetError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class FleetResponseError(FleetError):
    """The server answered, but the response lacks a required part."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)
