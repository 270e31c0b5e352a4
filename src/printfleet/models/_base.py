"""Base model, tri-state enum and date coercion for fleet API payloads.

Every response model inherits from :class:`FleetBaseModel` which
provides:

* ``alias_generator=to_camel`` so camelCase API keys map
  automatically to snake_case fields.
* A ``raw`` dict that captures the original payload.

:class:`FlagState` models printer status flags that may not have been
reported yet.  Values without a mapped member resolve to ``UNKNOWN``
instead of raising ``ValueError``.
"""

from __future__ import annotations

import enum
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1_000_000_000_000


class FlagState(enum.IntEnum):
    """Explicit tri-state for a printer status flag.

    ``UNKNOWN`` means the server has not reported the flag yet; it must
    never be read as a confirmed ``NO``.
    """

    UNKNOWN = -1
    NO = 0
    YES = 1

    @classmethod
    def _missing_(cls, value: object) -> FlagState:
        return cls.UNKNOWN

    @property
    def known(self) -> bool:
        return self is not FlagState.UNKNOWN


def parse_flag(value: Any) -> FlagState:
    """Coerce ``None``/bool/int/enum payload values to a :class:`FlagState`."""
    if isinstance(value, FlagState):
        return value
    if value is None:
        return FlagState.UNKNOWN
    if isinstance(value, bool):
        return FlagState.YES if value else FlagState.NO
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "1", "yes"}:
            return FlagState.YES
        if lowered in {"false", "0", "no"}:
            return FlagState.NO
        return FlagState.UNKNOWN
    return FlagState(value)


Flag = Annotated[FlagState, BeforeValidator(parse_flag)]
"""Annotated type that parses optional boolean flags into a :class:`FlagState`."""


def parse_file_date(value: Any) -> datetime | None:
    """Convert a file date (ISO string, epoch seconds **or** ms) to a UTC datetime.

    Naive datetimes are assumed to be UTC so that every parsed date is
    comparable with every other.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if isinstance(value, bool):
        raise ValueError(f"invalid file date: {value!r}")
    if isinstance(value, str):
        text = value.strip()
        try:
            value = float(text)
        except ValueError:
            if text.endswith("Z"):
                text = f"{text[:-1]}+00:00"
            parsed = datetime.fromisoformat(text)
            return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)
    if isinstance(value, (int, float)):
        ts = float(value)
        if ts >= _MS_THRESHOLD:
            ts /= 1000.0
        try:
            return datetime.fromtimestamp(ts, tz=UTC)
        except (OverflowError, OSError) as exc:
            raise ValueError(f"file date out of range: {value!r}") from exc
    raise ValueError(f"invalid file date: {value!r}")


FileDate = Annotated[datetime | None, BeforeValidator(parse_file_date)]
"""Annotated type that coerces file dates to timezone-aware UTC datetimes."""


class FleetBaseModel(BaseModel):
    """Base for fleet API response models.

    Handles:
    * camelCase → snake_case via ``alias_generator=to_camel``
    * Stashes the original API dict in ``raw``
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    raw: dict[str, Any] = Field(default_factory=dict)
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        # Only auto-stash raw when validating an API dict; keep an explicit raw=.
        if "raw" in values:
            return values
        merged = dict(values)
        merged["raw"] = dict(values)
        return merged
