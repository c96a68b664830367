"""Calendar option models with Pydantic v2 validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from icsmaker.models.event import EventOptions
from icsmaker.models.fields import coerce_records, coerce_text


class RawCalendarOptions(BaseModel):
    """Calendar options as supplied by the caller.

    ``events`` left out means "one default event"; an empty list means no
    events at all.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    filename: str | None = None
    events: list[Any] | None = None
    time_zone: str | None = Field(default=None, alias="timeZone")
    is_valid: bool = Field(default=False, alias="isValid")

    @field_validator("filename", "time_zone", mode="before")
    @classmethod
    def convert_text(cls, v, info):
        return coerce_text(v, info.field_name)

    @field_validator("events", mode="before")
    @classmethod
    def convert_events(cls, v):
        return coerce_records(v, "events")

    @field_validator("is_valid", mode="before")
    @classmethod
    def convert_marker(cls, v: Any) -> bool:
        return bool(v)


class CalendarOptions(BaseModel):
    """Canonical calendar ready for formatting.

    ``model_dump(by_alias=True)`` gives a mapping that can be fed back in and
    will skip validation through the ``isValid`` marker.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_path: str = Field(alias="filePath")
    time_zone: str = Field(alias="timeZone")
    events: tuple[EventOptions, ...] = ()
    is_valid: bool = Field(default=True, alias="isValid")

    @property
    def event_count(self) -> int:
        return len(self.events)
