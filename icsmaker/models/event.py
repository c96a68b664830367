"""Event option models with Pydantic v2 validation."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from icsmaker.models.fields import coerce_record, coerce_records, coerce_text, coerce_timestamp
from icsmaker.models.person import Attendee, Person


class RawEventOptions(BaseModel):
    """Event options as supplied by the caller.

    Field aliases follow the input names (``eventName``); snake_case names
    are accepted too. Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    dtstamp: str | datetime | None = None
    dtstart: str | datetime | None = None
    dtend: str | datetime | None = None
    event_name: str | None = Field(default=None, alias="eventName")
    description: str | None = None
    location: str | None = None
    organizer: Any = None
    attendees: list[Any] | None = None

    @field_validator("dtstamp", "dtstart", "dtend", mode="before")
    @classmethod
    def convert_timestamp(cls, v, info):
        return coerce_timestamp(v, info.field_name)

    @field_validator("event_name", "description", "location", mode="before")
    @classmethod
    def convert_text(cls, v, info):
        return coerce_text(v, info.field_name)

    @field_validator("organizer", mode="before")
    @classmethod
    def convert_organizer(cls, v):
        return coerce_record(v, "organizer")

    @field_validator("attendees", mode="before")
    @classmethod
    def convert_attendees(cls, v):
        return coerce_records(v, "attendees")


class EventOptions(BaseModel):
    """Canonical event: every default applied, timestamps in iCalendar form."""

    model_config = ConfigDict(frozen=True)

    dtstamp: str
    dtstart: str
    dtend: str
    summary: str
    description: str = ""
    location: str | None = None
    organizer: Person | None = None
    attendees: tuple[Attendee, ...] = ()
