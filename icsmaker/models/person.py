"""Organizer and attendee models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from icsmaker.models.fields import coerce_text

TRUE_STRINGS = {"true", "1", "yes"}
FALSE_STRINGS = {"false", "0", "no", ""}


class RawPerson(BaseModel):
    """Organizer or attendee as supplied by the caller; every field optional."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    rsvp: bool | None = None

    @field_validator("name", "email", mode="before")
    @classmethod
    def convert_text(cls, v, info):
        return coerce_text(v, info.field_name)

    @field_validator("rsvp", mode="before")
    @classmethod
    def convert_rsvp(cls, v: Any) -> bool | None:
        """Read yes/no strings by their meaning, anything else by truthiness."""
        if v is None:
            return None
        if isinstance(v, str):
            text = v.strip().lower()
            if text in FALSE_STRINGS:
                return False
            if text in TRUE_STRINGS:
                return True
        return bool(v)

    @property
    def is_complete(self) -> bool:
        """True if both name and email are non-empty."""
        return bool(self.name) and bool(self.email)


class Person(BaseModel):
    """Validated organizer."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)


class Attendee(Person):
    """Validated attendee."""

    rsvp: bool = False
