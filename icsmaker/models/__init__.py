"""Raw and canonical calendar models."""

from icsmaker.models.calendar import CalendarOptions, RawCalendarOptions
from icsmaker.models.event import EventOptions, RawEventOptions
from icsmaker.models.person import Attendee, Person, RawPerson

__all__ = [
    "Attendee",
    "CalendarOptions",
    "EventOptions",
    "Person",
    "RawCalendarOptions",
    "RawEventOptions",
    "RawPerson",
]
