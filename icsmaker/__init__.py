"""Build iCalendar (.ics) documents from loosely specified event options."""

from icsmaker.calendar_builder import create_calendar, get_calendar, load_calendar_options
from icsmaker.config import CalendarConfig
from icsmaker.exceptions import CalendarError, ExportError, InvalidOptionsError
from icsmaker.models import (
    Attendee,
    CalendarOptions,
    EventOptions,
    Person,
    RawCalendarOptions,
    RawEventOptions,
)
from icsmaker.output import ICSFormatter, ICSWriter, WriteResult
from icsmaker.validation import OptionsValidator

__all__ = [
    "Attendee",
    "CalendarConfig",
    "CalendarError",
    "CalendarOptions",
    "EventOptions",
    "ExportError",
    "ICSFormatter",
    "ICSWriter",
    "InvalidOptionsError",
    "OptionsValidator",
    "Person",
    "RawCalendarOptions",
    "RawEventOptions",
    "WriteResult",
    "create_calendar",
    "get_calendar",
    "load_calendar_options",
]
