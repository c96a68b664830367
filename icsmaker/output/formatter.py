"""Render canonical calendar options as iCalendar text."""

import os

from icsmaker.models import Attendee, CalendarOptions, EventOptions, Person

CALENDAR_HEADER = ("BEGIN:VCALENDAR", "VERSION:2.0")
CALENDAR_FOOTER = "END:VCALENDAR"
EVENT_HEADER = "BEGIN:VEVENT"
EVENT_FOOTER = "END:VEVENT"


def time_property(name: str, timestamp: str, time_zone: str) -> str:
    return f"{name};TZID={time_zone}:{timestamp}"


def organizer_property(organizer: Person) -> str:
    return f"ORGANIZER;CN={organizer.name}:MAILTO:{organizer.email}"


def attendee_property(attendee: Attendee) -> str:
    rsvp = "true" if attendee.rsvp else "false"
    return f'ATTENDEE;CN="{attendee.name}";RSVP={rsvp}:MAILTO:{attendee.email}'


class ICSFormatter:
    """Formatter for iCalendar documents.

    Output is a pure function of the canonical options and the line separator.
    Property values are written verbatim: commas, semicolons and newlines are
    not escaped and long lines are not folded.
    """

    def __init__(self, line_break: str = os.linesep):
        self.line_break = line_break

    def _join(self, parts) -> str:
        return self.line_break.join(parts)

    def format_event(self, event: EventOptions, time_zone: str) -> str:
        """Render one VEVENT block, preceded by a blank line."""
        parts = [
            "",
            EVENT_HEADER,
            time_property("DTSTAMP", event.dtstamp, time_zone),
        ]

        if event.organizer:
            parts.append(organizer_property(event.organizer))

        for attendee in event.attendees:
            parts.append(attendee_property(attendee))

        parts.append(time_property("DTSTART", event.dtstart, time_zone))
        parts.append(time_property("DTEND", event.dtend, time_zone))

        if event.location:
            parts.append(f"LOCATION:{event.location}")

        parts.append(f"DESCRIPTION:{event.description}")
        parts.append(f"SUMMARY:{event.summary}")
        parts.append(EVENT_FOOTER)

        return self._join(parts)

    def format_calendar(self, calendar: CalendarOptions) -> str:
        """Render the VCALENDAR envelope around every event block."""
        events = self._join(
            self.format_event(event, calendar.time_zone) for event in calendar.events
        )
        return self._join([self._join(CALENDAR_HEADER), events, CALENDAR_FOOTER])
