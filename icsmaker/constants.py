"""Shared constants for ics-maker."""

# Event defaults
DEFAULT_EVENT_NAME = "New Event"
DEFAULT_ATTENDEE_RSVP = False

# Output file defaults
DEFAULT_FILE_NAME = "calendar-event.ics"
ICS_EXTENSION = ".ics"

# Canonical iCalendar timestamp (no offset suffix; TZID carries the zone)
ICAL_TIME_FORMAT = "%Y%m%dT%H%M%S"

# Hours added to "now" when a timestamp is missing
DTSTAMP_OFFSET_HOURS = 0
DTSTART_OFFSET_HOURS = 0
DTEND_OFFSET_HOURS = 1

FALLBACK_TIMEZONE = "UTC"
