"""Pure formatting functions for display output."""

from datetime import datetime

from icsmaker.constants import ICAL_TIME_FORMAT


def format_timestamp(timestamp: str) -> str:
    """Format a canonical iCalendar timestamp for display.

    Args:
        timestamp: Timestamp in ``YYYYMMDDTHHMMSS`` form.

    Returns:
        Formatted string (e.g., "2025-01-01 09:00"), or the input unchanged
        if it is not in canonical form.
    """
    try:
        return datetime.strptime(timestamp, ICAL_TIME_FORMAT).strftime("%Y-%m-%d %H:%M")
    except ValueError:
        return timestamp


def format_attendees(count: int) -> str:
    """Format an attendee count (e.g., "-", "1 attendee", "3 attendees")."""
    if count == 0:
        return "-"
    return f"{count} attendee" if count == 1 else f"{count} attendees"
