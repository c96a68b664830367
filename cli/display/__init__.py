"""Display helpers for the CLI: event table and value formatting."""

from cli.display.event_table import EventTableRenderer
from cli.display.formatters import format_attendees, format_timestamp

__all__ = [
    "EventTableRenderer",
    "format_attendees",
    "format_timestamp",
]
