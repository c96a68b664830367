"""Output layer: iCalendar formatting and file writing."""

from icsmaker.output.formatter import ICSFormatter
from icsmaker.output.ics_writer import ICSWriter, WriteResult

__all__ = [
    "ICSFormatter",
    "ICSWriter",
    "WriteResult",
]
