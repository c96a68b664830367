"""Exception hierarchy for calendar operations."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class InvalidOptionsError(CalendarError):
    """Calendar options do not have a recognizable shape."""

    pass


class OptionsFileError(CalendarError):
    """Options file could not be read or parsed."""

    pass


class ExportError(CalendarError):
    """Error during calendar export."""

    pass
