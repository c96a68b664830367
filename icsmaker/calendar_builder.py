"""Entry points: render calendar options to text, or render and write a file."""

import logging
from pathlib import Path
from typing import Any, Callable

from icsmaker.config import CalendarConfig
from icsmaker.models import CalendarOptions
from icsmaker.output.formatter import ICSFormatter
from icsmaker.output.ics_writer import ICSWriter, WriteResult
from icsmaker.validation import OptionsValidator

logger = logging.getLogger(__name__)

WriteCallback = Callable[[OSError | UnicodeError | None, str | None], Any]


def get_calendar(calendar_options: Any = None, config: CalendarConfig | None = None) -> str:
    """
    Render calendar options as an iCalendar document.

    Args:
        calendar_options: Raw options (mapping or ``RawCalendarOptions``) or
            already validated ``CalendarOptions``
        config: Configuration; loaded from the environment if None

    Returns:
        The document text, joined with the configured line separator
    """
    config = config or CalendarConfig.from_env()
    calendar = OptionsValidator(config).validate_calendar_options(calendar_options)
    return ICSFormatter(config.line_break).format_calendar(calendar)


def create_calendar(
    calendar_options: Any = None,
    file_path: str | Path | None = None,
    callback: WriteCallback | None = None,
    config: CalendarConfig | None = None,
) -> WriteResult:
    """
    Render calendar options and write them to a file.

    The destination is ``file_path`` if given, otherwise ``filename`` from the
    options (or the default name) inside the output directory. Write errors are
    reported through the result and the callback, not raised.

    Args:
        calendar_options: Raw or validated calendar options
        file_path: Explicit destination path
        callback: Called once as ``callback(error, None)`` on failure or
            ``callback(None, path)`` on success
        config: Configuration; loaded from the environment if None

    Returns:
        WriteResult with the written path or the write error
    """
    config = config or CalendarConfig.from_env()
    calendar = OptionsValidator(config).validate_calendar_options(
        calendar_options, file_path
    )
    content = get_calendar(calendar, config)
    result = ICSWriter().write(content, calendar.file_path)

    if callback is not None:
        callback(result.error, result.path)
    return result


def load_calendar_options(
    calendar_options: Any = None,
    file_path: str | Path | None = None,
    config: CalendarConfig | None = None,
) -> CalendarOptions:
    """Validate options without rendering, e.g. to inspect the resolved path."""
    config = config or CalendarConfig.from_env()
    return OptionsValidator(config).validate_calendar_options(calendar_options, file_path)
