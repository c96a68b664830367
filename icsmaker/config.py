"""Configuration for ics-maker."""

import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field
from tzlocal import get_localzone_name

from icsmaker.constants import (
    DEFAULT_ATTENDEE_RSVP,
    DEFAULT_EVENT_NAME,
    DEFAULT_FILE_NAME,
    FALLBACK_TIMEZONE,
)

logger = logging.getLogger(__name__)

LINE_BREAKS = {
    "lf": "\n",
    "crlf": "\r\n",
    "native": os.linesep,
}


def guess_timezone() -> str:
    """Return the host's IANA timezone name, or UTC if it cannot be detected."""
    try:
        name = get_localzone_name()
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        logger.warning(f"Could not detect host timezone ({e}), using {FALLBACK_TIMEZONE}")
        return FALLBACK_TIMEZONE
    return name or FALLBACK_TIMEZONE


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class CalendarConfig(BaseModel):
    """Calendar configuration with Pydantic validation.

    Built once and handed to the validator, formatter and writer so none of
    them read process state (clock, host timezone, line separator) directly.
    """

    model_config = ConfigDict(frozen=True)

    # Output
    output_dir: Path = Field(default_factory=lambda: Path(tempfile.gettempdir()))
    default_file_name: str = Field(default=DEFAULT_FILE_NAME)
    line_break: str = Field(default=os.linesep)

    # Event defaults
    default_event_name: str = Field(default=DEFAULT_EVENT_NAME)
    default_attendee_rsvp: bool = Field(default=DEFAULT_ATTENDEE_RSVP)
    time_zone: str = Field(default_factory=guess_timezone)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="ics_maker.log")

    clock: Callable[[], datetime] = Field(default=utc_now, exclude=True, repr=False)

    @classmethod
    def from_env(cls) -> "CalendarConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Output
        if "ICS_OUTPUT_DIR" in os.environ:
            config_dict["output_dir"] = Path(os.environ["ICS_OUTPUT_DIR"])
        if "ICS_DEFAULT_FILENAME" in os.environ:
            config_dict["default_file_name"] = os.environ["ICS_DEFAULT_FILENAME"]
        if "ICS_LINE_BREAK" in os.environ:
            line_break = LINE_BREAKS.get(os.environ["ICS_LINE_BREAK"].lower())
            if line_break is not None:
                config_dict["line_break"] = line_break
            else:
                logger.warning(
                    f"Ignoring unknown ICS_LINE_BREAK={os.environ['ICS_LINE_BREAK']!r}"
                )

        # Event defaults
        if "ICS_DEFAULT_EVENT_NAME" in os.environ:
            config_dict["default_event_name"] = os.environ["ICS_DEFAULT_EVENT_NAME"]
        if "ICS_TIMEZONE" in os.environ:
            name = os.environ["ICS_TIMEZONE"]
            try:
                ZoneInfo(name)
                config_dict["time_zone"] = name
            except (ZoneInfoNotFoundError, ValueError, OSError):
                logger.warning(f"Ignoring unknown ICS_TIMEZONE={name!r}")

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        return cls(**config_dict)
