"""Normalize loosely specified calendar options into canonical models.

Validation is defaults-first: a missing or malformed optional field falls back
to its default (and is logged) instead of failing the calendar. The only
errors raised here are for input that is not a calendar options object at all.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime, timedelta, tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.parser import isoparse
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from icsmaker.config import CalendarConfig
from icsmaker.constants import (
    DTEND_OFFSET_HOURS,
    DTSTAMP_OFFSET_HOURS,
    DTSTART_OFFSET_HOURS,
    FALLBACK_TIMEZONE,
    ICAL_TIME_FORMAT,
    ICS_EXTENSION,
)
from icsmaker.exceptions import InvalidOptionsError
from icsmaker.models import (
    Attendee,
    CalendarOptions,
    EventOptions,
    Person,
    RawCalendarOptions,
    RawEventOptions,
    RawPerson,
)

logger = logging.getLogger(__name__)

Timestamp = str | datetime | None


def _as_mapping(raw: Any) -> Mapping | None:
    """Return raw input as a mapping, or None if it has no usable shape."""
    if isinstance(raw, Mapping):
        return raw
    if isinstance(raw, BaseModel):
        return raw.model_dump(by_alias=True)
    return None


class OptionsValidator:
    """Turns raw calendar/event options into canonical ``CalendarOptions``."""

    def __init__(self, config: CalendarConfig | None = None):
        self.config = config or CalendarConfig.from_env()

    # Timezones

    @staticmethod
    def _is_known(name: str) -> bool:
        try:
            ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            return False
        return True

    def default_timezone(self) -> str:
        """The configured timezone if it loads, else UTC."""
        if self._is_known(self.config.time_zone):
            return self.config.time_zone
        logger.warning(
            f"Configured timezone '{self.config.time_zone}' is unknown, using {FALLBACK_TIMEZONE}"
        )
        return FALLBACK_TIMEZONE

    def resolve_timezone(self, time_zone: str | None = None) -> str:
        """Return the explicit IANA name if it is known, else the default one."""
        if not time_zone:
            return self.default_timezone()
        if not self._is_known(time_zone):
            default = self.default_timezone()
            logger.warning(f"Unknown timezone '{time_zone[:64]}', using {default} instead")
            return default
        return time_zone

    def _zone(self, time_zone: str | None) -> tzinfo:
        return ZoneInfo(self.resolve_timezone(time_zone))

    # Field validators

    def _parse(self, raw: Timestamp) -> datetime | None:
        if isinstance(raw, datetime):
            return raw
        if not raw:
            return None
        try:
            return isoparse(raw)
        except (ValueError, OverflowError):
            logger.warning(f"Could not parse date '{raw}'")
            return None

    def validate_timestamp(
        self,
        raw: Timestamp,
        fallback_offset_hours: int = 0,
        time_zone: str | None = None,
    ) -> str:
        """Render a timestamp in canonical ``YYYYMMDDTHHMMSS`` form.

        Args:
            raw: ISO-8601 string (``2025-01-01T09:00:00+01:00``), datetime, or None
            fallback_offset_hours: Hours added to "now" when ``raw`` is missing,
                cannot be parsed, or falls outside the representable range
            time_zone: IANA name the result is expressed in (config default if None)

        Returns:
            Wall-clock time in ``time_zone`` without an offset suffix
        """
        zone = self._zone(time_zone)
        value = self._parse(raw)

        if value is not None:
            try:
                if value.tzinfo is None:
                    # Naive input is already wall time in the calendar's zone
                    return value.replace(tzinfo=zone).strftime(ICAL_TIME_FORMAT)
                return value.astimezone(zone).strftime(ICAL_TIME_FORMAT)
            except (OverflowError, ValueError):
                logger.warning(f"Date '{raw}' is out of range in {zone}")

        logger.debug(f"Using now + {fallback_offset_hours}h")
        now = self.config.clock().astimezone(zone)
        try:
            return (now + timedelta(hours=fallback_offset_hours)).strftime(ICAL_TIME_FORMAT)
        except OverflowError:
            return now.strftime(ICAL_TIME_FORMAT)

    def _raw_person(self, raw: Any) -> RawPerson | None:
        if isinstance(raw, RawPerson):
            return raw
        data = _as_mapping(raw)
        if data is None:
            return None
        try:
            return RawPerson.model_validate(data)
        except PydanticValidationError as e:
            logger.warning(f"Ignoring malformed person {data!r}: {e}")
            return None

    def validate_person(self, raw: Any) -> Person | None:
        """Return a Person if both name and email are present, else None."""
        person = self._raw_person(raw)
        if person is None or not person.is_complete:
            return None
        return Person(name=person.name, email=person.email)

    def validate_attendees(self, raw_list: Iterable[Any] | None) -> tuple[Attendee, ...]:
        """Keep complete attendees in their original order, defaulting RSVP."""
        attendees = []
        for raw in raw_list or ():
            person = self._raw_person(raw)
            if person is None or not person.is_complete:
                logger.debug(f"Dropping incomplete attendee {raw!r}")
                continue
            attendees.append(
                Attendee(
                    name=person.name,
                    email=person.email,
                    rsvp=person.rsvp or self.config.default_attendee_rsvp,
                )
            )
        return tuple(attendees)

    def validate_file_path(
        self, file_name: str | None = None, explicit_path: str | Path | None = None
    ) -> str:
        """Resolve the output path.

        An explicit path is used verbatim. Otherwise the file name (or the
        default one) gets an ``.ics`` suffix if missing and is placed in the
        output directory.
        """
        if explicit_path:
            return str(explicit_path)

        name = file_name or self.config.default_file_name
        if not name.endswith(ICS_EXTENSION):
            name = f"{name}{ICS_EXTENSION}"
        return str(self.config.output_dir / name)

    # Whole structures

    def validate_event_options(
        self, raw: Any = None, time_zone: str | None = None
    ) -> EventOptions:
        """Apply every per-event default and validate organizer and attendees."""
        if isinstance(raw, RawEventOptions):
            options = raw
        else:
            options = RawEventOptions.model_validate(_as_mapping(raw) or {})

        return EventOptions(
            dtstamp=self.validate_timestamp(options.dtstamp, DTSTAMP_OFFSET_HOURS, time_zone),
            dtstart=self.validate_timestamp(options.dtstart, DTSTART_OFFSET_HOURS, time_zone),
            dtend=self.validate_timestamp(options.dtend, DTEND_OFFSET_HOURS, time_zone),
            summary=options.event_name or self.config.default_event_name,
            description=options.description or "",
            location=options.location or None,
            organizer=self.validate_person(options.organizer),
            attendees=self.validate_attendees(options.attendees),
        )

    def validate_calendar_options(
        self, raw: Any = None, explicit_path: str | Path | None = None
    ) -> CalendarOptions:
        """Produce canonical calendar options.

        Args:
            raw: Mapping or ``RawCalendarOptions``; a ``CalendarOptions`` or a
                mapping carrying a true ``isValid`` marker is returned as-is
            explicit_path: Destination path overriding ``filename``

        Raises:
            InvalidOptionsError: If ``raw`` is not an options object, or is
                marked valid without having the canonical fields
        """
        if isinstance(raw, CalendarOptions):
            return raw
        if raw is None:
            raw = {}

        if isinstance(raw, RawCalendarOptions):
            options = raw
            if options.is_valid:
                raise InvalidOptionsError(
                    "RawCalendarOptions cannot be marked valid; pass CalendarOptions instead"
                )
        elif isinstance(raw, Mapping):
            if raw.get("isValid") or raw.get("is_valid"):
                return self._trust(raw)
            options = RawCalendarOptions.model_validate(raw)
        else:
            raise InvalidOptionsError(
                f"Calendar options must be a mapping, got {type(raw).__name__}"
            )

        time_zone = self.resolve_timezone(options.time_zone)
        if options.events is None:
            events = (self.validate_event_options({}, time_zone),)
        else:
            events = tuple(
                self.validate_event_options(event, time_zone) for event in options.events
            )

        calendar = CalendarOptions(
            file_path=self.validate_file_path(options.filename, explicit_path),
            time_zone=time_zone,
            events=events,
        )
        logger.debug(
            f"Validated calendar with {calendar.event_count} event(s) in {time_zone}"
            f" -> {calendar.file_path}"
        )
        return calendar

    def _trust(self, raw: Mapping) -> CalendarOptions:
        """Read a mapping marked pre-validated as canonical fields, no defaults applied."""
        try:
            return CalendarOptions.model_validate(raw)
        except PydanticValidationError as e:
            raise InvalidOptionsError(
                f"Options marked isValid are not canonical calendar options: {e}"
            ) from e
