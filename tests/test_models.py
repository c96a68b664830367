"""Tests for raw and canonical models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from icsmaker.models import (
    Attendee,
    CalendarOptions,
    EventOptions,
    Person,
    RawCalendarOptions,
    RawEventOptions,
    RawPerson,
)


def test_raw_person_is_complete():
    """RawPerson reports completeness only with both name and email."""
    assert RawPerson(name="Ann", email="ann@example.com").is_complete
    assert not RawPerson(name="Ann").is_complete
    assert not RawPerson(name="", email="ann@example.com").is_complete


def test_raw_person_rsvp_truthiness():
    """Non-string RSVP values count by truthiness."""
    assert RawPerson.model_validate({"rsvp": 1}).rsvp is True
    assert RawPerson.model_validate({"rsvp": 0}).rsvp is False
    assert RawPerson.model_validate({}).rsvp is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("false", False),
        ("False", False),
        ("0", False),
        ("no", False),
        (" ", False),
        ("true", True),
        ("TRUE", True),
        ("1", True),
        ("yes", True),
        ("maybe", True),
    ],
)
def test_raw_person_rsvp_string_values(value, expected):
    """Yes/no strings are read by meaning, not by being non-empty."""
    assert RawPerson.model_validate({"rsvp": value}).rsvp is expected


def test_raw_person_numeric_name_becomes_text():
    """Numbers in text fields are converted to strings."""
    assert RawPerson.model_validate({"name": 42}).name == "42"


def test_raw_event_options_aliases():
    """Input names and snake_case names are both accepted."""
    assert RawEventOptions.model_validate({"eventName": "A"}).event_name == "A"
    assert RawEventOptions.model_validate({"event_name": "B"}).event_name == "B"


def test_raw_event_options_ignores_unknown_keys():
    """Unknown keys are dropped."""
    options = RawEventOptions.model_validate({"eventName": "A", "color": "red"})
    assert not hasattr(options, "color")


def test_raw_event_options_keeps_datetime():
    """datetime values pass through unchanged."""
    when = datetime(2025, 1, 1, 12, 0)
    assert RawEventOptions(dtstart=when).dtstart == when


def test_raw_calendar_options_marker_and_alias():
    """timeZone and isValid use the input names."""
    options = RawCalendarOptions.model_validate({"timeZone": "UTC", "isValid": 1})
    assert options.time_zone == "UTC"
    assert options.is_valid is True


def test_raw_calendar_options_events_missing_vs_empty():
    """Missing events stay None; an empty list stays empty."""
    assert RawCalendarOptions.model_validate({}).events is None
    assert RawCalendarOptions.model_validate({"events": []}).events == []


def test_person_requires_non_empty_fields():
    """Canonical Person rejects empty values."""
    with pytest.raises(ValidationError):
        Person(name="", email="a@x.com")


def test_attendee_rsvp_default():
    """Attendee RSVP defaults to False."""
    assert Attendee(name="A", email="a@x.com").rsvp is False


def test_canonical_models_are_frozen():
    """Canonical models cannot be modified after validation."""
    event = EventOptions(
        dtstamp="20250101T000000",
        dtstart="20250101T000000",
        dtend="20250101T010000",
        summary="A",
    )
    with pytest.raises(ValidationError):
        event.summary = "B"


def test_calendar_options_dump_uses_input_names():
    """Dumping by alias gives the input names and the isValid marker."""
    calendar = CalendarOptions(file_path="/tmp/a.ics", time_zone="UTC")
    data = calendar.model_dump(by_alias=True)
    assert set(data) == {"filePath", "timeZone", "events", "isValid"}
    assert data["isValid"] is True
    assert calendar.event_count == 0
