"""Tests for get_calendar / create_calendar."""

from pathlib import Path

import pytest
from icalendar import Calendar as ICalendar

from icsmaker.calendar_builder import create_calendar, get_calendar, load_calendar_options
from icsmaker.exceptions import ExportError


def test_get_calendar_defaults(config):
    """Empty options render one event with every default."""
    text = get_calendar({}, config)
    lines = text.split("\n")

    assert lines[0] == "BEGIN:VCALENDAR"
    assert lines[-1] == "END:VCALENDAR"
    assert text.count("BEGIN:VEVENT") == 1
    assert "SUMMARY:New Event" in lines
    assert "DESCRIPTION:" in lines
    assert "DTSTAMP;TZID=UTC:20250115T093000" in lines
    assert "DTSTART;TZID=UTC:20250115T093000" in lines
    assert "DTEND;TZID=UTC:20250115T103000" in lines
    assert not any(line.startswith(("LOCATION", "ORGANIZER", "ATTENDEE")) for line in lines)


def test_get_calendar_explicit_empty_events(config):
    """events=[] gives no event blocks, unlike a missing events list."""
    assert "BEGIN:VEVENT" not in get_calendar({"events": []}, config)
    assert get_calendar({}, config).count("BEGIN:VEVENT") == 1


def test_get_calendar_attendee_filtering(config):
    """Only complete attendees produce ATTENDEE lines."""
    text = get_calendar(
        {
            "events": [
                {"attendees": [{"name": "A", "email": "a@x.com"}, {"name": "B"}]}
            ]
        },
        config,
    )
    attendee_lines = [line for line in text.split("\n") if line.startswith("ATTENDEE")]
    assert attendee_lines == ['ATTENDEE;CN="A";RSVP=false:MAILTO:a@x.com']


def test_get_calendar_deterministic_for_validated_input(config):
    """Pre-validated input renders byte-identically on every call."""
    calendar = load_calendar_options({"events": [{"eventName": "Standup"}]}, config=config)
    assert get_calendar(calendar, config) == get_calendar(calendar, config)


def test_get_calendar_does_not_write(config):
    """get_calendar never touches the filesystem."""
    get_calendar({"filename": "nothing"}, config)
    assert not (config.output_dir / "nothing.ics").exists()


def test_get_calendar_parses_as_icalendar(config):
    """The output is readable by a standard iCalendar parser."""
    text = get_calendar(
        {
            "events": [
                {
                    "eventName": "Review",
                    "dtstart": "2025-02-03T15:00:00Z",
                    "dtend": "2025-02-03T16:00:00Z",
                    "location": "Room 2",
                    "organizer": {"name": "Ann", "email": "ann@example.com"},
                    "attendees": [{"name": "Bob", "email": "bob@example.com"}],
                }
            ]
        },
        config,
    )

    cal = ICalendar.from_ical(text)
    events = list(cal.walk("VEVENT"))
    assert len(events) == 1
    assert str(events[0]["summary"]) == "Review"
    assert str(events[0]["location"]) == "Room 2"


def test_create_calendar_writes_default_path(config):
    """Without a path the file lands in the output directory."""
    result = create_calendar({"filename": "foo"}, config=config)

    assert result.ok
    assert result.path == str(config.output_dir / "foo.ics")
    content = Path(result.path).read_text(encoding="utf-8")
    assert content.startswith("BEGIN:VCALENDAR")


def test_create_calendar_explicit_path(config, tmp_path):
    """An explicit path overrides filename."""
    target = tmp_path / "sub.ics"
    result = create_calendar({"filename": "ignored"}, target, config=config)

    assert result.path == str(target)
    assert target.exists()
    assert not (config.output_dir / "ignored.ics").exists()


def test_create_calendar_callback_success(config):
    """The callback receives (None, path) on success."""
    calls = []
    result = create_calendar({}, callback=lambda err, path: calls.append((err, path)), config=config)

    assert calls == [(None, result.path)]


def test_create_calendar_unwritable_path(config, tmp_path):
    """An unwritable path is reported through the callback, not raised."""
    calls = []
    target = tmp_path / "missing-dir" / "cal.ics"

    result = create_calendar(
        {}, target, callback=lambda err, path: calls.append((err, path)), config=config
    )

    assert not result.ok
    assert isinstance(result.error, OSError)
    assert len(calls) == 1
    assert calls[0][0] is result.error
    assert calls[0][1] is None
    with pytest.raises(ExportError):
        result.unwrap()


def test_create_calendar_unencodable_description(config, tmp_path):
    """Text that cannot be encoded reaches the callback instead of raising."""
    calls = []
    target = tmp_path / "bad.ics"

    result = create_calendar(
        {"events": [{"description": "bad \ud800"}]},
        target,
        callback=lambda err, path: calls.append((err, path)),
        config=config,
    )

    assert len(calls) == 1
    assert isinstance(calls[0][0], UnicodeEncodeError)
    assert calls[0][1] is None
    assert result.error is calls[0][0]
    assert not target.exists()


def test_get_calendar_rsvp_false_string(config):
    """An RSVP of "false" renders as RSVP=false."""
    content = get_calendar(
        {"events": [{"attendees": [{"name": "A", "email": "a@x", "rsvp": "false"}]}]},
        config,
    )
    assert 'ATTENDEE;CN="A";RSVP=false:MAILTO:a@x' in content


def test_get_calendar_unloadable_timezone(config):
    """A timezone name the zone database cannot open renders in the default zone."""
    content = get_calendar({"timeZone": "America"}, config)
    assert "DTSTART;TZID=UTC:20250115T093000" in content


def test_create_calendar_preserves_line_breaks(config, tmp_path):
    """The configured line separator is written without translation."""
    crlf_config = config.model_copy(update={"line_break": "\r\n"})
    target = tmp_path / "crlf.ics"

    create_calendar({}, target, config=crlf_config)

    data = target.read_bytes()
    assert data.startswith(b"BEGIN:VCALENDAR\r\nVERSION:2.0\r\n")
    assert b"\r\r\n" not in data
