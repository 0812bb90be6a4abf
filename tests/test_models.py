from __future__ import annotations

from datetime import datetime, timezone

import pytest

from shared_time.domain import CalendarEvent


def test_from_store_record():
    record = {
        "id": "9b1c",
        "user_id": "party-1",
        "title": "Dentist",
        "start_time": "2026-10-19T09:00:00Z",
        "end_time": "2026-10-19T10:00:00+00:00",
    }
    parsed = CalendarEvent.from_record(record)

    assert parsed.start == datetime(2026, 10, 19, 9, tzinfo=timezone.utc)
    assert parsed.end == datetime(2026, 10, 19, 10, tzinfo=timezone.utc)
    assert parsed.user_id == "party-1"
    assert parsed.title == "Dentist"


def test_from_plain_record():
    start = datetime(2026, 10, 19, 9)
    parsed = CalendarEvent.from_record({"start": start, "end": "2026-10-19T09:30:00"})

    assert parsed.start is start
    assert parsed.end == datetime(2026, 10, 19, 9, 30)
    assert parsed.id is None


def test_unparseable_timestamp_is_rejected():
    with pytest.raises(ValueError):
        CalendarEvent.from_record({"start": "tomorrow", "end": "2026-10-19T09:30:00"})


def test_missing_bounds_are_rejected():
    with pytest.raises(KeyError):
        CalendarEvent.from_record({"start": "2026-10-19T09:00:00"})


def test_well_formed_flag():
    start = datetime(2026, 10, 19, 9)
    assert CalendarEvent(start, datetime(2026, 10, 19, 10)).is_well_formed
    assert not CalendarEvent(start, start).is_well_formed
