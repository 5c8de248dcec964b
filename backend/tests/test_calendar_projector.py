"""
Acadex Backend — Calendar Projector Unit Tests
================================================

What:  Tests for week anchoring and RoutineEvent → CalendarEvent projection.
How:   Every test injects a fixed reference instant; nothing reads the clock.
"""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from acadex.schemas.routine import RoutineEvent, Weekday
from acadex.services.calendar_projector import (
    end_of_week,
    start_of_week,
    to_calendar_events,
)


def make_event(day: Weekday, **overrides) -> RoutineEvent:
    fields = {
        "id": f"id-{day.value.lower()}",
        "title": "CSE4520",
        "day": day,
        "start": "08:00",
        "end": "09:30",
        "confidence": 1.0,
        "raw": "CSE4520 Data Structures",
    }
    fields.update(overrides)
    return RoutineEvent(**fields)


class TestWeekAnchor:

    @pytest.mark.parametrize(
        "reference",
        [
            datetime(2024, 1, 14, 0, 0),       # Sunday midnight itself
            datetime(2024, 1, 14, 15, 0),      # Sunday afternoon
            datetime(2024, 1, 17, 10, 30),     # Wednesday
            datetime(2024, 1, 20, 23, 59, 59), # Saturday, last second
        ],
    )
    def test_start_of_week_is_previous_sunday(self, reference):
        assert start_of_week(reference) == datetime(2024, 1, 14)

    def test_start_of_week_across_month_boundary(self):
        assert start_of_week(datetime(2024, 3, 1, 9)) == datetime(2024, 2, 25)

    def test_end_of_week_is_next_sunday(self, reference_wednesday):
        assert end_of_week(reference_wednesday) == datetime(2024, 1, 21)

    def test_aware_reference_keeps_local_date(self):
        dhaka = ZoneInfo("Asia/Dhaka")
        reference = datetime(2024, 1, 14, 0, 30, tzinfo=dhaka)  # Sat 18:30 in UTC

        week_start = start_of_week(reference)

        assert week_start == datetime(2024, 1, 14, tzinfo=dhaka)
        assert week_start.tzinfo is dhaka


class TestToCalendarEvents:

    def test_empty(self, reference_wednesday):
        assert to_calendar_events([], reference_wednesday) == []

    def test_wednesday_lands_three_days_after_sunday(self, reference_wednesday):
        [event] = to_calendar_events([make_event(Weekday.WEDNESDAY)], reference_wednesday)

        expected_date = (start_of_week(reference_wednesday) + timedelta(days=3)).date()
        assert expected_date.isoformat() == "2024-01-17"
        assert event.start == "2024-01-17T08:00:00"
        assert event.end == "2024-01-17T09:30:00"

    @pytest.mark.parametrize(
        "day, date",
        [
            (Weekday.SUNDAY, "2024-01-14"),
            (Weekday.MONDAY, "2024-01-15"),
            (Weekday.FRIDAY, "2024-01-19"),
            (Weekday.SATURDAY, "2024-01-20"),
        ],
    )
    def test_every_day_maps_into_the_week(self, day, date, reference_wednesday):
        [event] = to_calendar_events([make_event(day)], reference_wednesday)
        assert event.start.startswith(date)

    def test_fields_pass_through(self, reference_wednesday):
        source = make_event(Weekday.MONDAY, confidence=0.7)

        [event] = to_calendar_events([source], reference_wednesday)

        assert event.id == source.id
        assert event.title == "CSE4520"
        assert event.extended_props.confidence == 0.7
        assert event.extended_props.raw == "CSE4520 Data Structures"
        assert event.extended_props.location is None
        assert event.extended_props.day == Weekday.MONDAY

    def test_location_appended_to_title(self, reference_wednesday):
        source = make_event(Weekday.MONDAY, location="Room 301")

        [event] = to_calendar_events([source], reference_wednesday)

        assert event.title == "CSE4520 (Room 301)"
        assert event.extended_props.location == "Room 301"

    def test_overlapping_events_preserved_in_order(self, reference_wednesday):
        events = [
            make_event(Weekday.TUESDAY, id="a", title="CSE1001"),
            make_event(Weekday.TUESDAY, id="b", title="CSE1002"),
            make_event(Weekday.MONDAY, id="c", title="MATH2101"),
        ]

        projected = to_calendar_events(events, reference_wednesday)

        assert [e.id for e in projected] == ["a", "b", "c"]
        assert projected[0].start == projected[1].start

    def test_serializes_with_widget_keys(self, reference_wednesday):
        [event] = to_calendar_events([make_event(Weekday.MONDAY)], reference_wednesday)

        data = event.model_dump(by_alias=True, mode="json")

        assert set(data) == {"id", "title", "start", "end", "extendedProps"}
        assert data["extendedProps"]["day"] == "Monday"

    def test_same_reference_is_deterministic(self, reference_wednesday):
        events = [make_event(Weekday.THURSDAY)]
        assert to_calendar_events(events, reference_wednesday) == to_calendar_events(
            events, reference_wednesday
        )
