"""
Acadex Backend — Calendar Projector
=====================================

What:  Pins weekly RoutineEvents to concrete dates in one calendar week.
Why:   Calendar widgets work with absolute timestamps; a routine only says
       "Monday 08:00". The projection shows the routine as the current week.
How:   Anchor at the Sunday midnight on or before `reference`, offset each
       event by its weekday index, and glue the date to its HH:MM times.

Week Layout (Sunday-first, matching the widget's timeGridWeek view):
    Sunday=0  Monday=1  Tuesday=2  Wednesday=3  Thursday=4  Friday=5  Saturday=6

Timezone handling:
    `reference` is the caller's "now". Dates are taken from its own wall
    clock, never converted to UTC, so a naive reference stays naive and an
    aware one keeps its tzinfo. Output timestamps carry no offset; the
    widget reads them as local time.

This module is pure; the clock is always injected.
"""

from datetime import datetime, timedelta
from typing import Iterable, List

from acadex.schemas.routine import (
    CalendarEvent,
    CalendarEventProps,
    RoutineEvent,
    Weekday,
)

DAY_INDEX = {
    Weekday.SUNDAY: 0,
    Weekday.MONDAY: 1,
    Weekday.TUESDAY: 2,
    Weekday.WEDNESDAY: 3,
    Weekday.THURSDAY: 4,
    Weekday.FRIDAY: 5,
    Weekday.SATURDAY: 6,
}


def start_of_week(reference: datetime) -> datetime:
    """Midnight of the most recent Sunday on or before `reference`."""
    # datetime.weekday() counts Monday=0 .. Sunday=6
    days_since_sunday = (reference.weekday() + 1) % 7
    midnight = reference.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=days_since_sunday)


def end_of_week(reference: datetime) -> datetime:
    """Exclusive upper bound of the week containing `reference`."""
    return start_of_week(reference) + timedelta(days=7)


def to_calendar_event(event: RoutineEvent, week_start: datetime) -> CalendarEvent:
    date = (week_start + timedelta(days=DAY_INDEX[event.day])).date().isoformat()
    title = f"{event.title} ({event.location})" if event.location else event.title

    return CalendarEvent(
        id=event.id,
        title=title,
        start=f"{date}T{event.start}:00",
        end=f"{date}T{event.end}:00",
        extended_props=CalendarEventProps(
            confidence=event.confidence,
            raw=event.raw,
            location=event.location,
            day=event.day,
        ),
    )


def to_calendar_events(
    events: Iterable[RoutineEvent], reference: datetime
) -> List[CalendarEvent]:
    """
    Project routine events onto the week containing `reference`.

    One CalendarEvent per input event, in input order. Overlapping events
    are kept as-is; nothing is merged or sorted.
    """
    week_start = start_of_week(reference)
    return [to_calendar_event(event, week_start) for event in events]
