"""
Acadex Backend — Routine Service (Business Logic Orchestrator)
================================================================

What:  Glues the pure routine parser and calendar projector to the HTTP layer.
Why:   The core functions take every input explicitly; something has to
       supply configured defaults, enforce request limits and read the clock.
How:   Stateless methods that validate, call the core, and build responses.
Who:   Called by route handlers in routes/routine.py.

Orchestration Flow (POST /api/routine/ingest):
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐    ┌──────────────┐
    │ OCR text │───▶│  Validate   │───▶│ parse_routine│───▶│  to_calendar │
    │ (Route)  │    │  (length)   │    │  (defaults)  │    │  _events(now)│
    └──────────┘    └─────────────┘    └──────────────┘    └──────────────┘
"""

import logging
from datetime import datetime
from typing import List, Optional
from zoneinfo import ZoneInfo

from acadex.config import settings
from acadex.exceptions import ValidationError
from acadex.schemas.routine import (
    CalendarResponse,
    IngestResponse,
    RoutineEvent,
    WeekRange,
)
from acadex.services.calendar_projector import (
    end_of_week,
    start_of_week,
    to_calendar_events,
)
from acadex.services.routine_parser import parse_routine

logger = logging.getLogger(__name__)


class RoutineService:
    """
    Business logic layer for routine operations.

    Responsibilities:
        - ingest_text(): OCR text → routine events (+ calendar projection)
        - project(): routine events → calendar events for the current week
        - remove_event(): drop one event by id from a list
        - now(): wall clock in the configured calendar timezone
    """

    def now(self) -> datetime:
        """Current instant in `settings.calendar_timezone`."""
        return datetime.now(ZoneInfo(settings.calendar_timezone))

    def week_range(self, reference: datetime) -> WeekRange:
        return WeekRange(start=start_of_week(reference), end=end_of_week(reference))

    def ingest_text(
        self,
        text: str,
        reference: Optional[datetime] = None,
        include_calendar: bool = True,
    ) -> IngestResponse:
        """
        Parse OCR text into routine events.

        Args:
            text: Raw OCR output
            reference: Instant anchoring the calendar week (defaults to now())
            include_calendar: Also project events onto the calendar week

        Returns:
            IngestResponse echoing the text with the parsed events

        Raises:
            ValidationError: Text exceeds settings.max_text_length
        """
        if len(text) > settings.max_text_length:
            raise ValidationError(
                message=(
                    f"OCR text is too long ({len(text)} characters, "
                    f"max {settings.max_text_length})"
                ),
                field="text",
                context={"max_length": settings.max_text_length},
            )

        events = parse_routine(
            text,
            default_start=settings.routine_default_start,
            default_end=settings.routine_default_end,
        )
        logger.info(
            "Parsed routine: %d chars, %d lines → %d events",
            len(text),
            text.count("\n") + 1 if text else 0,
            len(events),
        )
        if text.strip() and not events:
            logger.debug("No day header followed by a course code was found")

        response = IngestResponse(ocr_text=text, routine_events=events)
        if include_calendar:
            projected = self.project(events, reference)
            response.calendar_events = projected.calendar_events
            response.week = projected.week
        return response

    def project(
        self,
        events: List[RoutineEvent],
        reference: Optional[datetime] = None,
    ) -> CalendarResponse:
        """
        Project `events` onto the week containing `reference` (or now).

        An aware `reference` is read in CALENDAR_TIMEZONE first, so the week
        follows the local date. A naive one is taken as local wall time.
        """
        if reference is None:
            reference = self.now()
        elif reference.tzinfo is not None:
            reference = reference.astimezone(ZoneInfo(settings.calendar_timezone))

        calendar_events = to_calendar_events(events, reference)
        logger.debug(
            "Projected %d events onto week of %s",
            len(calendar_events),
            start_of_week(reference).date().isoformat(),
        )
        return CalendarResponse(
            calendar_events=calendar_events,
            week=self.week_range(reference),
        )

    def remove_event(self, events: List[RoutineEvent], event_id: str) -> List[RoutineEvent]:
        """
        Return `events` without the ones whose id is `event_id`.

        Unknown ids leave the list unchanged; ids are only unique within
        a single parse, so every match is removed.
        """
        remaining = [event for event in events if event.id != event_id]
        if len(remaining) == len(events):
            logger.debug("remove_event: id %s not in list of %d", event_id, len(events))
        return remaining


routine_service = RoutineService()
