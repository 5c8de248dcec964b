"""
Acadex Backend — Routine & Calendar Schemas
=============================================

What:  Pydantic models for parsed routine events, their calendar projection,
       and the request/response bodies of the routine API.
Why:   One set of models serves the pure core (return types), the service
       layer and FastAPI's validation/OpenAPI generation.

Two event shapes:
    RoutineEvent  — weekly, date-less: "CSE4520 on Monday 08:00-09:30"
    CalendarEvent — absolute, widget-ready: "2024-01-15T08:00:00"

CalendarEvent serializes `extended_props` as `extendedProps`, the key
calendar widgets read side-channel data from. FastAPI serializes responses
by alias, so the wire format matches without touching Python naming.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Weekday(str, Enum):
    """The seven weekday names; a semantic day, not a date."""

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


# ══════════════════════════════════════════════════════════════════════════
# Domain Models
# ══════════════════════════════════════════════════════════════════════════


class RoutineEvent(BaseModel):
    """
    What:  One class occurrence extracted from a routine, repeating weekly.
    Who:   Produced by parse_routine(); consumed by the projector and the UI.

    `start`/`end` are not checked against each other. `raw` keeps the source
    line so users can see why an event was detected.
    """
    id: str = Field(description="Opaque short token, unique within one parse result")
    title: str = Field(description="Course label as matched, e.g. CSE4520")
    day: Weekday = Field(description="Day of the week the class repeats on")
    start: str = Field(description="Start time of day, 24-hour HH:MM")
    end: str = Field(description="End time of day, 24-hour HH:MM")
    location: Optional[str] = Field(default=None, description="Room or building, if known")
    confidence: float = Field(ge=0.0, le=1.0, description="Heuristic quality score")
    raw: Optional[str] = Field(default=None, description="OCR line the event came from")


class CalendarEventProps(BaseModel):
    """Side-channel data shown by the calendar widget on hover/debug."""
    confidence: float
    raw: Optional[str] = None
    location: Optional[str] = None
    day: Weekday


class CalendarEvent(BaseModel):
    """
    What:  A RoutineEvent pinned to a date in the current calendar week.
    Format: start/end are local timestamps without offset, YYYY-MM-DDTHH:MM:SS
    """
    id: str
    title: str
    start: str
    end: str
    extended_props: CalendarEventProps = Field(alias="extendedProps")

    model_config = {"populate_by_name": True}


class WeekRange(BaseModel):
    """Visible range for the calendar widget: [start, end) of the anchored week."""
    start: datetime = Field(description="Sunday 00:00 of the anchored week")
    end: datetime = Field(description="Following Sunday 00:00 (exclusive)")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class IngestRequest(BaseModel):
    """
    What:  Raw OCR output of a routine image.
    Who:   Sent by the frontend after its OCR step finishes.
    """
    text: str = Field(description="Newline-delimited OCR text")
    reference: Optional[datetime] = Field(
        default=None,
        description="Instant whose week the calendar is anchored to (defaults to now)",
    )
    include_calendar: bool = Field(
        default=True,
        description="Also return the calendar projection of the parsed events",
    )


class CalendarRequest(BaseModel):
    """Re-project an edited event list, e.g. after the user deleted a row."""
    events: List[RoutineEvent] = Field(default_factory=list)
    reference: Optional[datetime] = Field(default=None)


class RemoveEventRequest(BaseModel):
    events: List[RoutineEvent] = Field(default_factory=list)
    event_id: str = Field(description="Id of the event to drop")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class CalendarResponse(BaseModel):
    calendar_events: List[CalendarEvent]
    week: WeekRange


class IngestResponse(BaseModel):
    """
    What:  Result of parsing one routine.
    Why echo ocr_text: The UI shows it in a debug panel next to the calendar.
    """
    success: bool = Field(default=True)
    ocr_text: str = Field(description="The text that was parsed, unmodified")
    routine_events: List[RoutineEvent]
    calendar_events: Optional[List[CalendarEvent]] = Field(default=None)
    week: Optional[WeekRange] = Field(default=None)


class RoutineEventList(BaseModel):
    routine_events: List[RoutineEvent]


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "OCR text is too long (250000 characters, max 100000)",
            "details": {"field": "text", "max_length": 100000},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    timezone: str = Field(description="Timezone used to anchor calendar weeks")
    uptime_seconds: float = Field(description="Seconds since service started")
