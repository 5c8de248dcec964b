"""
Acadex Backend — Routine Route Handlers
=========================================

What:  HTTP endpoints for turning OCR'd routines into calendar events.
How:   Thin handlers; RoutineService does the work.
Who:   Called by the frontend schedule page.

Endpoints:
    POST /api/routine/ingest         OCR text → routine events (+ calendar)
    POST /api/routine/calendar       routine events → calendar events
    POST /api/routine/events/remove  drop one event by id

The API keeps no state. The frontend holds the event list and sends it
back whenever it needs a fresh projection.
"""

import logging

from fastapi import APIRouter

from acadex.schemas.routine import (
    CalendarRequest,
    CalendarResponse,
    ErrorResponse,
    IngestRequest,
    IngestResponse,
    RemoveEventRequest,
    RoutineEventList,
)
from acadex.services.routine_service import routine_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/routine", tags=["Routine"])


@router.post(
    "/ingest",
    status_code=201,
    response_model=IngestResponse,
    responses={
        400: {"description": "OCR text too long", "model": ErrorResponse},
        429: {"description": "Rate limit exceeded", "model": ErrorResponse},
    },
    summary="Parse OCR text of a class routine",
    description=(
        "Send the raw OCR output of a routine image. Returns one event per course "
        "code found under a Mon-Fri day header, plus their projection onto the "
        "current calendar week unless include_calendar is false."
    ),
)
async def ingest_routine(body: IngestRequest) -> IngestResponse:
    logger.info("Received routine ingest request: %d chars", len(body.text))
    return routine_service.ingest_text(
        body.text,
        reference=body.reference,
        include_calendar=body.include_calendar,
    )


@router.post(
    "/calendar",
    response_model=CalendarResponse,
    summary="Project routine events onto the current week",
)
async def project_calendar(body: CalendarRequest) -> CalendarResponse:
    return routine_service.project(body.events, reference=body.reference)


@router.post(
    "/events/remove",
    response_model=RoutineEventList,
    summary="Remove an event from a routine list",
)
async def remove_routine_event(body: RemoveEventRequest) -> RoutineEventList:
    return RoutineEventList(
        routine_events=routine_service.remove_event(body.events, body.event_id)
    )
