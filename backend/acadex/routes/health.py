"""
Acadex Backend — Health Check Route
=====================================

What:  Health check endpoint for monitoring and load balancer checks.
How:   The routine backend has no database or upstream API, so the check
       reports process liveness plus whether configuration validated.

Status levels:
    - healthy:   Configuration valid (HTTP 200)
    - degraded:  Configuration problem, e.g. default start not before end (HTTP 200)
"""

import logging
import time

from fastapi import APIRouter

from acadex import __version__
from acadex.config import settings
from acadex.schemas.routine import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    status = "healthy"
    try:
        settings.validate_required_for_production()
    except ValueError as e:
        status = "degraded"
        logger.warning("Health check: %s", str(e))

    return HealthResponse(
        status=status,
        version=__version__,
        timezone=settings.calendar_timezone,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
