"""
Acadex Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Inventory:
    ├── reference_wednesday: Fixed "now" (Wed 2024-01-17 10:30, week of Sun 2024-01-14)
    ├── routine_text: Realistic OCR output of a printed routine
    ├── sample_event: One parsed RoutineEvent
    └── test_client: HTTPX AsyncClient bound to the FastAPI app
"""

import os
from datetime import datetime

# Override settings BEFORE any application import reads them
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CALENDAR_TIMEZONE"] = "UTC"
os.environ["RATE_LIMIT_REQUESTS"] = "10000"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from acadex.schemas.routine import RoutineEvent, Weekday


@pytest.fixture
def reference_wednesday():
    """A fixed instant; its week starts on Sunday 2024-01-14."""
    return datetime(2024, 1, 17, 10, 30)


@pytest.fixture
def routine_text():
    """
    OCR output as Tesseract returns it for a printed routine: noise glyphs,
    a teacher legend line, day headers on their own lines and inline.
    """
    return (
        "CLASS ROUTINE — SPRING\n"
        "Teachers: Dr. Rahman (CSE4520), Dr. Akter\n"
        "~~\n"
        "Mon\n"
        "CSE4520 Data Structures   Room 301\n"
        "MATH 2101 Linear Algebra\n"
        "Tue\n"
        "CSE1001 Intro and CSE1002 Lab\n"
        "Wed © lab day, no lectures\n"
        "Fri CSE3300 Operating Systems\n"
    )


@pytest.fixture
def sample_event():
    return RoutineEvent(
        id="abc1234",
        title="CSE4520",
        day=Weekday.WEDNESDAY,
        start="08:00",
        end="09:30",
        confidence=1.0,
        raw="CSE4520 Data Structures",
    )


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from acadex.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
