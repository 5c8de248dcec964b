"""
Acadex Backend — Application Package Initializer
================================================

What: Marks the `acadex` directory as a Python package.
Why:  Enables module imports like `from acadex.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The routine backend follows the same layered shape as the rest of Acadex:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     RoutineService (Orchestration)  │  ← limits, defaults, wall clock
    ├─────────────────────────────────────┤
    │  Routine Parser │ Calendar Projector│  ← pure functions, no I/O
    ├─────────────────────────────────────┤
    │        Schemas (Pydantic models)    │  ← RoutineEvent, CalendarEvent
    └─────────────────────────────────────┘

    The parser and projector never touch configuration, the clock or the
    network. Everything impure is supplied by the service layer, so the two
    core functions can be tested with plain strings and fixed datetimes.
"""

__version__ = "1.0.0"
