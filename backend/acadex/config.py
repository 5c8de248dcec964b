"""
Acadex Backend — Application Configuration
============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the service layer, middleware and the app factory.
When:  Loaded once at module import time; validated before app starts.

Note:
    The routine parser and calendar projector do not import this module.
    Defaults such as the placeholder class times are passed in by
    RoutineService, keeping the core free of global state.
"""

import re
from typing import List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development.
    Attributes are grouped by concern for readability.
    """

    # ── Routine Parsing ───────────────────────────────────────────────────
    # What: Time-of-day assigned to every parsed class
    # Why fixed: OCR'd routines carry no reliable time column yet; the user
    # drags events into place in the calendar widget
    routine_default_start: str = Field(default="08:00")
    routine_default_end: str = Field(default="09:30")

    # What: Upper bound on the OCR text accepted per request (characters)
    # Why: A full-page routine is a few KB; anything far larger is not a routine
    max_text_length: int = Field(default=100_000, ge=1_000, le=1_000_000)

    # ── Calendar Projection ───────────────────────────────────────────────
    # What: IANA timezone used to read "now" when a request gives no reference
    # Why: The week anchor (last Sunday midnight) depends on the local date
    calendar_timezone: str = Field(default="UTC")

    @field_validator("calendar_timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Ensures the calendar timezone resolves to an IANA zone at load time."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            raise ValueError(f"Invalid calendar_timezone '{v}'. Expected an IANA timezone name")
        return v

    @field_validator("routine_default_start", "routine_default_end")
    @classmethod
    def validate_hhmm(cls, v: str) -> str:
        """Ensures default class times are 24-hour HH:MM strings."""
        if not _HHMM.match(v):
            raise ValueError(f"Invalid time '{v}'. Expected 24-hour HH:MM")
        return v

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (parsed by property below)
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Rate Limiting ─────────────────────────────────────────────────────
    # What: Per-IP sliding window rate limit
    rate_limit_requests: int = Field(default=100, ge=10, le=10000)
    rate_limit_window: int = Field(default=3600, ge=60, le=86400)  # seconds

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    def validate_required_for_production(self) -> None:
        """
        What:  Cross-field checks that single-field validators cannot express.
        When:  Called during app startup (lifespan).
        How:   Collects every problem and raises one ValueError listing them.
        """
        errors = []
        # HH:MM strings compare correctly as text
        if self.routine_default_start >= self.routine_default_end:
            errors.append(
                "ROUTINE_DEFAULT_START must be earlier than ROUTINE_DEFAULT_END "
                f"(got {self.routine_default_start} / {self.routine_default_end})"
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


settings = Settings()
