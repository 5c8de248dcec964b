"""
Acadex Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the HTTP boundary.
Why:   The routine parser and calendar projector are total and never raise;
       the only failures are request-level ones (oversized text, abuse).
How:   Each exception carries a message and optional context dict.
       ValidationError is mapped by a handler in main.py; RateLimitMiddleware
       renders RateLimitExceededError itself, since it fires before routing.

Exception Hierarchy:
    AcadexError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    └── RateLimitExceededError   → 429 Too Many Requests
"""

from typing import Any, Dict, Optional


class AcadexError(Exception):
    """
    Base exception for all Acadex application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info returned as `details`
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(AcadexError):
    """
    Raised when client input fails a business rule.

    When:    OCR text longer than the configured limit.
    HTTP:    400 Bad Request

    Schema-level problems (wrong types, unknown weekday) are rejected by
    FastAPI with 422 before reaching the service layer.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class RateLimitExceededError(AcadexError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests, with a Retry-After header.
             Built and rendered by RateLimitMiddleware._reject.
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
