"""
Acadex Backend — Routine Parser
=================================

What:  Turns raw OCR text of a class routine into RoutineEvent records.
Why:   Students photograph their printed routine; the OCR engine hands back
       noisy, line-oriented text that has to become weekly calendar entries.
How:   Clean the text, then scan it line by line remembering the last day
       header seen. Every course code found while a day is active becomes
       one event.
Who:   Called by RoutineService for POST /api/routine/ingest.

Scan Model:
    Routines are printed as a day header followed by that day's classes:

        Mon                          ← current_day = Monday
        CSE4520 Data Structures      ← event (Monday, CSE4520)
        Room 301 lab session         ← no course code, nothing emitted
        Tue                          ← current_day = Tuesday
        CSE1001 and MATH2101         ← two events (Tuesday)

    The day persists until the next header. Lines with course codes that
    appear before any header produce nothing. Only Mon-Fri abbreviations
    are recognized as headers.

Known Limitations:
    - Every event gets the same placeholder time (08:00-09:30 by default).
      No time column is read from the text.
    - Confidence is additive over signals that are always present when an
      event is emitted, so every event currently scores 1.0.

This module is pure: no I/O, no configuration, no clock. It never raises
for any string input.
"""

import re
import uuid
from typing import List, Optional

from acadex.schemas.routine import RoutineEvent, Weekday

# ── Placeholder times and noise thresholds ────────────────────────────────
DEFAULT_START = "08:00"
DEFAULT_END = "09:30"

# Lines shorter than this are OCR debris (stray glyphs, table borders)
MIN_LINE_LENGTH = 7

# ── Patterns ──────────────────────────────────────────────────────────────
# re.ASCII keeps \b and \d to plain ASCII word/digit classes
NOISE_CHARS = re.compile(r"[©™=~_`]")
DASHES = re.compile(r"[–—]")
INLINE_WHITESPACE = re.compile(r"[ \t]+")
TEACHER_LINE = re.compile(r"^teachers?", re.IGNORECASE)

DAY_PATTERN = re.compile(r"\b(mon|tue|wed|thu|fri)\b", re.IGNORECASE | re.ASCII)
COURSE_PATTERN = re.compile(
    r"\bCSE\s?\d{4}\b|\bMATH\s?\d{4}\b", re.IGNORECASE | re.ASCII
)

DAY_MAP = {
    "mon": Weekday.MONDAY,
    "tue": Weekday.TUESDAY,
    "wed": Weekday.WEDNESDAY,
    "thu": Weekday.THURSDAY,
    "fri": Weekday.FRIDAY,
}

# ── Confidence weights ────────────────────────────────────────────────────
BASE_CONFIDENCE = 0.4
DAY_BONUS = 0.3
COURSE_BONUS = 0.3


def _new_id() -> str:
    return uuid.uuid4().hex[:7]


def _keep_line(line: str, min_line_length: int) -> bool:
    if TEACHER_LINE.match(line):
        return False
    # A bare "Mon" header is shorter than the noise threshold but is signal
    if len(line) < min_line_length and not DAY_PATTERN.search(line):
        return False
    return True


def preprocess_ocr(text: str, min_line_length: int = MIN_LINE_LENGTH) -> str:
    """
    Normalize raw OCR output before line scanning.

    Steps:
        1. Stray OCR glyphs (© ™ = ~ _ `) become spaces
        2. En/em dashes become ASCII hyphens
        3. Runs of spaces/tabs collapse to one space
        4. Lines are trimmed; short noise lines and "Teacher(s)" legend
           lines are dropped

    Returns the surviving lines joined with newlines (may be empty).
    """
    text = NOISE_CHARS.sub(" ", text)
    text = DASHES.sub("-", text)
    text = INLINE_WHITESPACE.sub(" ", text)

    lines = (line.strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if _keep_line(line, min_line_length))


def detect_day(line: str) -> Optional[Weekday]:
    """Return the weekday named by the first day token on the line, if any."""
    match = DAY_PATTERN.search(line)
    if match is None:
        return None
    return DAY_MAP[match.group(1).lower()]


def find_courses(line: str) -> List[str]:
    """All course codes on the line, in order, with inner whitespace collapsed."""
    return [re.sub(r"\s+", " ", code) for code in COURSE_PATTERN.findall(line)]


def score_confidence(current_day: Optional[Weekday], courses: List[str]) -> float:
    """
    Additive confidence: base 0.4, +0.3 with a known day, +0.3 with course
    matches on the line. Clamped to [0, 1] and rounded to two places.
    """
    score = BASE_CONFIDENCE
    if current_day:
        score += DAY_BONUS
    if courses:
        score += COURSE_BONUS
    return round(min(1.0, max(0.0, score)), 2)


def parse_routine(
    raw_text: str,
    default_start: str = DEFAULT_START,
    default_end: str = DEFAULT_END,
    min_line_length: int = MIN_LINE_LENGTH,
) -> List[RoutineEvent]:
    """
    Parse OCR text into weekly routine events.

    Args:
        raw_text: Raw OCR output, newline-delimited
        default_start: Time-of-day given to every event
        default_end: End time-of-day given to every event
        min_line_length: Noise threshold passed to preprocess_ocr()

    Returns:
        Events in scan order (top to bottom, left to right within a line).
        Empty when no day header precedes any course code.
    """
    text = preprocess_ocr(raw_text or "", min_line_length=min_line_length)

    current_day: Optional[Weekday] = None
    events: List[RoutineEvent] = []

    for line in text.split("\n"):
        day = detect_day(line)
        if day is not None:
            current_day = day

        courses = find_courses(line)
        if current_day is None or not courses:
            continue

        for course in courses:
            events.append(
                RoutineEvent(
                    id=_new_id(),
                    title=course,
                    day=current_day,
                    start=default_start,
                    end=default_end,
                    confidence=score_confidence(current_day, courses),
                    raw=line,
                )
            )

    return events
