"""
Acadex Backend — Routine Service Unit Tests
=============================================

What:  Tests for RoutineService orchestration (limits, defaults, clock, removal).
How:   Calls the service directly; settings and the clock are patched where needed.
"""

from datetime import datetime, timezone
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest

from acadex.config import settings
from acadex.exceptions import ValidationError
from acadex.services.routine_service import RoutineService


class TestIngestText:

    def setup_method(self):
        self.service = RoutineService()

    def test_ingest_parses_and_projects(self, routine_text, reference_wednesday):
        result = self.service.ingest_text(routine_text, reference=reference_wednesday)

        assert result.success is True
        assert result.ocr_text == routine_text
        assert len(result.routine_events) == 5
        assert len(result.calendar_events) == 5
        assert result.calendar_events[0].start == "2024-01-15T08:00:00"
        assert result.week.start == datetime(2024, 1, 14)
        assert result.week.end == datetime(2024, 1, 21)

    def test_ingest_without_calendar(self, routine_text):
        result = self.service.ingest_text(routine_text, include_calendar=False)

        assert len(result.routine_events) == 5
        assert result.calendar_events is None
        assert result.week is None

    def test_ingest_uses_configured_default_times(self):
        with patch.object(settings, "routine_default_start", "10:00"), \
             patch.object(settings, "routine_default_end", "11:30"):
            result = self.service.ingest_text("Mon\nCSE4520 Data Structures", include_calendar=False)

        event = result.routine_events[0]
        assert (event.start, event.end) == ("10:00", "11:30")

    def test_ingest_empty_text(self, reference_wednesday):
        result = self.service.ingest_text("", reference=reference_wednesday)

        assert result.routine_events == []
        assert result.calendar_events == []

    def test_ingest_rejects_oversized_text(self):
        with patch.object(settings, "max_text_length", 1_000):
            with pytest.raises(ValidationError, match="too long") as exc_info:
                self.service.ingest_text("x" * 1_001)

        assert exc_info.value.field == "text"
        assert exc_info.value.context["max_length"] == 1_000

    def test_ingest_accepts_text_at_limit(self):
        with patch.object(settings, "max_text_length", 1_000):
            result = self.service.ingest_text("x" * 1_000, include_calendar=False)
        assert result.routine_events == []


class TestProject:

    def setup_method(self):
        self.service = RoutineService()

    def test_project_defaults_to_now(self, sample_event):
        fixed_now = datetime(2024, 1, 17, 10, 30, tzinfo=ZoneInfo("UTC"))
        with patch.object(RoutineService, "now", return_value=fixed_now):
            result = self.service.project([sample_event])

        assert result.calendar_events[0].start == "2024-01-17T08:00:00"
        assert result.week.start == datetime(2024, 1, 14, tzinfo=ZoneInfo("UTC"))

    def test_project_explicit_reference(self, sample_event):
        result = self.service.project([sample_event], reference=datetime(2025, 6, 4, 12))

        # 2025-06-04 is a Wednesday; its week starts Sunday 2025-06-01
        assert result.calendar_events[0].start == "2025-06-04T08:00:00"
        assert result.week.start == datetime(2025, 6, 1)

    def test_aware_reference_read_in_configured_timezone(self, sample_event):
        # 20:00 UTC Saturday is already Sunday 02:00 in Dhaka
        reference = datetime(2024, 1, 13, 20, tzinfo=timezone.utc)
        with patch.object(settings, "calendar_timezone", "Asia/Dhaka"):
            result = self.service.project([sample_event], reference=reference)

        assert result.week.start == datetime(2024, 1, 14, tzinfo=ZoneInfo("Asia/Dhaka"))
        assert result.calendar_events[0].start == "2024-01-17T08:00:00"

    def test_naive_reference_not_shifted(self, sample_event):
        with patch.object(settings, "calendar_timezone", "Asia/Dhaka"):
            result = self.service.project([sample_event], reference=datetime(2024, 1, 13, 20))

        assert result.week.start == datetime(2024, 1, 7)

    def test_now_uses_configured_timezone(self):
        with patch.object(settings, "calendar_timezone", "Asia/Dhaka"):
            now = self.service.now()
        assert now.tzinfo == ZoneInfo("Asia/Dhaka")


class TestRemoveEvent:

    def setup_method(self):
        self.service = RoutineService()

    def test_remove_existing(self, routine_text):
        events = self.service.ingest_text(routine_text, include_calendar=False).routine_events
        target = events[2]

        remaining = self.service.remove_event(events, target.id)

        assert len(remaining) == 4
        assert target.id not in {e.id for e in remaining}

    def test_remove_unknown_id_is_noop(self, sample_event):
        assert self.service.remove_event([sample_event], "nope") == [sample_event]

    def test_remove_from_empty(self):
        assert self.service.remove_event([], "abc") == []
