# tests/unit/test_validation.py
"""Tests for boundary input sanitization."""

from datetime import date, datetime

import pytest
from fastmcp.exceptions import ToolError

from rein_planner.validation import (
    MAX_TOTAL_DAYS,
    sanitize_experience_level,
    sanitize_start_date,
    sanitize_timeframe,
    sanitize_total_days,
)


class TestSanitizeTimeframe:
    def test_strips_whitespace(self):
        assert sanitize_timeframe("  2 weeks  ") == "2 weeks"

    def test_blank_becomes_none(self):
        assert sanitize_timeframe("   ") is None
        assert sanitize_timeframe("") is None
        assert sanitize_timeframe(None) is None

    def test_truncates_long_text(self):
        assert len(sanitize_timeframe("x" * 500)) == 200


class TestSanitizeStartDate:
    def test_iso_string(self):
        assert sanitize_start_date("2026-01-01") == date(2026, 1, 1)

    def test_date_and_datetime(self):
        assert sanitize_start_date(date(2026, 1, 1)) == date(2026, 1, 1)
        assert sanitize_start_date(datetime(2026, 1, 1, 9, 0)) == date(2026, 1, 1)

    def test_none_and_blank(self):
        assert sanitize_start_date(None) is None
        assert sanitize_start_date("  ") is None

    @pytest.mark.parametrize("value", ["tomorrow", "2026-13-01", "01/02/2026", "2026-02-30"])
    def test_invalid_raises(self, value):
        with pytest.raises(ToolError, match="Invalid date"):
            sanitize_start_date(value)


class TestSanitizeExperienceLevel:
    def test_normalizes_case(self):
        assert sanitize_experience_level(" Beginner ") == "beginner"

    def test_none_and_blank(self):
        assert sanitize_experience_level(None) is None
        assert sanitize_experience_level("") is None

    def test_unknown_raises(self):
        with pytest.raises(ToolError, match="Invalid experience level"):
            sanitize_experience_level("expert")


class TestSanitizeTotalDays:
    def test_within_limit(self):
        assert sanitize_total_days(365, date(2026, 1, 1)) == 365

    def test_over_limit(self):
        with pytest.raises(ToolError, match="too long"):
            sanitize_total_days(MAX_TOTAL_DAYS + 1, date(2026, 1, 1))

    def test_past_date_max(self):
        with pytest.raises(ToolError, match="ends past year 9999"):
            sanitize_total_days(30, date(9999, 12, 15))

    def test_defaults_to_today(self):
        assert sanitize_total_days(30) == 30
