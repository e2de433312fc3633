# File: tests/unit/test_week_anchor.py
"""
Unit tests for week start normalization.
"""

from datetime import date, datetime
from unittest.mock import patch

import pytest

from weekly_scheduler.core import week_anchor


class TestNormalizeWeekStart:

    def test_monday_unchanged(self, monday):
        assert week_anchor.normalize_week_start(monday) == monday

    @pytest.mark.parametrize("day", range(2, 8))
    def test_rest_of_week_moves_back(self, monday, day):
        assert week_anchor.normalize_week_start(date(2024, 1, day)) == monday

    def test_accepts_datetime(self, monday):
        assert week_anchor.normalize_week_start(datetime(2024, 1, 3, 15, 30)) == monday


class TestParseWeekStart:

    def test_parse_monday(self, monday):
        assert week_anchor.parse_week_start("2024-01-01") == monday

    def test_parse_midweek(self, monday):
        assert week_anchor.parse_week_start(" 2024-01-05 ") == monday

    @pytest.mark.parametrize("text", [None, "", "   ", "01/05/2024", "soon"])
    def test_fallback_to_current_week(self, text):
        with patch.object(week_anchor, "today", return_value=date(2024, 3, 14)):
            assert week_anchor.parse_week_start(text) == date(2024, 3, 11)

    def test_today_uses_timezone(self):
        assert isinstance(week_anchor.today("Europe/Amsterdam"), date)


def test_week_days(monday):
    days = week_anchor.week_days(date(2024, 1, 4))

    assert len(days) == 7
    assert days[0] == monday
    assert days[-1] == date(2024, 1, 7)
