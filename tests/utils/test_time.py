"""
Tests for calendar utilities.

Verifies provider date parsing, chart labels and calendar windows.
"""

import pytest
from datetime import date, datetime, timezone
from unittest.mock import patch

from finplan_app.utils.time import (
    calendar_days, format_day_label, offset_day, parse_trading_date, today_utc
)


class TestParseTradingDate:
    """Test parse_trading_date function."""

    def test_parses_iso_key(self):
        assert parse_trading_date("2024-05-17") == date(2024, 5, 17)

    def test_strips_whitespace(self):
        assert parse_trading_date(" 2024-05-17 ") == date(2024, 5, 17)

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_trading_date("17/05/2024")


class TestFormatDayLabel:
    """Test format_day_label function."""

    def test_label_has_no_leading_zero(self):
        assert format_day_label(date(2024, 10, 7)) == "7 Oct"

    def test_december(self):
        assert format_day_label(date(2023, 12, 31)) == "31 Dec"


class TestCalendarDays:
    """Test calendar window generation."""

    def test_window_is_inclusive(self):
        window = calendar_days(date(2024, 3, 2), 3)

        assert window == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1), date(2024, 3, 2)]

    def test_zero_days(self):
        assert calendar_days(date(2024, 1, 1), 0) == [date(2024, 1, 1)]


class TestOffsetDay:
    """Test offset_day function."""

    def test_offset_from_start(self):
        assert offset_day(date(2024, 1, 30), 3) == date(2024, 2, 2)

    def test_falls_back_to_today(self):
        with patch('finplan_app.utils.time.datetime') as mock_datetime:
            mock_datetime.now.return_value = datetime(2024, 6, 1, 23, 30, tzinfo=timezone.utc)

            assert today_utc() == date(2024, 6, 1)
            assert offset_day(None, 1) == date(2024, 6, 2)
            mock_datetime.now.assert_called_with(timezone.utc)
