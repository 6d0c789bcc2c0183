"""
Tests for date normalization.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from date_periods.core.normalize import add_days, day, normalize


class TestNormalize:
    """Tests for normalize()."""

    def test_valid_date_unchanged(self):
        assert normalize(2024, 6, 26) == date(2024, 6, 26)

    def test_day_zero_is_last_day_of_previous_month(self):
        assert normalize(2024, 3, 0) == date(2024, 2, 29)
        assert normalize(2023, 3, 0) == date(2023, 2, 28)

    def test_negative_day(self):
        assert normalize(2024, 3, -1) == date(2024, 2, 28)

    def test_day_overflow_rolls_into_next_month(self):
        """Feb 30th in a leap year is March 1st."""
        assert normalize(2020, 2, 30) == date(2020, 3, 1)
        assert normalize(2024, 1, 32) == date(2024, 2, 1)

    def test_month_overflow_rolls_into_next_year(self):
        assert normalize(2024, 13, 1) == date(2025, 1, 1)
        assert normalize(2024, 25, 1) == date(2026, 1, 1)

    def test_month_zero_is_december_of_previous_year(self):
        assert normalize(2024, 0, 1) == date(2023, 12, 1)
        assert normalize(2024, -1, 1) == date(2023, 11, 1)

    def test_month_and_day_rollover_compose(self):
        """Month is rolled first, then the day."""
        assert normalize(2020, 0, 0) == date(2019, 11, 30)
        assert normalize(2024, 14, 0) == date(2025, 1, 31)

    def test_idempotent(self):
        current = date(2023, 1, 1)
        while current <= date(2025, 12, 31):
            assert normalize(current.year, current.month, current.day) == current
            current += timedelta(days=1)


class TestDay:
    """Tests for day() truncation."""

    def test_date_passthrough(self):
        assert day(date(2024, 2, 29)) == date(2024, 2, 29)

    def test_datetime_truncated(self):
        value = datetime(2020, 11, 15, 12, 5, 5, 5)
        assert day(value) == date(2020, 11, 15)
        assert type(day(value)) is date

    def test_timezone_discarded(self):
        """The wall-clock date is kept, whatever the offset."""
        value = datetime(2020, 11, 15, 23, 30, tzinfo=timezone(timedelta(hours=-7)))
        assert day(value) == date(2020, 11, 15)

    @pytest.mark.parametrize(
        "days, expected",
        [
            (1, date(2024, 3, 1)),
            (-1, date(2024, 2, 28)),
            (0, date(2024, 2, 29)),
        ],
    )
    def test_add_days(self, days, expected):
        assert add_days(datetime(2024, 2, 29, 18, 0), days) == expected
