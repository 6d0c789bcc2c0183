"""
Date normalization helpers.

Every calculation in the package goes through :func:`normalize`, which turns
any (year, month, day) triple into a real calendar date the way an
overflowing date constructor would: month 13 is January of the next year,
day 0 is the last day of the previous month, and so on.
"""

from datetime import date, datetime, timedelta
from typing import Union

DateLike = Union[date, datetime]


def normalize(year: int, month: int, day: int) -> date:
    """
    Build a date, rolling out-of-range months and days over.

    The month is rolled first, then the day, so ``normalize(2024, 14, 0)``
    is the last day of January 2025.

    Args:
        year: Calendar year.
        month: Month number, any integer.
        day: Day of month, any integer.

    Returns:
        The normalized date.
    """
    extra_years, month_index = divmod(month - 1, 12)
    first = date(year + extra_years, month_index + 1, 1)
    return first + timedelta(days=day - 1)


def day(value: DateLike) -> date:
    """
    Truncate a date or datetime to its calendar date.

    Time of day and timezone are discarded; the wall-clock date is kept.
    """
    if isinstance(value, datetime):
        return value.date()
    return value


def add_days(value: DateLike, days: int) -> date:
    """Truncate a date and move it by a number of days."""
    return day(value) + timedelta(days=days)
