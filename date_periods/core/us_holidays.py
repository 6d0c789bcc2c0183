"""
US holiday dates.

Each rule takes a reference date and returns the holiday in that date's year.
Observed-day shifting (a Saturday holiday observed on Friday) is not applied.
"""

from datetime import date, timedelta
from typing import Callable, Dict, List, Tuple

from date_periods.core.normalize import DateLike, day, normalize
from date_periods.data.schemas import Holiday, Weekday

HolidayRule = Callable[[DateLike], date]


def _nth_weekday(year: int, month: int, weekday: Weekday, n: int) -> date:
    """Find the nth occurrence of a weekday in a month (n is 1-based)."""
    first = normalize(year, month, 1)
    days_ahead = (weekday - first.weekday()) % 7
    return first + timedelta(days=days_ahead + 7 * (n - 1))


def _last_weekday(year: int, month: int, weekday: Weekday) -> date:
    """Find the last occurrence of a weekday in a month."""
    last = normalize(year, month + 1, 0)
    days_back = (last.weekday() - weekday) % 7
    return last - timedelta(days=days_back)


def new_years_day(reference: DateLike) -> date:
    return normalize(day(reference).year, 1, 1)


def martin_luther_king_jr_day(reference: DateLike) -> date:
    """Third Monday of January."""
    return _nth_weekday(day(reference).year, 1, Weekday.MONDAY, 3)


def memorial_day(reference: DateLike) -> date:
    """
    Last Monday of May.

    Counted back from May 31, so a Monday June 1st is never returned.
    """
    return _last_weekday(day(reference).year, 5, Weekday.MONDAY)


def juneteenth(reference: DateLike) -> date:
    return normalize(day(reference).year, 6, 19)


def independence_day(reference: DateLike) -> date:
    return normalize(day(reference).year, 7, 4)


def labor_day(reference: DateLike) -> date:
    """First Monday of September."""
    return _nth_weekday(day(reference).year, 9, Weekday.MONDAY, 1)


def veterans_day(reference: DateLike) -> date:
    return normalize(day(reference).year, 11, 11)


def new_years_eve(reference: DateLike) -> date:
    return normalize(day(reference).year, 12, 31)


# name -> (rule, falls on a fixed month/day)
HOLIDAY_RULES: Dict[str, Tuple[HolidayRule, bool]] = {
    "New Year's Day": (new_years_day, True),
    "Martin Luther King Jr. Day": (martin_luther_king_jr_day, False),
    "Memorial Day": (memorial_day, False),
    "Juneteenth": (juneteenth, True),
    "Independence Day": (independence_day, True),
    "Labor Day": (labor_day, False),
    "Veterans Day": (veterans_day, True),
    "New Year's Eve": (new_years_eve, True),
}


def holidays_for_year(reference: DateLike) -> List[Holiday]:
    """
    Get all holidays in the year of a reference date.

    Args:
        reference: Any date in the wanted year.

    Returns:
        List of Holiday objects sorted by date.
    """
    result = [
        Holiday(holiday_date=rule(reference), name=name, is_fixed=is_fixed)
        for name, (rule, is_fixed) in HOLIDAY_RULES.items()
    ]
    return sorted(result, key=lambda h: h.holiday_date)


def is_holiday(value: DateLike) -> bool:
    """Check if a date is one of the holidays."""
    current = day(value)
    return any(rule(current) == current for rule, _ in HOLIDAY_RULES.values())
