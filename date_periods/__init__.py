"""
Date periods: reporting period boundaries and US holiday dates.

Basic usage::

    from datetime import date
    from date_periods import PeriodCalculator, Weekday, new_week

    calc = PeriodCalculator(new_week(Weekday.SUNDAY, Weekday.SATURDAY))
    week = calc.last_full_week(date(2024, 2, 5))   # 2024-01-28 .. 2024-02-03
    month = calc.prev_month_to_date(date(2024, 3, 31))
"""

from date_periods.core.normalize import add_days, day, normalize
from date_periods.core.periods import PeriodCalculator
from date_periods.core.us_holidays import (
    HOLIDAY_RULES,
    holidays_for_year,
    independence_day,
    is_holiday,
    juneteenth,
    labor_day,
    martin_luther_king_jr_day,
    memorial_day,
    new_years_day,
    new_years_eve,
    veterans_day,
)
from date_periods.core.week import new_week
from date_periods.data.schemas import (
    DEFAULT_WEEK,
    DEFAULT_WEEK_END,
    DEFAULT_WEEK_START,
    Config,
    DateRange,
    Holiday,
    WeekConfig,
    Weekday,
)

__all__ = [
    "Config",
    "DateRange",
    "DEFAULT_WEEK",
    "DEFAULT_WEEK_END",
    "DEFAULT_WEEK_START",
    "HOLIDAY_RULES",
    "Holiday",
    "PeriodCalculator",
    "WeekConfig",
    "Weekday",
    "add_days",
    "day",
    "holidays_for_year",
    "independence_day",
    "is_holiday",
    "juneteenth",
    "labor_day",
    "martin_luther_king_jr_day",
    "memorial_day",
    "new_week",
    "new_years_day",
    "new_years_eve",
    "normalize",
    "veterans_day",
]
