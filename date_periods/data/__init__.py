"""
Data models and schemas for date periods.
"""

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
    "Holiday",
    "WeekConfig",
    "Weekday",
]
