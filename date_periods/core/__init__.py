"""
Core date period and holiday logic.
"""

from date_periods.core.normalize import add_days, day, normalize
from date_periods.core.periods import PeriodCalculator
from date_periods.core.week import new_week

__all__ = [
    "PeriodCalculator",
    "add_days",
    "day",
    "new_week",
    "normalize",
]
