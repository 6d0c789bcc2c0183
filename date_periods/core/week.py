"""
Week configuration constructor.
"""

import logging
from typing import Union

from pydantic import ValidationError

from date_periods.data.schemas import DEFAULT_WEEK, WeekConfig, Weekday

logger = logging.getLogger(__name__)


def _label(value: Union[Weekday, int, str]) -> str:
    if isinstance(value, Weekday):
        return value.name.title()
    return str(value)


def new_week(*weekdays: Union[Weekday, int, str]) -> WeekConfig:
    """
    Create a week configuration from a start and an end weekday.

    Only the first two arguments are used. With fewer than two, or with a
    pair that is not seven consecutive days, the default Monday-Sunday week
    is returned and a warning is logged.

    Args:
        weekdays: Start weekday, end weekday. Names and numbers are accepted.

    Returns:
        A WeekConfig that is always usable.
    """
    if len(weekdays) < 2:
        logger.warning(
            f"Week needs a start and an end day, got {len(weekdays)}; "
            f"using {DEFAULT_WEEK.start.name.title()}-{DEFAULT_WEEK.end.name.title()}"
        )
        return DEFAULT_WEEK

    start, end = weekdays[:2]
    try:
        return WeekConfig(start=start, end=end)
    except ValidationError as e:
        logger.warning(
            f"Invalid week {_label(start)}-{_label(end)} ({e.error_count()} error(s)); "
            f"using {DEFAULT_WEEK.start.name.title()}-{DEFAULT_WEEK.end.name.title()}"
        )
        return DEFAULT_WEEK
