"""
Reporting period calculations: weeks, months and years relative to a date.
"""

from datetime import date, timedelta

from date_periods.core.normalize import DateLike, add_days, day, normalize
from date_periods.core.week import new_week
from date_periods.data.schemas import DEFAULT_WEEK, Config, DateRange, WeekConfig

ONE_DAY = timedelta(days=1)
ONE_WEEK = timedelta(days=7)

# Roughly one year back while staying on the same week of the year.
PREV_YEAR_WEEK_OFFSET = 363


class PeriodCalculator:
    """Calculates period boundaries for a reference date."""

    def __init__(self, week: WeekConfig = DEFAULT_WEEK):
        """
        Initialize the period calculator.

        Args:
            week: Week configuration used by the week based periods.
        """
        self.week = week

    @classmethod
    def from_config(cls, config: Config) -> "PeriodCalculator":
        """
        Create a calculator for the week defined in a Config.

        An inconsistent start/end pair falls back to the default week.
        """
        return cls(new_week(config.week_start, config.week_end))

    # Weeks

    def start_of_week(self, value: DateLike) -> date:
        """
        Get the first day of the week containing a date.

        Args:
            value: Reference date.

        Returns:
            The latest date on or before ``value`` that falls on the week start.
        """
        current = day(value)
        offset = (current.weekday() - self.week.start) % 7
        return current - timedelta(days=offset)

    def week_of(self, value: DateLike) -> DateRange:
        """Get the full week containing a date."""
        start = self.start_of_week(value)
        return DateRange(start=start, end=start + 6 * ONE_DAY)

    def last_full_week(self, value: DateLike) -> DateRange:
        """
        Get the last complete week before the week containing a date.

        Args:
            value: Reference date.

        Returns:
            DateRange of seven days ending the day before the current week starts.
        """
        return self.week_of(value).shift(-7)

    def prior_last_full_week(self, value: DateLike) -> DateRange:
        """Get the week before the last full week."""
        return self.last_full_week(value).shift(-7)

    def prev_year_last_full_week(self, value: DateLike) -> DateRange:
        """
        Get the last full week of the same point in the previous year.

        Steps back 363 days from the start of the last full week and aligns
        to the week start. This is an approximation: around leap years the
        result can be one week off from the exact week of the year.

        Args:
            value: Reference date.

        Returns:
            DateRange of seven days in the previous year.
        """
        last_full_start = self.last_full_week(value).start
        return self.week_of(last_full_start - timedelta(days=PREV_YEAR_WEEK_OFFSET))

    @staticmethod
    def week_add(value: DateLike, weeks: int) -> date:
        """Move a date by whole weeks; negative values go back."""
        return day(value) + weeks * ONE_WEEK

    # Months

    @staticmethod
    def start_of_month(value: DateLike) -> date:
        current = day(value)
        return normalize(current.year, current.month, 1)

    @staticmethod
    def last_day_of_month(value: DateLike) -> date:
        current = day(value)
        return normalize(current.year, current.month + 1, 0)

    @staticmethod
    def first_of_next_month(value: DateLike) -> date:
        current = day(value)
        return normalize(current.year, current.month + 1, 1)

    def full_month(self, value: DateLike) -> DateRange:
        """Get the whole calendar month containing a date."""
        return DateRange(
            start=self.start_of_month(value),
            end=self.first_of_next_month(value) - ONE_DAY,
        )

    def month_to_date(self, value: DateLike) -> DateRange:
        """Get the range from the first of the month up to and including a date."""
        return DateRange(start=self.start_of_month(value), end=day(value))

    def prev_month(self, value: DateLike) -> DateRange:
        """
        Get the whole calendar month before the month of a date.

        Args:
            value: Reference date.

        Returns:
            DateRange from the first to the last day of the previous month.
        """
        current = day(value)
        return self.full_month(normalize(current.year, current.month - 1, 1))

    def prev_month_to_date(self, value: DateLike) -> DateRange:
        """
        Get the previous month up to the same day of month as a date.

        When the previous month is too short to have that day (the 31st
        after a 30 day month, the 30th after February) the whole previous
        month is returned instead.

        Args:
            value: Reference date.

        Returns:
            DateRange inside the previous month.
        """
        current = day(value)
        prev_first = normalize(current.year, current.month - 1, 1)
        same_day = normalize(prev_first.year, prev_first.month, current.day)
        if same_day.month != prev_first.month:
            return self.prev_month(current)
        return self.month_to_date(same_day)

    # Years

    @staticmethod
    def year_to_date(value: DateLike) -> DateRange:
        current = day(value)
        return DateRange(start=normalize(current.year, 1, 1), end=current)

    def previous_year_to_date(self, value: DateLike) -> DateRange:
        """
        Get the previous year from January 1st up to the same month and day.

        February 29th maps to February 28th of the previous year.
        """
        current = day(value)
        return DateRange(
            start=normalize(current.year - 1, 1, 1),
            end=self._same_day_last_year(current),
        )

    def prev_year_mtd(self, value: DateLike) -> DateRange:
        """
        Get the same month of the previous year up to the same day.

        Args:
            value: Reference date.

        Returns:
            DateRange from the first of the month to the same day, one year back.
        """
        end = self._same_day_last_year(day(value))
        return DateRange(start=self.start_of_month(end), end=end)

    @staticmethod
    def _same_day_last_year(current: date) -> date:
        end = normalize(current.year - 1, current.month, current.day)
        # Feb 29 rolls over into March in a non-leap year
        if end.month > current.month:
            end = add_days(end, -1)
        return end
