"""
Data models for date periods using Pydantic.
"""

from datetime import date, timedelta
from enum import IntEnum
from typing import Any, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Weekday(IntEnum):
    """Days of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: Union["Weekday", int, str]) -> "Weekday":
        """
        Parse a weekday from an enum member, an int or an English name.

        Numbers follow date.weekday(): Monday is 0 and Sunday is 6.

        Args:
            value: Weekday, 0-6, or a name such as "monday" / "Mon".

        Returns:
            The matching Weekday.

        Raises:
            ValueError: If the value does not name a weekday.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Not a weekday: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().upper()
            if key.isdigit():
                return cls(int(key))
            for member in cls:
                if member.name == key or member.name[:3] == key:
                    return member
        raise ValueError(f"Not a weekday: {value!r}")


DEFAULT_WEEK_START = Weekday.MONDAY
DEFAULT_WEEK_END = Weekday.SUNDAY


class WeekConfig(BaseModel):
    """Which weekday starts a week and which one ends it."""

    model_config = ConfigDict(frozen=True)

    start: Weekday = Field(default=DEFAULT_WEEK_START, description="First day of the week")
    end: Weekday = Field(default=DEFAULT_WEEK_END, description="Last day of the week")

    @field_validator("start", "end", mode="before")
    @classmethod
    def parse_weekday(cls, v: Any) -> Weekday:
        """Accept weekday names and numbers."""
        return Weekday.parse(v)

    @model_validator(mode="after")
    def validate_consecutive(self) -> "WeekConfig":
        """A week must cover seven consecutive days, start through end."""
        if self.end != (self.start - 1) % 7:
            raise ValueError(
                f"{self.start.name.title()}-{self.end.name.title()} is not a seven day week"
            )
        return self


DEFAULT_WEEK = WeekConfig(start=DEFAULT_WEEK_START, end=DEFAULT_WEEK_END)


class DateRange(BaseModel):
    """An inclusive range of calendar dates."""

    model_config = ConfigDict(frozen=True)

    start: date = Field(..., description="First day of the range")
    end: date = Field(..., description="Last day of the range")

    @field_validator("end")
    @classmethod
    def validate_order(cls, v: date, info) -> date:
        """Ensure end is not before start."""
        if "start" in info.data and v < info.data["start"]:
            raise ValueError("end must be after or equal to start")
        return v

    @property
    def days(self) -> int:
        """Number of days in the range, both ends included."""
        return (self.end - self.start).days + 1

    def __contains__(self, value: date) -> bool:
        return self.start <= value <= self.end

    def shift(self, days: int) -> "DateRange":
        """Return the same range moved by a number of days."""
        offset = timedelta(days=days)
        return DateRange(start=self.start + offset, end=self.end + offset)

    def as_tuple(self) -> Tuple[date, date]:
        return self.start, self.end


class Holiday(BaseModel):
    """Represents a holiday in a given year."""

    holiday_date: date = Field(..., description="Date of the holiday")
    name: str = Field(..., description="Name of the holiday")
    is_fixed: bool = Field(default=True, description="Whether the holiday falls on a fixed month/day")


class Config(BaseModel):
    """Configuration for date period calculations."""

    week_start: Weekday = Field(default=DEFAULT_WEEK_START, description="First day of the week")
    week_end: Weekday = Field(default=DEFAULT_WEEK_END, description="Last day of the week")

    @field_validator("week_start", "week_end", mode="before")
    @classmethod
    def parse_weekday(cls, v: Any) -> Weekday:
        """Accept weekday names and numbers from YAML or the environment."""
        return Weekday.parse(v)
