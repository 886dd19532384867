"""A calendar date that always holds a valid month, day and year."""

from __future__ import annotations

import calendar
import logging
from enum import IntEnum
from typing import Any

logger = logging.getLogger(__name__)

MIN_YEAR = 1
MAX_YEAR = 9999

DEFAULT_DAY = 1
DEFAULT_YEAR = 2025


class Month(IntEnum):
    """Months of the year, numbered from 1."""

    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12


DEFAULT_MONTH = Month.JAN


def _as_month(value: Any) -> Month | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    try:
        return Month(value)
    except ValueError:
        return None


def _valid_year(year: Any) -> bool:
    return (
        isinstance(year, int)
        and not isinstance(year, bool)
        and MIN_YEAR <= year <= MAX_YEAR
    )


def _valid_day(day: Any, month: Month, year: int) -> bool:
    if isinstance(day, bool) or not isinstance(day, int) or day <= 0:
        return False
    return day <= calendar.monthrange(year, month)[1]


class Date:
    """A month/day/year date.

    The constructor replaces any invalid part with its default (January,
    day 1, year 2025). Setting an invalid value afterwards raises
    ValueError and leaves the date unchanged.
    """

    def __init__(
        self,
        month: Month | int = DEFAULT_MONTH,
        day: int = DEFAULT_DAY,
        year: int = DEFAULT_YEAR,
    ) -> None:
        if not _valid_year(year):
            logger.warning("Invalid year %r; using %d.", year, DEFAULT_YEAR)
            year = DEFAULT_YEAR
        checked_month = _as_month(month)
        if checked_month is None:
            logger.warning("Invalid month %r; using January.", month)
            checked_month = DEFAULT_MONTH
        if not _valid_day(day, checked_month, year):
            logger.warning("Invalid day %r; using %d.", day, DEFAULT_DAY)
            day = DEFAULT_DAY
        self._month: Month = checked_month
        self._day: int = day
        self._year: int = year

    @property
    def month(self) -> Month:
        """The month of the date."""
        return self._month

    @month.setter
    def month(self, value: Month | int) -> None:
        checked = _as_month(value)
        if checked is None:
            raise ValueError(f"invalid month: {value!r}")
        self._month = checked

    @property
    def day(self) -> int:
        """The day of the month."""
        return self._day

    @day.setter
    def day(self, value: int) -> None:
        if not _valid_day(value, self._month, self._year):
            raise ValueError(f"invalid day: {value!r}")
        self._day = value

    @property
    def year(self) -> int:
        """The year, from 1 to 9999."""
        return self._year

    @year.setter
    def year(self, value: int) -> None:
        if not _valid_year(value):
            raise ValueError(f"invalid year: {value!r}")
        self._year = value

    def set_date(self, month: Month | int, day: int, year: int) -> None:
        """Set all three parts at once; raise ValueError if they do not form a date."""
        checked_month = _as_month(month)
        if (
            checked_month is None
            or not _valid_year(year)
            or not _valid_day(day, checked_month, year)
        ):
            raise ValueError(
                f"invalid date {month!r}/{day!r}/{year!r}; keeping {self}"
            )
        self._month = checked_month
        self._day = day
        self._year = year

    def is_leap_year(self) -> bool:
        """Whether the date's year is a leap year."""
        return calendar.isleap(self._year)

    def copy(self) -> Date:
        """A new date with the same month, day and year."""
        return Date(self._month, self._day, self._year)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return (self._month, self._day, self._year) == (
            other._month,
            other._day,
            other._year,
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{int(self._month):02d}/{self._day:02d}/{self._year:04d}"

    def __repr__(self) -> str:
        return f"Date(Month.{self._month.name}, {self._day}, {self._year})"