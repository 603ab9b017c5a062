from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .config import max_year
from .errors import InvalidDateError, UninitializedDateError
from ..engines import arithmetic, daycount, leap, week


@dataclass(frozen=True, eq=False)
class Date:
    """
    A date in the proleptic Gregorian calendar.

    Years are Gregorian numbered: there is no year 0 and -1 is 1 BCE. Build
    values with new_date() / Date.new(); a bare Date() is the zero value and
    every operation on it raises UninitializedDateError.

    Dates are immutable and order chronologically. Comparing or hashing an
    uninitialized Date raises UninitializedDateError like any other operation.
    """
    year: int = 0
    month: int = 0
    day: int = 0
    safely_instantiated: bool = field(default=False, init=False, repr=False)

    @classmethod
    def new(cls, year: int, month: int, day: int) -> "Date":
        return new_date(year, month, day)

    def __str__(self) -> str:
        if self.year < 0:
            return f"-{-self.year:04d}-{self.month:02d}-{self.day:02d}"
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    # ---------------------------------------------------------
    # Checks
    # ---------------------------------------------------------

    def is_zero(self) -> bool:
        return self.year == 0 and self.month == 0 and self.day == 0

    def _check(self) -> None:
        if self.is_zero() or not self.safely_instantiated:
            raise UninitializedDateError("date not created with new_date(); got zero value or direct construction")

    # ---------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------

    def ymd(self) -> Tuple[int, int, int]:
        self._check()
        return self.year, self.month, self.day

    def is_ce(self) -> bool:
        self._check()
        return self.year > 0

    def astronomical_year(self) -> int:
        self._check()
        return leap.astronomical_year(self.year)

    def is_leap(self) -> bool:
        self._check()
        return leap.is_leap(self.year)

    def days_in_month(self) -> int:
        self._check()
        return leap.days_in_month(self.year, self.month)

    last_day_of_month = days_in_month

    def year_day(self) -> int:
        self._check()
        return daycount.year_day(*self.ymd())

    def days_since_epoch(self) -> int:
        """Signed days from 1 January 1 CE (day 0); 31 December 1 BCE is -1."""
        return daycount.to_days(*self.ymd())

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add_days(self, n: int) -> "Date":
        return new_date(*arithmetic.add_days(*self.ymd(), n))

    def add_months(self, n: int) -> "Date":
        return new_date(*arithmetic.add_months(*self.ymd(), n))

    def add_years(self, n: int) -> "Date":
        return new_date(*arithmetic.add_years(*self.ymd(), n))

    def add_parts(self, years: int, months: int, days: int) -> "Date":
        return new_date(*arithmetic.add_parts(*self.ymd(), years, months, days))

    def days_to(self, other: "Date") -> int:
        """Signed number of days from self to other."""
        return daycount.days_between(self.ymd(), other.ymd())

    # ---------------------------------------------------------
    # Weeks
    # ---------------------------------------------------------

    def weekday(self) -> int:
        """ISO weekday, 1 = Monday .. 7 = Sunday."""
        return week.weekday(*self.ymd())

    def iso_week(self) -> Tuple[int, int]:
        return week.iso_week(*self.ymd())

    def iso_week_of_year(self) -> int:
        return week.iso_week_of_year(*self.ymd())

    def iso_weeks_in_year(self) -> int:
        self._check()
        return week.iso_weeks_in_year(self.year)

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def equal(self, other: "Date") -> bool:
        return self.ymd() == other.ymd()

    def is_before(self, other: "Date") -> bool:
        return self.ymd() < other.ymd()

    def is_after(self, other: "Date") -> bool:
        return self.ymd() > other.ymd()

    def min_date(self, other: "Date") -> "Date":
        return other if other.is_before(self) else self

    def max_date(self, other: "Date") -> "Date":
        return other if other.is_after(self) else self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.equal(other)

    def __lt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.is_before(other)

    def __le__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return not self.is_after(other)

    def __gt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.is_after(other)

    def __ge__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return not self.is_before(other)

    def __hash__(self) -> int:
        return hash(self.ymd())


def new_date(year: int, month: int, day: int) -> Date:
    """
    The Date factory.

    Year 0 is stored as year 1. Raises InvalidDateError when the year is
    outside [-max_year(), max_year()], the month is not in 1..12 or the day is
    not in 1..days_in_month(year, month).
    """
    year = leap.normalize_year(year)
    limit = max_year()
    if not -limit <= year <= limit:
        raise InvalidDateError(f"year {year} outside supported range [-{limit}, {limit}]")
    if not 1 <= month <= 12:
        raise InvalidDateError(f"invalid month {month} for date")
    dim = leap.days_in_month(year, month)
    if not 1 <= day <= dim:
        raise InvalidDateError(f"invalid day {day} for month {month} of year {year} (1..{dim})")
    d = Date(year, month, day)
    object.__setattr__(d, "safely_instantiated", True)
    return d
