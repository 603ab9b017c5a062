from __future__ import annotations

from datetime import date as _pydate
from typing import Optional

from .core.config import max_year
from .core.types import Date, new_date
from .engines import arithmetic, daycount, leap, week


def from_days(n: int) -> Date:
    """Date `n` days from the epoch (day 0 = 0001-01-01, day -1 = -0001-12-31)."""
    return new_date(*arithmetic.from_days(n))


def days_between(a: Date, b: Date) -> int:
    return a.days_to(b)


def today(d: Optional[_pydate] = None) -> Date:
    """Today's date from the local clock (or from `d`, a datetime.date)."""
    if d is None:
        d = _pydate.today()
    return new_date(d.year, d.month, d.day)


def min_date() -> Date:
    """The smallest representable date."""
    return new_date(-max_year(), 1, 1)


def max_date() -> Date:
    """The largest representable date."""
    return new_date(max_year(), 12, 31)


# ============================================================
# Year-level queries (no Date needed)
# ============================================================

def is_leap(year: int) -> bool:
    return leap.is_leap(year)


def days_in_month(year: int, month: int) -> int:
    return leap.days_in_month(year, month)


def days_in_year(year: int) -> int:
    return leap.days_in_year(year)


def iso_weeks_in_year(year: int) -> int:
    return week.iso_weeks_in_year(year)


def days_to_anchor_day(year: int) -> int:
    return daycount.days_to_anchor_day(year)
