"""
gregdate.engines.leap
---------------------
Leap-year and days-in-month oracle.

Years passed in are Gregorian (no year 0, -1 is 1 BCE). The leap rule is
applied to the astronomical year (1 BCE = 0, 2 BCE = -1, ...) so that the
%4 / %100 / %400 rule holds uniformly on both sides of the epoch.
"""

from __future__ import annotations

from typing import Tuple

from ..core.errors import InvalidDateError

# Index 0 is unused so months can index directly.
DAYS_IN_MONTH: Tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def normalize_year(year: int) -> int:
    """A requested year 0 is stored as year 1."""
    return 1 if year == 0 else year


def astronomical_year(year: int) -> int:
    """Gregorian -> astronomical: 1 BCE (-1) -> 0, 5 BCE (-5) -> -4."""
    year = normalize_year(year)
    return year if year > 0 else year + 1


def gregorian_year(astro: int) -> int:
    """Astronomical -> Gregorian: 0 -> -1, -4 -> -5."""
    return astro if astro > 0 else astro - 1


def is_leap_astronomical(astro: int) -> bool:
    return astro % 4 == 0 and (astro % 100 != 0 or astro % 400 == 0)


def is_leap(year: int) -> bool:
    return is_leap_astronomical(astronomical_year(year))


def leap_day_count(astro: int) -> int:
    """
    a//4 - a//100 + a//400 with floor division.

    For a > 0 this is the number of leap years in [1, a]. For a <= 0 it is
    minus the number of leap years in [a+1, 0].
    """
    return astro // 4 - astro // 100 + astro // 400


def leap_days_in_span(astro: int, years: int) -> int:
    """Number of leap years among astronomical years [astro, astro + years)."""
    return leap_day_count(astro + years - 1) - leap_day_count(astro - 1)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"invalid month {month}")
    if month == 2 and is_leap(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    return 366 if is_leap(year) else 365


def days_before_month(year: int, month: int) -> int:
    """Days in the months of `year` that precede `month`."""
    total = sum(DAYS_IN_MONTH[1:month])
    if month > 2 and is_leap(year):
        total += 1
    return total
