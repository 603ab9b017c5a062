"""
gregdate.engines.week
---------------------
Weekday and ISO-8601 week numbering.

Weekdays are ISO numbered: 1 = Monday .. 7 = Sunday. The proleptic
Gregorian 1 January 1 CE was a Monday, so 31 December 1 BCE was a Sunday.
CE dates count forward from the first, BCE dates backward from the second.
"""

from __future__ import annotations

from typing import Tuple

from .daycount import to_days, year_day
from .leap import astronomical_year, gregorian_year

MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6
SUNDAY = 7

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

FIRST_DOW_CE = MONDAY    # 1 January 1 CE
LAST_DOW_BCE = SUNDAY    # 31 December 1 BCE


def count_days_forward(start: int, count: int) -> int:
    dow = (start + count) % 7
    return 7 if dow == 0 else dow


def count_days_backward(start: int, count: int) -> int:
    dow = (start - count) % 7
    return 7 if dow == 0 else dow


def weekday(year: int, month: int, day: int) -> int:
    n = to_days(year, month, day)
    if n >= 0:
        return count_days_forward(FIRST_DOW_CE, n)
    # n = -1 is the BCE reference day itself
    return count_days_backward(LAST_DOW_BCE, -n - 1)


def _p(astro: int) -> int:
    # weekday-like residue of 31 December of `astro`
    return (astro + astro // 4 - astro // 100 + astro // 400) % 7


def iso_weeks_in_year(year: int) -> int:
    """52 or 53. Long years end on a Thursday, or on a Friday after a long-ending year."""
    astro = astronomical_year(year)
    if _p(astro) == 4 or _p(astro - 1) == 3:
        return 53
    return 52


def iso_week(year: int, month: int, day: int) -> Tuple[int, int]:
    """(ISO year, ISO week). The ISO year is Gregorian numbered."""
    week = (10 + year_day(year, month, day) - weekday(year, month, day)) // 7
    if week < 1:
        prev = gregorian_year(astronomical_year(year) - 1)
        return prev, iso_weeks_in_year(prev)
    if week > iso_weeks_in_year(year):
        return gregorian_year(astronomical_year(year) + 1), 1
    return year, week


def iso_week_of_year(year: int, month: int, day: int) -> int:
    return iso_week(year, month, day)[1]
