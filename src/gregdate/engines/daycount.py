"""
gregdate.engines.daycount
-------------------------
Bidirectional mapping between (year, month, day) and a signed day count.

Epoch: day 0 is 1 January 1 CE, day -1 is 31 December 1 BCE. CE dates have
non-negative counts, BCE dates negative ones.

Each year is reached through its anchor day: 1 January for CE years,
31 December for BCE years. CE years are walked forward from their anchor,
BCE years backward, so neither side ever counts across the year-zero gap.
The inverse (from_days) lives in the arithmetic engine, which walks from a
reference date.
"""

from __future__ import annotations

from typing import Tuple

from .leap import (
    astronomical_year,
    days_before_month,
    days_in_month,
    is_leap_astronomical,
    leap_day_count,
    normalize_year,
)


def days_to_anchor_day(year: int) -> int:
    """
    Days between the epoch and the anchor day of `year` (always >= 0).

    CE:  1 Jan of `year` is this many days after 1 Jan 1 CE.
    BCE: 31 Dec of `year` is this many days before 31 Dec 1 BCE.
    """
    year = normalize_year(year)
    astro = astronomical_year(year)

    if year > 0:
        # Leap years in [1, year); the year's own leap day is not reached yet.
        leap_days = leap_day_count(astro)
        if is_leap_astronomical(astro):
            leap_days -= 1
    else:
        # Leap years in (astro, 0], i.e. between the anchor and the epoch.
        leap_days = -leap_day_count(astro)

    return abs(year) * 365 - 365 + leap_days


def days_from_anchor_day(year: int, month: int, day: int) -> int:
    """
    Days between the anchor day of `year` and the date (always >= 0).

    CE counts forward from 1 Jan, BCE counts backward from 31 Dec.
    """
    year = normalize_year(year)
    total = 0

    if year > 0:
        for m in range(1, month):
            total += days_in_month(year, m)
        return total + day - 1

    for m in range(12, month, -1):
        total += days_in_month(year, m)
    return total + days_in_month(year, month) - day


def to_days(year: int, month: int, day: int) -> int:
    """Signed days since the epoch."""
    year = normalize_year(year)
    total = days_to_anchor_day(year) + days_from_anchor_day(year, month, day)
    if year > 0:
        return total
    return -total - 1


def days_between(start: Tuple[int, int, int], end: Tuple[int, int, int]) -> int:
    """Signed day difference end - start."""
    return to_days(*end) - to_days(*start)


def year_day(year: int, month: int, day: int) -> int:
    """Day of year, 1..365 (366 in leap years)."""
    return days_before_month(year, month) + day
