"""
gregdate.engines.arithmetic
---------------------------
Chunked addition engine for days, months and years.

All year arithmetic is done on astronomical years, so no intermediate
position can land on the non-existent Gregorian year 0. Inputs and outputs
are Gregorian (year, month, day) triples; callers pass results through the
Date factory, which is the final validation gate.

add_days never loops per day. A delta is reduced by whole 400-year cycles
(exact in the proleptic calendar), then the residual is consumed in
100-year, 4-year and 1-year blocks from the year's anchor day, and the last
partial year is walked month by month.
"""

from __future__ import annotations

import logging
from typing import Tuple

from ..core.config import max_year
from ..core.errors import ArithmeticOverflowError
from .daycount import days_between
from .leap import (
    DAYS_IN_MONTH,
    astronomical_year,
    gregorian_year,
    is_leap_astronomical,
    leap_days_in_span,
    normalize_year,
)

logger = logging.getLogger(__name__)

YMD = Tuple[int, int, int]

DAYS_PER_400_YEARS = 365 * 400 + 97
DAYS_PER_100_YEARS = 365 * 100 + 24
DAYS_PER_4_YEARS = 365 * 4 + 1

# Block sizes in years, largest first, consumed after the 400-year split.
_BLOCKS = (100, 4, 1)

REFERENCE_CE: YMD = (1, 1, 1)
REFERENCE_BCE: YMD = (-1, 12, 31)


def _dim(astro: int, month: int) -> int:
    if month == 2 and is_leap_astronomical(astro):
        return 29
    return DAYS_IN_MONTH[month]


def _span_days(astro: int, years: int) -> int:
    """
    Days in astronomical years [astro, astro + years).

    A 100-year block is DAYS_PER_100_YEARS plus one when it holds a year
    divisible by 400; a 4-year block is DAYS_PER_4_YEARS minus one when its
    multiple of 4 is a common century year.
    """
    return 365 * years + leap_days_in_span(astro, years)


def _check_range(year: int) -> None:
    limit = max_year()
    if not -limit <= year <= limit:
        raise ArithmeticOverflowError(
            f"year {year} outside supported range [-{limit}, {limit}]"
        )


def _walk_forward(astro: int, month: int, day: int, remaining: int) -> Tuple[int, int, int]:
    """Move `remaining` (>= 0) days forward, starting from 1 January of the year."""
    remaining += sum(_dim(astro, m) for m in range(1, month)) + day - 1

    for years in _BLOCKS:
        span = _span_days(astro, years)
        while remaining >= span:
            remaining -= span
            astro += years
            span = _span_days(astro, years)

    month = 1
    while remaining >= _dim(astro, month):
        remaining -= _dim(astro, month)
        month += 1
    return astro, month, remaining + 1


def _walk_backward(astro: int, month: int, day: int, remaining: int) -> Tuple[int, int, int]:
    """Move -`remaining` (remaining <= 0) days backward, starting from 31 December of the year."""
    remaining -= (_dim(astro, month) - day) + sum(_dim(astro, m) for m in range(month + 1, 13))

    for years in _BLOCKS:
        span = _span_days(astro - years + 1, years)
        while -remaining >= span:
            remaining += span
            astro -= years
            span = _span_days(astro - years + 1, years)

    month = 12
    while -remaining >= _dim(astro, month):
        remaining += _dim(astro, month)
        month -= 1
    return astro, month, _dim(astro, month) + remaining


def add_days(year: int, month: int, day: int, n: int) -> YMD:
    """Return the date `n` days after (n < 0: before) the given date."""
    year = normalize_year(year)
    astro = astronomical_year(year)

    if year > 0:
        cycles, remaining = divmod(n, DAYS_PER_400_YEARS)
    else:
        cycles = -(-n // DAYS_PER_400_YEARS)
        remaining = n - cycles * DAYS_PER_400_YEARS

    logger.debug(
        "add_days %d to %d-%02d-%02d: %d x 400y cycles, remainder %d",
        n, year, month, day, cycles, remaining,
    )

    astro += 400 * cycles
    if year > 0:
        astro, month, day = _walk_forward(astro, month, day, remaining)
    else:
        astro, month, day = _walk_backward(astro, month, day, remaining)

    year = gregorian_year(astro)
    _check_range(year)
    return year, month, day


def add_months(year: int, month: int, day: int, n: int) -> YMD:
    """
    Return the date `n` calendar months later.

    The day is clamped to the target month, so 31 January + 1 month is the
    last day of February.
    """
    index = astronomical_year(year) * 12 + (month - 1) + n
    astro, m0 = divmod(index, 12)
    month = m0 + 1
    day = min(day, _dim(astro, month))

    year = gregorian_year(astro)
    _check_range(year)
    return year, month, day


def add_years(year: int, month: int, day: int, n: int) -> YMD:
    """
    Return the same month and day `n` years later (29 Feb -> 28 Feb in a
    common year).

    The day delta to the target is taken from the day-count converter and
    applied through add_days, so leap days crossed on the way are counted
    exactly.
    """
    year = normalize_year(year)
    target_astro = astronomical_year(year) + n
    target = (gregorian_year(target_astro), month, min(day, _dim(target_astro, month)))
    _check_range(target[0])

    delta = days_between((year, month, day), target)
    return add_days(year, month, day, delta)


def add_parts(year: int, month: int, day: int, years: int, months: int, days: int) -> YMD:
    """Add years, then months, then days. The order is part of the result."""
    ymd: YMD = (normalize_year(year), month, day)
    if years:
        ymd = add_years(*ymd, years)
    if months:
        ymd = add_months(*ymd, months)
    if days:
        ymd = add_days(*ymd, days)
    _check_range(ymd[0])
    return ymd


def from_days(n: int) -> YMD:
    """Inverse of daycount.to_days: walk from the reference day on either side of the epoch."""
    if n >= 0:
        return add_days(*REFERENCE_CE, n)
    return add_days(*REFERENCE_BCE, n + 1)
