# tests/test_arithmetic.py

import random
from datetime import date, timedelta

import pytest

import gregdate
from gregdate.engines import arithmetic


D = gregdate.new_date


def test_from_days_reference_points():
    assert gregdate.from_days(0) == D(1, 1, 1)
    assert gregdate.from_days(-1) == D(-1, 12, 31)
    assert gregdate.from_days(-366) == D(-1, 1, 1)
    assert gregdate.from_days(-367) == D(-2, 12, 31)


def test_add_days_matches_python_in_ce():
    random.seed(11)
    lo, hi = date(1, 1, 1).toordinal(), date(9999, 12, 31).toordinal()
    for _ in range(3000):
        a = date.fromordinal(random.randint(lo, hi))
        n = random.randint(lo - a.toordinal(), hi - a.toordinal())
        b = a + timedelta(days=n)
        assert D(a.year, a.month, a.day).add_days(n) == D(b.year, b.month, b.day)


def test_add_days_large_delta_matches_python():
    b = date(2019, 6, 1) + timedelta(days=1_000_000)
    assert D(2019, 6, 1).add_days(1_000_000) == D(b.year, b.month, b.day)


def test_add_days_crosses_the_epoch_both_ways():
    assert D(-1, 12, 31).add_days(1) == D(1, 1, 1)
    assert D(1, 1, 1).add_days(-1) == D(-1, 12, 31)
    assert D(-1, 12, 30).add_days(3) == D(1, 1, 2)
    assert D(1, 1, 2).add_days(-3) == D(-1, 12, 30)


@pytest.mark.parametrize("n", [
    146097 * 3 + 17,
    -146097 * 5 - 3,
    146097,
    -146097,
    36524,
    -36525,
    1461,
    10 ** 9,
    -(10 ** 9),
])
@pytest.mark.parametrize("ymd", [(2020, 2, 29), (-1, 12, 31), (1, 1, 1), (-401, 3, 1), (1900, 12, 31)])
def test_add_days_is_invertible(ymd, n):
    d = D(*ymd)
    moved = d.add_days(n)
    assert moved.add_days(-n) == d
    assert moved.days_since_epoch() == d.days_since_epoch() + n


def test_add_days_agrees_with_from_days():
    random.seed(99)
    for _ in range(3000):
        y = random.choice([-1, 1]) * random.randint(1, 100_000)
        m = random.randint(1, 12)
        d = D(y, m, random.randint(1, gregdate.days_in_month(y, m)))
        n = random.randint(-50_000_000, 50_000_000)
        assert d.add_days(n) == gregdate.from_days(d.days_since_epoch() + n)


def test_add_days_never_produces_year_zero():
    d = D(-3, 1, 1)
    for _ in range(60):
        d = d.add_days(29)
        assert d.year != 0


def test_add_months_clamps_day():
    assert D(2021, 1, 31).add_months(1) == D(2021, 2, 28)
    assert D(2020, 1, 31).add_months(1) == D(2020, 2, 29)
    assert D(2021, 3, 31).add_months(1) == D(2021, 4, 30)
    assert D(2020, 2, 29).add_months(12) == D(2021, 2, 28)
    assert D(2020, 2, 29).add_months(48) == D(2024, 2, 29)


def test_add_months_normalizes_year_overflow():
    assert D(2021, 11, 15).add_months(3) == D(2022, 2, 15)
    assert D(2021, 2, 15).add_months(-3) == D(2020, 11, 15)
    assert D(2021, 6, 1).add_months(-12 * 100) == D(1921, 6, 1)


def test_add_months_across_the_epoch():
    assert D(-1, 12, 15).add_months(1) == D(1, 1, 15)
    assert D(1, 1, 15).add_months(-1) == D(-1, 12, 15)
    assert D(-1, 6, 1).add_months(12) == D(1, 6, 1)


def test_add_years():
    assert D(2019, 6, 1).add_years(1) == D(2020, 6, 1)
    assert D(2020, 2, 29).add_years(1) == D(2021, 2, 28)
    assert D(2020, 2, 29).add_years(4) == D(2024, 2, 29)
    assert D(2020, 2, 29).add_years(-400) == D(1620, 2, 29)
    assert D(2000, 2, 29).add_years(100) == D(2100, 2, 28)


def test_add_years_skips_year_zero():
    assert D(-1, 6, 1).add_years(1) == D(1, 6, 1)
    assert D(1, 6, 1).add_years(-1) == D(-1, 6, 1)
    assert D(-5, 1, 1).add_years(10) == D(6, 1, 1)
    assert D(-1, 2, 29).add_years(1) == D(1, 2, 28)


def test_add_years_large():
    assert D(1, 3, 1).add_years(1_000_000) == D(1_000_001, 3, 1)
    assert D(-1_000_000, 3, 1).add_years(1_000_000) == D(1, 3, 1)


def test_add_parts_applies_years_then_months_then_days():
    assert D(2019, 3, 1).add_parts(3, 10, 1) == D(2023, 1, 2)
    # months before days: 30 Jan -> 28 Feb -> 1 Mar
    assert D(2021, 1, 30).add_parts(0, 1, 1) == D(2021, 3, 1)
    assert D(2020, 2, 29).add_parts(1, 0, 0) == D(2021, 2, 28)
    assert D(2020, 6, 15).add_parts(0, 0, 0) == D(2020, 6, 15)


def test_add_parts_negative():
    assert D(2021, 3, 31).add_parts(0, -1, -1) == D(2021, 2, 27)
    assert D(1, 1, 1).add_parts(-1, 0, 0) == D(-1, 1, 1)


def test_overflow_raises():
    with pytest.raises(gregdate.ArithmeticOverflowError):
        gregdate.max_date().add_days(1)
    with pytest.raises(gregdate.ArithmeticOverflowError):
        gregdate.min_date().add_days(-1)
    with pytest.raises(gregdate.ArithmeticOverflowError):
        gregdate.max_date().add_months(1)
    with pytest.raises(gregdate.ArithmeticOverflowError):
        gregdate.min_date().add_years(-1)


def test_range_edges_are_reachable():
    assert gregdate.max_date().add_days(-1) == D(gregdate.max_date().year, 12, 30)
    assert gregdate.min_date().add_days(1) == D(gregdate.min_date().year, 1, 2)


def test_span_days_block_sizes():
    assert arithmetic._span_days(1, 100) == arithmetic.DAYS_PER_100_YEARS
    assert arithmetic._span_days(301, 100) == arithmetic.DAYS_PER_100_YEARS + 1
    assert arithmetic._span_days(97, 4) == arithmetic.DAYS_PER_4_YEARS - 1
    assert arithmetic._span_days(397, 4) == arithmetic.DAYS_PER_4_YEARS
    assert arithmetic._span_days(-399, 400) == arithmetic.DAYS_PER_400_YEARS
