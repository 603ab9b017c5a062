# tests/test_types.py

from datetime import date

import pytest

import gregdate
from gregdate import Date


D = gregdate.new_date


def test_zero_value_is_uninitialized():
    z = Date()
    assert z.is_zero()
    with pytest.raises(gregdate.UninitializedDateError):
        z.add_days(1)
    with pytest.raises(gregdate.UninitializedDateError):
        z.weekday()
    with pytest.raises(gregdate.UninitializedDateError):
        z.days_since_epoch()


def test_direct_construction_is_not_safe():
    with pytest.raises(gregdate.UninitializedDateError):
        Date(2020, 1, 1).is_leap()


def test_uninitialized_is_a_gregdate_error():
    with pytest.raises(gregdate.GregdateError):
        Date().iso_week()


@pytest.mark.parametrize("ymd", [
    (2021, 2, 29),
    (2020, 13, 1),
    (2020, 0, 1),
    (2020, 1, 0),
    (2020, 4, 31),
    (-2, 2, 29),
])
def test_new_date_rejects_invalid(ymd):
    with pytest.raises(gregdate.InvalidDateError):
        D(*ymd)


def test_year_zero_becomes_one_ce():
    d = D(0, 6, 15)
    assert d.year == 1
    assert d == D(1, 6, 15)
    assert Date.new(0, 1, 1).is_ce()


def test_str():
    assert str(D(2020, 2, 29)) == "2020-02-29"
    assert str(D(-44, 3, 15)) == "-0044-03-15"
    assert str(D(12, 1, 5)) == "0012-01-05"
    assert str(D(123456, 7, 8)) == "123456-07-08"


def test_accessors():
    d = D(-44, 3, 15)
    assert d.ymd() == (-44, 3, 15)
    assert not d.is_ce()
    assert d.astronomical_year() == -43
    assert not d.is_leap()
    assert D(-45, 1, 1).is_leap()
    assert D(2020, 2, 1).days_in_month() == 29
    assert D(2020, 2, 1).last_day_of_month() == 29
    assert D(2020, 3, 1).year_day() == 61
    assert D(2021, 12, 31).iso_weeks_in_year() == 52


def test_days_since_epoch_matches_python():
    for y, m, d in ((1, 1, 1), (1970, 1, 1), (2000, 2, 29), (9999, 12, 31)):
        assert D(y, m, d).days_since_epoch() == date(y, m, d).toordinal() - 1


def test_comparisons():
    bce = D(-1, 12, 31)
    ce = D(1, 1, 1)
    assert bce < ce
    assert bce.is_before(ce)
    assert ce.is_after(bce)
    assert not ce.is_before(ce)
    assert ce.equal(D(1, 1, 1))
    assert ce.min_date(bce) == bce
    assert bce.min_date(ce) == bce
    assert ce.max_date(bce) == ce
    assert sorted([D(2020, 1, 2), D(-5, 6, 1), D(2020, 1, 1)]) == [D(-5, 6, 1), D(2020, 1, 1), D(2020, 1, 2)]


def test_days_to_and_days_between():
    assert D(2019, 6, 1).days_to(D(2020, 6, 1)) == 366
    assert D(2020, 6, 1).days_to(D(2019, 6, 1)) == -366
    assert gregdate.days_between(D(-1, 12, 31), D(1, 1, 1)) == 1
    assert gregdate.days_between(D(-1, 1, 1), D(1, 1, 1)) == 366


def test_dates_are_immutable_and_hashable():
    d = D(2020, 1, 1)
    with pytest.raises(Exception):
        d.year = 2021
    assert len({d, D(2020, 1, 1), D(2020, 1, 2)}) == 2


def test_today_and_range_helpers():
    assert gregdate.today(date(2024, 2, 29)) == D(2024, 2, 29)
    t = gregdate.today()
    assert t.is_ce()
    assert gregdate.min_date() == D(-150_000_000, 1, 1)
    assert gregdate.max_date() == D(150_000_000, 12, 31)
    assert gregdate.min_date() < t < gregdate.max_date()


def test_comparison_operators_reject_uninitialized():
    with pytest.raises(gregdate.UninitializedDateError):
        Date() == Date()
    with pytest.raises(gregdate.UninitializedDateError):
        Date() < D(1, 1, 1)
    with pytest.raises(gregdate.UninitializedDateError):
        D(1, 1, 1) >= Date()
    with pytest.raises(gregdate.UninitializedDateError):
        sorted([D(2020, 1, 1), Date()])
    with pytest.raises(gregdate.UninitializedDateError):
        hash(Date())


def test_direct_construction_never_equals_a_factory_date():
    with pytest.raises(gregdate.UninitializedDateError):
        Date(2020, 1, 1) == D(2020, 1, 1)


def test_comparison_with_other_types():
    d = D(2020, 1, 1)
    assert d != (2020, 1, 1)
    assert d != "2020-01-01"
    with pytest.raises(TypeError):
        d < (2020, 1, 1)


def test_marker_is_not_an_init_argument():
    with pytest.raises(TypeError):
        Date(2021, 2, 30, safely_instantiated=True)
    assert D(2021, 2, 28).safely_instantiated
    assert not Date(2021, 2, 28).safely_instantiated


def test_new_date_rejects_years_outside_the_range():
    top = gregdate.max_date().year
    assert D(top, 12, 31) == gregdate.max_date()
    assert D(-top, 1, 1) == gregdate.min_date()
    with pytest.raises(gregdate.InvalidDateError):
        D(top + 1, 1, 1)
    with pytest.raises(gregdate.InvalidDateError):
        D(-top - 1, 12, 31)
    with pytest.raises(gregdate.InvalidDateError):
        D(10 ** 12, 1, 1)
