"""Tests for the proleptic Julian calendar."""

import random

import pytest

import caldays
from caldays import CalendarDate, NotDefined


def test_leap_years(julian):
    assert julian.leap_year(1900)
    assert julian.leap_year(2000)
    assert not julian.leap_year(2001)
    # 1 BCE is year -1 and is leap; so are 5 BCE, 9 BCE, ...
    assert julian.leap_year(-1)
    assert julian.leap_year(-5)
    assert not julian.leap_year(-4)
    assert julian.days_in_month(-1, 2) == 29
    assert julian.days_in_year(1900) == 366


def test_no_year_zero(julian):
    assert not julian.valid_date(0, 1, 1)
    assert julian.valid_date(-1, 12, 31)
    assert julian.valid_date(1, 1, 1)
    # 1 BCE Dec 31 is followed by 1 CE Jan 1
    n = julian.date_to_iso_days(-1, 12, 31)
    assert julian.date_from_iso_days(n + 1) == (1, 1, 1)


def test_epoch(julian, gregorian):
    # Julian 0001-01-01 is Gregorian 0000-12-30
    assert julian.date_to_iso_days(1, 1, 1) == gregorian.date_to_iso_days(0, 12, 30)


def test_round_trip(julian):
    random.seed(42)
    for _ in range(5000):
        y = random.choice([random.randint(-3000, -1), random.randint(1, 3000)])
        m = random.randint(1, 12)
        d = random.randint(1, julian.days_in_month(y, m))
        assert julian.date_from_iso_days(julian.date_to_iso_days(y, m, d)) == (y, m, d)


@pytest.mark.parametrize(
    "julian_ymd,gregorian_ymd",
    [
        ((1582, 10, 5), (1582, 10, 15)),
        ((2000, 1, 1), (2000, 1, 14)),
        ((1, 1, 3), (1, 1, 1)),
    ],
)
def test_convert(julian_ymd, gregorian_ymd):
    d = CalendarDate(*julian_ymd, "julian")
    assert caldays.convert(d, "gregorian").ymd() == gregorian_ymd
    assert caldays.convert(CalendarDate(*gregorian_ymd, "gregorian"), "julian").ymd() == julian_ymd


def test_eras(julian):
    assert julian.year_of_era(2024) == (2024, 1)
    assert julian.year_of_era(-1) == (1, 0)
    assert julian.year_of_era(-44) == (44, 0)
    assert julian.day_of_era(1, 1, 1) == (1, 1)
    assert julian.day_of_era(-1, 12, 31) == (1, 0)


def test_day_of_week(julian):
    # Julian 1582-10-04 was a Thursday, followed by Gregorian Friday 1582-10-15
    assert julian.day_of_week(1582, 10, 4) == 4


def test_weeks_not_defined(julian):
    result = julian.week_of_year(2024, 1, 1)
    assert isinstance(result, NotDefined)
    assert not result
    assert result.operation == "week_of_year"
    assert result.calendar == "julian"
    assert isinstance(julian.iso_week_of_year(2024, 1, 1), NotDefined)
    assert isinstance(julian.week(2024, 1), NotDefined)
    assert isinstance(julian.long_year(2024), NotDefined)
    assert isinstance(julian.weeks_in_year(2024), NotDefined)


def test_ranges(julian):
    r = julian.year(-1)
    assert r.first.ymd() == (-1, 1, 1)
    assert r.last.ymd() == (-1, 12, 31)
    assert julian.month(1900, 2).last.ymd() == (1900, 2, 29)


def test_plus_skips_year_zero(julian):
    assert julian.plus(-1, 12, 1, "months", 1) == (1, 1, 1)
    assert julian.plus(1, 1, 1, "months", -1) == (-1, 12, 1)


def test_cldr_calendar_type(julian):
    assert julian.cldr_calendar_type == "gregorian"
