"""Tests for the configurable week rule."""

import pytest

from caldays.core.time import gregorian_to_iso_days, gregorian_year_bounds
from caldays.core.types import WeekRuleParams
from caldays.engines.week_rule import ISO_WEEK_RULE, WeekRule


@pytest.fixture
def iso_rule():
    return WeekRule(ISO_WEEK_RULE, gregorian_year_bounds)


def test_week_start(iso_rule):
    # Jan 1 2016 (Friday) -> Monday Dec 28 2015
    assert iso_rule.week_start(gregorian_to_iso_days(2016, 1, 1)) == gregorian_to_iso_days(2015, 12, 28)
    monday = gregorian_to_iso_days(2016, 1, 4)
    assert iso_rule.week_start(monday) == monday


def test_year_bounds(iso_rule):
    assert iso_rule.first_week_starts(2016) == gregorian_to_iso_days(2016, 1, 4)
    assert iso_rule.last_week_ends(2015) == gregorian_to_iso_days(2016, 1, 3)
    assert iso_rule.first_week_starts(2015) == gregorian_to_iso_days(2014, 12, 29)


def test_week_of_year_buckets(iso_rule):
    assert iso_rule.week_of_year(gregorian_to_iso_days(2016, 1, 1), 2016) == (2015, 53)
    assert iso_rule.week_of_year(gregorian_to_iso_days(2014, 12, 29), 2014) == (2015, 1)
    assert iso_rule.week_of_year(gregorian_to_iso_days(2016, 6, 15), 2016) == (2016, 24)


def test_long_year_count(iso_rule):
    assert sum(iso_rule.long_year(y) for y in range(1600, 2000)) == 71


@pytest.mark.parametrize("first_day", range(1, 8))
@pytest.mark.parametrize("min_days", range(1, 8))
def test_years_abut(first_day, min_days):
    rule = WeekRule(WeekRuleParams(first_day, min_days), gregorian_year_bounds)
    for year in range(1999, 2030):
        assert rule.last_week_ends(year) + 1 == rule.first_week_starts(year + 1)
        assert rule.weeks_in_year(year) in (52, 53)


def test_first_week_holds_min_days():
    rule = WeekRule(WeekRuleParams(first_day=7, min_days=1), gregorian_year_bounds)
    jan1 = gregorian_to_iso_days(2022, 1, 1)
    start = rule.first_week_starts(2022)
    assert start <= jan1 < start + 7


def test_params_validation():
    with pytest.raises(ValueError):
        WeekRuleParams(first_day=0, min_days=4)
    with pytest.raises(ValueError):
        WeekRuleParams(first_day=1, min_days=8)
