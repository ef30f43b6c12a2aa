# tests/test_time.py

import random
from datetime import date

from caldays.core import time as ct


def test_iso_epoch():
    assert ct.gregorian_to_iso_days(0, 1, 1) == 0
    assert ct.gregorian_to_iso_days(1, 1, 1) == 366
    assert ct.gregorian_to_iso_days(2000, 1, 1) == 730485
    # Iso day 0 is a Saturday
    assert ct.iso_days_to_day_of_week(0) == 6


def test_gregorian_jdn_roundtrip():
    random.seed(42)
    for _ in range(10000):
        jdn_in = random.randint(-1000000, 5373484)
        assert ct.gregorian_to_jdn(*ct.jdn_to_gregorian(jdn_in)) == jdn_in


def test_julian_jdn_roundtrip():
    random.seed(7)
    for _ in range(10000):
        jdn_in = random.randint(-1000000, 5373484)
        assert ct.julian_to_jdn(*ct.jdn_to_julian(jdn_in)) == jdn_in


def test_known_jdn():
    assert ct.gregorian_to_jdn(2000, 1, 1) == 2451545
    # Julian calendar epoch: 4713 BCE (astronomical -4712) January 1
    assert ct.julian_to_jdn(-4712, 1, 1) == 0


def test_pydate_matches_datetime():
    random.seed(1)
    for _ in range(2000):
        d = date.fromordinal(random.randint(1, date.max.toordinal()))
        iso_days = ct.pydate_to_iso_days(d)
        assert iso_days == ct.gregorian_to_iso_days(d.year, d.month, d.day)
        assert ct.iso_days_to_pydate(iso_days) == d
        assert ct.iso_days_to_day_of_week(iso_days) == d.isoweekday()


def test_div_amod():
    assert ct.div_amod(1, 12) == (0, 1)
    assert ct.div_amod(12, 12) == (0, 12)
    assert ct.div_amod(13, 12) == (1, 1)
    assert ct.div_amod(0, 12) == (-1, 12)
    assert ct.div_amod(-11, 12) == (-1, 1)
    assert ct.div_amod(-12, 12) == (-2, 12)


def test_leap_rules():
    assert ct.gregorian_leap_year(2000)
    assert not ct.gregorian_leap_year(1900)
    assert ct.gregorian_leap_year(2024)
    assert ct.gregorian_leap_year(0)
    assert ct.julian_leap_year(1900)
    assert ct.julian_leap_year(0)
