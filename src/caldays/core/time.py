"""
caldays.core.time
-----------------
Closed-form day counting shared by every calendar.

The common currency is the iso day: days since proleptic Gregorian 0000-01-01
(iso day 0, a Saturday). Internally the formulas go through the Julian Day
Number (JDN) using floor division throughout, so they hold for negative years.
"""

from __future__ import annotations
from datetime import date
from typing import Tuple

# JDN of proleptic Gregorian 0000-01-01
ISO_EPOCH_JDN = 1721060

# Offset between iso days and datetime.date.toordinal() (0001-01-01 == 1)
ORDINAL_OFFSET = 365

DAYS_IN_WEEK = 7

_DPM = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def amod(x: int, n: int) -> int:
    """Adjusted mod giving 1..n."""
    return ((x - 1) % n) + 1


def div_amod(x: int, n: int) -> Tuple[int, int]:
    """Returns (floor((x - 1) / n), amod(x, n)): carry and 1-based remainder."""
    return (x - 1) // n, amod(x, n)


def gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def julian_leap_year(year: int) -> bool:
    """Leap test on the astronomical year (year 0 == 1 BCE)."""
    return year % 4 == 0


def days_in_month(month: int, leap: bool) -> int:
    if month == 2 and leap:
        return 29
    return _DPM[month - 1]


def gregorian_to_jdn(y: int, m: int, day: int) -> int:
    """Convert an astronomical Gregorian date to a Julian Day Number."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def julian_to_jdn(y: int, m: int, day: int) -> int:
    """Convert an astronomical Julian date to a Julian Day Number."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083


def jdn_to_julian(jdn: int) -> Tuple[int, int, int]:
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day


def iso_days_to_day_of_week(iso_days: int) -> int:
    """1 = Monday ... 7 = Sunday. Iso day 0 is a Saturday."""
    return amod(iso_days + 6, DAYS_IN_WEEK)


def pydate_to_iso_days(d: date) -> int:
    return d.toordinal() + ORDINAL_OFFSET


def iso_days_to_pydate(iso_days: int) -> date:
    """Inverse of pydate_to_iso_days; raises ValueError outside datetime's 1..9999 range."""
    return date.fromordinal(iso_days - ORDINAL_OFFSET)


def gregorian_to_iso_days(y: int, m: int, day: int) -> int:
    return gregorian_to_jdn(y, m, day) - ISO_EPOCH_JDN


def iso_days_to_gregorian(iso_days: int) -> Tuple[int, int, int]:
    return jdn_to_gregorian(iso_days + ISO_EPOCH_JDN)


def gregorian_year_bounds(year: int) -> Tuple[int, int]:
    """First and last iso day of a January-based Gregorian year."""
    return gregorian_to_iso_days(year, 1, 1), gregorian_to_iso_days(year, 12, 31)
