"""
caldays.bulk
------------
Day counting over numpy arrays. Same floor-division formulas as
caldays.core.time and caldays.engines.week_rule, applied element-wise.
"""

from __future__ import annotations

import numpy as np

from .core.time import DAYS_IN_WEEK, ISO_EPOCH_JDN
from .engines.calendar import Calendar


def gregorian_to_iso_days(years, months, days) -> np.ndarray:
    y = np.asarray(years, dtype=np.int64)
    m = np.asarray(months, dtype=np.int64)
    d = np.asarray(days, dtype=np.int64)
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = d + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn - ISO_EPOCH_JDN


def iso_days_to_gregorian(iso_days) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    a = np.asarray(iso_days, dtype=np.int64) + ISO_EPOCH_JDN + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def iso_days_to_day_of_week(iso_days) -> np.ndarray:
    """1 = Monday ... 7 = Sunday."""
    return (np.asarray(iso_days, dtype=np.int64) + 5) % 7 + 1


def _week_start(iso_days: np.ndarray, first_day: int) -> np.ndarray:
    return iso_days - (iso_days_to_day_of_week(iso_days) - first_day) % DAYS_IN_WEEK


def long_years(calendar: Calendar, start: int, stop: int) -> np.ndarray:
    """
    Years in [start, stop) that have 53 weeks under the calendar's week rule.
    Year bounds come from the calendar one year at a time; the week
    arithmetic runs over the whole array.
    """
    rule = calendar.week_rule
    if rule is None:
        raise TypeError(f"Calendar '{calendar.name}' has no week numbering")
    years = np.arange(start, stop, dtype=np.int64)
    bounds = np.array([rule.bounds(int(y)) for y in years], dtype=np.int64).reshape(-1, 2)
    first = _week_start(bounds[:, 0] + rule.min_days - 1, rule.first_day)
    last = _week_start(bounds[:, 1] - (DAYS_IN_WEEK - rule.min_days), rule.first_day) + DAYS_IN_WEEK - 1
    weeks = (last - first + 1) // DAYS_IN_WEEK
    return years[weeks == 53]
