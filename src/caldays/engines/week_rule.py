"""
caldays.engines.week_rule
-------------------------
Configurable week-of-year numbering.

A week starts on `first_day`; the first week of a year is the one holding at
least `min_days` days of that year. (first_day=1, min_days=4) reproduces
ISO-8601; (first_day=7, min_days=1) reproduces US numbering.

The rule is evaluated against a bounds function `year -> (first iso day,
last iso day)`, so the same algorithm serves January years, fiscal years and
the Gregorian projection used by week calendars. Neighbouring years are found
through a `step(year, n)` function, so a calendar without a year zero carries
from 1 to -1.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from ..core.time import DAYS_IN_WEEK, iso_days_to_day_of_week
from ..core.types import WeekRuleParams, WeekYear

YearBounds = Callable[[int], Tuple[int, int]]
YearStep = Callable[[int, int], int]

ISO_WEEK_RULE = WeekRuleParams(first_day=1, min_days=4)


def _plain_step(year: int, n: int) -> int:
    return year + n


class WeekRule:
    """
    Week numbering over a year defined by `bounds`.
    All methods are O(1) and pure.
    """
    def __init__(self, params: WeekRuleParams, bounds: YearBounds, step: Optional[YearStep] = None):
        self.p = params
        self.bounds = bounds
        self.step = step or _plain_step

    @property
    def first_day(self) -> int:
        return self.p.first_day

    @property
    def min_days(self) -> int:
        return self.p.min_days

    def week_start(self, iso_days: int) -> int:
        """Iso day of the nearest `first_day` on or before `iso_days`."""
        day_of_week = iso_days_to_day_of_week(iso_days)
        return iso_days - (day_of_week - self.p.first_day) % DAYS_IN_WEEK

    def first_week_starts(self, year: int) -> int:
        start, _ = self.bounds(year)
        return self.week_start(start + self.p.min_days - 1)

    def last_week_ends(self, year: int) -> int:
        """
        Last day of the week holding the year's last day minus (7 - min_days).
        That week directly precedes week 1 of the next year; for min_days=4
        the anchor is Dec 28, i.e. day 31 - min_days + 1 of December.
        """
        _, end = self.bounds(year)
        return self.week_start(end - (DAYS_IN_WEEK - self.p.min_days)) + DAYS_IN_WEEK - 1

    def weeks_in_year(self, year: int) -> int:
        return (self.last_week_ends(year) - self.first_week_starts(year) + 1) // DAYS_IN_WEEK

    def long_year(self, year: int) -> bool:
        return self.weeks_in_year(year) == 53

    def week_of_year(self, iso_days: int, year: int) -> WeekYear:
        """
        Buckets `iso_days` (a day labelled with `year`) into a week year.
        Days before week 1 belong to the last week of the previous year; days
        after the last week belong to week 1 of the next one.
        """
        first = self.first_week_starts(year)
        if iso_days < first:
            previous = self.step(year, -1)
            return WeekYear(previous, 53 if self.long_year(previous) else 52)
        if iso_days > self.last_week_ends(year):
            return WeekYear(self.step(year, 1), 1)
        return WeekYear(year, (iso_days - first) // DAYS_IN_WEEK + 1)
