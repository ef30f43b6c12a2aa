"""
caldays.engines.month_cycle
---------------------------
Month-based calendars: Gregorian or Julian leap rule, optionally starting the
year in a month other than January (fiscal years) and optionally without a
year zero.

Labels vs. arithmetic years: a calendar without a year zero labels the year
before 1 as -1. Internally everything runs on the astronomical year, where
that year is 0.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from ..core.time import (
    ISO_EPOCH_JDN,
    days_in_month,
    div_amod,
    gregorian_leap_year,
    gregorian_to_jdn,
    jdn_to_gregorian,
    jdn_to_julian,
    julian_leap_year,
    julian_to_jdn,
)
from ..core.errors import DomainError
from ..core.types import MonthCycleParams

MONTHS_IN_YEAR = 12

_RULES: Dict[str, Tuple[Callable[[int], bool], Callable[..., int], Callable[[int], Tuple[int, int, int]]]] = {
    "gregorian": (gregorian_leap_year, gregorian_to_jdn, jdn_to_gregorian),
    "julian": (julian_leap_year, julian_to_jdn, jdn_to_julian),
}


class MonthCycleEngine:
    """
    Closed-form conversion between (year, month, day) labels and iso days.
    Fully implements CycleEngineProtocol.
    """
    cycle = "month"

    def __init__(self, params: MonthCycleParams):
        self.p = params
        self._leap, self._to_jdn, self._from_jdn = _RULES[params.leap_rule]
        # Fiscal years labelled by the year they end in start one base year earlier
        self._label_shift = 1 if (params.year_label == "ending" and params.month_of_year != 1) else 0

    # ---------------------------------------------------------
    # Year labels
    # ---------------------------------------------------------

    def astronomical_year(self, year: int) -> int:
        if not self.p.year_zero and year < 0:
            return year + 1
        return year

    def label_year(self, astro_year: int) -> int:
        if not self.p.year_zero and astro_year <= 0:
            return astro_year - 1
        return astro_year

    def step_year(self, year: int, n: int) -> int:
        """Year label `n` years after `year`, skipping year 0 where there is none."""
        return self.label_year(self.astronomical_year(year) + n)

    def year_of_era(self, year: int) -> Tuple[int, int]:
        if year > 0:
            return year, 1
        if self.p.year_zero:
            return 1 - year, 0
        return -year, 0

    # ---------------------------------------------------------
    # Base-calendar projection
    # ---------------------------------------------------------

    def _base_month(self, astro_year: int, month: int) -> Tuple[int, int]:
        """(base astronomical year, base month) of calendar month `month`."""
        k = month + self.p.month_of_year - 2
        return astro_year + k // MONTHS_IN_YEAR - self._label_shift, k % MONTHS_IN_YEAR + 1

    def _from_base(self, base_year: int, base_month: int) -> Tuple[int, int]:
        k = base_month - self.p.month_of_year
        return base_year + k // MONTHS_IN_YEAR + self._label_shift, k % MONTHS_IN_YEAR + 1

    def _year_start(self, astro_year: int) -> int:
        gy, gm = self._base_month(astro_year, 1)
        return self._to_jdn(gy, gm, 1) - ISO_EPOCH_JDN + self.p.epoch_offset

    # ---------------------------------------------------------
    # Protocol Methods
    # ---------------------------------------------------------

    def months_in_year(self, year: int) -> int:
        return MONTHS_IN_YEAR

    def days_in_month(self, year: int, month: int) -> int:
        if not (1 <= month <= MONTHS_IN_YEAR):
            raise DomainError(f"month must be in 1..{MONTHS_IN_YEAR}, got {month}")
        gy, gm = self._base_month(self.astronomical_year(year), month)
        return days_in_month(gm, self._leap(gy))

    def days_in_year(self, year: int) -> int:
        ay = self.astronomical_year(year)
        return self._year_start(ay + 1) - self._year_start(ay)

    def leap_year(self, year: int) -> bool:
        if self.p.month_of_year == 1:
            return self._leap(self.astronomical_year(year))
        return self.days_in_year(year) == 366

    def valid_date(self, year: int, month: int, day: int) -> bool:
        if year == 0 and not self.p.year_zero:
            return False
        if not (1 <= month <= MONTHS_IN_YEAR):
            return False
        return 1 <= day <= self.days_in_month(year, month)

    def date_to_iso_days(self, year: int, month: int, day: int) -> int:
        gy, gm = self._base_month(self.astronomical_year(year), month)
        return self._to_jdn(gy, gm, day) - ISO_EPOCH_JDN + self.p.epoch_offset

    def date_from_iso_days(self, iso_days: int) -> Tuple[int, int, int]:
        gy, gm, day = self._from_jdn(iso_days - self.p.epoch_offset + ISO_EPOCH_JDN)
        ay, month = self._from_base(gy, gm)
        return self.label_year(ay), month, day

    def year_bounds(self, year: int) -> Tuple[int, int]:
        ay = self.astronomical_year(year)
        return self._year_start(ay), self._year_start(ay + 1) - 1

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return self.date_to_iso_days(year, month, day) - self.year_bounds(year)[0] + 1

    def month_of_year(self, year: int, month: int, day: int) -> int:
        return month

    def quarter_of_year(self, year: int, month: int, day: int) -> int:
        return (month - 1) // (MONTHS_IN_YEAR // 4) + 1

    def first_of_month(self, year: int, month: int) -> Tuple[int, int, int]:
        return year, month, 1

    def last_of_month(self, year: int, month: int) -> Tuple[int, int, int]:
        return year, month, self.days_in_month(year, month)

    def plus_months(self, year: int, month: int, day: int, months: int, *, coerce: bool = False) -> Tuple[int, int, int]:
        increment, new_month = div_amod(month + months, MONTHS_IN_YEAR)
        new_year = self.label_year(self.astronomical_year(year) + increment)
        if coerce:
            day = min(day, self.days_in_month(new_year, new_month))
        return new_year, new_month, day
