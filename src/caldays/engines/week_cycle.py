"""
caldays.engines.week_cycle
--------------------------
Week-based calendars (ISO week, 4-4-5 retail/fiscal layouts).

A date is (year, week, day): `week` in 1..52|53 and `day` in 1..7 counted from
the calendar's first day of the week. Years are made of whole weeks, anchored
on the Gregorian year by the (first_day, min_days) rule. Months are groups of
weeks given by a layout repeated every quarter; the extra week of a long year
is added to the final month.
"""

from __future__ import annotations

from typing import Tuple

from ..core.time import (
    DAYS_IN_WEEK,
    div_amod,
    gregorian_to_iso_days,
    iso_days_to_gregorian,
)
from ..core.errors import DomainError
from ..core.types import WeekCycleParams, WeekRuleParams
from .week_rule import WeekRule

WEEKS_IN_QUARTER = 13


class WeekCycleEngine:
    """
    Closed-form conversion between (year, week, day) labels and iso days.
    Fully implements CycleEngineProtocol.
    """
    cycle = "week"

    def __init__(self, params: WeekCycleParams, week_rule: WeekRuleParams):
        self.p = params
        self.rule = WeekRule(week_rule, self._gregorian_bounds)

    def _gregorian_bounds(self, year: int) -> Tuple[int, int]:
        m0 = self.p.month_of_year
        return gregorian_to_iso_days(year, m0, 1), gregorian_to_iso_days(year + 1, m0, 1) - 1

    # ---------------------------------------------------------
    # Year labels
    # ---------------------------------------------------------

    def step_year(self, year: int, n: int) -> int:
        return year + n

    def year_of_era(self, year: int) -> Tuple[int, int]:
        if year > 0:
            return year, 1
        return 1 - year, 0

    # ---------------------------------------------------------
    # Week layout
    # ---------------------------------------------------------

    def weeks_in_year(self, year: int) -> int:
        return self.rule.weeks_in_year(year)

    def long_year(self, year: int) -> bool:
        return self.rule.long_year(year)

    def months_in_year(self, year: int) -> int:
        return 4 * len(self.p.weeks_in_month)

    def weeks_in_month(self, year: int, month: int) -> int:
        layout = self.p.weeks_in_month
        weeks = layout[(month - 1) % len(layout)]
        if month == self.months_in_year(year) and self.long_year(year):
            weeks += 1
        return weeks

    def first_week_of_month(self, year: int, month: int) -> int:
        layout = self.p.weeks_in_month
        quarter, index = divmod(month - 1, len(layout))
        return quarter * WEEKS_IN_QUARTER + sum(layout[:index]) + 1

    # ---------------------------------------------------------
    # Protocol Methods
    # ---------------------------------------------------------

    def days_in_month(self, year: int, month: int) -> int:
        if not (1 <= month <= self.months_in_year(year)):
            raise DomainError(f"month must be in 1..{self.months_in_year(year)}, got {month}")
        return self.weeks_in_month(year, month) * DAYS_IN_WEEK

    def days_in_year(self, year: int) -> int:
        return self.weeks_in_year(year) * DAYS_IN_WEEK

    def leap_year(self, year: int) -> bool:
        return self.long_year(year)

    def valid_date(self, year: int, week: int, day: int) -> bool:
        return 1 <= week <= self.weeks_in_year(year) and 1 <= day <= DAYS_IN_WEEK

    def date_to_iso_days(self, year: int, week: int, day: int) -> int:
        start = self.rule.first_week_starts(year)
        return start + (week - 1) * DAYS_IN_WEEK + (day - 1) + self.p.epoch_offset

    def date_from_iso_days(self, iso_days: int) -> Tuple[int, int, int]:
        n = iso_days - self.p.epoch_offset
        gy, gm, _ = iso_days_to_gregorian(n)
        year = gy if gm >= self.p.month_of_year else gy - 1
        week_year, week = self.rule.week_of_year(n, year)
        day = n - self.rule.first_week_starts(week_year) - (week - 1) * DAYS_IN_WEEK + 1
        return week_year, week, day

    def year_bounds(self, year: int) -> Tuple[int, int]:
        start = self.date_to_iso_days(year, 1, 1)
        return start, start + self.days_in_year(year) - 1

    def day_of_year(self, year: int, week: int, day: int) -> int:
        return (week - 1) * DAYS_IN_WEEK + day

    def month_of_year(self, year: int, week: int, day: int) -> int:
        layout = self.p.weeks_in_month
        quarter = min((week - 1) // WEEKS_IN_QUARTER, 3)
        remaining = week - quarter * WEEKS_IN_QUARTER
        for index, weeks in enumerate(layout):
            if remaining <= weeks:
                return quarter * len(layout) + index + 1
            remaining -= weeks
        # The 53rd week
        return self.months_in_year(year)

    def quarter_of_year(self, year: int, week: int, day: int) -> int:
        return min((week - 1) // WEEKS_IN_QUARTER + 1, 4)

    def first_of_month(self, year: int, month: int) -> Tuple[int, int, int]:
        return year, self.first_week_of_month(year, month), 1

    def last_of_month(self, year: int, month: int) -> Tuple[int, int, int]:
        last_week = self.first_week_of_month(year, month) + self.weeks_in_month(year, month) - 1
        return year, last_week, DAYS_IN_WEEK

    def plus_months(self, year: int, week: int, day: int, months: int, *, coerce: bool = False) -> Tuple[int, int, int]:
        """
        Moves by whole months keeping the week offset within the month and the
        day of week.

        When the offset does not fit the destination month, coerce=True clamps
        it to the month's last week. Otherwise the result stays on that last
        week and the surplus weeks are carried in the day part (day > 7), so
        valid_date rejects it while date_to_iso_days still counts through.
        """
        month = self.month_of_year(year, week, day)
        offset = week - self.first_week_of_month(year, month)
        increment, new_month = div_amod(month + months, self.months_in_year(year))
        new_year = year + increment
        first = self.first_week_of_month(new_year, new_month)
        weeks = self.weeks_in_month(new_year, new_month)
        if offset < weeks:
            return new_year, first + offset, day
        if coerce:
            return new_year, first + weeks - 1, day
        return new_year, first + weeks - 1, day + (offset - weeks + 1) * DAYS_IN_WEEK
