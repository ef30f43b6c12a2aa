"""
caldays.engines.ranges
----------------------
Start/end label pairs for a year, quarter, month or week.

Quarters are `months_in_year / 4` months long so that layouts with other than
twelve months stay correct.
"""

from __future__ import annotations

from typing import Tuple

from ..core.errors import DomainError
from ..core.time import DAYS_IN_WEEK
from .arithmetic import QUARTERS_IN_YEAR, months_in_quarter
from .interfaces import CycleEngineProtocol
from .week_rule import WeekRule

Label = Tuple[int, int, int]


def year_range(engine: CycleEngineProtocol, year: int) -> Tuple[Label, Label]:
    last_month = engine.months_in_year(year)
    return engine.first_of_month(year, 1), engine.last_of_month(year, last_month)


def quarter_range(engine: CycleEngineProtocol, year: int, quarter: int) -> Tuple[Label, Label]:
    if not (1 <= quarter <= QUARTERS_IN_YEAR):
        raise DomainError(f"quarter must be in 1..{QUARTERS_IN_YEAR}, got {quarter}")
    per_quarter = months_in_quarter(engine, year)
    starting_month = per_quarter * (quarter - 1) + 1
    ending_month = starting_month + per_quarter - 1
    return engine.first_of_month(year, starting_month), engine.last_of_month(year, ending_month)


def month_range(engine: CycleEngineProtocol, year: int, month: int) -> Tuple[Label, Label]:
    months = engine.months_in_year(year)
    if not (1 <= month <= months):
        raise DomainError(f"month must be in 1..{months}, got {month}")
    return engine.first_of_month(year, month), engine.last_of_month(year, month)


def week_range(engine: CycleEngineProtocol, rule: WeekRule, year: int, week: int) -> Tuple[Label, Label]:
    """
    Week `week` of `year` under `rule`. For month calendars the ends may fall
    in the adjacent year; they are returned in that year's labels.
    """
    weeks = rule.weeks_in_year(year)
    if not (1 <= week <= weeks):
        raise DomainError(f"week must be in 1..{weeks} for year {year}, got {week}")
    if engine.cycle == "week":
        return (year, week, 1), (year, week, DAYS_IN_WEEK)
    start = rule.first_week_starts(year) + (week - 1) * DAYS_IN_WEEK
    return engine.date_from_iso_days(start), engine.date_from_iso_days(start + DAYS_IN_WEEK - 1)
