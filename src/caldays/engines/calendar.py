"""
caldays.engines.calendar
------------------------
The Orchestrator. A single Calendar class serves every variant: it binds a
cycle engine (month- or week-based) and an optional week rule, and exposes
the shared operation set on top of them.

Calendars are immutable once built; every method is a pure function of the
spec and its arguments.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from ..core.errors import DomainError
from ..core.time import (
    DAYS_IN_WEEK,
    gregorian_year_bounds,
    iso_days_to_day_of_week,
    iso_days_to_gregorian,
    iso_days_to_pydate,
    pydate_to_iso_days,
)
from ..core.types import CalendarDate, CalendarSpec, DateRange, NotDefined, WeekRuleParams, WeekYear
from . import arithmetic, ranges
from .interfaces import CycleEngineProtocol
from .week_rule import ISO_WEEK_RULE, WeekRule

# ISO-8601 numbering over the Gregorian projection, shared by every calendar
_ISO_RULE = WeekRule(ISO_WEEK_RULE, gregorian_year_bounds)


class Calendar:
    """
    Translates calendar labels to iso days and vice versa and answers
    calendar queries. Queries a calendar does not model return NotDefined.
    """
    def __init__(
        self,
        spec: CalendarSpec,
        engine: CycleEngineProtocol,
        week_rule: Optional[WeekRule] = None,
    ):
        self.spec = spec
        self.id = spec.id
        self.engine = engine
        self.week_rule = week_rule

    def __repr__(self) -> str:
        return f"Calendar({self.name!r}, cycle={self.cycle!r})"

    @property
    def name(self) -> str:
        return self.id.name

    @property
    def cycle(self) -> str:
        return self.spec.cycle

    @property
    def cldr_calendar_type(self) -> str:
        """Display-rule tag for formatting collaborators."""
        return "gregorian" if self.cycle == "month" else "other"

    def _not_defined(self, operation: str) -> NotDefined:
        return NotDefined(calendar=self.name, operation=operation)

    def _date(self, label: Tuple[int, int, int]) -> CalendarDate:
        year, month, day = label
        return CalendarDate(year, month, day, self.name)

    # ---------------------------------------------------------
    # Validation / construction
    # ---------------------------------------------------------

    def valid_date(self, year: int, month: int, day: int) -> bool:
        return self.engine.valid_date(year, month, day)

    def new_date(self, year: int, month: int, day: int, *, coerce: bool = False) -> CalendarDate:
        """
        Builds a CalendarDate. An out-of-range day is clamped only when
        coerce=True; any other invalid component raises DomainError.
        """
        if coerce and self.engine.valid_date(year, month, 1):
            day = max(1, min(day, self._period_length(year, month)))
        if not self.engine.valid_date(year, month, day):
            raise DomainError(f"{year}-{month}-{day} is not a valid date in calendar '{self.name}'")
        return CalendarDate(year, month, day, self.name)

    def _period_length(self, year: int, month: int) -> int:
        if self.cycle == "week":
            return DAYS_IN_WEEK
        return self.engine.days_in_month(year, month)

    # ---------------------------------------------------------
    # Year / month structure
    # ---------------------------------------------------------

    def days_in_month(self, year: int, month: int) -> int:
        return self.engine.days_in_month(year, month)

    def days_in_year(self, year: int) -> int:
        return self.engine.days_in_year(year)

    def leap_year(self, year: int) -> bool:
        return self.engine.leap_year(year)

    def months_in_year(self, year: int) -> int:
        return self.engine.months_in_year(year)

    def periods_in_year(self, year: int) -> int:
        """Months in a month calendar, weeks in a week calendar."""
        if self.cycle == "week":
            return self.engine.weeks_in_year(year)
        return self.engine.months_in_year(year)

    def days_in_week(self) -> int:
        return DAYS_IN_WEEK

    def year_of_era(self, year: int) -> Tuple[int, int]:
        return self.engine.year_of_era(year)

    def day_of_era(self, year: int, month: int, day: int) -> Tuple[int, int]:
        """Days since the start of the era (counting backwards in era 0)."""
        _, era = self.engine.year_of_era(year)
        iso_days = self.engine.date_to_iso_days(year, month, day)
        era_start = self.engine.year_bounds(1)[0]
        if era == 1:
            return iso_days - era_start + 1, era
        return era_start - iso_days, era

    # ---------------------------------------------------------
    # Day-level queries
    # ---------------------------------------------------------

    def day_of_week(self, year: int, month: int, day: int) -> int:
        """1 = Monday ... 7 = Sunday."""
        return iso_days_to_day_of_week(self.engine.date_to_iso_days(year, month, day))

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return self.engine.day_of_year(year, month, day)

    def month_of_year(self, year: int, month: int, day: int) -> int:
        return self.engine.month_of_year(year, month, day)

    def quarter_of_year(self, year: int, month: int, day: int) -> int:
        return self.engine.quarter_of_year(year, month, day)

    # ---------------------------------------------------------
    # Weeks
    # ---------------------------------------------------------

    def week_of_year(
        self,
        year: int,
        month: int,
        day: int,
        *,
        first_day: Optional[int] = None,
        min_days: Optional[int] = None,
    ) -> Union[WeekYear, NotDefined]:
        """
        (week_year, week) of a date. Month calendars may override the
        configured first_day/min_days per call; week calendars carry the week
        in the date itself.
        """
        if self.week_rule is None:
            return self._not_defined("week_of_year")
        if self.cycle == "week":
            if first_day is not None or min_days is not None:
                raise ValueError("first_day/min_days overrides apply to month calendars only")
            return WeekYear(year, month)
        rule = self.week_rule
        if first_day is not None or min_days is not None:
            params = WeekRuleParams(
                first_day=rule.first_day if first_day is None else first_day,
                min_days=rule.min_days if min_days is None else min_days,
            )
            rule = WeekRule(params, self.engine.year_bounds, self.engine.step_year)
        return rule.week_of_year(self.engine.date_to_iso_days(year, month, day), year)

    def iso_week_of_year(self, year: int, month: int, day: int) -> Union[WeekYear, NotDefined]:
        """ISO-8601 week of the Gregorian day this date falls on."""
        if self.week_rule is None:
            return self._not_defined("iso_week_of_year")
        iso_days = self.engine.date_to_iso_days(year, month, day)
        gregorian_year, _, _ = iso_days_to_gregorian(iso_days)
        return _ISO_RULE.week_of_year(iso_days, gregorian_year)

    def long_year(self, year: int) -> Union[bool, NotDefined]:
        if self.week_rule is None:
            return self._not_defined("long_year")
        return self.week_rule.long_year(year)

    def weeks_in_year(self, year: int) -> Union[Tuple[int, int], NotDefined]:
        """(weeks, days of the year that fall in the last week)."""
        if self.week_rule is None:
            return self._not_defined("weeks_in_year")
        weeks = self.week_rule.weeks_in_year(year)
        if self.cycle == "week":
            return weeks, DAYS_IN_WEEK
        last_week_starts = self.week_rule.first_week_starts(year) + (weeks - 1) * DAYS_IN_WEEK
        _, year_end = self.engine.year_bounds(year)
        return weeks, min(DAYS_IN_WEEK, year_end - last_week_starts + 1)

    # ---------------------------------------------------------
    # Day counting
    # ---------------------------------------------------------

    def date_to_iso_days(self, year: int, month: int, day: int) -> int:
        return self.engine.date_to_iso_days(year, month, day)

    def date_from_iso_days(self, iso_days: int) -> Tuple[int, int, int]:
        return self.engine.date_from_iso_days(iso_days)

    def from_iso_days(self, iso_days: int) -> CalendarDate:
        return self._date(self.engine.date_from_iso_days(iso_days))

    def to_date(self, year: int, month: int, day: int) -> date:
        """The datetime.date (proleptic Gregorian) this date falls on."""
        return iso_days_to_pydate(self.engine.date_to_iso_days(year, month, day))

    def from_date(self, d: date) -> CalendarDate:
        return self.from_iso_days(pydate_to_iso_days(d))

    def convert(self, d: CalendarDate, source: "Calendar") -> CalendarDate:
        """Re-labels a date of `source` in this calendar via iso days."""
        return self.from_iso_days(source.date_to_iso_days(d.year, d.month, d.day))

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def plus(
        self,
        year: int,
        month: int,
        day: int,
        unit: str,
        amount: int,
        *,
        coerce: bool = False,
    ) -> Tuple[int, int, int]:
        return arithmetic.plus(self.engine, year, month, day, unit, amount, coerce=coerce)

    # ---------------------------------------------------------
    # Ranges
    # ---------------------------------------------------------

    def _range(self, labels: Tuple[Tuple[int, int, int], Tuple[int, int, int]]) -> DateRange:
        first, last = labels
        return DateRange(self._date(first), self._date(last))

    def year(self, year: int) -> DateRange:
        return self._range(ranges.year_range(self.engine, year))

    def quarter(self, year: int, quarter: int) -> DateRange:
        return self._range(ranges.quarter_range(self.engine, year, quarter))

    def month(self, year: int, month: int) -> DateRange:
        return self._range(ranges.month_range(self.engine, year, month))

    def week(self, year: int, week: int) -> Union[DateRange, NotDefined]:
        if self.week_rule is None:
            return self._not_defined("week")
        return self._range(ranges.week_range(self.engine, self.week_rule, year, week))

    def dates(self, r: DateRange) -> Iterator[CalendarDate]:
        """Every date of `r`, in order."""
        start = self.engine.date_to_iso_days(*r.first.ymd())
        end = self.engine.date_to_iso_days(*r.last.ymd())
        for iso_days in range(start, end + 1):
            yield self.from_iso_days(iso_days)

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "id": asdict(self.id),
            "cycle": self.cycle,
            "cycle_params": asdict(self.spec.cycle_params),
            "week_rule": asdict(self.spec.week_rule) if self.spec.week_rule else None,
            "locale": self.spec.locale_ref,
            "cldr_calendar_type": self.cldr_calendar_type,
        }
