"""
caldays.engines.interfaces
--------------------------
Defines the boundary between the cycle engines (month- or week-based label
arithmetic) and the orchestrating Calendar.

Standard Reference Frame:
All day counts are iso days, i.e. days since proleptic Gregorian 0000-01-01.
"""

from __future__ import annotations

from typing import Protocol, Tuple


class CycleEngineProtocol(Protocol):
    """
    Maps (year, month|week, day) labels to iso days and vice versa, and
    answers the per-year layout questions the Calendar needs.
    """
    cycle: str

    def year_of_era(self, year: int) -> Tuple[int, int]:
        ...

    def step_year(self, year: int, n: int) -> int:
        """Year label `n` years away from `year`."""
        ...

    def months_in_year(self, year: int) -> int:
        ...

    def days_in_month(self, year: int, month: int) -> int:
        """Days in calendar month `month` (not week) of `year`."""
        ...

    def days_in_year(self, year: int) -> int:
        ...

    def leap_year(self, year: int) -> bool:
        ...

    def valid_date(self, year: int, month: int, day: int) -> bool:
        ...

    def date_to_iso_days(self, year: int, month: int, day: int) -> int:
        ...

    def date_from_iso_days(self, iso_days: int) -> Tuple[int, int, int]:
        """Exact inverse of date_to_iso_days over the valid domain."""
        ...

    def year_bounds(self, year: int) -> Tuple[int, int]:
        """First and last iso day of `year`."""
        ...

    def day_of_year(self, year: int, month: int, day: int) -> int:
        ...

    def month_of_year(self, year: int, month: int, day: int) -> int:
        ...

    def quarter_of_year(self, year: int, month: int, day: int) -> int:
        ...

    # ---------------------------------------------------------
    # Range and arithmetic support
    # ---------------------------------------------------------

    def first_of_month(self, year: int, month: int) -> Tuple[int, int, int]:
        """Date label of the first day of calendar month `month`."""
        ...

    def last_of_month(self, year: int, month: int) -> Tuple[int, int, int]:
        ...

    def plus_months(self, year: int, month: int, day: int, months: int, *, coerce: bool = False) -> Tuple[int, int, int]:
        ...
