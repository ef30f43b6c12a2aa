"""
caldays.engines.arithmetic
--------------------------
Calendar-unit date arithmetic.

The day is never clamped silently: without `coerce=True` a month step may land
on a day past the end of the destination month (e.g. 2021-02-31). Callers
decide whether that is acceptable by checking `valid_date`.
"""

from __future__ import annotations

from typing import Tuple

from .interfaces import CycleEngineProtocol

QUARTERS_IN_YEAR = 4

_UNITS = {
    "month": "months",
    "months": "months",
    "quarter": "quarters",
    "quarters": "quarters",
}


def normalize_unit(unit: str) -> str:
    try:
        return _UNITS[unit]
    except KeyError:
        raise ValueError(f"Unknown date part '{unit}'. Expected one of {sorted(set(_UNITS.values()))}") from None


def months_in_quarter(engine: CycleEngineProtocol, year: int) -> int:
    return engine.months_in_year(year) // QUARTERS_IN_YEAR


def plus(
    engine: CycleEngineProtocol,
    year: int,
    month: int,
    day: int,
    unit: str,
    amount: int,
    *,
    coerce: bool = False,
) -> Tuple[int, int, int]:
    """Adds `amount` months or quarters to a date; returns the new (year, month, day)."""
    if normalize_unit(unit) == "quarters":
        amount = amount * months_in_quarter(engine, year)
    return engine.plus_months(year, month, day, amount, coerce=coerce)
