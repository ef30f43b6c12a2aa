from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from .bootstrap import build_builtins, build_registry
from .core.engine import CalendarRegistry
from .core.errors import UnknownCalendarError
from .core.types import CalendarDate
from .engines.calendar import Calendar
from .engines.factory import make_calendar

_BUILTINS: Dict[str, Calendar] = build_builtins()
_registry: Optional[CalendarRegistry] = None


def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg


def reset_registry() -> None:
    """Drop every registered calendar. Useful for testing."""
    set_registry(build_registry())


def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry


def list_calendars() -> List[str]:
    return sorted(set(_BUILTINS) | set(_reg().list()))


def get_calendar(name: str) -> Calendar:
    if name in _BUILTINS:
        return _BUILTINS[name]
    try:
        return _reg().get(name)
    except UnknownCalendarError:
        raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {list_calendars()}") from None


def calendar_info(name: str) -> Dict[str, Any]:
    return get_calendar(name).info()


def new_calendar(name: str, cycle: str, **options: Any) -> Calendar:
    """
    Validates `options`, builds a calendar and registers it under `name`.

    Raises CalendarValidationError (naming every bad key) before anything is
    registered, and CalendarExistsError if `name` is taken.
    """
    _, calendar = make_calendar(name, cycle, **options)
    _reg().register(name, calendar)
    return calendar


def convert(d: CalendarDate, to: str) -> CalendarDate:
    """Re-labels `d` in calendar `to`."""
    return get_calendar(to).convert(d, get_calendar(d.calendar))


def to_date(d: CalendarDate) -> date:
    return get_calendar(d.calendar).to_date(d.year, d.month, d.day)


def from_date(d: date, *, calendar: str = "gregorian") -> CalendarDate:
    return get_calendar(calendar).from_date(d)


def iso_week_of_year(year: int, month: int, day: int):
    """ISO-8601 (week_year, week) of a Gregorian date."""
    return _BUILTINS["gregorian"].iso_week_of_year(year, month, day)
