from __future__ import annotations
from typing import Dict

from caldays.core.engine import CalendarRegistry
from caldays.engines.calendar import Calendar
from caldays.engines.factory import build_calendar
from caldays.engines.specs import BUILTIN_SPECS


def build_builtins() -> Dict[str, Calendar]:
    return {name: build_calendar(spec) for name, spec in BUILTIN_SPECS.items()}


def build_registry() -> CalendarRegistry:
    """An empty registry; built-in names are reserved."""
    return CalendarRegistry(reserved=tuple(BUILTIN_SPECS))
