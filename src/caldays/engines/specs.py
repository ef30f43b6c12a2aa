from __future__ import annotations

from typing import Dict

from ..core.types import CalendarId, CalendarSpec, MonthCycleParams, WeekCycleParams, WeekRuleParams

# ============================================================
# BUILT-IN CALENDARS
# ============================================================

# Proleptic Gregorian, astronomical year numbering (year 0 == 1 BCE).
GREGORIAN = CalendarSpec(
    id=CalendarId("builtin", "gregorian"),
    cycle="month",
    cycle_params=MonthCycleParams(leap_rule="gregorian", year_zero=True),
    week_rule=WeekRuleParams(first_day=1, min_days=4),
)

# Proleptic Julian, no year zero (year -1 == 1 BCE). No week numbering.
JULIAN = CalendarSpec(
    id=CalendarId("builtin", "julian"),
    cycle="month",
    cycle_params=MonthCycleParams(leap_rule="julian", year_zero=False),
    week_rule=None,
)

# ISO-8601 week calendar with a 4-4-5 month layout.
ISO_WEEK = CalendarSpec(
    id=CalendarId("builtin", "iso_week"),
    cycle="week",
    cycle_params=WeekCycleParams(weeks_in_month=(4, 4, 5)),
    week_rule=WeekRuleParams(first_day=1, min_days=4),
)

BUILTIN_SPECS: Dict[str, CalendarSpec] = {
    spec.id.name: spec for spec in (GREGORIAN, JULIAN, ISO_WEEK)
}
