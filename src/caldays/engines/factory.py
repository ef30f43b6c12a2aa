"""
caldays.engines.factory
-----------------------
Transforms calendar options into frozen CalendarSpec values, and
CalendarSpec values into live Calendar objects.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Tuple

from caldays.config import get_config
from caldays.core.errors import CalendarValidationError
from caldays.core.types import CalendarId, CalendarSpec, MonthCycleParams, WeekCycleParams, WeekRuleParams
from caldays.engines.calendar import Calendar
from caldays.engines.month_cycle import MonthCycleEngine
from caldays.engines.week_cycle import WEEKS_IN_QUARTER, WeekCycleEngine
from caldays.engines.week_rule import WeekRule
from caldays.logging import get_logger

logger = get_logger(__name__)

COMMON_OPTIONS = frozenset({"first_day", "min_days", "month_of_year", "epoch", "locale"})

VALID_OPTIONS: Dict[str, frozenset] = {
    "month": COMMON_OPTIONS | {"leap_rule", "year_label", "year_zero"},
    "week": COMMON_OPTIONS | {"weeks_in_month"},
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_range(errors: Dict[str, str], options: Mapping[str, Any], key: str, lo: int, hi: int) -> None:
    if key in options and not (_is_int(options[key]) and lo <= options[key] <= hi):
        errors[key] = f"must be an integer in {lo}..{hi}, got {options[key]!r}"


def validate_options(cycle: str, options: Mapping[str, Any]) -> Dict[str, str]:
    """Returns {key: problem} for every unknown key or invalid value. Empty means valid."""
    if cycle not in VALID_OPTIONS:
        return {"cycle": f"must be one of {sorted(VALID_OPTIONS)}, got {cycle!r}"}

    errors: Dict[str, str] = {}
    for key in sorted(set(options) - VALID_OPTIONS[cycle]):
        errors[key] = f"unknown option for a {cycle} calendar (value {options[key]!r})"

    _check_range(errors, options, "first_day", 1, 7)
    _check_range(errors, options, "min_days", 1, 7)
    _check_range(errors, options, "month_of_year", 1, 12)

    if "epoch" in options and not _is_int(options["epoch"]):
        errors["epoch"] = f"must be an integer day offset, got {options['epoch']!r}"
    if "locale" in options and not isinstance(options["locale"], str):
        errors["locale"] = f"must be a string, got {options['locale']!r}"

    if cycle == "month":
        if options.get("leap_rule", "gregorian") not in ("gregorian", "julian"):
            errors["leap_rule"] = f"must be 'gregorian' or 'julian', got {options['leap_rule']!r}"
        if options.get("year_label", "beginning") not in ("beginning", "ending"):
            errors["year_label"] = f"must be 'beginning' or 'ending', got {options['year_label']!r}"
        if "year_zero" in options and not isinstance(options["year_zero"], bool):
            errors["year_zero"] = f"must be a bool, got {options['year_zero']!r}"

    if cycle == "week" and "weeks_in_month" in options:
        problem = _check_layout(options["weeks_in_month"])
        if problem:
            errors["weeks_in_month"] = problem

    return errors


def _check_layout(layout: Any) -> str | None:
    if isinstance(layout, (str, bytes)) or not hasattr(layout, "__iter__"):
        return f"must be a sequence of week counts, got {layout!r}"
    weeks = list(layout)
    if not weeks or not all(_is_int(w) and w > 0 for w in weeks):
        return f"must be a non-empty sequence of positive integers, got {layout!r}"
    # Four quarters of 13 weeks give 52; a long year adds its 53rd week to the final month.
    if sum(weeks) != WEEKS_IN_QUARTER:
        return f"must sum to {WEEKS_IN_QUARTER} weeks per quarter (52 per year), got {sum(weeks)}"
    return None


def make_spec(name: str, cycle: str, options: Mapping[str, Any]) -> CalendarSpec:
    """Validates `options` and returns the CalendarSpec they describe."""
    errors = validate_options(cycle, options)
    if not isinstance(name, str) or not name:
        errors["name"] = f"must be a non-empty string, got {name!r}"
    if errors:
        logger.warning("calendar_options_invalid", calendar=name, cycle=cycle, keys=sorted(errors))
        raise CalendarValidationError(errors)

    # Defaults are resolved here, once; the built calendar never reads global config.
    config = get_config()
    week_rule = WeekRuleParams(
        first_day=options.get("first_day", config.default_first_day),
        min_days=options.get("min_days", config.default_min_days),
    )
    cycle_params: MonthCycleParams | WeekCycleParams
    if cycle == "month":
        cycle_params = MonthCycleParams(
            leap_rule=options.get("leap_rule", "gregorian"),
            year_zero=options.get("year_zero", True),
            month_of_year=options.get("month_of_year", 1),
            year_label=options.get("year_label", "beginning"),
            epoch_offset=options.get("epoch", 0),
        )
    else:
        cycle_params = WeekCycleParams(
            weeks_in_month=tuple(options.get("weeks_in_month", (4, 4, 5))),
            month_of_year=options.get("month_of_year", 1),
            epoch_offset=options.get("epoch", 0),
        )

    return CalendarSpec(
        id=CalendarId("custom", name),
        cycle=cycle,
        cycle_params=cycle_params,
        week_rule=week_rule,
        locale_ref=options.get("locale"),
        meta={"options": dict(options)},
    )


def build_calendar(spec: CalendarSpec) -> Calendar:
    """Transforms a pure data CalendarSpec into a live Calendar."""
    # 1. Build the cycle engine
    if isinstance(spec.cycle_params, MonthCycleParams):
        engine = MonthCycleEngine(spec.cycle_params)
    elif isinstance(spec.cycle_params, WeekCycleParams):
        if spec.week_rule is None:
            raise TypeError("Week calendars require a week rule")
        engine = WeekCycleEngine(spec.cycle_params, spec.week_rule)
    else:
        raise TypeError(f"Unknown cycle params type: {type(spec.cycle_params)}")

    # 2. Bind the week rule to the engine's own years
    if spec.week_rule is None:
        week_rule = None
    elif isinstance(engine, WeekCycleEngine):
        week_rule = engine.rule
    else:
        week_rule = WeekRule(spec.week_rule, engine.year_bounds, engine.step_year)

    # 3. Orchestrate
    return Calendar(spec, engine, week_rule)


def make_calendar(name: str, cycle: str, **options: Any) -> Tuple[CalendarSpec, Calendar]:
    spec = make_spec(name, cycle, options)
    return spec, build_calendar(spec)
