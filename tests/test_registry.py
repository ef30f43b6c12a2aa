"""Tests for calendar registration."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

import caldays
from caldays import CalendarExistsError, UnknownCalendarError, new_calendar
from caldays.core.engine import CalendarRegistry


def test_starts_with_builtins_only():
    assert caldays.list_calendars() == ["gregorian", "iso_week", "julian"]


def test_register_and_get():
    cal = new_calendar("retail", "week", weeks_in_month=[4, 5, 4])
    assert caldays.get_calendar("retail") is cal
    assert "retail" in caldays.list_calendars()
    assert caldays.calendar_info("retail")["id"]["family"] == "custom"


def test_reregistering_identical_config_is_rejected():
    first = new_calendar("fy", "month", month_of_year=7)
    with pytest.raises(CalendarExistsError):
        new_calendar("fy", "month", month_of_year=7)
    assert caldays.get_calendar("fy") is first


def test_reregistering_different_config_is_rejected():
    first = new_calendar("fy", "month", month_of_year=7)
    with pytest.raises(CalendarExistsError):
        new_calendar("fy", "month", month_of_year=10)
    # The existing name keeps its meaning
    assert caldays.get_calendar("fy") is first
    assert caldays.get_calendar("fy").to_date(2024, 1, 1).month == 7


@pytest.mark.parametrize("name", ["gregorian", "julian", "iso_week"])
def test_builtin_names_are_reserved(name):
    with pytest.raises(CalendarExistsError):
        new_calendar(name, "month")


def test_unknown_calendar():
    with pytest.raises(UnknownCalendarError):
        caldays.get_calendar("nope")
    with pytest.raises(KeyError):
        caldays.get_calendar("nope")


def test_concurrent_registration_single_winner():
    barrier = threading.Barrier(8)

    def attempt(i):
        barrier.wait()
        try:
            return new_calendar("contested", "month", month_of_year=i + 1)
        except CalendarExistsError:
            return None

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(8)))

    winners = [r for r in results if r is not None]
    assert len(winners) == 1
    assert caldays.get_calendar("contested") is winners[0]


def test_registry_is_isolated():
    reg = CalendarRegistry(reserved=("gregorian",))
    assert reg.list() == []
    cal = caldays.get_calendar("julian")
    reg.register("old_style", cal)
    assert reg.get("old_style") is cal
    assert "old_style" in reg
    with pytest.raises(CalendarExistsError):
        reg.register("gregorian", cal)


def test_reset_registry():
    new_calendar("temp", "month")
    caldays.reset_registry()
    assert "temp" not in caldays.list_calendars()
