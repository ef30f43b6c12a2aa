"""Tests for the command line."""

import pytest

from caldays.cli import main


def test_info_lists_calendars(capsys):
    assert main(["info"]) == 0
    out = capsys.readouterr().out.split()
    assert out == ["gregorian", "iso_week", "julian"]


def test_info_one(capsys):
    assert main(["info", "iso_week"]) == 0
    assert '"cycle": "week"' in capsys.readouterr().out


def test_week(capsys):
    assert main(["week", "2016-01-01"]) == 0
    out = capsys.readouterr().out
    assert "week_of_year     = 2015-W53" in out
    assert "day_of_week      = 5" in out


def test_week_shortcut(capsys):
    assert main(["2021-12-31", "--first-day", "7", "--min-days", "1"]) == 0
    assert "week_of_year     = 2022-W01" in capsys.readouterr().out


def test_week_not_defined(capsys):
    assert main(["week", "2016-01-01", "--calendar", "julian"]) == 1


def test_convert(capsys):
    assert main(["convert", "1582-10-15", "--to", "julian"]) == 0
    assert "julian: 1582-10-05" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["range", "gregorian", "--year", "2024", "--quarter", "1"], "2024-01-01 .. 2024-03-31"),
        (["range", "gregorian", "--year", "2023", "--month", "2"], "2023-02-01 .. 2023-02-28"),
        (["range", "iso_week", "--year", "2015"], "2015-01-01 .. 2015-53-07"),
    ],
)
def test_range(capsys, argv, expected):
    assert main(argv) == 0
    assert expected in capsys.readouterr().out


def test_range_not_defined(capsys):
    assert main(["range", "julian", "--year", "2020", "--week", "1"]) == 1
    assert "not defined" in capsys.readouterr().out


def test_long_years(capsys):
    assert main(["long-years", "--start", "2000", "--stop", "2400"]) == 0
    assert "71 long years" in capsys.readouterr().out


def test_long_years_for_named_calendar(capsys):
    assert main(["long-years", "--start", "2000", "--stop", "2030", "--calendar", "iso_week"]) == 0
    out = capsys.readouterr().out
    assert "2004 2009 2015 2020 2026" in out
    assert "5 long years" in out
