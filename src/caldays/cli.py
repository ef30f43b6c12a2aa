from __future__ import annotations

import argparse
import json
import re
import sys

_DATE_RE = re.compile(r"^\d{1,}-\d{1,2}-\d{1,2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    """Parses YYYY-MM-DD; a leading '-' marks a non-positive year (pass it after `--`)."""
    sign = -1 if s.startswith("-") else 1
    y, m, d = map(int, s.lstrip("-").split("-"))
    return sign * y, m, d


def _fmt(label) -> str:
    y, m, d = label
    return f"{y:04d}-{m:02d}-{d:02d}" if y >= 0 else f"-{-y:04d}-{m:02d}-{d:02d}"


def cmd_info(argv: list[str]) -> int:
    import caldays

    p = argparse.ArgumentParser(prog="caldays info", description="Show a calendar's configuration")
    p.add_argument("name", nargs="?", help="calendar name (omit to list calendars)")
    args = p.parse_args(argv)

    if args.name is None:
        for name in caldays.list_calendars():
            print(name)
        return 0
    print(json.dumps(caldays.calendar_info(args.name), indent=2, sort_keys=True))
    return 0


def cmd_convert(argv: list[str]) -> int:
    import caldays

    p = argparse.ArgumentParser(prog="caldays convert", description="Re-label a date in another calendar")
    p.add_argument("date", help="YYYY-MM-DD (or YYYY-WW-D for week calendars)")
    p.add_argument("--from", dest="source", default="gregorian")
    p.add_argument("--to", dest="target", required=True)
    args = p.parse_args(argv)

    source = caldays.get_calendar(args.source)
    y, m, d = _parse_ymd(args.date)
    converted = caldays.convert(source.new_date(y, m, d), args.target)
    iso_days = source.date_to_iso_days(y, m, d)
    print(f"{args.source:>10}: {_fmt((y, m, d))}")
    print(f"{args.target:>10}: {_fmt(converted.ymd())}")
    print(f"{'iso days':>10}: {iso_days}")
    return 0


def cmd_week(argv: list[str]) -> int:
    import caldays

    p = argparse.ArgumentParser(prog="caldays week", description="Week of year of a date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--first-day", type=int, default=None, help="1 = Monday ... 7 = Sunday")
    p.add_argument("--min-days", type=int, default=None, help="days of the new year in week 1")
    args = p.parse_args(argv)

    cal = caldays.get_calendar(args.calendar)
    y, m, d = _parse_ymd(args.date)
    cal.new_date(y, m, d)
    week = cal.week_of_year(y, m, d, first_day=args.first_day, min_days=args.min_days)
    if not week:
        print(f"week_of_year is not defined for calendar '{cal.name}'")
        return 1
    print(f"week_of_year     = {week.year}-W{week.week:02d}")
    iso_week = cal.iso_week_of_year(y, m, d)
    print(f"iso_week_of_year = {iso_week.year}-W{iso_week.week:02d}")
    print(f"day_of_week      = {cal.day_of_week(y, m, d)}")
    return 0


def cmd_range(argv: list[str]) -> int:
    import caldays

    p = argparse.ArgumentParser(prog="caldays range", description="First and last day of a year/quarter/month/week")
    p.add_argument("name", help="calendar name")
    p.add_argument("--year", type=int, required=True)
    unit = p.add_mutually_exclusive_group()
    unit.add_argument("--quarter", type=int)
    unit.add_argument("--month", type=int)
    unit.add_argument("--week", type=int)
    args = p.parse_args(argv)

    cal = caldays.get_calendar(args.name)
    if args.quarter is not None:
        r = cal.quarter(args.year, args.quarter)
    elif args.month is not None:
        r = cal.month(args.year, args.month)
    elif args.week is not None:
        r = cal.week(args.year, args.week)
    else:
        r = cal.year(args.year)

    if not r:
        print(f"{r.operation} is not defined for calendar '{cal.name}'")
        return 1
    print(f"{_fmt(r.first.ymd())} .. {_fmt(r.last.ymd())}")
    return 0


def cmd_long_years(argv: list[str]) -> int:
    import caldays
    from caldays.bulk import long_years

    p = argparse.ArgumentParser(prog="caldays long-years", description="List years with 53 weeks")
    p.add_argument("--start", type=int, default=2000)
    p.add_argument("--stop", type=int, default=2400, help="exclusive")
    p.add_argument("--calendar", default="gregorian")
    args = p.parse_args(argv)

    years = long_years(caldays.get_calendar(args.calendar), args.start, args.stop)
    print(" ".join(str(y) for y in years.tolist()))
    print(f"{len(years)} long years in [{args.start}, {args.stop})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    from caldays.logging import configure_logging

    # Shortcut: `caldays YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_week(argv)

    p = argparse.ArgumentParser(prog="caldays", description="Multi-calendar date toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING or ERROR")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("info", help="List calendars or show one calendar's configuration")
    sub.add_parser("convert", help="Re-label a date in another calendar")
    sub.add_parser("week", help="Week of year of a date")
    sub.add_parser("range", help="First and last day of a year, quarter, month or week")
    sub.add_parser("long-years", help="Years with 53 weeks")

    args, rest = p.parse_known_args(argv)
    configure_logging(level=args.log_level)

    if args.cmd == "info":
        return cmd_info(rest)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "week":
        return cmd_week(rest)

    if args.cmd == "range":
        return cmd_range(rest)

    if args.cmd == "long-years":
        return cmd_long_years(rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
