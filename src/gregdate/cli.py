from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})(BCE)?$", re.IGNORECASE)


def _protect_bce(arg: str) -> str:
    """-0044-03-15 -> 0044-03-15BCE, so argparse does not read it as an option."""
    m = _DATE_RE.match(arg)
    if m and arg.startswith("-") and not m.group(4):
        return arg[1:] + "BCE"
    return arg


def parse_ymd(s: str):
    """YYYY-MM-DD; BCE years as -0044-03-15 or 0044-03-15BCE."""
    import gregdate

    m = _DATE_RE.match(s.strip())
    if not m:
        raise SystemExit(f"invalid date {s!r}, expected YYYY-MM-DD")
    y, mo, d = (int(g) for g in m.groups()[:3])
    if m.group(4):
        y = -abs(y)
    try:
        return gregdate.new_date(y, mo, d)
    except gregdate.GregdateError as e:
        raise SystemExit(f"invalid date {s!r}: {e}") from e


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_info(argv: list[str]) -> int:
    from gregdate.engines.week import WEEKDAY_NAMES

    p = argparse.ArgumentParser(prog="gregdate info", description="Calendar facts for a date")
    p.add_argument("date", help="YYYY-MM-DD (BCE: -0044-03-15 or 0044-03-15BCE)")
    args = p.parse_args(argv)

    d = parse_ymd(args.date)
    iso_year, iso_wk = d.iso_week()
    dow = d.weekday()

    print(f"Date               = {d}")
    print(f"Era                = {'CE' if d.is_ce() else 'BCE'}")
    print(f"Astronomical year  = {d.astronomical_year()}")
    print(f"Leap year          = {d.is_leap()}")
    print(f"Days in month      = {d.days_in_month()}")
    print(f"Day of year        = {d.year_day()}")
    print(f"Weekday            = {dow} ({WEEKDAY_NAMES[dow - 1]})")
    print(f"ISO week           = {iso_year}-W{iso_wk:02d}")
    print(f"ISO weeks in year  = {d.iso_weeks_in_year()}")
    print(f"Days since epoch   = {d.days_since_epoch()}")
    return 0


def cmd_add(argv: list[str]) -> int:
    import gregdate

    p = argparse.ArgumentParser(prog="gregdate add", description="Add years, then months, then days to a date")
    p.add_argument("date", help="YYYY-MM-DD (BCE: -0044-03-15 or 0044-03-15BCE)")
    p.add_argument("--years", type=int, default=0)
    p.add_argument("--months", type=int, default=0)
    p.add_argument("--days", type=int, default=0)
    args = p.parse_args(argv)

    d = parse_ymd(args.date)
    try:
        out = d.add_parts(args.years, args.months, args.days)
    except gregdate.GregdateError as e:
        raise SystemExit(str(e)) from e
    print(out)
    return 0


def cmd_between(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="gregdate between", description="Signed days from the first date to the second")
    p.add_argument("start", help="YYYY-MM-DD")
    p.add_argument("end", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    print(parse_ymd(args.start).days_to(parse_ymd(args.end)))
    return 0


def cmd_from_days(argv: list[str]) -> int:
    import gregdate

    p = argparse.ArgumentParser(prog="gregdate from-days", description="Date for a day count (day 0 = 0001-01-01)")
    p.add_argument("days", type=int)
    args = p.parse_args(argv)

    try:
        print(gregdate.from_days(args.days))
    except gregdate.GregdateError as e:
        raise SystemExit(str(e)) from e
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    argv = [_protect_bce(a) for a in argv]

    # Shortcut: `gregdate YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_info(argv)

    p = argparse.ArgumentParser(prog="gregdate", description="Extended-range proleptic Gregorian date toolkit.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("info", help="Calendar facts for a date")
    sub.add_parser("add", help="Add years/months/days to a date")
    sub.add_parser("between", help="Signed day difference between two dates")
    sub.add_parser("from-days", help="Date for a day count since the epoch")

    # diagnostics
    sub.add_parser("pretty-month", help="Print a month calendar with ISO weeks (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-cycle"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "info":
        return cmd_info(rest)

    if args.cmd == "add":
        return cmd_add(rest)

    if args.cmd == "between":
        return cmd_between(rest)

    if args.cmd == "from-days":
        return cmd_from_days(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("gregdate.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "gregdate.diagnostics.round_trip",
            "leap-cycle": "gregdate.diagnostics.leap_cycle",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
