from __future__ import annotations

import argparse

import gregdate


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def format_grid(title: str, weeks: list[list[tuple[str, str]]]) -> str:
    lines = [title, dow_header(), "-" * len(dow_header())]
    for wk in weeks:
        lines.append(" ".join(c[0] for c in wk).rstrip())
        lines.append(" ".join(c[1] for c in wk).rstrip())
    return "\n".join(lines) + "\n"


def month_weeks(year: int, month: int) -> list[list[tuple[str, str]]]:
    first = gregdate.new_date(year, month, 1)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(first.weekday() - 1):  # Monday = 1
        wk.append(cell("", ""))

    d = first
    for _ in range(first.days_in_month()):
        wk.append(cell(f"{d.day:2d}", f"w{d.iso_week_of_year():02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        d = d.add_days(1)
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def gregorian_month_calendar(year: int, month: int) -> str:
    d = gregdate.new_date(year, month, 1)
    era = "CE" if d.is_ce() else "BCE"
    title = f"Gregorian month  {d.year}-{d.month:02d} ({abs(d.year)} {era}, astronomical {d.astronomical_year()})"
    return format_grid(title, month_weeks(d.year, d.month))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a proleptic Gregorian month calendar with ISO week numbers."
    )
    p.add_argument("--year", type=int, default=None, help="Gregorian year (negative for BCE)")
    p.add_argument("--month", type=int, default=None, help="Month 1..12")
    args = p.parse_args(argv)

    if args.year is None or args.month is None:
        t = gregdate.today()
        year, month = t.year, t.month
    else:
        year, month = args.year, args.month

    try:
        print(gregorian_month_calendar(year, month))
    except gregdate.GregdateError as e:
        raise SystemExit(str(e)) from e
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
