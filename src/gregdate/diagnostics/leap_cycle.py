#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import gregdate


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "gregdate[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "gregdate[diagnostics]"') from e


@dataclass(frozen=True)
class Row:
    label: str
    predicate: Callable[[int], bool]
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"
    lw: float = 1.2


ROWS: Dict[str, Row] = {
    "leap": Row("Leap year (366 days)", gregdate.is_leap, marker="s", size=30, hollow=False),
    "long": Row("ISO long year (53 weeks)", lambda y: gregdate.iso_weeks_in_year(y) == 53,
                marker="o", size=40, hollow=True),
}


def year_range(start_year: int, end_year: int) -> List[int]:
    """Gregorian years in [start_year, end_year], skipping the non-existent year 0."""
    return [y for y in range(start_year, end_year + 1) if y != 0]


def build_points(np, row: Row, years: List[int], level: int) -> Tuple["np.ndarray", "np.ndarray"]:
    xs = [gregdate.Date.new(y, 1, 1).astronomical_year() for y in years if row.predicate(y)]
    return np.array(xs, dtype=int), np.full(len(xs), level, dtype=int)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Barcode of leap years and 53-week ISO years across a range (astronomical x axis)."
    )
    p.add_argument("--start-year", type=int, default=-120, help="Gregorian year (negative for BCE)")
    p.add_argument("--end-year", type=int, default=120)
    p.add_argument("--out", default="leap_cycle.png")
    p.add_argument("--title", default="Leap years and ISO long years around the epoch")
    p.add_argument("--year-step", type=int, default=10, help="Label every k astronomical years.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    years = year_range(args.start_year, args.end_year)
    if not years:
        raise SystemExit("empty year range")
    a0 = gregdate.Date.new(years[0], 1, 1).astronomical_year()
    a1 = gregdate.Date.new(years[-1], 1, 1).astronomical_year()

    fig, ax = plt.subplots(figsize=(16, 2.4))

    for level, row in enumerate(ROWS.values(), start=1):
        x, yv = build_points(np, row, years, level)
        if row.hollow:
            ax.scatter(x, yv, s=row.size, marker=row.marker, facecolors="none",
                       edgecolors=row.color, linewidths=row.lw, label=row.label, zorder=5)
        else:
            ax.scatter(x, yv, s=row.size, marker=row.marker, c=row.color,
                       linewidths=0.0, label=row.label, zorder=5)

    ax.axvline(0.5, color="0.6", lw=0.8, ls="--", zorder=1)  # 1 BCE | 1 CE

    ax.set_xlim(a0 - 0.5, a1 + 0.5)
    ax.set_ylim(0.5, len(ROWS) + 0.5)
    ax.tick_params(axis="both", which="both", length=0)
    step = max(1, int(args.year_step))
    xt = list(range(a0 - a0 % step, a1 + 1, step))
    ax.set_xticks(xt)
    ax.set_xticklabels([str(a) for a in xt])
    ax.set_xlabel("Astronomical year (0 = 1 BCE)")
    ax.set_yticks(list(range(1, len(ROWS) + 1)))
    ax.set_yticklabels(list(ROWS))

    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
