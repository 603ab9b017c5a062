from __future__ import annotations

import argparse
import random

import gregdate
from gregdate import Date


def random_date(start_year: int, end_year: int) -> Date:
    while True:
        y = random.randint(start_year, end_year)
        if y != 0:
            break
    m = random.randint(1, 12)
    d = random.randint(1, gregdate.days_in_month(y, m))
    return gregdate.new_date(y, m, d)


def roundtrip_test(
    N: int,
    start_year: int,
    end_year: int,
    seed: int,
    *,
    max_delta: int,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start_year, end_year)
        n = d0.days_since_epoch()

        back = gregdate.from_days(n)
        if back != d0:
            failures += 1
            print("\nFAIL (from_days)")
            print("d0:", d0)
            print("days:", n)
            print("back:", back)
            if failures >= max_failures:
                return failures

        delta = random.randint(-max_delta, max_delta)
        moved = d0.add_days(delta)
        if moved.days_since_epoch() != n + delta or moved.add_days(-delta) != d0:
            failures += 1
            print("\nFAIL (add_days)")
            print("d0:", d0)
            print("delta:", delta)
            print("moved:", moved, "days:", moved.days_since_epoch(), "expected:", n + delta)
            if failures >= max_failures:
                return failures

        nxt = d0.add_days(1)
        if nxt.weekday() % 7 != (d0.weekday() + 1) % 7:
            failures += 1
            print("\nFAIL (weekday)")
            print("d0:", d0, "weekday:", d0.weekday())
            print("next:", nxt, "weekday:", nxt.weekday())
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: date -> day count -> date, and add/subtract days.")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--start-year", type=int, default=-10000, help="First year (Gregorian, negative for BCE).")
    p.add_argument("--end-year", type=int, default=10000, help="Last year.")
    p.add_argument("--max-delta", type=int, default=10_000_000, help="Largest |days| added per trial.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    print(f"Testing years {args.start_year}..{args.end_year} ...")
    total_fail = roundtrip_test(
        args.N, args.start_year, args.end_year, args.seed,
        max_delta=args.max_delta, max_failures=args.max_failures,
    )

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
