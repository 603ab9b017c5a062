"""Diagnostics package.

- round_trip, pretty_month: always available, stdlib only
- leap_cycle: needs the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["round_trip", "pretty_month", "leap_cycle"]
