"""gregdate public API.

Keep this surface small: users should mostly interact with Date and the
functions re-exported here.
"""

from .api import (
    from_days,
    days_between,
    today,
    min_date,
    max_date,
    is_leap,
    days_in_month,
    days_in_year,
    iso_weeks_in_year,
    days_to_anchor_day,
)
from .core.errors import (
    GregdateError,
    UninitializedDateError,
    InvalidDateError,
    ArithmeticOverflowError,
)
from .core.types import Date, new_date
from .engines.week import (
    MONDAY,
    TUESDAY,
    WEDNESDAY,
    THURSDAY,
    FRIDAY,
    SATURDAY,
    SUNDAY,
)

__all__ = [
    "Date",
    "new_date",
    "from_days",
    "days_between",
    "today",
    "min_date",
    "max_date",
    "is_leap",
    "days_in_month",
    "days_in_year",
    "iso_weeks_in_year",
    "days_to_anchor_day",
    "GregdateError",
    "UninitializedDateError",
    "InvalidDateError",
    "ArithmeticOverflowError",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
]
