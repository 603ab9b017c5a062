from __future__ import annotations

import logging
import os
from functools import lru_cache

logger = logging.getLogger(__name__)

# 15 * 100 * 100 * 1000 years either side of the epoch.
DEFAULT_MAX_YEAR = 150_000_000


@lru_cache(maxsize=1)
def max_year() -> int:
    """
    Magnitude of the largest supported year.

    Search order:
      1) GREGDATE_MAX_YEAR environment variable (positive integer)
      2) DEFAULT_MAX_YEAR
    """
    raw = os.environ.get("GREGDATE_MAX_YEAR", "").strip()
    if not raw:
        return DEFAULT_MAX_YEAR
    try:
        value = int(raw.replace("_", ""))
    except ValueError:
        logger.warning("Ignoring GREGDATE_MAX_YEAR=%r: not an integer", raw)
        return DEFAULT_MAX_YEAR
    if value <= 0:
        logger.warning("Ignoring GREGDATE_MAX_YEAR=%r: must be positive", raw)
        return DEFAULT_MAX_YEAR
    return value
