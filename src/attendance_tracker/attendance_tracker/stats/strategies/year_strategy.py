from __future__ import annotations

import math
from datetime import datetime

from ...common.datetime_utils import days_in_year
from ...core.constants import SECONDS_PER_DAY
from .base import RateDenominatorStrategy


class YearRateStrategy(RateDenominatorStrategy):
    """Days elapsed in the year.

    Current year: ``ceil((now - Jan 1) / 1 day) + 1``. A finished year counts
    all its days, a year that has not started counts none.
    """

    def denominator(self, *, year: int, month: int | None, now: datetime) -> int:
        if year < now.year:
            return days_in_year(year)
        if year > now.year:
            return 0

        elapsed = (now - datetime(year, 1, 1)).total_seconds()
        return math.ceil(elapsed / SECONDS_PER_DAY) + 1
