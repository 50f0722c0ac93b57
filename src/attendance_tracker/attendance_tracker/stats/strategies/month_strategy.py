from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import days_in_month
from .base import RateDenominatorStrategy


class MonthRateStrategy(RateDenominatorStrategy):
    """Past month: all its days. Current month: days so far. Future: none."""

    def denominator(self, *, year: int, month: int | None, now: datetime) -> int:
        if month is None:
            raise ValueError("month is required for a month-scoped rate")

        target = (year, month)
        current = (now.year, now.month)
        if target < current:
            return days_in_month(year, month)
        if target == current:
            return now.day
        return 0
