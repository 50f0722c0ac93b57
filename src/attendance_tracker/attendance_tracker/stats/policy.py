from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import PeriodScope
from .strategies.base import RateDenominatorStrategy
from .strategies.month_strategy import MonthRateStrategy
from .strategies.year_strategy import YearRateStrategy


@dataclass
class RatePolicy:
    """Factory Pattern: pick the denominator strategy for a period scope.

    The week view does not report a rate, so WEEK has no strategy.
    """

    def for_scope(self, scope: PeriodScope) -> RateDenominatorStrategy:
        if scope == PeriodScope.YEAR:
            return YearRateStrategy()
        if scope == PeriodScope.MONTH:
            return MonthRateStrategy()
        raise ValueError(f"No attendance rate is defined for scope {scope.value!r}")

    def denominator(self, scope: PeriodScope, *, year: int, month: int | None = None, now: datetime) -> int:
        return self.for_scope(scope).denominator(year=year, month=month, now=now)
