from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import FrozenSet, Iterable, Optional, Sequence

from ..common.datetime_utils import end_of_day, month_bounds, now_local, start_of_day, year_bounds
from ..core.constants import SECONDS_PER_HOUR, WEEK_WINDOW_DAYS
from ..core.enums import PeriodScope
from ..punches.model import PunchRecord
from ..punches.repository import PunchRepository
from .model import AggregateStats, PeriodSummary
from .policy import RatePolicy


def presence_set(records: Iterable[PunchRecord]) -> FrozenSet[date]:
    """Distinct punch-in days. Several sessions on one day count once."""
    return frozenset(r.in_time.date() for r in records)


def total_seconds(records: Iterable[PunchRecord]) -> int:
    # Open sessions have no duration yet and contribute nothing.
    return sum(r.duration_seconds or 0 for r in records)


def attendance_rate(present_days: int, denominator: int) -> int:
    """Rounded percentage (half up); 0 when there are no eligible days."""
    if denominator <= 0:
        return 0
    percent = Decimal(present_days) * 100 / Decimal(denominator)
    return int(percent.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def week_window(now: datetime) -> tuple[datetime, datetime]:
    """Seven days ending today: (today - 6) 00:00 .. today 23:59:59.999999."""
    today = now.date()
    return start_of_day(today - timedelta(days=WEEK_WINDOW_DAYS - 1)), end_of_day(today)


class PeriodAggregator:
    """Presence, worked time and attendance rate for a user over a date range.

    Store errors propagate: a caller never gets stats built from a partial
    fetch.
    """

    def __init__(self, punches: PunchRepository, *, policy: RatePolicy | None = None):
        self._punches = punches
        self._policy = policy or RatePolicy()

    def fetch(self, user_id: int, start: datetime, end: datetime) -> Sequence[PunchRecord]:
        records = self._punches.find_records_in_range(user_id=user_id, start=start, end=end)
        return sorted(records, key=lambda r: (r.in_time, r.punch_id))

    def aggregate(
        self,
        user_id: int,
        start: date,
        end: date,
        *,
        scope: PeriodScope,
        now: datetime | None = None,
    ) -> PeriodSummary:
        """Aggregate records whose punch-in falls on ``start`` .. ``end`` inclusive.

        ``scope`` selects the rate denominator (the target year/month is taken
        from ``start``). WEEK summaries carry no rate.
        """

        now = now or now_local()
        records = self.fetch(user_id, start_of_day(start), end_of_day(end))
        return self.summarize(records, scope=scope, year=start.year, month=start.month, now=now)

    def summarize(
        self,
        records: Sequence[PunchRecord],
        *,
        scope: PeriodScope,
        year: int,
        month: Optional[int],
        now: datetime,
    ) -> PeriodSummary:
        presence = presence_set(records)
        seconds = total_seconds(records)

        rate = None
        if scope != PeriodScope.WEEK:
            denominator = self._policy.denominator(scope, year=year, month=month, now=now)
            rate = attendance_rate(len(presence), denominator)

        stats = AggregateStats(
            present_days=len(presence),
            total_seconds=seconds,
            total_hours=seconds // SECONDS_PER_HOUR,
            attendance_rate=rate,
        )
        return PeriodSummary(stats=stats, presence=presence, records=tuple(records))

    def aggregate_year(self, user_id: int, year: int, *, now: datetime | None = None) -> PeriodSummary:
        start, end = year_bounds(year)
        return self.aggregate(user_id, start, end, scope=PeriodScope.YEAR, now=now)

    def aggregate_month(self, user_id: int, year: int, month: int, *, now: datetime | None = None) -> PeriodSummary:
        start, end = month_bounds(year, month)
        return self.aggregate(user_id, start, end, scope=PeriodScope.MONTH, now=now)

    def aggregate_week(self, user_id: int, *, now: datetime | None = None) -> PeriodSummary:
        now = now or now_local()
        start, end = week_window(now)
        records = self.fetch(user_id, start, end)
        return self.summarize(records, scope=PeriodScope.WEEK, year=now.year, month=None, now=now)
