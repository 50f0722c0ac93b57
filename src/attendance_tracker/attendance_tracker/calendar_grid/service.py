from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_month, require_year
from ..core.constants import DEFAULT_RECENT_LIMIT
from ..punches.repository import PunchRepository
from ..stats.aggregator import PeriodAggregator, week_window
from .builder import build_month_grid, build_week_strip, build_year_grid
from .model import HomeView, MonthView, WeekView


class DashboardService:
    """Use case: the year, month and week attendance views of one user."""

    def __init__(
        self,
        punches: PunchRepository,
        *,
        aggregator: PeriodAggregator | None = None,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
    ):
        self._punches = punches
        self._aggregator = aggregator or PeriodAggregator(punches)
        self._recent_limit = int(recent_limit)

    def home(self, user_id: int, *, year: Optional[int] = None, now: datetime | None = None) -> HomeView:
        now = now or now_local()
        year = require_year(year or now.year)

        summary = self._aggregator.aggregate_year(user_id, year, now=now)
        week = self._aggregator.aggregate_week(user_id, now=now)
        recent = self._punches.list_for_user(user_id, limit=self._recent_limit)
        open_session = self._punches.find_open_record(user_id)

        return HomeView(
            year=year,
            stats=summary.stats,
            calendar=build_year_grid(year, summary.presence),
            week=build_week_strip(now.date(), week.presence),
            recent_records=list(recent),
            open_session=open_session,
        )

    def month_detail(
        self,
        user_id: int,
        month: int,
        *,
        year: Optional[int] = None,
        now: datetime | None = None,
    ) -> MonthView:
        now = now or now_local()
        month = require_month(month)
        year = require_year(year or now.year)

        summary = self._aggregator.aggregate_month(user_id, year, month, now=now)
        return MonthView(
            year=year,
            month=month,
            stats=summary.stats,
            grid=build_month_grid(year, month, summary.presence),
            records=summary.records,
        )

    def week_detail(self, user_id: int, *, now: datetime | None = None) -> WeekView:
        now = now or now_local()
        start, end = week_window(now)

        summary = self._aggregator.aggregate_week(user_id, now=now)
        return WeekView(
            start=start.date(),
            end=end.date(),
            stats=summary.stats,
            days=build_week_strip(now.date(), summary.presence),
            records=summary.records,
        )

    def records_feed(self, user_id: int) -> list[dict]:
        # Oldest first so chart labels read left to right.
        return [r.to_feed_item() for r in reversed(self._punches.list_for_user(user_id))]
