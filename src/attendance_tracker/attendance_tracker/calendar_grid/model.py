from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..core.enums import PresenceLevel
from ..punches.model import PunchRecord
from ..stats.model import AggregateStats


@dataclass(frozen=True)
class CalendarDay:
    day: int
    level: PresenceLevel


@dataclass(frozen=True)
class MonthGrid:
    """One month of the heat-map.

    ``offset`` is the number of empty Monday-first cells before day 1.
    """

    month_name: str
    month_index: int
    offset: int
    days: Sequence[CalendarDay]


@dataclass(frozen=True)
class WeekDay:
    date: date
    day_name: str
    level: PresenceLevel

    @property
    def date_key(self) -> str:
        return self.date.isoformat()


@dataclass(frozen=True)
class HomeView:
    year: int
    stats: AggregateStats
    calendar: Sequence[MonthGrid]
    week: Sequence[WeekDay]
    recent_records: Sequence[PunchRecord]
    open_session: Optional[PunchRecord]


@dataclass(frozen=True)
class MonthView:
    year: int
    month: int
    stats: AggregateStats
    grid: MonthGrid
    records: Sequence[PunchRecord]


@dataclass(frozen=True)
class WeekView:
    start: date
    end: date
    stats: AggregateStats
    days: Sequence[WeekDay]
    records: Sequence[PunchRecord]
