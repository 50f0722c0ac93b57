"""Pure functions mapping a presence set onto calendar shapes."""

from __future__ import annotations

from datetime import date
from typing import AbstractSet, List

from ..common.datetime_utils import days_in_month, trailing_days
from ..core.constants import DAY_NAMES, MONTH_NAMES, WEEK_WINDOW_DAYS
from ..core.enums import PresenceLevel
from .model import CalendarDay, MonthGrid, WeekDay


def presence_level(day: date, presence: AbstractSet[date]) -> PresenceLevel:
    return PresenceLevel.PRESENT if day in presence else PresenceLevel.ABSENT


def monday_offset(day: date) -> int:
    """Empty cells before ``day`` in a Monday-first week row (Sunday -> 6)."""
    return day.weekday()


def build_month_grid(year: int, month: int, presence: AbstractSet[date]) -> MonthGrid:
    days = [
        CalendarDay(day=d, level=presence_level(date(year, month, d), presence))
        for d in range(1, days_in_month(year, month) + 1)
    ]
    return MonthGrid(
        month_name=MONTH_NAMES[month - 1],
        month_index=month,
        offset=monday_offset(date(year, month, 1)),
        days=days,
    )


def build_year_grid(year: int, presence: AbstractSet[date]) -> List[MonthGrid]:
    return [build_month_grid(year, month, presence) for month in range(1, 13)]


def build_week_strip(today: date, presence: AbstractSet[date]) -> List[WeekDay]:
    """Exactly seven entries, ``today - 6`` first and ``today`` last."""
    return [
        WeekDay(date=day, day_name=DAY_NAMES[day.weekday()], level=presence_level(day, presence))
        for day in trailing_days(today, WEEK_WINDOW_DAYS)
    ]
