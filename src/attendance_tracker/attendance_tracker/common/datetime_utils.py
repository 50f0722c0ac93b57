from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def month_bounds(year: int, month: int) -> tuple[date, date]:
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def year_bounds(year: int) -> tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)


def trailing_days(today: date, count: int) -> list[date]:
    """``count`` consecutive days ending at ``today``, oldest first."""
    return [today - timedelta(days=offset) for offset in range(count - 1, -1, -1)]


def format_duration(seconds: Optional[int]) -> str:
    if seconds is None:
        return "-"
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return f"{hours}h {minutes}m"


def format_date(value: Optional[datetime]) -> str:
    if not value:
        return "-"
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def format_time(value: Optional[datetime]) -> str:
    if not value:
        return "-"
    return value.strftime("%I:%M %p")
