from __future__ import annotations

from enum import Enum, IntEnum


class Role(str, Enum):
    """User role. MANAGER is reserved and grants nothing extra yet."""

    USER = "user"
    MANAGER = "manager"


class PresenceLevel(IntEnum):
    """Heat-map level of a calendar day.

    The numeric values are what the templates render as ``level-0`` /
    ``level-3`` cells.
    """

    ABSENT = 0
    PRESENT = 3


class PeriodScope(str, Enum):
    """Which period an aggregation covers."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
