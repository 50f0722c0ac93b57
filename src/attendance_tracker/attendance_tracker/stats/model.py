from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import FrozenSet, Optional, Sequence

from ..punches.model import PunchRecord


@dataclass(frozen=True)
class AggregateStats:
    """``attendance_rate`` is None for periods that report no rate (week)."""

    present_days: int
    total_seconds: int
    total_hours: int
    attendance_rate: Optional[int]


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregator output for one user and one date range."""

    stats: AggregateStats
    presence: FrozenSet[date] = field(default_factory=frozenset)
    records: Sequence[PunchRecord] = ()
