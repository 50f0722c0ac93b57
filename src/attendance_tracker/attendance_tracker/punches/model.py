from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class PunchRecord:
    """Domain entity: one punch-in/punch-out session.

    ``out_time`` stays ``None`` while the session is open. ``duration_seconds``
    is written once, together with ``out_time``.
    """

    punch_id: int
    user_id: int
    in_time: datetime
    out_time: Optional[datetime] = None
    duration_seconds: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.out_time is None

    def to_feed_item(self) -> dict:
        """Shape used by the JSON feed for client-side charting."""
        return {
            "punch_id": self.punch_id,
            "in_time": self.in_time.isoformat(),
            "out_time": self.out_time.isoformat() if self.out_time else None,
            "duration_seconds": self.duration_seconds,
        }
