from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import PunchRecord


class PunchRepository(Protocol):
    """Record store for punch sessions.

    Implementations raise ``StorageError`` when the store is unreachable.
    """

    def create_record_if_none_open(self, *, user_id: int, in_time: datetime) -> Optional[PunchRecord]:
        """Insert an open record unless the user already has one.

        Must be atomic: returns ``None`` instead of creating a second open row.
        """

        raise NotImplementedError

    def find_open_record(self, user_id: int) -> Optional[PunchRecord]:
        """Open record with the latest ``in_time``, if any."""

        raise NotImplementedError

    def close_record(self, *, punch_id: int, out_time: datetime, duration_seconds: int) -> None:
        """Close an open record.

        Raises ``InvariantViolation`` if the record is not open any more.
        """

        raise NotImplementedError

    def find_records_in_range(self, *, user_id: int, start: datetime, end: datetime) -> Sequence[PunchRecord]:
        """Records with ``start <= in_time <= end``, ascending ``in_time``."""

        raise NotImplementedError

    def list_for_user(self, user_id: int, *, limit: Optional[int] = None) -> Sequence[PunchRecord]:
        """Most recent first."""

        raise NotImplementedError
