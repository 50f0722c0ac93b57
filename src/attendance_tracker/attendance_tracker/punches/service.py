from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import InvariantViolation, StorageError
from .model import PunchRecord
from .repository import PunchRepository

logger = logging.getLogger(__name__)


def session_duration_seconds(in_time: datetime, out_time: datetime) -> int:
    """Whole seconds between punch-in and punch-out, floored, never negative."""
    elapsed = out_time - in_time
    seconds = elapsed.days * 86400 + elapsed.seconds
    return max(seconds, 0)


class PunchService:
    """Session ledger: punch in / punch out for one user at a time.

    Store failures are logged and turned into no-ops here; callers only see
    ``None`` (nothing changed).
    """

    def __init__(self, punches: PunchRepository):
        self._punches = punches

    def punch_in(self, user_id: int, *, now: datetime | None = None) -> Optional[PunchRecord]:
        now = now or now_local()
        try:
            if self._punches.find_open_record(user_id):
                logger.info("User %s already punched in", user_id)
                return None

            record = self._punches.create_record_if_none_open(user_id=user_id, in_time=now)
            if record is None:
                logger.info("User %s already punched in (concurrent request)", user_id)
            return record
        except StorageError:
            logger.exception("Punch-in failed for user %s", user_id)
            return None

    def punch_out(self, user_id: int, *, now: datetime | None = None) -> Optional[PunchRecord]:
        now = now or now_local()
        try:
            record = self._punches.find_open_record(user_id)
            if not record:
                logger.info("No active punch-in found for user %s", user_id)
                return None

            duration = session_duration_seconds(record.in_time, now)
            self._punches.close_record(punch_id=record.punch_id, out_time=now, duration_seconds=duration)
        except InvariantViolation:
            logger.info("Punch %s was closed by another request", record.punch_id)
            return None
        except StorageError:
            logger.exception("Punch-out failed for user %s", user_id)
            return None

        return PunchRecord(
            punch_id=record.punch_id,
            user_id=record.user_id,
            in_time=record.in_time,
            out_time=now,
            duration_seconds=duration,
        )

    def current_session(self, user_id: int) -> Optional[PunchRecord]:
        return self._punches.find_open_record(user_id)
