from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.exceptions import InvariantViolation
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PunchRecord
from .repository import PunchRepository

_COLUMNS = "punch_id, user_id, in_time, out_time, duration_seconds"


def _to_record(r: Dict[str, Any]) -> PunchRecord:
    duration = r.get("duration_seconds")
    return PunchRecord(
        punch_id=int(r["punch_id"]),
        user_id=int(r["user_id"]),
        in_time=r["in_time"],
        out_time=r.get("out_time"),
        duration_seconds=int(duration) if duration is not None else None,
    )


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_record_if_none_open(self, *, user_id: int, in_time: datetime) -> Optional[PunchRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                # uq_punch_open_session rejects a second open row for the same user.
                cur.execute(
                    """
                    INSERT INTO punch_records(user_id, in_time)
                    VALUES(%s, %s)
                    """,
                    (int(user_id), in_time),
                )
            except IntegrityError as exc:
                if exc.errno == errorcode.ER_DUP_ENTRY:
                    return None
                raise
            return PunchRecord(punch_id=int(cur.lastrowid), user_id=int(user_id), in_time=in_time)

    def find_open_record(self, user_id: int) -> Optional[PunchRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punch_records
                WHERE user_id=%s AND out_time IS NULL
                ORDER BY in_time DESC
                LIMIT 1
                """,
                (int(user_id),),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def close_record(self, *, punch_id: int, out_time: datetime, duration_seconds: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE punch_records
                SET out_time=%s, duration_seconds=%s
                WHERE punch_id=%s AND out_time IS NULL
                """,
                (out_time, int(duration_seconds), int(punch_id)),
            )
            if cur.rowcount == 0:
                raise InvariantViolation(f"Punch {punch_id} is not open")

    def find_records_in_range(self, *, user_id: int, start: datetime, end: datetime) -> Sequence[PunchRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punch_records
                WHERE user_id=%s AND in_time BETWEEN %s AND %s
                ORDER BY in_time ASC, punch_id ASC
                """,
                (int(user_id), start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_user(self, user_id: int, *, limit: Optional[int] = None) -> Sequence[PunchRecord]:
        sql = f"""
            SELECT {_COLUMNS}
            FROM punch_records
            WHERE user_id=%s
            ORDER BY in_time DESC, punch_id DESC
        """
        params: list[object] = [int(user_id)]
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_record(r) for r in fetchall(cur)]
