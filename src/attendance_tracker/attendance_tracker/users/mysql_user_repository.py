from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import ProfileDetails, User
from .repository import UserRepository

_COLUMNS = """
    user_id, email, username, password_hash, role, full_name, address, mobile,
    emp_id, position, type_of_work, profile_image, profile_completed
"""


def _to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=int(row["user_id"]),
        email=row["email"],
        username=row["username"],
        password_hash=row["password_hash"],
        role=Role(row.get("role") or Role.USER.value),
        full_name=row.get("full_name"),
        address=row.get("address"),
        mobile=row.get("mobile"),
        emp_id=row.get("emp_id"),
        position=row.get("position"),
        type_of_work=row.get("type_of_work"),
        profile_image=row.get("profile_image"),
        profile_completed=bool(row.get("profile_completed")),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, column: str, value: object) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE {column}=%s", (value,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._get_one("user_id", int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        return self._get_one("email", email)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._get_one("username", username)

    def get_by_emp_id(self, emp_id: str) -> Optional[User]:
        return self._get_one("emp_id", emp_id)

    def create_user(self, *, email: str, username: str, password_hash: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(email, username, password_hash, role, profile_completed)
                VALUES(%s,%s,%s,%s,0)
                """,
                (email, username, password_hash, Role.USER.value),
            )
            return int(cur.lastrowid)

    def update_profile(self, user_id: int, profile: ProfileDetails) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE users
                SET full_name=%s, address=%s, mobile=%s, emp_id=%s, position=%s,
                    type_of_work=%s, profile_image=COALESCE(%s, profile_image), profile_completed=1
                WHERE user_id=%s
                """,
                (
                    profile.full_name,
                    profile.address,
                    profile.mobile,
                    profile.emp_id,
                    profile.position,
                    profile.type_of_work,
                    profile.profile_image,
                    int(user_id),
                ),
            )
            return cur.rowcount > 0
