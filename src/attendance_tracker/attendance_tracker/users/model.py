from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account that punches in and out.

    Note: Plain data object (no DB access code here).
    """

    user_id: int
    email: str
    username: str
    password_hash: str
    role: Role = Role.USER
    full_name: Optional[str] = None
    address: Optional[str] = None
    mobile: Optional[str] = None
    emp_id: Optional[str] = None
    position: Optional[str] = None
    type_of_work: Optional[str] = None
    profile_image: Optional[str] = None
    profile_completed: bool = False

    @property
    def display_name(self) -> str:
        return self.full_name or self.username


@dataclass(frozen=True)
class ProfileDetails:
    full_name: str
    address: Optional[str] = None
    mobile: Optional[str] = None
    emp_id: Optional[str] = None
    position: Optional[str] = None
    type_of_work: Optional[str] = None
    profile_image: Optional[str] = None
