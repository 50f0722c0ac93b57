from __future__ import annotations

from typing import Optional, Protocol

from .model import ProfileDetails, User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_emp_id(self, emp_id: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, email: str, username: str, password_hash: str) -> int:
        raise NotImplementedError

    def update_profile(self, user_id: int, profile: ProfileDetails) -> bool:
        """Store the profile fields and mark the profile completed."""

        raise NotImplementedError
