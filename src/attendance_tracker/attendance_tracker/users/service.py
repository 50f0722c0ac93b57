from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash
from werkzeug.utils import secure_filename

from ..common.validators import optional_text, require_email, require_min_length, require_non_empty
from ..core.constants import ALLOWED_PROFILE_IMAGE_EXTENSIONS, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import ProfileDetails, User
from .repository import UserRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    name: str
    role: Role
    profile_completed: bool


def to_session_user(user: User) -> SessionUser:
    return SessionUser(
        user_id=user.user_id,
        name=user.display_name,
        role=user.role,
        profile_completed=user.profile_completed,
    )


class AuthService:
    """Use case: sign up and sign in."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, *, email: str, username: str, password: str, confirm_password: str) -> int:
        if not email or not username or not password or not confirm_password:
            raise ValidationError("All fields required")
        if password != confirm_password:
            raise ValidationError("Passwords do not match")

        email = require_email(email)
        username = require_non_empty(username, "Username")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise ValidationError("Email already registered")
        if self._users.get_by_username(username):
            raise ValidationError("Username already taken")

        return self._users.create_user(
            email=email,
            username=username,
            password_hash=generate_password_hash(password),
        )

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email((email or "").strip().lower())
        if not user:
            raise AuthenticationError("Incorrect email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Incorrect email or password")

        return to_session_user(user)


class ProfileService:
    """Use case: complete the employee profile required before punching."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("User not found")
        return user

    def prepare_profile(
        self,
        user_id: int,
        *,
        full_name: str,
        address: Optional[str] = None,
        mobile: Optional[str] = None,
        emp_id: Optional[str] = None,
        position: Optional[str] = None,
        type_of_work: Optional[str] = None,
        profile_image: Optional[str] = None,
    ) -> ProfileDetails:
        """Validate profile input without writing anything."""
        user = self.get_user(user_id)

        profile = ProfileDetails(
            full_name=require_non_empty(full_name, "Full name"),
            address=optional_text(address),
            mobile=optional_text(mobile),
            emp_id=optional_text(emp_id),
            position=optional_text(position),
            type_of_work=optional_text(type_of_work),
            profile_image=profile_image,
        )

        if profile.emp_id:
            owner = self._users.get_by_emp_id(profile.emp_id)
            if owner and owner.user_id != user.user_id:
                raise ValidationError("Employee ID already in use")

        return profile

    def save_profile(self, user_id: int, profile: ProfileDetails) -> SessionUser:
        self._users.update_profile(user_id, profile)
        return to_session_user(self.get_user(user_id))

    def complete_profile(self, user_id: int, **fields) -> SessionUser:
        return self.save_profile(user_id, self.prepare_profile(user_id, **fields))

    @staticmethod
    def allowed_image(filename: Optional[str]) -> bool:
        if not filename:
            return False
        return os.path.splitext(filename)[1].lower() in ALLOWED_PROFILE_IMAGE_EXTENSIONS

    @classmethod
    def image_filename(cls, user_id: int, filename: str) -> str:
        """Stored name of an uploaded profile image: ``<user_id><ext>``."""
        safe_name = secure_filename(filename)
        if not cls.allowed_image(safe_name):
            raise ValidationError("Only JPG, JPEG and PDF files are allowed")
        return f"{int(user_id)}{os.path.splitext(safe_name)[1].lower()}"
