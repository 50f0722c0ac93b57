from __future__ import annotations

from datetime import MAXYEAR, MINYEAR
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Optional[str]) -> str:
    value = require_non_empty(value, "Email")
    local, _, domain = value.partition("@")
    if not local or "." not in domain:
        raise ValidationError("Email is not valid")
    return value.lower()


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def require_month(value: int) -> int:
    if not 1 <= int(value) <= 12:
        raise ValidationError("Month must be between 1 and 12")
    return int(value)


def require_year(value: int) -> int:
    if not MINYEAR <= int(value) <= MAXYEAR:
        raise ValidationError(f"Year must be between {MINYEAR} and {MAXYEAR}")
    return int(value)
