from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class RateDenominatorStrategy(ABC):
    """Strategy Pattern: how many eligible days an attendance rate divides by."""

    @abstractmethod
    def denominator(self, *, year: int, month: int | None, now: datetime) -> int:
        raise NotImplementedError
