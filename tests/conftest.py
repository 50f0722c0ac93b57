from __future__ import annotations

from datetime import datetime

import pytest

from tests.fakes import InMemoryPunches, InMemoryUsers


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 6, 15, 10, 30, 0)


@pytest.fixture
def punches_repo() -> InMemoryPunches:
    return InMemoryPunches()


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()
