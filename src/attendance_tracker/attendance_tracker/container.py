from __future__ import annotations

from dataclasses import dataclass

from .calendar_grid.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.repository import PunchRepository
from .punches.service import PunchService
from .stats.aggregator import PeriodAggregator
from .stats.policy import RatePolicy
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, ProfileService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    punches_repo: PunchRepository

    auth_service: AuthService
    profile_service: ProfileService
    punch_service: PunchService
    dashboard_service: DashboardService


def build_services(*, users_repo: UserRepository, punches_repo: PunchRepository, recent_limit: int = 5) -> Container:
    """Wire services around any repository implementation (MySQL or in-memory)."""
    aggregator = PeriodAggregator(punches_repo, policy=RatePolicy())
    return Container(
        users_repo=users_repo,
        punches_repo=punches_repo,
        auth_service=AuthService(users_repo),
        profile_service=ProfileService(users_repo),
        punch_service=PunchService(punches_repo),
        dashboard_service=DashboardService(punches_repo, aggregator=aggregator, recent_limit=recent_limit),
    )


def build_container(*, db_config: dict, recent_limit: int = 5) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        users_repo=MySQLUserRepository(conn),
        punches_repo=MySQLPunchRepository(conn),
        recent_limit=recent_limit,
    )
