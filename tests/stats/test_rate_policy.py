from __future__ import annotations

from datetime import datetime

import pytest

from attendance_tracker.core.enums import PeriodScope
from attendance_tracker.stats.policy import RatePolicy
from attendance_tracker.stats.strategies.month_strategy import MonthRateStrategy
from attendance_tracker.stats.strategies.year_strategy import YearRateStrategy


def test_policy_picks_strategy_per_scope():
    policy = RatePolicy()

    assert isinstance(policy.for_scope(PeriodScope.YEAR), YearRateStrategy)
    assert isinstance(policy.for_scope(PeriodScope.MONTH), MonthRateStrategy)


def test_week_scope_has_no_rate():
    with pytest.raises(ValueError):
        RatePolicy().for_scope(PeriodScope.WEEK)


@pytest.mark.parametrize(
    "year, month, expected",
    [
        (2024, 6, 15),
        (2024, 7, 0),
        (2024, 5, 31),
        (2024, 2, 29),
        (2023, 12, 31),
        (2025, 1, 0),
    ],
)
def test_month_denominator(fixed_now, year, month, expected):
    assert RatePolicy().denominator(PeriodScope.MONTH, year=year, month=month, now=fixed_now) == expected


def test_future_year_with_earlier_month_is_still_future():
    now = datetime(2024, 11, 3, 12, 0)
    assert RatePolicy().denominator(PeriodScope.MONTH, year=2025, month=2, now=now) == 0


def test_month_strategy_requires_month(fixed_now):
    with pytest.raises(ValueError):
        MonthRateStrategy().denominator(year=2024, month=None, now=fixed_now)


def test_year_denominator_current_year():
    # ceil(days since Jan 1 00:00) + 1
    assert YearRateStrategy().denominator(year=2024, month=None, now=datetime(2024, 1, 1, 0, 0)) == 1
    assert YearRateStrategy().denominator(year=2024, month=None, now=datetime(2024, 1, 1, 9, 0)) == 2
    assert YearRateStrategy().denominator(year=2024, month=None, now=datetime(2024, 6, 15, 10, 30)) == 168


def test_year_denominator_past_and_future_years(fixed_now):
    strategy = YearRateStrategy()

    assert strategy.denominator(year=2023, month=None, now=fixed_now) == 365
    assert strategy.denominator(year=2020, month=None, now=fixed_now) == 366
    assert strategy.denominator(year=2025, month=None, now=fixed_now) == 0
