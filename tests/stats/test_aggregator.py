from __future__ import annotations

from datetime import date, datetime, time

import pytest

from attendance_tracker.core.enums import PeriodScope
from attendance_tracker.core.exceptions import StorageError
from attendance_tracker.stats.aggregator import PeriodAggregator, attendance_rate, presence_set, week_window
from tests.fakes import FailingPunches


def test_two_sessions_same_day_count_once(punches_repo, fixed_now):
    day = date(2024, 6, 10)
    punches_repo.add_session(1, datetime.combine(day, time(9, 0)), datetime.combine(day, time(12, 0)))
    punches_repo.add_session(1, datetime.combine(day, time(13, 0)), datetime.combine(day, time(17, 0)))

    summary = PeriodAggregator(punches_repo).aggregate(1, day, day, scope=PeriodScope.MONTH, now=fixed_now)

    assert summary.stats.present_days == 1
    assert summary.stats.total_seconds == 25200
    assert summary.stats.total_hours == 7
    assert summary.presence == {day}


def test_total_hours_are_floored(punches_repo, fixed_now):
    punches_repo.add_session(1, datetime(2024, 6, 3, 9, 0), datetime(2024, 6, 3, 10, 59, 59))

    summary = PeriodAggregator(punches_repo).aggregate_month(1, 2024, 6, now=fixed_now)

    assert summary.stats.total_hours == 1


def test_open_session_counts_as_present_without_hours(punches_repo, fixed_now):
    punches_repo.add_session(1, datetime(2024, 6, 15, 8, 0))

    summary = PeriodAggregator(punches_repo).aggregate_month(1, 2024, 6, now=fixed_now)

    assert summary.stats.present_days == 1
    assert summary.stats.total_seconds == 0


def test_range_covers_whole_end_day(punches_repo, fixed_now):
    punches_repo.add_session(1, datetime(2024, 5, 31, 23, 59, 59), datetime(2024, 6, 1, 0, 30))
    punches_repo.add_session(1, datetime(2024, 6, 1, 0, 0), datetime(2024, 6, 1, 1, 0))

    summary = PeriodAggregator(punches_repo).aggregate_month(1, 2024, 5, now=fixed_now)

    assert [r.in_time for r in summary.records] == [datetime(2024, 5, 31, 23, 59, 59)]
    _, start, end = punches_repo.range_queries[-1]
    assert start == datetime(2024, 5, 1, 0, 0)
    assert end == datetime(2024, 5, 31, 23, 59, 59, 999999)


def test_records_come_back_in_ascending_order(punches_repo, fixed_now):
    punches_repo.add_session(1, datetime(2024, 6, 12, 9, 0), datetime(2024, 6, 12, 10, 0))
    punches_repo.add_session(1, datetime(2024, 6, 2, 9, 0), datetime(2024, 6, 2, 10, 0))

    summary = PeriodAggregator(punches_repo).aggregate_month(1, 2024, 6, now=fixed_now)

    assert [r.in_time.day for r in summary.records] == [2, 12]


def test_month_rate_uses_days_elapsed(punches_repo, fixed_now):
    for day in (3, 4, 5):
        punches_repo.add_session(1, datetime(2024, 6, day, 9, 0), datetime(2024, 6, day, 17, 0))

    summary = PeriodAggregator(punches_repo).aggregate_month(1, 2024, 6, now=fixed_now)

    # 3 of 15 days so far
    assert summary.stats.attendance_rate == 20


def test_future_month_rate_is_zero_even_with_records(punches_repo, fixed_now):
    punches_repo.add_session(1, datetime(2024, 7, 1, 9, 0), datetime(2024, 7, 1, 17, 0))

    summary = PeriodAggregator(punches_repo).aggregate_month(1, 2024, 7, now=fixed_now)

    assert summary.stats.present_days == 1
    assert summary.stats.attendance_rate == 0


def test_year_aggregate_only_reads_that_year(punches_repo, fixed_now):
    punches_repo.add_session(1, datetime(2023, 12, 31, 9, 0), datetime(2023, 12, 31, 10, 0))
    punches_repo.add_session(1, datetime(2024, 1, 2, 9, 0), datetime(2024, 1, 2, 10, 0))

    summary = PeriodAggregator(punches_repo).aggregate_year(1, 2024, now=fixed_now)

    assert summary.stats.present_days == 1
    assert summary.stats.attendance_rate == round(100 / 168)


def test_other_users_are_ignored(punches_repo, fixed_now):
    punches_repo.add_session(2, datetime(2024, 6, 3, 9, 0), datetime(2024, 6, 3, 10, 0))

    summary = PeriodAggregator(punches_repo).aggregate_month(1, 2024, 6, now=fixed_now)

    assert summary.stats.present_days == 0
    assert summary.records == ()


def test_week_summary_has_no_rate(punches_repo, fixed_now):
    punches_repo.add_session(1, datetime(2024, 6, 9, 9, 0), datetime(2024, 6, 9, 10, 0))
    punches_repo.add_session(1, datetime(2024, 6, 8, 23, 0), datetime(2024, 6, 8, 23, 30))

    summary = PeriodAggregator(punches_repo).aggregate_week(1, now=fixed_now)

    assert summary.stats.attendance_rate is None
    assert summary.presence == {date(2024, 6, 9)}


def test_week_window_bounds(fixed_now):
    start, end = week_window(fixed_now)

    assert start == datetime(2024, 6, 9, 0, 0)
    assert end == datetime(2024, 6, 15, 23, 59, 59, 999999)


def test_storage_error_propagates(fixed_now):
    with pytest.raises(StorageError):
        PeriodAggregator(FailingPunches()).aggregate_month(1, 2024, 6, now=fixed_now)


@pytest.mark.parametrize(
    "present, denominator, expected",
    [(0, 0, 0), (5, 0, 0), (1, 8, 13), (1, 200, 1), (1, 3, 33), (2, 3, 67), (15, 15, 100)],
)
def test_attendance_rate_rounds_half_up(present, denominator, expected):
    assert attendance_rate(present, denominator) == expected


def test_presence_set_uses_calendar_dates(punches_repo):
    a = punches_repo.add_session(1, datetime(2024, 6, 1, 0, 0))
    b = punches_repo.add_session(1, datetime(2024, 6, 1, 23, 59))

    assert presence_set([a, b]) == frozenset({date(2024, 6, 1)})
