from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from attendance_tracker.punches.model import PunchRecord
from attendance_tracker.punches.service import PunchService, session_duration_seconds
from tests.fakes import FailingPunches


def test_punch_in_creates_open_record(punches_repo, fixed_now):
    svc = PunchService(punches_repo)

    rec = svc.punch_in(1, now=fixed_now)

    assert rec is not None
    assert rec.in_time == fixed_now
    assert rec.is_open
    assert punches_repo.find_open_record(1) == rec


def test_second_punch_in_is_a_noop(punches_repo, fixed_now):
    svc = PunchService(punches_repo)
    svc.punch_in(1, now=fixed_now)

    assert svc.punch_in(1, now=fixed_now + timedelta(minutes=5)) is None
    assert len(punches_repo.all()) == 1


def test_punch_in_is_per_user(punches_repo, fixed_now):
    svc = PunchService(punches_repo)

    assert svc.punch_in(1, now=fixed_now) is not None
    assert svc.punch_in(2, now=fixed_now) is not None


def test_punch_out_sets_out_time_and_duration(punches_repo, fixed_now):
    svc = PunchService(punches_repo)
    svc.punch_in(1, now=fixed_now)

    closed = svc.punch_out(1, now=fixed_now + timedelta(hours=2, seconds=5, microseconds=999_999))

    assert closed is not None
    assert closed.duration_seconds == 2 * 3600 + 5
    stored = punches_repo.all()[0]
    assert stored.out_time == closed.out_time
    assert stored.duration_seconds == 7205


def test_punch_out_without_open_record_changes_nothing(punches_repo, fixed_now):
    punches_repo.add_session(1, fixed_now - timedelta(hours=3), fixed_now - timedelta(hours=1))
    before = punches_repo.all()

    assert PunchService(punches_repo).punch_out(1, now=fixed_now) is None
    assert punches_repo.all() == before


def test_closed_duration_is_never_recomputed(punches_repo, fixed_now):
    svc = PunchService(punches_repo)
    svc.punch_in(1, now=fixed_now)
    svc.punch_out(1, now=fixed_now + timedelta(minutes=30))

    svc.punch_out(1, now=fixed_now + timedelta(hours=5))

    assert punches_repo.all()[0].duration_seconds == 1800


def test_punch_out_picks_latest_open_record(punches_repo, fixed_now):
    # Two open rows should not exist; if they do the newest one is closed.
    punches_repo.add(PunchRecord(punch_id=1, user_id=1, in_time=fixed_now - timedelta(hours=4)))
    punches_repo.add(PunchRecord(punch_id=2, user_id=1, in_time=fixed_now - timedelta(hours=1)))

    closed = PunchService(punches_repo).punch_out(1, now=fixed_now)

    assert closed.punch_id == 2
    assert closed.duration_seconds == 3600


def test_sequence_keeps_at_most_one_open_record(punches_repo, fixed_now):
    svc = PunchService(punches_repo)
    actions = ["in", "in", "out", "out", "in", "out", "in", "in"]

    for i, action in enumerate(actions):
        now = fixed_now + timedelta(minutes=10 * i)
        if action == "in":
            svc.punch_in(1, now=now)
        else:
            svc.punch_out(1, now=now)
        assert len(punches_repo.open_records(1)) <= 1

    for r in punches_repo.all():
        if r.out_time is not None:
            assert r.duration_seconds == int((r.out_time - r.in_time).total_seconds())


def test_concurrent_insert_is_rejected_by_store(punches_repo, fixed_now):
    class RacingStore(type(punches_repo)):
        def find_open_record(self, user_id):
            # Simulates the read happening before another request's insert.
            return None

    store = RacingStore()
    svc = PunchService(store)

    assert svc.punch_in(1, now=fixed_now) is not None
    assert svc.punch_in(1, now=fixed_now) is None
    assert len(store.open_records(1)) == 1


def test_storage_errors_are_swallowed(fixed_now, caplog):
    svc = PunchService(FailingPunches())

    assert svc.punch_in(1, now=fixed_now) is None
    assert svc.punch_out(1, now=fixed_now) is None
    assert "Punch-in failed" in caplog.text


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(seconds=59, microseconds=999_999), 59),
        (timedelta(days=1, seconds=1), 86401),
        (timedelta(seconds=-5), 0),
    ],
)
def test_session_duration_seconds_floors(delta, expected):
    start = datetime(2024, 1, 1, 9, 0)
    assert session_duration_seconds(start, start + delta) == expected
