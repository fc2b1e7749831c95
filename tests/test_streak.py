"""Tests for the streak state machine and its persistence."""

import logging
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import Base
from app.core.day_boundary import DayBoundaryResolver
from app.core.exceptions import ServiceError
from app.crud.streak import crud_streak
from app.models.diary_entry import DiaryEntry
from app.services.streak import (
    StreakService,
    StreakState,
    TransitionKind,
    next_streak_state,
)

UTC = timezone.utc
IST = DayBoundaryResolver(330)


def local_noon(year, month, day):
    return IST.canonical_storage_instant(year, month, day)


# ── State machine ─────────────────────────────────────────────


class TestNextStreakState:
    def test_initial_event(self):
        now = local_noon(2024, 1, 10)
        t = next_streak_state(StreakState(0, 0, None), now, IST)
        assert t.kind == TransitionKind.INITIAL
        assert t.state == StreakState(1, 1, now)

    def test_initial_keeps_prior_longest(self):
        now = local_noon(2024, 1, 10)
        t = next_streak_state(StreakState(0, 7, None), now, IST)
        assert t.state == StreakState(1, 7, now)

    def test_same_day_is_noop(self):
        last = local_noon(2024, 1, 10)
        state = StreakState(3, 4, last)
        t = next_streak_state(state, last + timedelta(hours=5), IST)
        assert t.kind == TransitionKind.SAME_DAY
        assert not t.changed
        # last_activity_at is not bumped to the later event
        assert t.state is state

    def test_consecutive_day(self):
        t = next_streak_state(
            StreakState(5, 5, local_noon(2024, 1, 10)), local_noon(2024, 1, 11), IST
        )
        assert t.kind == TransitionKind.CONSECUTIVE
        assert t.state.current_streak == 6
        assert t.state.longest_streak == 6
        assert t.state.last_activity_at == local_noon(2024, 1, 11)

    def test_consecutive_below_longest(self):
        t = next_streak_state(
            StreakState(2, 9, local_noon(2024, 1, 10)), local_noon(2024, 1, 11), IST
        )
        assert t.state[:2] == (3, 9)

    def test_gap_resets(self):
        t = next_streak_state(
            StreakState(5, 10, local_noon(2024, 1, 10)), local_noon(2024, 1, 13), IST
        )
        assert t.kind == TransitionKind.RESET
        assert t.state[:2] == (1, 10)
        assert t.state.last_activity_at == local_noon(2024, 1, 13)

    def test_event_before_last_activity_resets(self):
        t = next_streak_state(
            StreakState(4, 4, local_noon(2024, 1, 10)), local_noon(2024, 1, 8), IST
        )
        assert t.kind == TransitionKind.RESET
        assert t.state[:2] == (1, 4)

    def test_yesterday_is_a_calendar_day_not_24_hours(self):
        # 23:50 local on the 10th, then 00:10 local on the 11th: 20 minutes apart
        last = datetime(2024, 1, 10, 18, 20, tzinfo=UTC)
        now = datetime(2024, 1, 10, 18, 40, tzinfo=UTC)
        t = next_streak_state(StreakState(1, 1, last), now, IST)
        assert t.kind == TransitionKind.CONSECUTIVE

    def test_more_than_24_hours_can_still_be_consecutive(self):
        # 00:05 local on the 10th, then 23:55 local on the 11th
        last = datetime(2024, 1, 9, 18, 35, tzinfo=UTC)
        now = datetime(2024, 1, 11, 18, 25, tzinfo=UTC)
        t = next_streak_state(StreakState(1, 1, last), now, IST)
        assert t.kind == TransitionKind.CONSECUTIVE

    def test_same_utc_date_can_be_different_local_days(self):
        last = datetime(2024, 1, 1, 10, 0, tzinfo=UTC)  # local 1st
        now = datetime(2024, 1, 1, 19, 0, tzinfo=UTC)  # local 2nd
        t = next_streak_state(StreakState(1, 1, last), now, IST)
        assert t.kind == TransitionKind.CONSECUTIVE

    def test_month_boundary(self):
        t = next_streak_state(
            StreakState(1, 1, local_noon(2024, 2, 29)), local_noon(2024, 3, 1), IST
        )
        assert t.kind == TransitionKind.CONSECUTIVE

    @pytest.mark.parametrize("days_later", [0, 1, 2, 5, -1])
    def test_longest_never_decreases(self, days_later):
        last = local_noon(2024, 1, 10)
        state = StreakState(3, 8, last)
        t = next_streak_state(state, last + timedelta(days=days_later), IST)
        assert t.state.longest_streak >= state.longest_streak
        assert t.state.longest_streak >= t.state.current_streak


# ── Persistence ───────────────────────────────────────────────


@pytest.fixture
def service():
    return StreakService(resolver=IST)


class TestStreakService:
    def test_first_activity_creates_row(self, db, service):
        now = local_noon(2024, 1, 10)
        streak = service.record_activity(db, "journal", now=now)
        assert streak.type == "journal"
        assert (streak.current_streak, streak.longest_streak) == (1, 1)
        assert streak.version == 1

    def test_same_day_twice_is_idempotent(self, db, service):
        first = local_noon(2024, 1, 10)
        service.record_activity(db, "journal", now=first)
        streak = service.record_activity(db, "journal", now=first + timedelta(hours=3))
        assert (streak.current_streak, streak.longest_streak) == (1, 1)
        assert streak.last_activity_at.replace(tzinfo=UTC) == first
        assert streak.version == 1

    def test_consecutive_days_accumulate(self, db, service):
        for day in range(10, 15):
            streak = service.record_activity(db, "journal", now=local_noon(2024, 1, day))
        assert (streak.current_streak, streak.longest_streak) == (5, 5)

    def test_gap_keeps_longest(self, db, service):
        for day in (10, 11, 12):
            service.record_activity(db, "journal", now=local_noon(2024, 1, day))
        streak = service.record_activity(db, "journal", now=local_noon(2024, 1, 20))
        assert (streak.current_streak, streak.longest_streak) == (1, 3)

    def test_activity_types_are_independent(self, db, service):
        service.record_activity(db, "journal", now=local_noon(2024, 1, 10))
        service.record_activity(db, "journal", now=local_noon(2024, 1, 11))
        tasks = service.record_activity(db, "tasks", now=local_noon(2024, 1, 11))
        assert tasks.current_streak == 1
        assert [s.type for s in service.list_streaks(db)] == ["journal", "tasks"]
        assert [s.type for s in service.list_streaks(db, activity_type="tasks")] == ["tasks"]

    def test_row_without_last_activity(self, db, service):
        crud_streak.create(
            db, activity_type="journal", current_streak=0, longest_streak=4, last_activity_at=None
        )
        streak = service.record_activity(db, "journal", now=local_noon(2024, 1, 10))
        assert (streak.current_streak, streak.longest_streak) == (1, 4)

    def test_active_days(self, db, service):
        now = local_noon(2024, 1, 31)
        stamps = [
            datetime(2024, 1, 30, 19, 0, tzinfo=UTC),  # local 31st
            datetime(2024, 1, 30, 10, 0, tzinfo=UTC),  # local 30th
            datetime(2024, 1, 30, 11, 0, tzinfo=UTC),  # local 30th again
            datetime(2023, 11, 1, 10, 0, tzinfo=UTC),  # outside window
        ]
        for stamp in stamps:
            db.add(DiaryEntry(content="x", date=stamp))
        db.commit()

        days = service.active_days(db, now=now)
        assert [d.isoformat() for d in days] == ["2024-01-30", "2024-01-31"]

    def test_active_days_window_counts_today(self, db, service, monkeypatch):
        monkeypatch.setattr("app.services.streak.settings.ACTIVE_DAYS_WINDOW", 30)
        for day in (1, 2):
            db.add(DiaryEntry(content="x", date=local_noon(2024, 1, day)))
        db.commit()

        days = service.active_days(db, now=local_noon(2024, 1, 31))
        assert [d.isoformat() for d in days] == ["2024-01-02"]


class TestConcurrency:
    def test_stale_read_is_retried(self, tmp_path, monkeypatch, caplog):
        engine = create_engine(f"sqlite:///{tmp_path / 'race.db'}")
        Base.metadata.create_all(bind=engine)
        Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        service = StreakService(resolver=IST)

        with Session() as setup:
            service.record_activity(setup, "journal", now=local_noon(2024, 1, 1))

        original = crud_streak.get_by_type
        interfered = []

        def racing_get_by_type(db, *, activity_type, for_update=False):
            streak = original(db, activity_type=activity_type, for_update=for_update)
            if not interfered:
                interfered.append(True)
                # Another request commits between our read and our write
                with Session() as other:
                    service.record_activity(other, activity_type, now=local_noon(2024, 1, 2))
            return streak

        monkeypatch.setattr(crud_streak, "get_by_type", racing_get_by_type)

        with caplog.at_level(logging.WARNING), Session() as session:
            streak = service.record_activity(session, "journal", now=local_noon(2024, 1, 3))
            # Serialized: day 1 -> day 2 -> day 3. A lost update would reset to 1.
            assert (streak.current_streak, streak.longest_streak) == (3, 3)

        assert "write conflict" in caplog.text
        engine.dispose()

    def test_gives_up_after_max_retries(self, db, monkeypatch):
        from sqlalchemy.orm.exc import StaleDataError

        service = StreakService(resolver=IST)

        def always_stale(*args, **kwargs):
            raise StaleDataError("row changed")

        monkeypatch.setattr(service, "_apply", always_stale)
        with pytest.raises(ServiceError):
            service.record_activity(db, "journal", now=local_noon(2024, 1, 1))


class TestBestEffort:
    def test_failure_is_swallowed_and_counted(self, db, monkeypatch, caplog):
        service = StreakService(resolver=IST)

        def broken(*args, **kwargs):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(service, "record_activity", broken)
        with caplog.at_level(logging.ERROR):
            assert service.record_activity_best_effort(db, "journal") is None
        assert service.failed_updates == 1
        assert "Streak update for 'journal' failed" in caplog.text

    def test_success_returns_streak(self, db):
        service = StreakService(resolver=IST)
        streak = service.record_activity_best_effort(db, "journal", now=local_noon(2024, 1, 1))
        assert streak.current_streak == 1
        assert service.failed_updates == 0
