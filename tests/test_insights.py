"""Tests for the insights summary."""

from datetime import datetime, timedelta, timezone

from app.core.day_boundary import day_resolver
from app.models.diary_entry import DiaryEntry, MoodType
from app.models.task import Task, TaskPriority
from app.services.insights import insights_service
from app.services.streak import streak_service

UTC = timezone.utc
# Wednesday 2024-01-10, local noon
NOW = day_resolver.canonical_storage_instant(2024, 1, 10)


def add_entry(db, mood, when):
    db.add(DiaryEntry(content="entry", mood=mood, date=when))


def add_task(db, priority, completed, when):
    db.add(Task(title="task", priority=priority, is_completed=completed, date=when, order=0))


def test_empty_summary(db):
    summary = insights_service.get_summary(db, now=NOW)
    assert summary.journal_streak == 0
    assert summary.journal_entries == 0
    assert summary.most_common_mood is None
    assert summary.completion_rate == 0
    assert summary.tasks_by_priority == {"low": 0, "medium": 0, "high": 0}
    assert [d.day for d in summary.weekly_activity] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert summary.weekly_activity[0].date.isoformat() == "2024-01-08"


def test_summary_counts(db):
    add_entry(db, MoodType.happy, NOW)
    add_entry(db, MoodType.happy, NOW - timedelta(days=1))
    add_entry(db, MoodType.sad, NOW - timedelta(days=1))
    add_entry(db, None, NOW - timedelta(days=30))
    add_task(db, TaskPriority.high, True, NOW)
    add_task(db, TaskPriority.high, False, NOW)
    add_task(db, TaskPriority.low, True, NOW - timedelta(days=2))
    db.commit()
    streak_service.record_activity(db, "journal", now=NOW - timedelta(days=1))
    streak_service.record_activity(db, "journal", now=NOW)

    summary = insights_service.get_summary(db, now=NOW)

    assert summary.journal_streak == 2
    assert summary.longest_streak == 2
    assert summary.journal_entries == 4
    assert summary.mood_counts == {"happy": 2, "sad": 1}
    assert summary.most_common_mood == "happy"
    assert summary.total_tasks == 3
    assert summary.completed_tasks == 2
    assert summary.completion_rate == 67
    assert summary.tasks_by_priority == {"low": 1, "medium": 0, "high": 2}

    week = {d.day: d for d in summary.weekly_activity}
    assert (week["Mon"].entries, week["Mon"].tasks) == (0, 1)
    assert (week["Tue"].entries, week["Tue"].tasks) == (2, 0)
    assert (week["Wed"].entries, week["Wed"].tasks, week["Wed"].total) == (1, 1, 2)


def test_weekly_activity_buckets_by_local_day(db):
    # 19:00Z on Tuesday the 9th is 00:30 Wednesday locally
    add_entry(db, None, datetime(2024, 1, 9, 19, 0, tzinfo=UTC))
    db.commit()

    week = {d.day: d for d in insights_service.get_summary(db, now=NOW).weekly_activity}
    assert week["Tue"].entries == 0
    assert week["Wed"].entries == 1


def test_summary_endpoint(client):
    client.post("/diary", json={"content": "hello", "mood": "calm"})
    body = client.get("/insights/summary").json()
    assert body["journal_entries"] == 1
    assert body["journal_streak"] == 1
    assert body["mood_counts"] == {"calm": 1}
    assert len(body["weekly_activity"]) == 7
