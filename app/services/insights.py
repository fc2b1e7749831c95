# services/insights.py
from collections import Counter
from datetime import datetime, timedelta
from typing import Optional, List, Dict
from sqlalchemy.orm import Session

from app.core.day_boundary import day_resolver
from app.crud.diary_entry import crud_diary_entry
from app.crud.task import crud_task
from app.models.task import TaskPriority
from app.schemas.insights import InsightsSummary, WeeklyActivityDay
from app.services.streak import JOURNAL_ACTIVITY, streak_service

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


class InsightsService:
    """Aggregates diary, task and streak data for the insights dashboard."""

    def __init__(self):
        self.resolver = day_resolver

    def _weekly_activity(
        self, entry_days: Counter, task_days: Counter, now: Optional[datetime]
    ) -> List[WeeklyActivityDay]:
        today = self.resolver.today(now)
        monday = today - timedelta(days=today.weekday())

        week = []
        for offset, label in enumerate(WEEKDAY_LABELS):
            day = monday + timedelta(days=offset)
            entries = entry_days.get(day, 0)
            tasks = task_days.get(day, 0)
            week.append(
                WeeklyActivityDay(
                    day=label, date=day, entries=entries, tasks=tasks, total=entries + tasks
                )
            )
        return week

    def get_summary(self, db: Session, now: Optional[datetime] = None) -> InsightsSummary:
        entries = crud_diary_entry.get_multi(db)
        tasks = crud_task.get_multi(db)
        journal = streak_service.get_streak(db, JOURNAL_ACTIVITY)

        mood_counts: Dict[str, int] = Counter(e.mood.value for e in entries if e.mood)
        most_common = mood_counts.most_common(1)

        completed = [t for t in tasks if t.is_completed]
        completion_rate = round(len(completed) / len(tasks) * 100) if tasks else 0
        by_priority = Counter(t.priority.value for t in tasks)

        entry_days = Counter(self.resolver.local_day_of(e.date) for e in entries)
        task_days = Counter(self.resolver.local_day_of(t.date) for t in completed)

        return InsightsSummary(
            journal_streak=journal.current_streak if journal else 0,
            longest_streak=journal.longest_streak if journal else 0,
            journal_entries=len(entries),
            mood_counts=dict(mood_counts),
            most_common_mood=most_common[0][0] if most_common else None,
            total_tasks=len(tasks),
            completed_tasks=len(completed),
            completion_rate=completion_rate,
            tasks_by_priority={p.value: by_priority.get(p.value, 0) for p in TaskPriority},
            weekly_activity=self._weekly_activity(entry_days, task_days, now),
        )


insights_service = InsightsService()
