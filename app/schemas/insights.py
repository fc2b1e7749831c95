# schemas/insights.py
from pydantic import BaseModel
from typing import Optional, Dict, List
from datetime import date


class WeeklyActivityDay(BaseModel):
    day: str  # Mon..Sun
    date: date
    entries: int
    tasks: int
    total: int


class InsightsSummary(BaseModel):
    journal_streak: int
    longest_streak: int
    journal_entries: int

    mood_counts: Dict[str, int]
    most_common_mood: Optional[str] = None

    total_tasks: int
    completed_tasks: int
    completion_rate: int  # percent
    tasks_by_priority: Dict[str, int]

    weekly_activity: List[WeeklyActivityDay]
