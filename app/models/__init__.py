# app/models/__init__.py

from app.core.config import Base

# Import all models here so metadata.create_all and app-wide imports work
from .diary_entry import DiaryEntry, MoodType
from .task import Task, TaskPriority, Category
from .streak import Streak
from .daily_prompt import DailyPrompt
from .motivational_quote import MotivationalQuote

__all__ = [
    "Base",
    "DiaryEntry",
    "MoodType",
    "Task",
    "TaskPriority",
    "Category",
    "Streak",
    "DailyPrompt",
    "MotivationalQuote",
]
