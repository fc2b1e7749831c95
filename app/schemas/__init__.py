# app/schemas/__init__.py

from .common import SuccessResponse, UTCDateTime
from .diary import (
    DiaryEntryBase,
    DiaryEntryCreate,
    DiaryEntryUpdate,
    DiaryEntryOut,
)
from .task import (
    CategoryCreate,
    CategoryOut,
    TaskCreate,
    TaskUpdate,
    TaskOut,
    TaskDateChange,
    TaskDateMigrationPreview,
    TaskDateMigrationResult,
)
from .streak import StreakActivityRequest, StreakOut, StreakListResponse
from .prompt import DailyPromptCreate, DailyPromptUpdate, DailyPromptOut
from .quote import QuoteCreate, QuoteUpdate, QuoteOut
from .insights import WeeklyActivityDay, InsightsSummary


__all__ = [
    "SuccessResponse", "UTCDateTime",

    # Diary
    "DiaryEntryBase", "DiaryEntryCreate", "DiaryEntryUpdate", "DiaryEntryOut",

    # Tasks
    "CategoryCreate", "CategoryOut", "TaskCreate", "TaskUpdate", "TaskOut",
    "TaskDateChange", "TaskDateMigrationPreview", "TaskDateMigrationResult",

    # Streaks, prompts, quotes
    "StreakActivityRequest", "StreakOut", "StreakListResponse",
    "DailyPromptCreate", "DailyPromptUpdate", "DailyPromptOut",
    "QuoteCreate", "QuoteUpdate", "QuoteOut",

    # Insights
    "WeeklyActivityDay", "InsightsSummary",
]
