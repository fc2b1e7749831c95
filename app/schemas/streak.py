# schemas/streak.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import date
from uuid import UUID

from app.schemas.common import UTCDateTime


class StreakActivityRequest(BaseModel):
    type: str = Field(..., min_length=1, max_length=50, description="Activity type, e.g. journal")


class StreakOut(BaseModel):
    id: UUID
    type: str
    current_streak: int
    longest_streak: int
    last_activity_at: Optional[UTCDateTime] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime

    model_config = ConfigDict(from_attributes=True)


class StreakListResponse(BaseModel):
    streaks: List[StreakOut]
    active_days: List[date]
