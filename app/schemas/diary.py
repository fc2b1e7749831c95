# schemas/diary.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from uuid import UUID

from app.models.diary_entry import MoodType
from app.schemas.common import UTCDateTime


# =====================================================================
# BASE
# =====================================================================

class DiaryEntryBase(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    mood: Optional[MoodType] = None
    mood_score: Optional[int] = Field(None, ge=1, le=10)
    weather: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=255)


# =====================================================================
# CREATE / UPDATE
# =====================================================================

class DiaryEntryCreate(DiaryEntryBase):
    content: str = Field(..., min_length=1)
    prompt: Optional[str] = None
    date: Optional[datetime] = Field(
        None, description="Instant the entry belongs to, defaults to now"
    )


class DiaryEntryUpdate(DiaryEntryBase):
    content: Optional[str] = Field(None, min_length=1)


# =====================================================================
# OUTPUT
# =====================================================================

class DiaryEntryOut(DiaryEntryBase):
    id: UUID
    content: str
    prompt: Optional[str] = None
    date: UTCDateTime
    created_at: UTCDateTime
    updated_at: UTCDateTime

    model_config = ConfigDict(from_attributes=True)
