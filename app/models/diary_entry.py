# models/diary_entry.py

import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, Integer, DateTime, Uuid, Enum as SqlEnum
from app.core.config import Base


class MoodType(enum.Enum):
    happy = "happy"
    calm = "calm"
    neutral = "neutral"
    sad = "sad"
    anxious = "anxious"


class DiaryEntry(Base):
    __tablename__ = "diary_entry"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    title = Column(String(255), nullable=True)
    content = Column(Text, nullable=False)
    mood = Column(SqlEnum(MoodType), nullable=True)
    mood_score = Column(Integer, nullable=True)  # 1..10
    prompt = Column(Text, nullable=True)  # prompt the entry answered, if any
    weather = Column(String(100), nullable=True)
    location = Column(String(255), nullable=True)

    # Absolute instant the entry belongs to; bucketed by local day on read
    date = Column(DateTime(timezone=True), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
