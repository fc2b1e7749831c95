# models/daily_prompt.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, Boolean, Integer, DateTime, Uuid
from app.core.config import Base


class DailyPrompt(Base):
    __tablename__ = "daily_prompt"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    content = Column(Text, nullable=False)
    author = Column(String(255), nullable=True)
    category = Column(String(50), nullable=True)  # mindfulness, gratitude, reflection, ...
    is_active = Column(Boolean, nullable=False, default=True)
    position = Column(Integer, nullable=False, default=0)  # insertion order, selection key

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
