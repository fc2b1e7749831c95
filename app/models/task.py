# models/task.py

import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import (
    Column, String, Text, Integer, Boolean, DateTime, ForeignKey, Uuid, Enum as SqlEnum
)
from sqlalchemy.orm import relationship
from app.core.config import Base


class TaskPriority(enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


class Category(Base):
    __tablename__ = "category"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(100), unique=True, nullable=False)
    color = Column(String(32), nullable=False, default="#6366f1")
    icon = Column(String(50), nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    tasks = relationship("Task", back_populates="category")


class Task(Base):
    __tablename__ = "task"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    start_time = Column(DateTime(timezone=True), nullable=True)
    end_time = Column(DateTime(timezone=True), nullable=True)
    duration = Column(Integer, nullable=True)  # minutes
    is_completed = Column(Boolean, nullable=False, default=False)
    priority = Column(SqlEnum(TaskPriority), nullable=False, default=TaskPriority.medium)

    category_id = Column(
        Uuid(as_uuid=True), ForeignKey("category.id", ondelete="SET NULL"), nullable=True
    )

    # Local noon of the day the task is scheduled for
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    category = relationship("Category", back_populates="tasks")
