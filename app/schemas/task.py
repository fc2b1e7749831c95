# schemas/task.py
from pydantic import BaseModel, Field, ConfigDict, model_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from app.models.task import TaskPriority
from app.schemas.common import UTCDateTime


# =====================================================================
# CATEGORY
# =====================================================================

class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field("#6366f1", max_length=32)
    icon: Optional[str] = Field(None, max_length=50)


class CategoryOut(CategoryCreate):
    id: UUID
    created_at: UTCDateTime
    updated_at: UTCDateTime

    model_config = ConfigDict(from_attributes=True)


# =====================================================================
# TASK
# =====================================================================

class TaskBase(BaseModel):
    description: Optional[str] = None
    start_time: Optional[UTCDateTime] = None
    end_time: Optional[UTCDateTime] = None
    duration: Optional[int] = Field(None, ge=0, description="Minutes")
    category_id: Optional[UUID] = None

    @model_validator(mode="after")
    def check_time_window(self):
        if self.start_time and self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class TaskCreate(TaskBase):
    title: str = Field(..., min_length=1, max_length=255)
    priority: TaskPriority = TaskPriority.medium
    date: Optional[datetime] = Field(
        None, description="Any instant inside the target local day, defaults to today"
    )


class TaskUpdate(TaskBase):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    priority: Optional[TaskPriority] = None
    is_completed: Optional[bool] = None
    date: Optional[datetime] = None
    order: Optional[int] = Field(None, ge=0)


class TaskOut(TaskBase):
    id: UUID
    title: str
    priority: TaskPriority
    is_completed: bool
    start_time: Optional[UTCDateTime] = None
    end_time: Optional[UTCDateTime] = None
    date: UTCDateTime
    order: int
    category: Optional[CategoryOut] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime

    model_config = ConfigDict(from_attributes=True)


# =====================================================================
# DATE MIGRATION
# =====================================================================

class TaskDateChange(BaseModel):
    id: UUID
    title: Optional[str] = None
    original_date: UTCDateTime
    corrected_date: UTCDateTime
    created_at: UTCDateTime
    needs_update: bool


class TaskDateMigrationPreview(BaseModel):
    total_tasks: int
    tasks_needing_update: int
    preview: List[TaskDateChange]


class TaskDateMigrationResult(BaseModel):
    message: str
    updates: List[TaskDateChange]
