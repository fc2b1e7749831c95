# schemas/prompt.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from uuid import UUID

from app.schemas.common import UTCDateTime


class DailyPromptCreate(BaseModel):
    content: str = Field(..., min_length=1)
    author: Optional[str] = Field(None, max_length=255)
    category: Optional[str] = Field(None, max_length=50)


class DailyPromptUpdate(BaseModel):
    content: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = Field(None, max_length=255)
    category: Optional[str] = Field(None, max_length=50)
    is_active: Optional[bool] = None


class DailyPromptOut(BaseModel):
    """Prompt of the day. Only ``content`` is set for the built-in fallback."""
    id: Optional[UUID] = None
    content: str
    author: Optional[str] = None
    category: Optional[str] = None
    is_active: bool = True
    created_at: Optional[UTCDateTime] = None

    model_config = ConfigDict(from_attributes=True)
