# schemas/quote.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from uuid import UUID

from app.schemas.common import UTCDateTime


class QuoteCreate(BaseModel):
    content: str = Field(..., min_length=1)
    author: Optional[str] = Field(None, max_length=255)
    is_favorite: bool = False


class QuoteUpdate(BaseModel):
    content: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = Field(None, max_length=255)
    is_favorite: Optional[bool] = None


class QuoteOut(BaseModel):
    id: UUID
    content: str
    author: Optional[str] = None
    is_favorite: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime

    model_config = ConfigDict(from_attributes=True)
