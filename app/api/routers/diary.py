# app/api/routers/diary.py
from typing import List, Optional
from uuid import UUID
from datetime import date
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.schemas.common import SuccessResponse
from app.schemas.diary import DiaryEntryCreate, DiaryEntryUpdate, DiaryEntryOut
from app.services.diary import diary_service

router = APIRouter(prefix="/diary", tags=["Diary"])


@router.get("", response_model=List[DiaryEntryOut], summary="List diary entries")
def list_entries(
    day: Optional[date] = Query(None, alias="date", description="Local day (YYYY-MM-DD)"),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    """
    List diary entries, newest first.

    With ``date`` only entries inside that local day (start to end of day,
    inclusive) are returned.
    """
    return diary_service.list_entries(db, day=day, limit=limit)


@router.post(
    "",
    response_model=DiaryEntryOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a diary entry",
)
def create_entry(entry_data: DiaryEntryCreate, db: Session = Depends(get_db)):
    """
    Create a diary entry and advance the journal streak.

    The response does not depend on the streak update succeeding.
    """
    return diary_service.create_entry(db, entry_data)


@router.get("/{entry_id}", response_model=DiaryEntryOut)
def get_entry(entry_id: UUID, db: Session = Depends(get_db)):
    return diary_service.get_entry(db, entry_id)


@router.patch("/{entry_id}", response_model=DiaryEntryOut)
def update_entry(
    entry_id: UUID, entry_data: DiaryEntryUpdate, db: Session = Depends(get_db)
):
    """Update only the fields present in the body."""
    return diary_service.update_entry(db, entry_id, entry_data)


@router.delete("/{entry_id}", response_model=SuccessResponse)
def delete_entry(entry_id: UUID, db: Session = Depends(get_db)):
    diary_service.delete_entry(db, entry_id)
    return SuccessResponse()
