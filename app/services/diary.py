# services/diary.py
from typing import Optional, List
from uuid import UUID
from datetime import date, datetime, timezone
from sqlalchemy.orm import Session

from app.core.day_boundary import day_resolver, ensure_utc
from app.core.exceptions import NotFoundError, ValidationError
from app.crud.diary_entry import crud_diary_entry
from app.models.diary_entry import DiaryEntry
from app.schemas.diary import DiaryEntryCreate, DiaryEntryUpdate
from app.services.streak import JOURNAL_ACTIVITY, streak_service


class DiaryService:
    """Service layer for diary entries."""

    def __init__(self):
        self.crud = crud_diary_entry
        self.resolver = day_resolver

    def create_entry(
        self, db: Session, obj_in: DiaryEntryCreate, now: Optional[datetime] = None
    ) -> DiaryEntry:
        """
        Create an entry, then advance the journal streak.

        The streak update is best-effort: the entry is already committed and
        is returned whether or not the streak bookkeeping succeeds.
        """
        now = ensure_utc(now) if now else datetime.now(timezone.utc)
        entry_date = ensure_utc(obj_in.date) if obj_in.date else now

        entry = self.crud.create(db, obj_in=obj_in, entry_date=entry_date)
        entry_id = entry.id

        streak_service.record_activity_best_effort(db, JOURNAL_ACTIVITY, now=now)

        # A failed streak write rolls the session back and expires the entry
        return self.crud.get(db, id=entry_id)

    def list_entries(
        self, db: Session, day: Optional[date] = None, limit: Optional[int] = None
    ) -> List[DiaryEntry]:
        """Entries newest first, optionally restricted to one local day."""
        if day is None:
            return self.crud.get_multi(db, limit=limit)
        start, end = self.resolver.day_bounds(day)
        return self.crud.get_multi(db, start=start, end=end, limit=limit)

    def get_entry(self, db: Session, entry_id: UUID) -> DiaryEntry:
        entry = self.crud.get(db, id=entry_id)
        if not entry:
            raise NotFoundError("Diary entry not found")
        return entry

    def update_entry(
        self, db: Session, entry_id: UUID, obj_in: DiaryEntryUpdate
    ) -> DiaryEntry:
        entry = self.get_entry(db, entry_id)
        if "content" in obj_in.model_fields_set and obj_in.content is None:
            raise ValidationError("content cannot be null")
        return self.crud.update(db, db_obj=entry, obj_in=obj_in)

    def delete_entry(self, db: Session, entry_id: UUID) -> None:
        entry = self.get_entry(db, entry_id)
        self.crud.delete(db, db_obj=entry)


diary_service = DiaryService()
