# crud/diary_entry.py
from typing import Optional, List
from uuid import UUID
from datetime import datetime
from sqlalchemy.orm import Session

from app.models.diary_entry import DiaryEntry
from app.schemas.diary import DiaryEntryCreate, DiaryEntryUpdate


class CRUDDiaryEntry:
    """CRUD operations for DiaryEntry model."""

    # =====================================================================
    # CREATE OPERATIONS
    # =====================================================================

    def create(
        self, db: Session, *, obj_in: DiaryEntryCreate, entry_date: datetime
    ) -> DiaryEntry:
        """Create a diary entry stamped with ``entry_date``."""
        obj_data = obj_in.model_dump(exclude={"date"})

        db_obj = DiaryEntry(**obj_data, date=entry_date)

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get(self, db: Session, id: UUID) -> Optional[DiaryEntry]:
        """Get diary entry by ID."""
        return db.query(DiaryEntry).filter(DiaryEntry.id == id).first()

    def get_multi(
        self,
        db: Session,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[DiaryEntry]:
        """
        List entries newest first.

        Args:
            db: Database session
            start: Inclusive lower bound on ``date``
            end: Inclusive upper bound on ``date``
            limit: Maximum number of records to return

        Returns:
            List of DiaryEntry instances
        """
        query = db.query(DiaryEntry)
        if start is not None:
            query = query.filter(DiaryEntry.date >= start)
        if end is not None:
            query = query.filter(DiaryEntry.date <= end)
        query = query.order_by(DiaryEntry.date.desc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_dates_since(self, db: Session, *, start: datetime) -> List[datetime]:
        """Entry instants on or after ``start``."""
        rows = (
            db.query(DiaryEntry.date)
            .filter(DiaryEntry.date >= start)
            .order_by(DiaryEntry.date.asc())
            .all()
        )
        return [row.date for row in rows]

    def count(self, db: Session) -> int:
        return db.query(DiaryEntry).count()

    # =====================================================================
    # UPDATE / DELETE OPERATIONS
    # =====================================================================

    def update(
        self, db: Session, *, db_obj: DiaryEntry, obj_in: DiaryEntryUpdate
    ) -> DiaryEntry:
        """Apply only the fields the client sent."""
        for field, value in obj_in.model_dump(exclude_unset=True).items():
            setattr(db_obj, field, value)

        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: DiaryEntry) -> None:
        db.delete(db_obj)
        db.commit()


crud_diary_entry = CRUDDiaryEntry()
