# crud/streak.py
from typing import Optional, List
from datetime import datetime
from sqlalchemy.orm import Session

from app.models.streak import Streak


class CRUDStreak:
    """CRUD operations for Streak model."""

    def get_by_type(
        self, db: Session, *, activity_type: str, for_update: bool = False
    ) -> Optional[Streak]:
        """
        Get the streak row for an activity type.

        ``for_update`` takes a row lock on backends that support it so the
        caller's read-modify-write is serialized; the version column still
        guards backends that ignore it.
        """
        query = db.query(Streak).filter(Streak.type == activity_type)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def get_multi(self, db: Session, *, activity_type: Optional[str] = None) -> List[Streak]:
        query = db.query(Streak)
        if activity_type:
            query = query.filter(Streak.type == activity_type)
        return query.order_by(Streak.type.asc()).all()

    def create(
        self,
        db: Session,
        *,
        activity_type: str,
        current_streak: int,
        longest_streak: int,
        last_activity_at: Optional[datetime],
    ) -> Streak:
        db_obj = Streak(
            type=activity_type,
            current_streak=current_streak,
            longest_streak=longest_streak,
            last_activity_at=last_activity_at,
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update_state(
        self,
        db: Session,
        *,
        db_obj: Streak,
        current_streak: int,
        longest_streak: int,
        last_activity_at: Optional[datetime],
    ) -> Streak:
        """Write counters; raises StaleDataError if another writer got there first."""
        db_obj.current_streak = current_streak
        db_obj.longest_streak = longest_streak
        db_obj.last_activity_at = last_activity_at

        db.commit()
        db.refresh(db_obj)
        return db_obj


crud_streak = CRUDStreak()
