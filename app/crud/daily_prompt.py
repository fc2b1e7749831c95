# crud/daily_prompt.py
from typing import Optional, List, Dict, Any
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.daily_prompt import DailyPrompt
from app.schemas.prompt import DailyPromptCreate, DailyPromptUpdate


class CRUDDailyPrompt:
    """CRUD operations for DailyPrompt model."""

    def _next_position(self, db: Session) -> int:
        current = db.query(func.max(DailyPrompt.position)).scalar()
        return 0 if current is None else current + 1

    def create(self, db: Session, *, obj_in: DailyPromptCreate) -> DailyPrompt:
        db_obj = DailyPrompt(**obj_in.model_dump(), position=self._next_position(db))
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def create_many(self, db: Session, *, items: List[Dict[str, Any]]) -> int:
        """Insert several prompts keeping their list order as position."""
        start = self._next_position(db)
        for offset, item in enumerate(items):
            db.add(DailyPrompt(**item, position=start + offset))
        db.commit()
        return len(items)

    def get(self, db: Session, id: UUID) -> Optional[DailyPrompt]:
        return db.query(DailyPrompt).filter(DailyPrompt.id == id).first()

    def count_active(self, db: Session) -> int:
        return db.query(DailyPrompt).filter(DailyPrompt.is_active.is_(True)).count()

    def get_active(self, db: Session) -> List[DailyPrompt]:
        """Active prompts in insertion order."""
        return (
            db.query(DailyPrompt)
            .filter(DailyPrompt.is_active.is_(True))
            .order_by(DailyPrompt.position.asc(), DailyPrompt.created_at.asc())
            .all()
        )

    def get_multi(self, db: Session, *, include_inactive: bool = False) -> List[DailyPrompt]:
        query = db.query(DailyPrompt)
        if not include_inactive:
            query = query.filter(DailyPrompt.is_active.is_(True))
        return query.order_by(DailyPrompt.position.asc()).all()

    def update(
        self, db: Session, *, db_obj: DailyPrompt, obj_in: DailyPromptUpdate
    ) -> DailyPrompt:
        for field, value in obj_in.model_dump(exclude_unset=True).items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj


crud_daily_prompt = CRUDDailyPrompt()
