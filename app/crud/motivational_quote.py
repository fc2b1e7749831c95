# crud/motivational_quote.py
from typing import Optional, List
from uuid import UUID
from sqlalchemy.orm import Session

from app.models.motivational_quote import MotivationalQuote
from app.schemas.quote import QuoteCreate, QuoteUpdate


class CRUDMotivationalQuote:
    """CRUD operations for MotivationalQuote model."""

    def create(self, db: Session, *, obj_in: QuoteCreate) -> MotivationalQuote:
        db_obj = MotivationalQuote(**obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get(self, db: Session, id: UUID) -> Optional[MotivationalQuote]:
        return db.query(MotivationalQuote).filter(MotivationalQuote.id == id).first()

    def get_multi(self, db: Session) -> List[MotivationalQuote]:
        """All quotes, newest first."""
        return (
            db.query(MotivationalQuote)
            .order_by(MotivationalQuote.created_at.desc())
            .all()
        )

    def count(self, db: Session) -> int:
        return db.query(MotivationalQuote).count()

    def get_at_offset(self, db: Session, *, offset: int) -> Optional[MotivationalQuote]:
        return (
            db.query(MotivationalQuote)
            .order_by(MotivationalQuote.created_at.asc(), MotivationalQuote.id.asc())
            .offset(offset)
            .limit(1)
            .first()
        )

    def update(
        self, db: Session, *, db_obj: MotivationalQuote, obj_in: QuoteUpdate
    ) -> MotivationalQuote:
        for field, value in obj_in.model_dump(exclude_unset=True).items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: MotivationalQuote) -> None:
        db.delete(db_obj)
        db.commit()


crud_motivational_quote = CRUDMotivationalQuote()
