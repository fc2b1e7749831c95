# services/quote.py
import random
from typing import Optional, List
from uuid import UUID
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.crud.motivational_quote import crud_motivational_quote
from app.models.motivational_quote import MotivationalQuote
from app.schemas.quote import QuoteCreate, QuoteUpdate


class QuoteService:
    """Service layer for motivational quotes."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.crud = crud_motivational_quote
        self.rng = rng or random.Random()

    def list_quotes(self, db: Session) -> List[MotivationalQuote]:
        return self.crud.get_multi(db)

    def random_quote(self, db: Session) -> Optional[MotivationalQuote]:
        count = self.crud.count(db)
        if count == 0:
            return None
        return self.crud.get_at_offset(db, offset=self.rng.randrange(count))

    def get_quote(self, db: Session, quote_id: UUID) -> MotivationalQuote:
        quote = self.crud.get(db, id=quote_id)
        if not quote:
            raise NotFoundError("Quote not found")
        return quote

    def create_quote(self, db: Session, obj_in: QuoteCreate) -> MotivationalQuote:
        return self.crud.create(db, obj_in=obj_in)

    def update_quote(
        self, db: Session, quote_id: UUID, obj_in: QuoteUpdate
    ) -> MotivationalQuote:
        quote = self.get_quote(db, quote_id)
        for field in ("content", "is_favorite"):
            if field in obj_in.model_fields_set and getattr(obj_in, field) is None:
                raise ValidationError(f"{field} cannot be null")
        return self.crud.update(db, db_obj=quote, obj_in=obj_in)

    def delete_quote(self, db: Session, quote_id: UUID) -> None:
        quote = self.get_quote(db, quote_id)
        self.crud.delete(db, db_obj=quote)


quote_service = QuoteService()
