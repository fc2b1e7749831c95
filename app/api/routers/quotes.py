# app/api/routers/quotes.py
from typing import List, Union
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.schemas.common import SuccessResponse
from app.schemas.quote import QuoteCreate, QuoteUpdate, QuoteOut
from app.services.quote import quote_service

router = APIRouter(prefix="/quotes", tags=["Quotes"])


@router.get("", response_model=Union[List[QuoteOut], QuoteOut, None])
def get_quotes(
    random: bool = Query(False, description="Return one random quote (or null)"),
    db: Session = Depends(get_db),
):
    """All quotes newest first, or a single random one."""
    if random:
        quote = quote_service.random_quote(db)
        return QuoteOut.model_validate(quote) if quote else None
    return [QuoteOut.model_validate(q) for q in quote_service.list_quotes(db)]


@router.post("", response_model=QuoteOut, status_code=status.HTTP_201_CREATED)
def create_quote(quote_data: QuoteCreate, db: Session = Depends(get_db)):
    return quote_service.create_quote(db, quote_data)


@router.get("/{quote_id}", response_model=QuoteOut)
def get_quote(quote_id: UUID, db: Session = Depends(get_db)):
    return quote_service.get_quote(db, quote_id)


@router.patch("/{quote_id}", response_model=QuoteOut)
def update_quote(quote_id: UUID, quote_data: QuoteUpdate, db: Session = Depends(get_db)):
    return quote_service.update_quote(db, quote_id, quote_data)


@router.delete("/{quote_id}", response_model=SuccessResponse)
def delete_quote(quote_id: UUID, db: Session = Depends(get_db)):
    quote_service.delete_quote(db, quote_id)
    return SuccessResponse()
