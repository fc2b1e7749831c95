# app/api/routers/prompts.py
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.schemas.prompt import DailyPromptCreate, DailyPromptUpdate, DailyPromptOut
from app.services.prompt import prompt_service

router = APIRouter(prefix="/prompts", tags=["Prompts"])


@router.get("", response_model=DailyPromptOut, summary="Prompt of the day")
def get_daily_prompt(db: Session = Depends(get_db)):
    """Same prompt for every request on the same local day."""
    return prompt_service.get_prompt_of_the_day(db)


@router.get("/all", response_model=List[DailyPromptOut])
def list_prompts(
    include_inactive: bool = Query(False),
    db: Session = Depends(get_db),
):
    return prompt_service.list_prompts(db, include_inactive=include_inactive)


@router.post("", response_model=DailyPromptOut, status_code=status.HTTP_201_CREATED)
def create_prompt(prompt_data: DailyPromptCreate, db: Session = Depends(get_db)):
    return prompt_service.create_prompt(db, prompt_data)


@router.patch("/{prompt_id}", response_model=DailyPromptOut)
def update_prompt(
    prompt_id: UUID, prompt_data: DailyPromptUpdate, db: Session = Depends(get_db)
):
    """Edit a prompt or retire it with ``is_active: false``."""
    return prompt_service.update_prompt(db, prompt_id, prompt_data)
