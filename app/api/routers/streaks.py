# app/api/routers/streaks.py
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.schemas.streak import StreakActivityRequest, StreakOut, StreakListResponse
from app.services.streak import streak_service

router = APIRouter(prefix="/streaks", tags=["Streaks"])


@router.get("", response_model=StreakListResponse, summary="Get streaks and active days")
def get_streaks(
    activity_type: Optional[str] = Query(None, alias="type"),
    db: Session = Depends(get_db),
):
    """
    All streaks (or only ``type``), plus the local days with at least one
    diary entry in the recent window.
    """
    return StreakListResponse(
        streaks=[
            StreakOut.model_validate(s)
            for s in streak_service.list_streaks(db, activity_type=activity_type)
        ],
        active_days=streak_service.active_days(db),
    )


@router.post("", response_model=StreakOut, summary="Record a streak activity")
def record_activity(body: StreakActivityRequest, db: Session = Depends(get_db)):
    """
    Record a qualifying event now for ``type``.

    - first event creates the streak at 1
    - same local day: unchanged
    - next local day: +1
    - anything else: back to 1
    """
    return streak_service.record_activity(db, body.type)
