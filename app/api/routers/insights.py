# app/api/routers/insights.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.schemas.insights import InsightsSummary
from app.services.insights import insights_service

router = APIRouter(prefix="/insights", tags=["Insights"])


@router.get("/summary", response_model=InsightsSummary, summary="Dashboard statistics")
def get_summary(db: Session = Depends(get_db)):
    """
    Journal streak, mood distribution, task completion and the current
    local week's activity.
    """
    return insights_service.get_summary(db)
