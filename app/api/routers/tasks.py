# app/api/routers/tasks.py
from typing import List, Optional
from uuid import UUID
from datetime import date
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.schemas.common import SuccessResponse
from app.schemas.task import (
    CategoryCreate,
    CategoryOut,
    TaskCreate,
    TaskUpdate,
    TaskOut,
    TaskDateMigrationPreview,
    TaskDateMigrationResult,
)
from app.services.task import task_service

router = APIRouter(prefix="/tasks", tags=["Tasks"])
category_router = APIRouter(prefix="/categories", tags=["Categories"])


# =====================================================================
# TASKS
# =====================================================================

@router.get("", response_model=List[TaskOut], summary="List tasks")
def list_tasks(
    day: Optional[date] = Query(None, alias="date", description="Local day (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    """Tasks ordered by start time (unscheduled last), then by position."""
    return task_service.list_tasks(db, day=day)


@router.post(
    "",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
)
def create_task(task_data: TaskCreate, db: Session = Depends(get_db)):
    return task_service.create_task(db, task_data)


# Declared before /{task_id} so the literal path wins
@router.get(
    "/migrate-dates",
    response_model=TaskDateMigrationPreview,
    summary="Preview task date re-bucketing",
)
def preview_migrate_dates(db: Session = Depends(get_db)):
    """
    Show, for every task, the canonical date of the local day it was
    created on and whether the stored date differs.
    """
    return task_service.preview_date_migration(db)


@router.post(
    "/migrate-dates",
    response_model=TaskDateMigrationResult,
    summary="Re-bucket task dates to their local creation day",
)
def migrate_dates(db: Session = Depends(get_db)):
    return task_service.apply_date_migration(db)


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: UUID, db: Session = Depends(get_db)):
    return task_service.get_task(db, task_id)


@router.patch("/{task_id}", response_model=TaskOut)
def update_task(task_id: UUID, task_data: TaskUpdate, db: Session = Depends(get_db)):
    """
    Update only the fields present in the body.

    Setting ``is_completed`` to true records a "tasks" streak event.
    """
    return task_service.update_task(db, task_id, task_data)


@router.delete("/{task_id}", response_model=SuccessResponse)
def delete_task(task_id: UUID, db: Session = Depends(get_db)):
    task_service.delete_task(db, task_id)
    return SuccessResponse()


# =====================================================================
# CATEGORIES
# =====================================================================

@category_router.get("", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return task_service.list_categories(db)


@category_router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    return task_service.create_category(db, category_data)


@category_router.delete("/{category_id}", response_model=SuccessResponse)
def delete_category(category_id: UUID, db: Session = Depends(get_db)):
    """Delete a category; its tasks are kept without one."""
    task_service.delete_category(db, category_id)
    return SuccessResponse()
