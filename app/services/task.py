# services/task.py
import logging
from typing import Optional, List, Dict, Any
from uuid import UUID
from datetime import date, datetime, timezone
from sqlalchemy.orm import Session

from app.core.day_boundary import day_resolver, ensure_utc
from app.core.exceptions import (
    ConflictError,
    DatabaseConflictError,
    NotFoundError,
    ValidationError,
)
from app.crud.task import crud_task
from app.models.task import Task, Category
from app.schemas.task import (
    CategoryCreate,
    TaskCreate,
    TaskUpdate,
    TaskDateChange,
    TaskDateMigrationPreview,
    TaskDateMigrationResult,
)
from app.services.streak import TASKS_ACTIVITY, streak_service

logger = logging.getLogger(__name__)


class TaskService:
    """
    Service layer for tasks and categories.

    A task's ``date`` is always the canonical instant (local noon) of the
    local day it is scheduled for, so it re-buckets to the same day no
    matter which instant inside that day the client sent.
    """

    def __init__(self):
        self.crud = crud_task
        self.resolver = day_resolver

    # =====================================================================
    # HELPERS
    # =====================================================================

    def _canonical_date(self, value: Optional[datetime], now: datetime) -> datetime:
        day = self.resolver.local_day_of(value) if value else self.resolver.today(now)
        return self.resolver.canonical_instant_for(day)

    def _check_category(self, db: Session, category_id: Optional[UUID]) -> None:
        if category_id and not self.crud.get_category(db, id=category_id):
            raise NotFoundError(f"Category {category_id} not found")

    # =====================================================================
    # TASK OPERATIONS
    # =====================================================================

    def create_task(
        self, db: Session, obj_in: TaskCreate, now: Optional[datetime] = None
    ) -> Task:
        """Create a task appended after the day's existing tasks."""
        now = ensure_utc(now) if now else datetime.now(timezone.utc)
        self._check_category(db, obj_in.category_id)

        task_date = self._canonical_date(obj_in.date, now)
        start, end = self.resolver.day_bounds(self.resolver.local_day_of(task_date))
        max_order = self.crud.max_order(db, start=start, end=end)

        obj_data = obj_in.model_dump(exclude={"date"})
        for field in ("start_time", "end_time"):
            if obj_data[field] is not None:
                obj_data[field] = ensure_utc(obj_data[field])
        obj_data["date"] = task_date
        obj_data["order"] = (max_order if max_order is not None else -1) + 1

        task = self.crud.create(db, obj_data=obj_data)
        return self.crud.get(db, id=task.id)

    def list_tasks(self, db: Session, day: Optional[date] = None) -> List[Task]:
        if day is None:
            return self.crud.get_multi(db)
        start, end = self.resolver.day_bounds(day)
        return self.crud.get_multi(db, start=start, end=end)

    def get_task(self, db: Session, task_id: UUID) -> Task:
        task = self.crud.get(db, id=task_id)
        if not task:
            raise NotFoundError("Task not found")
        return task

    def update_task(
        self,
        db: Session,
        task_id: UUID,
        obj_in: TaskUpdate,
        now: Optional[datetime] = None,
    ) -> Task:
        """
        Partially update a task.

        Marking a task completed counts as a qualifying "tasks" streak
        event; that update is best-effort and never fails the request.
        """
        now = ensure_utc(now) if now else datetime.now(timezone.utc)
        task = self.get_task(db, task_id)
        update_data: Dict[str, Any] = obj_in.model_dump(exclude_unset=True)

        if "date" in update_data:
            if update_data["date"] is None:
                raise ValidationError("date cannot be cleared")
            update_data["date"] = self._canonical_date(update_data["date"], now)
        for field in ("start_time", "end_time"):
            if update_data.get(field) is not None:
                update_data[field] = ensure_utc(update_data[field])
        for field in ("title", "priority", "is_completed", "order"):
            if field in update_data and update_data[field] is None:
                raise ValidationError(f"{field} cannot be null")
        if "category_id" in update_data:
            self._check_category(db, update_data["category_id"])

        start_time = update_data.get("start_time", task.start_time)
        end_time = update_data.get("end_time", task.end_time)
        if start_time and end_time and ensure_utc(end_time) < ensure_utc(start_time):
            raise ValidationError("end_time must not be before start_time")

        newly_completed = update_data.get("is_completed") is True and not task.is_completed

        task = self.crud.update(db, db_obj=task, update_data=update_data)

        if newly_completed:
            streak_service.record_activity_best_effort(db, TASKS_ACTIVITY, now=now)

        return self.crud.get(db, id=task_id)

    def delete_task(self, db: Session, task_id: UUID) -> None:
        task = self.get_task(db, task_id)
        self.crud.delete(db, db_obj=task)

    # =====================================================================
    # DATE MIGRATION
    # =====================================================================

    def _date_changes(self, db: Session) -> List[TaskDateChange]:
        changes = []
        for task in self.crud.get_all(db):
            created_at = ensure_utc(task.created_at)
            original = ensure_utc(task.date)
            corrected = self.resolver.canonical_instant_for(
                self.resolver.local_day_of(created_at)
            )
            changes.append(
                TaskDateChange(
                    id=task.id,
                    title=task.title,
                    original_date=original,
                    corrected_date=corrected,
                    created_at=created_at,
                    needs_update=original != corrected,
                )
            )
        return changes

    def preview_date_migration(self, db: Session) -> TaskDateMigrationPreview:
        """
        Show what re-bucketing every task to the local day it was created
        on would change, without writing anything.
        """
        changes = self._date_changes(db)
        return TaskDateMigrationPreview(
            total_tasks=len(changes),
            tasks_needing_update=sum(1 for c in changes if c.needs_update),
            preview=changes,
        )

    def apply_date_migration(self, db: Session) -> TaskDateMigrationResult:
        updates = [c for c in self._date_changes(db) if c.needs_update]
        self.crud.set_dates(db, changes={c.id: c.corrected_date for c in updates})
        logger.info("Migrated dates of %d tasks", len(updates))
        return TaskDateMigrationResult(
            message=f"Successfully migrated {len(updates)} tasks",
            updates=updates,
        )

    # =====================================================================
    # CATEGORY OPERATIONS
    # =====================================================================

    def list_categories(self, db: Session) -> List[Category]:
        return self.crud.get_categories(db)

    def create_category(self, db: Session, obj_in: CategoryCreate) -> Category:
        try:
            return self.crud.create_category(db, obj_in=obj_in)
        except DatabaseConflictError as e:
            raise ConflictError(str(e)) from e

    def delete_category(self, db: Session, category_id: UUID) -> None:
        category = self.crud.get_category(db, id=category_id)
        if not category:
            raise NotFoundError("Category not found")
        self.crud.delete_category(db, db_obj=category)


task_service = TaskService()
