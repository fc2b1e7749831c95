# crud/task.py
from typing import Optional, List, Dict, Any
from uuid import UUID
from datetime import datetime
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.core.exceptions import DatabaseConflictError
from app.models.task import Task, Category
from app.schemas.task import CategoryCreate


class CRUDTask:
    """CRUD operations for Task and Category models."""

    # =====================================================================
    # TASKS
    # =====================================================================

    def create(self, db: Session, *, obj_data: Dict[str, Any]) -> Task:
        """Create a task from already-normalized column values."""
        db_obj = Task(**obj_data)

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get(self, db: Session, id: UUID) -> Optional[Task]:
        """Get task by ID with its category."""
        return (
            db.query(Task)
            .options(joinedload(Task.category))
            .filter(Task.id == id)
            .first()
        )

    def get_multi(
        self,
        db: Session,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Task]:
        """Tasks in an inclusive ``date`` range, by start time then order."""
        query = db.query(Task).options(joinedload(Task.category))
        if start is not None:
            query = query.filter(Task.date >= start)
        if end is not None:
            query = query.filter(Task.date <= end)
        return query.order_by(
            Task.start_time.asc().nulls_last(), Task.order.asc()
        ).all()

    def get_all(self, db: Session) -> List[Task]:
        return db.query(Task).order_by(Task.created_at.asc()).all()

    def max_order(self, db: Session, *, start: datetime, end: datetime) -> Optional[int]:
        """Highest ``order`` among tasks dated inside the range, or None."""
        return (
            db.query(func.max(Task.order))
            .filter(Task.date >= start)
            .filter(Task.date <= end)
            .scalar()
        )

    def update(self, db: Session, *, db_obj: Task, update_data: Dict[str, Any]) -> Task:
        for field, value in update_data.items():
            setattr(db_obj, field, value)

        db.commit()
        db.refresh(db_obj)
        return db_obj

    def set_dates(self, db: Session, *, changes: Dict[UUID, datetime]) -> int:
        """Rewrite ``date`` for several tasks in one transaction."""
        if not changes:
            return 0
        tasks = db.query(Task).filter(Task.id.in_(list(changes))).all()
        for task in tasks:
            task.date = changes[task.id]
        db.commit()
        return len(tasks)

    def delete(self, db: Session, *, db_obj: Task) -> None:
        db.delete(db_obj)
        db.commit()

    # =====================================================================
    # CATEGORIES
    # =====================================================================

    def create_category(self, db: Session, *, obj_in: CategoryCreate) -> Category:
        db_obj = Category(**obj_in.model_dump())
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise DatabaseConflictError(f"Category '{obj_in.name}' already exists") from e
        db.refresh(db_obj)
        return db_obj

    def get_category(self, db: Session, id: UUID) -> Optional[Category]:
        return db.query(Category).filter(Category.id == id).first()

    def get_categories(self, db: Session) -> List[Category]:
        return db.query(Category).order_by(Category.name.asc()).all()

    def delete_category(self, db: Session, *, db_obj: Category) -> None:
        # Tasks keep existing without a category
        db.query(Task).filter(Task.category_id == db_obj.id).update(
            {Task.category_id: None}, synchronize_session=False
        )
        db.delete(db_obj)
        db.commit()


crud_task = CRUDTask()
