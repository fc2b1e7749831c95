# services/prompt.py
import logging
from typing import Optional, List, Sequence, TypeVar
from uuid import UUID
from datetime import date, datetime
from sqlalchemy.orm import Session

from app.core.day_boundary import day_resolver
from app.core.exceptions import NotFoundError, ValidationError
from app.crud.daily_prompt import crud_daily_prompt
from app.data.prompt_repository import DEFAULT_PROMPTS, FALLBACK_PROMPT
from app.models.daily_prompt import DailyPrompt
from app.schemas.prompt import DailyPromptCreate, DailyPromptUpdate, DailyPromptOut

logger = logging.getLogger(__name__)

T = TypeVar("T")


def day_seed(day: date) -> int:
    """``YYYYMMDD`` as an integer."""
    return day.year * 10000 + day.month * 100 + day.day


def pick_for_day(items: Sequence[T], day: date) -> Optional[T]:
    """Same item for every call on the same day; None for an empty list."""
    if not items:
        return None
    return items[day_seed(day) % len(items)]


class PromptService:
    """Daily journaling prompt selection and prompt management."""

    def __init__(self):
        self.crud = crud_daily_prompt
        self.resolver = day_resolver

    def seed_defaults_if_empty(self, db: Session) -> int:
        if self.crud.count_active(db) > 0:
            return 0
        created = self.crud.create_many(db, items=DEFAULT_PROMPTS)
        logger.info("Seeded %d default prompts", created)
        return created

    def get_prompt_of_the_day(
        self, db: Session, now: Optional[datetime] = None
    ) -> DailyPromptOut:
        """
        Deterministic prompt for the current local day.

        Uses the same local-day resolver as streaks and task bucketing.
        Falls back to a fixed prompt if the store is still empty after
        seeding.
        """
        self.seed_defaults_if_empty(db)
        prompt = pick_for_day(self.crud.get_active(db), self.resolver.today(now))

        if prompt is None:
            return DailyPromptOut(content=FALLBACK_PROMPT)
        return DailyPromptOut.model_validate(prompt)

    def list_prompts(self, db: Session, include_inactive: bool = False) -> List[DailyPrompt]:
        return self.crud.get_multi(db, include_inactive=include_inactive)

    def create_prompt(self, db: Session, obj_in: DailyPromptCreate) -> DailyPrompt:
        return self.crud.create(db, obj_in=obj_in)

    def update_prompt(
        self, db: Session, prompt_id: UUID, obj_in: DailyPromptUpdate
    ) -> DailyPrompt:
        prompt = self.crud.get(db, id=prompt_id)
        if not prompt:
            raise NotFoundError("Prompt not found")
        for field in ("content", "is_active"):
            if field in obj_in.model_fields_set and getattr(obj_in, field) is None:
                raise ValidationError(f"{field} cannot be null")
        return self.crud.update(db, db_obj=prompt, obj_in=obj_in)


prompt_service = PromptService()
