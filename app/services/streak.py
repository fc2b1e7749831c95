# services/streak.py
import enum
import logging
from datetime import datetime, timedelta, timezone, date
from typing import List, NamedTuple, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from app.core.config import settings
from app.core.day_boundary import DayBoundaryResolver, day_resolver, ensure_utc
from app.core.exceptions import ServiceError
from app.crud.diary_entry import crud_diary_entry
from app.crud.streak import crud_streak
from app.models.streak import Streak

logger = logging.getLogger(__name__)

JOURNAL_ACTIVITY = "journal"
TASKS_ACTIVITY = "tasks"


# =====================================================================
# STATE MACHINE
# =====================================================================

class StreakState(NamedTuple):
    current_streak: int
    longest_streak: int
    last_activity_at: Optional[datetime]


class TransitionKind(str, enum.Enum):
    INITIAL = "initial"
    SAME_DAY = "same_day"
    CONSECUTIVE = "consecutive"
    RESET = "reset"


class StreakTransition(NamedTuple):
    kind: TransitionKind
    state: StreakState

    @property
    def changed(self) -> bool:
        return self.kind != TransitionKind.SAME_DAY


def next_streak_state(
    state: StreakState,
    now: datetime,
    resolver: DayBoundaryResolver = day_resolver,
) -> StreakTransition:
    """
    Apply one qualifying event at ``now`` to ``state``.

    Days are compared as local calendar days: "yesterday" is today's local
    date minus one calendar day, never ``now - 24h``. A second event on the
    same local day leaves the state untouched, including ``last_activity_at``.
    """
    now = ensure_utc(now)

    if state.last_activity_at is None:
        return StreakTransition(
            TransitionKind.INITIAL,
            StreakState(1, max(1, state.longest_streak), now),
        )

    today = resolver.local_day_of(now)
    last_day = resolver.local_day_of(state.last_activity_at)

    if last_day == today:
        return StreakTransition(TransitionKind.SAME_DAY, state)

    if last_day == resolver.previous_day(today):
        current = state.current_streak + 1
        return StreakTransition(
            TransitionKind.CONSECUTIVE,
            StreakState(current, max(current, state.longest_streak), now),
        )

    # Gap of two or more days, or an event dated before the last one
    return StreakTransition(
        TransitionKind.RESET,
        StreakState(1, state.longest_streak, now),
    )


# =====================================================================
# SERVICE CLASS
# =====================================================================

class StreakService:
    """Persists streak transitions and answers streak queries."""

    def __init__(self, resolver: DayBoundaryResolver = day_resolver):
        self.crud = crud_streak
        self.resolver = resolver
        # Swallowed best-effort failures, surfaced on /health
        self.failed_updates = 0

    # =====================================================================
    # UPDATE OPERATIONS
    # =====================================================================

    def _apply(self, db: Session, activity_type: str, now: datetime) -> Streak:
        streak = self.crud.get_by_type(db, activity_type=activity_type, for_update=True)

        if streak is None:
            transition = next_streak_state(StreakState(0, 0, None), now, self.resolver)
            return self.crud.create(
                db,
                activity_type=activity_type,
                current_streak=transition.state.current_streak,
                longest_streak=transition.state.longest_streak,
                last_activity_at=transition.state.last_activity_at,
            )

        prior = StreakState(
            streak.current_streak,
            streak.longest_streak,
            ensure_utc(streak.last_activity_at) if streak.last_activity_at else None,
        )
        transition = next_streak_state(prior, now, self.resolver)

        if not transition.changed:
            # Ends the transaction and releases the row lock
            db.commit()
            return streak

        return self.crud.update_state(
            db,
            db_obj=streak,
            current_streak=transition.state.current_streak,
            longest_streak=transition.state.longest_streak,
            last_activity_at=transition.state.last_activity_at,
        )

    def record_activity(
        self, db: Session, activity_type: str, now: Optional[datetime] = None
    ) -> Streak:
        """
        Record one qualifying event for ``activity_type``.

        The read-modify-write runs under a row lock where the backend has
        one, and the version column rejects a write based on a stale read.
        A rejected write (or losing a race to create the row) is rolled back
        and retried from a fresh read.

        Raises:
            ServiceError: If every attempt hit a conflict
        """
        now = ensure_utc(now) if now else datetime.now(timezone.utc)
        attempts = max(1, settings.STREAK_UPDATE_MAX_RETRIES)

        for attempt in range(1, attempts + 1):
            try:
                return self._apply(db, activity_type, now)
            except (StaleDataError, IntegrityError) as e:
                db.rollback()
                logger.warning(
                    "Streak '%s' write conflict (attempt %d/%d): %s",
                    activity_type, attempt, attempts, e,
                )
                if attempt == attempts:
                    raise ServiceError(
                        f"Could not update streak '{activity_type}' after {attempts} attempts"
                    ) from e

    def record_activity_best_effort(
        self, db: Session, activity_type: str, now: Optional[datetime] = None
    ) -> Optional[Streak]:
        """
        Fire-and-forget variant for side effects of other operations.
        Failures are logged and counted, never raised.
        """
        try:
            return self.record_activity(db, activity_type, now=now)
        except Exception:
            db.rollback()
            self.failed_updates += 1
            logger.exception("Streak update for '%s' failed", activity_type)
            return None

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def list_streaks(self, db: Session, activity_type: Optional[str] = None) -> List[Streak]:
        return self.crud.get_multi(db, activity_type=activity_type)

    def get_streak(self, db: Session, activity_type: str) -> Optional[Streak]:
        return self.crud.get_by_type(db, activity_type=activity_type)

    def active_days(self, db: Session, now: Optional[datetime] = None) -> List[date]:
        """Distinct local days with a diary entry, today and the window before it."""
        today = self.resolver.today(now)
        first_day = today - timedelta(days=max(1, settings.ACTIVE_DAYS_WINDOW) - 1)
        start, _ = self.resolver.day_bounds(first_day)

        instants = crud_diary_entry.get_dates_since(db, start=start)
        return sorted({self.resolver.local_day_of(ts) for ts in instants})


streak_service = StreakService()
