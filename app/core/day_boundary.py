# app/core/day_boundary.py
"""
Local calendar days under a fixed UTC offset.

Every "which day is this" question in the application goes through one
resolver so diary filters, task bucketing, streaks and the daily prompt all
agree on where a day starts and ends. The offset is a plain number of
minutes: no timezone database, no daylight-saving shifts.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Tuple

from app.core.config import settings
from app.core.exceptions import InvalidDateError


def ensure_utc(timestamp: datetime) -> datetime:
    """Return an aware UTC datetime. Naive values are taken to be UTC."""
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


class DayBoundaryResolver:
    """Maps absolute instants to local days and local days back to instants."""

    def __init__(self, offset_minutes: int):
        if not -1440 < offset_minutes < 1440:
            raise ValueError(f"UTC offset out of range: {offset_minutes} minutes")
        self.offset_minutes = offset_minutes
        self.offset = timedelta(minutes=offset_minutes)

    # =====================================================================
    # INSTANT -> DAY
    # =====================================================================

    def local_day_of(self, timestamp: datetime) -> date:
        """Calendar day of ``timestamp`` once shifted by the offset."""
        try:
            return (ensure_utc(timestamp) + self.offset).date()
        except OverflowError as e:
            raise InvalidDateError(f"Instant {timestamp} has no local day: {e}") from e

    def today(self, now: Optional[datetime] = None) -> date:
        if now is None:
            now = datetime.now(timezone.utc)
        return self.local_day_of(now)

    @staticmethod
    def previous_day(day: date) -> date:
        try:
            return day - timedelta(days=1)
        except OverflowError as e:
            raise InvalidDateError(f"No calendar day before {day}") from e

    # =====================================================================
    # DAY -> INSTANT
    # =====================================================================

    def _at(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> datetime:
        try:
            wall = datetime(
                year, month, day, hour, minute, second, microsecond, tzinfo=timezone.utc
            )
            return wall - self.offset
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidDateError(
                f"Invalid calendar date {year}-{month}-{day}: {e}"
            ) from e

    def start_of_local_day(self, year: int, month: int, day: int) -> datetime:
        """Absolute instant of 00:00:00.000 local time."""
        return self._at(year, month, day)

    def end_of_local_day(self, year: int, month: int, day: int) -> datetime:
        """Absolute instant of the last representable microsecond, local time."""
        return self._at(year, month, day, 23, 59, 59, 999999)

    def canonical_storage_instant(self, year: int, month: int, day: int) -> datetime:
        """Local noon; stays inside the same local day when re-bucketed."""
        return self._at(year, month, day, 12)

    def day_bounds(self, day: date) -> Tuple[datetime, datetime]:
        """Inclusive ``(start, end)`` range filter for a local day."""
        return (
            self.start_of_local_day(day.year, day.month, day.day),
            self.end_of_local_day(day.year, day.month, day.day),
        )

    def canonical_instant_for(self, day: date) -> datetime:
        return self.canonical_storage_instant(day.year, day.month, day.day)


day_resolver = DayBoundaryResolver(settings.LOCAL_UTC_OFFSET_MINUTES)
