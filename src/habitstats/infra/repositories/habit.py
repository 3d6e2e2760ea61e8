"""SQLModel implementation of the habit log store."""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Optional

from sqlmodel import Session, select

from ...domain.logs import HabitSchedule, LogEntry, LogSeries
from ...logging_config import get_logger
from ...models.habit import Habit, HabitLog

logger = get_logger("infra.repositories.habit")


def _to_series(
    rows: Iterable[HabitLog], *, start: date | None = None, end: date | None = None
) -> LogSeries:
    return LogSeries.of(
        (LogEntry(occurred_on=row.occurred_on, completed=bool(row.completed)) for row in rows),
        start=start,
        end=end,
    )


class SQLModelHabitLogStore:
    """SQLModel-based habit log store."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    # Habit operations
    def create_habit(self, habit: Habit, *, user_id: int) -> Habit:
        """Persist a new habit for the user."""
        with self.session_factory() as session:
            habit.user_id = user_id
            session.add(habit)
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
            return habit

    def get_habit(self, habit_id: int, *, user_id: int) -> Optional[Habit]:
        """Retrieve a habit owned by the user."""
        with self.session_factory() as session:
            obj = session.exec(
                select(Habit).where(Habit.id == habit_id, Habit.user_id == user_id)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_active_habits(self, *, user_id: int) -> list[Habit]:
        """List the user's active habits, oldest first."""
        with self.session_factory() as session:
            statement = (
                select(Habit)
                .where(Habit.user_id == user_id)
                .where(Habit.is_active == True)  # noqa: E712
                .order_by(Habit.created_at, Habit.id)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def schedule_for(self, habit: Habit) -> HabitSchedule:
        """Translate the stored frequency/target days into a schedule."""
        return HabitSchedule.from_record(habit.frequency, habit.target_days)

    # Log operations
    def upsert_log(
        self, habit_id: int, occurred_on: date, completed: bool, *, notes: str = ""
    ) -> HabitLog:
        """Insert or update the single log for a habit and date."""
        with self.session_factory() as session:
            existing = session.exec(
                select(HabitLog)
                .where(HabitLog.habit_id == habit_id)
                .where(HabitLog.occurred_on == occurred_on)
            ).first()

            if existing:
                existing.completed = completed
                existing.notes = notes
                row = existing
            else:
                row = HabitLog(
                    habit_id=habit_id, occurred_on=occurred_on, completed=completed, notes=notes
                )
            session.add(row)
            session.commit()
            session.refresh(row)
            session.expunge(row)
            return row

    def bulk_upsert(self, habit_id: int, logs: Iterable[tuple[date, bool]]) -> int:
        """Upsert many ``(date, completed)`` pairs; returns the number written."""
        written = 0
        with self.session_factory() as session:
            existing = {
                row.occurred_on: row
                for row in session.exec(select(HabitLog).where(HabitLog.habit_id == habit_id))
            }
            for occurred_on, completed in logs:
                row = existing.get(occurred_on)
                if row is None:
                    row = HabitLog(habit_id=habit_id, occurred_on=occurred_on)
                    existing[occurred_on] = row
                row.completed = bool(completed)
                session.add(row)
                written += 1
            session.commit()
        logger.debug("Bulk upserted habit logs", extra={"habit_id": habit_id, "written": written})
        return written

    def get_log_series(
        self, habit_id: int, start_date: date, end_date: date, *, user_id: int
    ) -> LogSeries:
        """Return the habit's logs within ``[start_date, end_date]``."""
        with self.session_factory() as session:
            statement = (
                select(HabitLog)
                .join(Habit)
                .where(Habit.user_id == user_id)
                .where(HabitLog.habit_id == habit_id)
                .where(HabitLog.occurred_on >= start_date)
                .where(HabitLog.occurred_on <= end_date)
                .order_by(HabitLog.occurred_on)  # type: ignore
            )
            return _to_series(session.exec(statement).all(), start=start_date, end=end_date)

    def get_full_history(self, habit_id: int, *, user_id: int) -> LogSeries:
        """Return every log recorded for the habit."""
        with self.session_factory() as session:
            statement = (
                select(HabitLog)
                .join(Habit)
                .where(Habit.user_id == user_id)
                .where(HabitLog.habit_id == habit_id)
                .order_by(HabitLog.occurred_on)  # type: ignore
            )
            return _to_series(session.exec(statement).all())
