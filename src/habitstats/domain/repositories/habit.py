"""Habit log store protocol."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional, Protocol

from ..logs import HabitSchedule, LogSeries

if TYPE_CHECKING:  # pragma: no cover
    from ...models.habit import Habit


class HabitLogStore(Protocol):
    """Supplies habits, their schedules and log series to the dashboard services."""

    def list_active_habits(self, *, user_id: int) -> list[Habit]:
        """List the user's active habits."""
        ...

    def get_habit(self, habit_id: int, *, user_id: int) -> Optional[Habit]:
        """Retrieve a habit owned by the user."""
        ...

    def get_log_series(
        self, habit_id: int, start_date: date, end_date: date, *, user_id: int
    ) -> LogSeries:
        """Return the habit's logs within ``[start_date, end_date]``."""
        ...

    def get_full_history(self, habit_id: int, *, user_id: int) -> LogSeries:
        """Return every log ever recorded for the habit."""
        ...

    def schedule_for(self, habit: Habit) -> HabitSchedule:
        """Translate a stored habit into its schedule."""
        ...
