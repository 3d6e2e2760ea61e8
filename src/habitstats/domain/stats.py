"""Derived, immutable statistics records returned by the engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Optional


def _serialize(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    return value


class _Serializable:
    __slots__ = ()

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dict with dates rendered as ISO strings."""

        return _serialize(asdict(self))  # type: ignore[call-overload]


@dataclass(frozen=True, slots=True)
class StreakSummary(_Serializable):
    """Current/longest streak plus the newest completed date."""

    current_streak: int = 0
    longest_streak: int = 0
    last_completed_date: Optional[date] = None


@dataclass(frozen=True, slots=True)
class HabitStats(_Serializable):
    """Per-habit statistics over a query window."""

    current_streak: int = 0
    longest_streak: int = 0
    completion_rate: float = 0.0
    total_logs: int = 0
    completed_logs: int = 0
    last_completed_date: Optional[date] = None
    best_weekday: Optional[int] = None
    consistency_score: int = 0
    habit_id: Optional[int] = None

    @classmethod
    def empty(cls, habit_id: int | None = None) -> "HabitStats":
        """Zeroed stats, used for empty windows and isolated failures."""

        return cls(habit_id=habit_id)


@dataclass(frozen=True, slots=True)
class UserStats(_Serializable):
    """Cross-habit dashboard figures for one user."""

    overall_completion_rate: float = 0.0
    total_active_habits: int = 0
    total_completed_logs: int = 0
    current_streak: int = 0
    best_streak: int = 0
    average_streak: float = 0.0
    habits_by_completion: tuple[HabitStats, ...] = ()


@dataclass(frozen=True, slots=True)
class MilestoneProjection(_Serializable):
    """Estimate of when the next streak milestone will be reached."""

    next_milestone: int
    estimated_days_to_reach: int
    confidence: int


@dataclass(frozen=True, slots=True)
class CalendarDay(_Serializable):
    """A logged day annotated with the running streak ending on it."""

    occurred_on: date
    completed: bool
    streak: int


@dataclass(frozen=True, slots=True)
class WeekdayRate(_Serializable):
    weekday: int
    total: int
    completed: int
    completion_rate: float


@dataclass(frozen=True, slots=True)
class MonthlyRate(_Serializable):
    year: int
    month: int
    total: int
    completed: int
    completion_rate: float


@dataclass(frozen=True, slots=True)
class DailyCount(_Serializable):
    """Number of habits completed on a given day."""

    occurred_on: date
    completed_habits: int


@dataclass(frozen=True, slots=True)
class HabitTrends(_Serializable):
    """Calendar views of one habit for charts."""

    habit_id: int
    calendar: tuple[CalendarDay, ...] = ()
    weekdays: tuple[WeekdayRate, ...] = ()
    months: tuple[MonthlyRate, ...] = ()
    missing_dates: tuple[date, ...] = ()
