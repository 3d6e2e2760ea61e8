"""Per-habit and per-user statistics assembled from the streak and scoring services."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..domain.logs import HabitSchedule, LogSeries
from ..domain.stats import HabitStats, UserStats
from ..logging_config import get_logger
from .rounding import percentage, round_half_up, to_decimal
from .scoring import consistency_score, schedule_adherence_score
from .streaks import compute_streaks
from .trends import weekday_breakdown

logger = get_logger("services.habit_stats")

BEST_WEEKDAY_MIN_SAMPLES = 5


def best_weekday(
    history: LogSeries, *, min_samples: int = BEST_WEEKDAY_MIN_SAMPLES
) -> Optional[int]:
    """Return the weekday (1=Monday..7=Sunday) with the highest completion rate.

    Weekdays with fewer than ``min_samples`` logs are ignored. Ties go to the
    lower-numbered weekday. Returns None when no weekday qualifies.
    """

    best: Optional[int] = None
    best_rate = -1.0
    for row in weekday_breakdown(history):
        if row.total < min_samples:
            continue
        if row.completion_rate > best_rate:
            best, best_rate = row.weekday, row.completion_rate
    return best


def compute_habit_stats(
    series: LogSeries,
    schedule: HabitSchedule,
    *,
    history: LogSeries | None = None,
    habit_id: int | None = None,
    min_weekday_samples: int = BEST_WEEKDAY_MIN_SAMPLES,
) -> HabitStats:
    """Compute ``HabitStats`` for one habit's window.

    ``history`` should be the habit's full log history; the best weekday is
    derived from it. When omitted, the query window is used instead.
    """

    streaks = compute_streaks(series)
    schedule_score = schedule_adherence_score(series, schedule)
    weekday_source = history if history is not None else series
    stats = HabitStats(
        current_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
        completion_rate=percentage(series.completed, series.total),
        total_logs=series.total,
        completed_logs=series.completed,
        last_completed_date=streaks.last_completed_date,
        best_weekday=best_weekday(weekday_source, min_samples=min_weekday_samples),
        consistency_score=consistency_score(series, streaks, schedule_score),
        habit_id=habit_id,
    )
    logger.debug(
        "Computed habit stats",
        extra={"habit_id": habit_id, "total_logs": stats.total_logs, "score": stats.consistency_score},
    )
    return stats


def _mean(values: Sequence[float | int]) -> Decimal:
    if not values:
        return Decimal(0)
    return sum((to_decimal(v) for v in values), Decimal(0)) / Decimal(len(values))


def compute_user_stats(per_habit: Sequence[HabitStats]) -> UserStats:
    """Aggregate per-habit stats into dashboard figures.

    The ranking orders habits by completion rate, highest first; ties keep
    their input order.
    """

    if not per_habit:
        return UserStats()

    streaks = [s.current_streak for s in per_habit]
    ranking = sorted(per_habit, key=lambda s: s.completion_rate, reverse=True)
    return UserStats(
        overall_completion_rate=round_half_up(_mean([s.completion_rate for s in per_habit])),
        total_active_habits=len(per_habit),
        total_completed_logs=sum(s.completed_logs for s in per_habit),
        current_streak=max(streaks),
        best_streak=max(streaks),
        average_streak=round_half_up(_mean(streaks)),
        habits_by_completion=tuple(ranking),
    )


__all__ = ["best_weekday", "compute_habit_stats", "compute_user_stats"]
