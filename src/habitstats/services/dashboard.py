"""Dashboard orchestration: fetch log series from a store and run the engine.

The engine functions are pure; this module is the seam where a
``HabitLogStore`` supplies windows, full histories and schedules, and where
per-habit failures are isolated so one bad habit does not sink a dashboard.
"""

from __future__ import annotations

from datetime import date, timedelta

from ..config import BaseConfig
from ..domain.errors import HabitNotFoundError, HabitStatsError
from ..domain.repositories import HabitLogStore
from ..domain.stats import DailyCount, HabitStats, HabitTrends, MilestoneProjection, UserStats
from ..logging_config import get_logger, habit_logger
from .habit_stats import BEST_WEEKDAY_MIN_SAMPLES, compute_habit_stats, compute_user_stats
from .milestones import project_milestone
from .streaks import completion_calendar
from .trends import completion_history, missing_dates, monthly_trend, weekday_breakdown

logger = get_logger("services.dashboard")

DEFAULT_WINDOW_DAYS = 30
PROJECTION_WINDOW_DAYS = 90


def options_from_config(config: BaseConfig) -> dict[str, int]:
    """Return config-driven keyword arguments for ``habit_stats_for`` and ``user_dashboard``.

    The other dashboard functions take no weekday sample size, and
    ``predict_next_milestone`` keeps its own longer window, so the result is
    not meant to be splatted into them.
    """

    return {
        "window_days": config.STATS_WINDOW_DAYS,
        "min_weekday_samples": config.BEST_WEEKDAY_MIN_SAMPLES,
    }


def window_start(today: date, window_days: int) -> date:
    """Return the first date of a ``window_days`` look-back ending on ``today``."""

    return today - timedelta(days=window_days)


def _stats_for_habit(
    store: HabitLogStore,
    habit,
    *,
    user_id: int,
    today: date,
    window_days: int,
    min_weekday_samples: int,
) -> HabitStats:
    series = store.get_log_series(habit.id, window_start(today, window_days), today, user_id=user_id)
    history = store.get_full_history(habit.id, user_id=user_id)
    return compute_habit_stats(
        series,
        store.schedule_for(habit),
        history=history,
        habit_id=habit.id,
        min_weekday_samples=min_weekday_samples,
    )


def habit_stats_for(
    store: HabitLogStore,
    habit_id: int,
    *,
    user_id: int,
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
    min_weekday_samples: int = BEST_WEEKDAY_MIN_SAMPLES,
) -> HabitStats:
    """Compute stats for one of the user's habits over the look-back window."""

    habit = store.get_habit(habit_id, user_id=user_id)
    if habit is None:
        raise HabitNotFoundError(habit_id, user_id)
    return _stats_for_habit(
        store,
        habit,
        user_id=user_id,
        today=today,
        window_days=window_days,
        min_weekday_samples=min_weekday_samples,
    )


def user_dashboard(
    store: HabitLogStore,
    *,
    user_id: int,
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
    min_weekday_samples: int = BEST_WEEKDAY_MIN_SAMPLES,
) -> UserStats:
    """Aggregate stats across the user's active habits.

    A habit whose computation raises ``HabitStatsError`` contributes zeroed
    stats; other errors propagate.
    """

    per_habit: list[HabitStats] = []
    for habit in store.list_active_habits(user_id=user_id):
        try:
            stats = _stats_for_habit(
                store,
                habit,
                user_id=user_id,
                today=today,
                window_days=window_days,
                min_weekday_samples=min_weekday_samples,
            )
        except HabitStatsError as exc:
            habit_logger(logger, habit_id=habit.id, user_id=user_id).warning(
                "Habit stats failed; substituting zeroed stats", extra={"error": str(exc)}
            )
            stats = HabitStats.empty(habit.id)
        per_habit.append(stats)
    return compute_user_stats(per_habit)


def predict_next_milestone(
    store: HabitLogStore,
    habit_id: int,
    *,
    user_id: int,
    today: date,
    window_days: int = PROJECTION_WINDOW_DAYS,
) -> MilestoneProjection:
    """Project the next streak milestone from a longer look-back window."""

    stats = habit_stats_for(store, habit_id, user_id=user_id, today=today, window_days=window_days)
    return project_milestone(stats)


def daily_completion_history(
    store: HabitLogStore,
    *,
    user_id: int,
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> list[DailyCount]:
    """Count completed habits per day across the user's active habits."""

    start = window_start(today, window_days)
    series_list = [
        store.get_log_series(habit.id, start, today, user_id=user_id)
        for habit in store.list_active_habits(user_id=user_id)
    ]
    return completion_history(series_list, start=start, end=today)


def habit_trends(
    store: HabitLogStore,
    habit_id: int,
    *,
    user_id: int,
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
    months: int = 6,
) -> HabitTrends:
    """Collect the calendar, weekday, monthly and gap views of one habit."""

    if store.get_habit(habit_id, user_id=user_id) is None:
        raise HabitNotFoundError(habit_id, user_id)
    window = store.get_log_series(habit_id, window_start(today, window_days), today, user_id=user_id)
    history = store.get_full_history(habit_id, user_id=user_id)
    return HabitTrends(
        habit_id=habit_id,
        calendar=tuple(completion_calendar(window)),
        weekdays=tuple(weekday_breakdown(history)),
        months=tuple(monthly_trend(history, end=today, months=months)),
        missing_dates=tuple(missing_dates(window)),
    )


__all__ = [
    "daily_completion_history",
    "habit_stats_for",
    "habit_trends",
    "options_from_config",
    "predict_next_milestone",
    "user_dashboard",
    "window_start",
]
