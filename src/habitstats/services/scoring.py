"""Schedule adherence and consistency scoring."""

from __future__ import annotations

from decimal import Decimal

from ..domain.logs import Frequency, HabitSchedule, LogSeries
from ..domain.stats import StreakSummary
from .rounding import round_to_int, to_decimal

COMPLETION_POINTS = Decimal(50)
STREAK_POINTS = Decimal(30)
SCHEDULE_POINTS = Decimal(20)


def expected_days(series: LogSeries, schedule: HabitSchedule) -> int:
    """Count distinct logged dates on which the schedule expects activity."""

    return len({e.occurred_on for e in series if schedule.expects(e.occurred_on)})


def schedule_adherence_score(series: LogSeries, schedule: HabitSchedule) -> float:
    """Return the 0-20 point schedule contribution to the consistency score.

    Daily habits get the full 20 points as soon as any entry is completed.
    Weekly habits earn ``completed / expected * 20``, capped at 20, where the
    expected count is the number of logged target-weekday dates.
    """

    completed = series.completed
    if schedule.frequency is Frequency.DAILY:
        return float(SCHEDULE_POINTS) if completed > 0 else 0.0

    expected = expected_days(series, schedule)
    if expected == 0:
        return 0.0
    return float(min(SCHEDULE_POINTS, Decimal(completed) / Decimal(expected) * SCHEDULE_POINTS))


def consistency_score(series: LogSeries, streaks: StreakSummary, schedule_score: float) -> int:
    """Blend completion (50%), streak stability (30%) and schedule (20%) into 0-100."""

    total = series.total
    completion = (
        Decimal(series.completed) / Decimal(total) * COMPLETION_POINTS if total else Decimal(0)
    )
    streak = min(
        Decimal(streaks.current_streak) / Decimal(max(streaks.longest_streak, 1)) * STREAK_POINTS,
        STREAK_POINTS,
    )
    schedule = min(max(to_decimal(schedule_score), Decimal(0)), SCHEDULE_POINTS)
    return round_to_int(completion + streak + schedule)


__all__ = ["consistency_score", "expected_days", "schedule_adherence_score"]
