"""Engine inputs, outputs and errors."""

from .errors import HabitNotFoundError, HabitStatsError, InvalidScheduleError
from .logs import Frequency, HabitSchedule, LogEntry, LogSeries
from .stats import (
    CalendarDay,
    DailyCount,
    HabitStats,
    HabitTrends,
    MilestoneProjection,
    MonthlyRate,
    StreakSummary,
    UserStats,
    WeekdayRate,
)

__all__ = [
    "CalendarDay",
    "DailyCount",
    "Frequency",
    "HabitNotFoundError",
    "HabitSchedule",
    "HabitStats",
    "HabitStatsError",
    "HabitTrends",
    "InvalidScheduleError",
    "LogEntry",
    "LogSeries",
    "MilestoneProjection",
    "MonthlyRate",
    "StreakSummary",
    "UserStats",
    "WeekdayRate",
]
