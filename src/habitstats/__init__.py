"""Habit streak and statistics engine."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .domain import (
    Frequency,
    HabitSchedule,
    HabitStats,
    InvalidScheduleError,
    LogEntry,
    LogSeries,
    MilestoneProjection,
    UserStats,
)
from .services.habit_stats import compute_habit_stats, compute_user_stats
from .services.milestones import project_milestone
from .services.streaks import compute_streaks

__all__ = [
    "BaseConfig",
    "DevConfig",
    "Frequency",
    "HabitSchedule",
    "HabitStats",
    "InvalidScheduleError",
    "LogEntry",
    "LogSeries",
    "MilestoneProjection",
    "UserStats",
    "compute_habit_stats",
    "compute_streaks",
    "compute_user_stats",
    "project_milestone",
]
