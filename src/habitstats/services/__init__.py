"""Service module exports."""

from . import dashboard, habit_stats, milestones, rounding, scoring, streaks, trends

__all__ = [
    "dashboard",
    "habit_stats",
    "milestones",
    "rounding",
    "scoring",
    "streaks",
    "trends",
]
