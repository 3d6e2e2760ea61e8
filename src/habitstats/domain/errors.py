"""Exceptions raised by the statistics engine and its collaborators."""

from __future__ import annotations


class HabitStatsError(Exception):
    """Base class for errors raised by habitstats."""


class InvalidScheduleError(HabitStatsError, ValueError):
    """A habit schedule violates its contract (e.g. weekly with no target days)."""


class HabitNotFoundError(HabitStatsError, LookupError):
    """A habit id did not resolve for the requesting user."""

    def __init__(self, habit_id: int, user_id: int) -> None:
        super().__init__(f"Habit {habit_id} not found for user {user_id}")
        self.habit_id = habit_id
        self.user_id = user_id
