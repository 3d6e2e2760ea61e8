"""SQLModel repository implementations."""

from .habit import SQLModelHabitLogStore

__all__ = ["SQLModelHabitLogStore"]
