"""Repository protocol definitions for domain layer."""

from .habit import HabitLogStore

__all__ = ["HabitLogStore"]
