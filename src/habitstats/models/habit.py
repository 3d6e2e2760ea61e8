"""Habit tracking tables."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import ClassVar, Optional

from sqlalchemy import JSON, Column
from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel


class Habit(SQLModel, table=True):
    """A user-defined habit, performed daily or on chosen weekdays."""

    __tablename__: ClassVar[str] = "habit"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    name: str = Field(nullable=False, max_length=80, index=True)
    description: str = Field(default="", max_length=255)
    frequency: str = Field(default="daily", max_length=16)
    # Weekdays 1=Monday..7=Sunday; only meaningful for weekly habits.
    target_days: Optional[list[int]] = Field(default=None, sa_column=Column(JSON))
    color: str = Field(default="#3B82F6", max_length=16)
    is_active: bool = Field(default=True, nullable=False)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    logs: list["HabitLog"] = Relationship(
        back_populates="habit",
        sa_relationship=relationship("HabitLog", back_populates="habit"),
    )


class HabitLog(SQLModel, table=True):
    """Completion record for a habit on a calendar day (one per habit and date)."""

    __tablename__: ClassVar[str] = "habit_log"

    habit_id: int = Field(foreign_key="habit.id", primary_key=True)
    occurred_on: date = Field(primary_key=True, index=True)
    completed: bool = Field(default=True, nullable=False)
    notes: str = Field(default="", max_length=255)

    habit: "Habit" = Relationship(
        back_populates="logs",
        sa_relationship=relationship("Habit", back_populates="logs"),
    )
