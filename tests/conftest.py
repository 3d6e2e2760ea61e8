"""Pytest configuration and shared fixtures for HabitStats tests.

This module provides database fixtures, habit/log factories, and helpers for
building log series with fixed fabricated dates, so no test depends on the
real calendar.
"""

from __future__ import annotations

import tempfile
from datetime import date, timedelta
from pathlib import Path
from typing import Iterable

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import models to ensure they're registered with SQLModel metadata
from habitstats.domain.logs import LogSeries
from habitstats.infra.repositories.habit import SQLModelHabitLogStore
from habitstats.models import Habit, HabitLog

# 2024-03-04 is a Monday; most fixtures anchor on it.
MONDAY = date(2024, 3, 4)
USER_ID = 1
OTHER_USER_ID = 2


# =============================================================================
# Series helpers
# =============================================================================


def consecutive(start: date, count: int, completed: bool = True) -> list[tuple[date, bool]]:
    """Return ``count`` contiguous (date, completed) pairs starting at ``start``."""

    return [(start + timedelta(days=i), completed) for i in range(count)]


def make_series(pairs: Iterable[tuple[date, bool]], **window) -> LogSeries:
    """Build a LogSeries from (date, completed) pairs."""

    return LogSeries.from_pairs(pairs, **window)


def pattern_series(start: date, pattern: str) -> LogSeries:
    """Build a daily series from a pattern string, oldest day first.

    ``x`` is a completed day, ``o`` a missed day and ``.`` a day with no entry.
    """

    pairs = [
        (start + timedelta(days=i), ch == "x")
        for i, ch in enumerate(pattern)
        if ch in "xo"
    ]
    return make_series(pairs)


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert abs(actual - expected) <= tolerance, (
        f"Expected {expected}, got {actual} (difference: {abs(actual - expected)})"
    )


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session for a single test.

    Yields:
        Session: SQLModel session for test
    """
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Create a session factory for repositories that expect Callable[[], Session]."""

    def factory() -> Session:
        return Session(db_engine, expire_on_commit=False)

    return factory


@pytest.fixture
def store(session_factory) -> SQLModelHabitLogStore:
    return SQLModelHabitLogStore(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def habit_factory(db_session):
    """Factory for creating test habits.

    Returns:
        Callable: Function that creates and persists Habit instances
    """

    def _create_habit(
        name: str = "Test Habit",
        frequency: str = "daily",
        target_days: list[int] | None = None,
        is_active: bool = True,
        user_id: int = USER_ID,
    ) -> Habit:
        habit = Habit(
            name=name,
            frequency=frequency,
            target_days=target_days,
            is_active=is_active,
            user_id=user_id,
        )
        db_session.add(habit)
        db_session.commit()
        db_session.refresh(habit)
        return habit

    return _create_habit


@pytest.fixture
def log_factory(db_session):
    """Factory for persisting habit logs from (date, completed) pairs."""

    def _create_logs(habit: Habit, pairs: Iterable[tuple[date, bool]]) -> list[HabitLog]:
        rows = [
            HabitLog(habit_id=habit.id, occurred_on=day, completed=completed)
            for day, completed in pairs
        ]
        db_session.add_all(rows)
        db_session.commit()
        return rows

    return _create_logs
