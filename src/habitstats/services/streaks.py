"""Streak calculations over a habit's log series.

Streaks use strict calendar contiguity: a run of completed entries ends at a
missed entry or at any gap of more than one day between consecutive entries.
Dates with no entry never count as missed, but they do separate runs, so a
streak recorded before a gap never merges with entries after it. Because the
current streak is itself one such run, ``current_streak <= longest_streak``.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator

from ..domain.logs import LogEntry, LogSeries
from ..domain.stats import CalendarDay, StreakSummary

_ONE_DAY = timedelta(days=1)


def _follows(previous: date | None, current: date) -> bool:
    """Return True when ``current`` is the calendar day right after ``previous``."""

    return previous is not None and current - previous == _ONE_DAY


def current_streak(entries_newest_first: list[LogEntry]) -> int:
    """Count completed, day-contiguous entries backwards from the newest entry.

    A missed newest entry means there is no active streak.
    """

    streak = 0
    newer: date | None = None
    for entry in entries_newest_first:
        if not entry.completed:
            break
        if newer is not None and newer - entry.occurred_on != _ONE_DAY:
            break
        streak += 1
        newer = entry.occurred_on
    return streak


def _running_streaks(entries_oldest_first: list[LogEntry]) -> Iterator[tuple[LogEntry, int]]:
    """Yield each entry with the length of the streak ending on it."""

    run = 0
    last_day: date | None = None
    for entry in entries_oldest_first:
        if not entry.completed:
            run = 0
        elif run and _follows(last_day, entry.occurred_on):
            run += 1
        else:
            run = 1
        yield entry, run
        last_day = entry.occurred_on


def longest_streak(entries_oldest_first: list[LogEntry]) -> int:
    """Return the longest run of completed, day-contiguous entries."""

    return max((run for _, run in _running_streaks(entries_oldest_first)), default=0)


def compute_streaks(series: LogSeries) -> StreakSummary:
    """Return current streak, longest streak and the newest completed date."""

    if not series.entries:
        return StreakSummary()

    newest_first = series.newest_first()
    last_completed = next((e.occurred_on for e in newest_first if e.completed), None)
    if last_completed is None:
        return StreakSummary()

    return StreakSummary(
        current_streak=current_streak(newest_first),
        longest_streak=longest_streak(series.oldest_first()),
        last_completed_date=last_completed,
    )


def completion_calendar(series: LogSeries) -> list[CalendarDay]:
    """Annotate each entry, oldest first, with the running streak ending on it."""

    return [
        CalendarDay(occurred_on=entry.occurred_on, completed=entry.completed, streak=run)
        for entry, run in _running_streaks(series.oldest_first())
    ]


__all__ = [
    "completion_calendar",
    "compute_streaks",
    "current_streak",
    "longest_streak",
]
