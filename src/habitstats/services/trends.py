"""Calendar rollups: weekday and monthly completion rates, gaps and daily counts."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from ..domain.logs import WEEKDAYS, LogSeries, date_range, weekday_of
from ..domain.stats import DailyCount, MonthlyRate, WeekdayRate
from .rounding import percentage

MAX_TREND_MONTHS = 12


def weekday_breakdown(history: LogSeries) -> list[WeekdayRate]:
    """Return completion counts for each weekday, Monday through Sunday."""

    totals = [0] * len(WEEKDAYS)
    completed = [0] * len(WEEKDAYS)
    for entry in history:
        slot = weekday_of(entry.occurred_on) - 1
        totals[slot] += 1
        if entry.completed:
            completed[slot] += 1

    return [
        WeekdayRate(
            weekday=weekday,
            total=totals[weekday - 1],
            completed=completed[weekday - 1],
            completion_rate=percentage(completed[weekday - 1], totals[weekday - 1]),
        )
        for weekday in WEEKDAYS
    ]


def _month_index(day: date) -> int:
    return day.year * 12 + day.month - 1


def monthly_trend(series: LogSeries, *, end: date, months: int = 6) -> list[MonthlyRate]:
    """Return per-month completion rates for the ``months`` months ending at ``end``.

    Only months with at least one entry are returned, newest first. ``months``
    is clamped to 1..12.
    """

    months = max(1, min(months, MAX_TREND_MONTHS))
    anchor = _month_index(end)
    totals = [0] * months
    completed = [0] * months
    for entry in series:
        offset = anchor - _month_index(entry.occurred_on)
        if not 0 <= offset < months:
            continue
        totals[offset] += 1
        if entry.completed:
            completed[offset] += 1

    trend: list[MonthlyRate] = []
    for offset in range(months):
        if not totals[offset]:
            continue
        year, month_zero = divmod(anchor - offset, 12)
        trend.append(
            MonthlyRate(
                year=year,
                month=month_zero + 1,
                total=totals[offset],
                completed=completed[offset],
                completion_rate=percentage(completed[offset], totals[offset]),
            )
        )
    return trend


def missing_dates(series: LogSeries) -> list[date]:
    """List the dates inside the series window that have no entry."""

    if series.start is None or series.end is None:
        return []
    logged = {e.occurred_on for e in series}
    return [day for day in date_range(series.start, series.end) if day not in logged]


def completion_history(
    series_list: Iterable[LogSeries], *, start: date, end: date
) -> list[DailyCount]:
    """Count, for each day in ``[start, end]``, how many habits were completed."""

    counts = {day: 0 for day in date_range(start, end)}
    for series in series_list:
        for day in {e.occurred_on for e in series if e.completed}:
            if day in counts:
                counts[day] += 1
    return [DailyCount(occurred_on=day, completed_habits=n) for day, n in counts.items()]


__all__ = [
    "completion_history",
    "missing_dates",
    "monthly_trend",
    "weekday_breakdown",
]
