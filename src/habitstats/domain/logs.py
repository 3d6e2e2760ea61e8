"""Input data structures for the statistics engine.

A ``LogSeries`` is the read-only, per-habit sequence of daily completion
records the engine computes over. Dates with no entry are simply absent:
they are neither completed nor missed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Iterable, Iterator, Optional

from .errors import InvalidScheduleError

MONDAY = 1
SUNDAY = 7
WEEKDAYS: tuple[int, ...] = tuple(range(MONDAY, SUNDAY + 1))


def normalize_weekday(value: int) -> int:
    """Map a Sunday-is-zero weekday number onto the 1=Monday..7=Sunday scale."""

    return SUNDAY if value == 0 else value


def weekday_of(day: date) -> int:
    """Return the normalized weekday (1=Monday..7=Sunday) of ``day``."""

    return day.isoweekday()


def date_range(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date from ``start`` to ``end`` inclusive."""

    cursor = start
    while cursor <= end:
        yield cursor
        cursor += timedelta(days=1)


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One habit's completion record for a single calendar day."""

    occurred_on: date
    completed: bool


@dataclass(frozen=True, slots=True)
class LogSeries:
    """Ordered (or not) completion records for one habit over a date window.

    The supplier guarantees at most one entry per date; the engine never
    deduplicates and never mutates the series.
    """

    entries: tuple[LogEntry, ...] = ()
    start: Optional[date] = None
    end: Optional[date] = None

    @classmethod
    def of(
        cls,
        entries: Iterable[LogEntry],
        *,
        start: date | None = None,
        end: date | None = None,
    ) -> "LogSeries":
        """Build a series, inferring the window from the entries when not given."""

        items = tuple(entries)
        if items:
            dates = [e.occurred_on for e in items]
            start = start or min(dates)
            end = end or max(dates)
        return cls(entries=items, start=start, end=end)

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[date, bool]],
        *,
        start: date | None = None,
        end: date | None = None,
    ) -> "LogSeries":
        """Build a series from ``(date, completed)`` tuples."""

        return cls.of(
            (LogEntry(occurred_on=d, completed=bool(done)) for d, done in pairs),
            start=start,
            end=end,
        )

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self.entries)

    @property
    def total(self) -> int:
        return len(self.entries)

    @property
    def completed(self) -> int:
        return sum(1 for e in self.entries if e.completed)

    def oldest_first(self) -> list[LogEntry]:
        return sorted(self.entries, key=lambda e: e.occurred_on)

    def newest_first(self) -> list[LogEntry]:
        return sorted(self.entries, key=lambda e: e.occurred_on, reverse=True)


class Frequency(str, Enum):
    """How often a habit is expected to be performed."""

    DAILY = "daily"
    WEEKLY = "weekly"


@dataclass(frozen=True, slots=True)
class HabitSchedule:
    """A habit's cadence: every day, or on specific weekdays each week."""

    frequency: Frequency = Frequency.DAILY
    target_weekdays: frozenset[int] = frozenset()

    def __post_init__(self) -> None:
        try:
            frequency = Frequency(self.frequency)
        except ValueError as exc:
            raise InvalidScheduleError(f"Unknown habit frequency: {self.frequency!r}") from exc
        object.__setattr__(self, "frequency", frequency)
        object.__setattr__(self, "target_weekdays", frozenset(self.target_weekdays))
        invalid = sorted(d for d in self.target_weekdays if d not in WEEKDAYS)
        if invalid:
            raise InvalidScheduleError(
                f"Target weekdays must be within 1..7 (Monday..Sunday), got {invalid}"
            )
        if self.frequency is Frequency.WEEKLY and not self.target_weekdays:
            raise InvalidScheduleError("Weekly schedules require at least one target weekday")

    @classmethod
    def daily(cls) -> "HabitSchedule":
        return cls(frequency=Frequency.DAILY)

    @classmethod
    def weekly(cls, *weekdays: int) -> "HabitSchedule":
        return cls(frequency=Frequency.WEEKLY, target_weekdays=frozenset(weekdays))

    @classmethod
    def from_record(
        cls, frequency: str, target_days: Iterable[int] | None = None
    ) -> "HabitSchedule":
        """Build a schedule from stored values, accepting Sunday as 0 or 7."""

        try:
            freq = Frequency(str(frequency or "").strip().lower())
        except ValueError as exc:
            raise InvalidScheduleError(f"Unknown habit frequency: {frequency!r}") from exc
        if freq is Frequency.DAILY:
            return cls(frequency=freq)
        try:
            days = frozenset(normalize_weekday(int(d)) for d in (target_days or ()))
        except (TypeError, ValueError) as exc:
            raise InvalidScheduleError(
                f"Target days must be weekday numbers, got {target_days!r}"
            ) from exc
        return cls(frequency=freq, target_weekdays=days)

    def expects(self, day: date) -> bool:
        """Return True when the schedule expects activity on ``day``."""

        if self.frequency is Frequency.DAILY:
            return True
        return weekday_of(day) in self.target_weekdays
