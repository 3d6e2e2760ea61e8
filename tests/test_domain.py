"""Tests for engine input/output records and schedule validation."""

from __future__ import annotations

import dataclasses
from datetime import date, timedelta

import pytest

from habitstats.domain.errors import HabitNotFoundError, HabitStatsError, InvalidScheduleError
from habitstats.domain.logs import (
    Frequency,
    HabitSchedule,
    LogEntry,
    LogSeries,
    normalize_weekday,
    weekday_of,
)
from habitstats.domain.stats import HabitStats, UserStats
from tests.conftest import MONDAY, make_series


class TestHabitSchedule:
    def test_weekly_requires_target_days(self):
        with pytest.raises(InvalidScheduleError):
            HabitSchedule.weekly()

    def test_invalid_schedule_is_a_value_error(self):
        with pytest.raises(ValueError):
            HabitSchedule(frequency=Frequency.WEEKLY)

    @pytest.mark.parametrize("day", [0, 8, -1])
    def test_target_days_must_be_weekdays(self, day):
        with pytest.raises(InvalidScheduleError):
            HabitSchedule.weekly(day)

    def test_string_frequency_is_coerced(self):
        schedule = HabitSchedule(frequency="weekly", target_weekdays={2})

        assert schedule.frequency is Frequency.WEEKLY
        assert schedule == HabitSchedule.weekly(2)

    def test_string_weekly_without_days_is_invalid(self):
        with pytest.raises(InvalidScheduleError):
            HabitSchedule(frequency="weekly")

    def test_unknown_string_frequency_is_invalid(self):
        with pytest.raises(InvalidScheduleError):
            HabitSchedule(frequency="fortnightly")

    @pytest.mark.parametrize("target_days", [["mon"], [None], 5])
    def test_from_record_rejects_non_numeric_days(self, target_days):
        with pytest.raises(InvalidScheduleError):
            HabitSchedule.from_record("weekly", target_days)

    def test_target_days_become_frozenset(self):
        schedule = HabitSchedule(frequency=Frequency.WEEKLY, target_weekdays={1, 3})

        assert schedule.target_weekdays == frozenset({1, 3})
        assert hash(schedule) == hash(HabitSchedule.weekly(3, 1))

    def test_from_record_accepts_sunday_as_zero(self):
        schedule = HabitSchedule.from_record("weekly", [0, 1])

        assert schedule.frequency is Frequency.WEEKLY
        assert schedule.target_weekdays == frozenset({7, 1})

    def test_from_record_daily_ignores_target_days(self):
        schedule = HabitSchedule.from_record(" Daily ", [2, 4])

        assert schedule == HabitSchedule.daily()

    def test_from_record_rejects_unknown_frequency(self):
        with pytest.raises(InvalidScheduleError):
            HabitSchedule.from_record("monthly")

    def test_from_record_weekly_without_days_is_invalid(self):
        with pytest.raises(InvalidScheduleError):
            HabitSchedule.from_record("weekly", None)

    def test_expects(self):
        weekly = HabitSchedule.weekly(1, 5)

        assert weekly.expects(MONDAY)
        assert not weekly.expects(MONDAY + timedelta(days=1))
        assert HabitSchedule.daily().expects(MONDAY + timedelta(days=1))


class TestWeekdays:
    def test_normalize_weekday(self):
        assert normalize_weekday(0) == 7
        assert normalize_weekday(3) == 3
        assert normalize_weekday(7) == 7

    def test_weekday_of(self):
        assert weekday_of(MONDAY) == 1
        assert weekday_of(MONDAY + timedelta(days=6)) == 7


class TestLogSeries:
    def test_window_is_inferred_from_entries(self):
        series = make_series([(MONDAY + timedelta(days=3), True), (MONDAY, False)])

        assert series.start == MONDAY
        assert series.end == MONDAY + timedelta(days=3)
        assert series.total == 2
        assert series.completed == 1

    def test_explicit_window_is_kept(self):
        series = make_series([(MONDAY, True)], start=date(2024, 1, 1), end=date(2024, 12, 31))

        assert (series.start, series.end) == (date(2024, 1, 1), date(2024, 12, 31))

    def test_orderings_do_not_mutate_entries(self):
        entries = (LogEntry(MONDAY + timedelta(days=1), True), LogEntry(MONDAY, True))
        series = LogSeries.of(entries)

        assert [e.occurred_on for e in series.oldest_first()] == [MONDAY, MONDAY + timedelta(days=1)]
        assert [e.occurred_on for e in series.newest_first()] == [MONDAY + timedelta(days=1), MONDAY]
        assert series.entries == entries

    def test_series_is_immutable(self):
        series = make_series([(MONDAY, True)])

        with pytest.raises(dataclasses.FrozenInstanceError):
            series.entries = ()  # type: ignore[misc]


class TestStatsRecords:
    def test_habit_stats_to_dict_uses_iso_dates(self):
        stats = HabitStats(current_streak=2, last_completed_date=MONDAY, habit_id=3)

        data = stats.to_dict()

        assert data["last_completed_date"] == "2024-03-04"
        assert data["habit_id"] == 3
        assert data["best_weekday"] is None

    def test_user_stats_to_dict_nests_ranking(self):
        user = UserStats(habits_by_completion=(HabitStats(habit_id=1, last_completed_date=MONDAY),))

        data = user.to_dict()

        assert data["habits_by_completion"][0]["habit_id"] == 1
        assert data["habits_by_completion"][0]["last_completed_date"] == "2024-03-04"

    def test_empty_keeps_habit_id(self):
        assert HabitStats.empty(5) == HabitStats(habit_id=5)


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(InvalidScheduleError, HabitStatsError)
        assert issubclass(HabitNotFoundError, LookupError)

    def test_not_found_message(self):
        exc = HabitNotFoundError(4, 9)

        assert exc.habit_id == 4
        assert exc.user_id == 9
        assert "Habit 4" in str(exc)
