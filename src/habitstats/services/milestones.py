"""Projection of the next streak milestone."""

from __future__ import annotations

import math

from ..domain.stats import HabitStats, MilestoneProjection
from .rounding import round_to_int, to_decimal

MILESTONES: tuple[int, ...] = (3, 7, 14, 21, 30, 60, 90, 100)
BEYOND_LADDER_STEP = 7
UNREACHABLE_DAYS = 99
MAX_CONFIDENCE = 95


def next_milestone(current_streak: int) -> int:
    """Return the first milestone above ``current_streak``, or a week beyond it."""

    return next((m for m in MILESTONES if m > current_streak), current_streak + BEYOND_LADDER_STEP)


def project_milestone(stats: HabitStats) -> MilestoneProjection:
    """Estimate days to the next milestone at the habit's current completion rate.

    A zero completion rate yields ``UNREACHABLE_DAYS`` instead of dividing by
    zero. Confidence tracks the completion rate but never exceeds 95.
    """

    milestone = next_milestone(stats.current_streak)
    fraction = to_decimal(stats.completion_rate) / 100
    if fraction > 0:
        days = math.ceil((milestone - stats.current_streak) / fraction)
    else:
        days = UNREACHABLE_DAYS
    return MilestoneProjection(
        next_milestone=milestone,
        estimated_days_to_reach=days,
        confidence=min(round_to_int(stats.completion_rate), MAX_CONFIDENCE),
    )


__all__ = ["MILESTONES", "next_milestone", "project_milestone"]
