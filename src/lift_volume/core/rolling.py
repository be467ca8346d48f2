"""
Rolling 7-day volume over training days.

A two-pointer window moves over the sorted daily rows: each day is added
once when it enters and subtracted once when it leaves, so the whole pass
is O(n) in the number of training days.  Windows are defined in calendar
days ([d - 6, d] inclusive) but only training days carry data; a week with
two sessions sums just those two days.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Sequence

from .config import EVICTION_EPSILON, ROLLING_WINDOW_DAYS
from .models import DailyMuscleVolume, RollingWeeklyVolume


@dataclass
class _WindowState:
    """Running sums for the days currently inside the window."""

    muscles: dict[str, float] = field(default_factory=dict)
    total_sets: float = 0.0
    start_idx: int = 0

    def add(self, day: DailyMuscleVolume) -> None:
        for muscle, sets in day.muscles.items():
            self.muscles[muscle] = self.muscles.get(muscle, 0.0) + sets
            self.total_sets += sets

    def evict(self, day: DailyMuscleVolume) -> None:
        for muscle, sets in day.muscles.items():
            remaining = self.muscles.get(muscle, 0.0) - sets
            if remaining <= EVICTION_EPSILON:
                self.muscles.pop(muscle, None)
            else:
                self.muscles[muscle] = remaining
            self.total_sets -= sets
        if self.total_sets < EVICTION_EPSILON:
            self.total_sets = 0.0
        self.start_idx += 1


def compute_rolling_weekly_volumes(
    daily_volumes: Sequence[DailyMuscleVolume],
    break_keys: set[str] | frozenset[str],
) -> list[RollingWeeklyVolume]:
    """
    Rolling weekly volume as of each training day.

    Args:
        daily_volumes: Daily volumes sorted ascending by date
        break_keys: Date keys of break-return days (from identify_break_days)

    Returns:
        One snapshot per daily row, same order; muscle maps are copies that
        later window movement does not touch
    """
    rolling: list[RollingWeeklyVolume] = []
    state = _WindowState()

    for i, current in enumerate(daily_volumes):
        state.add(current)

        window_start = current.date - timedelta(days=ROLLING_WINDOW_DAYS - 1)
        while state.start_idx <= i and daily_volumes[state.start_idx].date < window_start:
            state.evict(daily_volumes[state.start_idx])

        rolling.append(
            RollingWeeklyVolume(
                date=current.date,
                date_key=current.date_key,
                muscles=dict(state.muscles),
                total_sets=round(state.total_sets, 1),
                is_in_break=current.date_key in break_keys,
            )
        )

    return rolling
