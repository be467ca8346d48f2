"""
Daily volume aggregation.

Groups working sets by calendar day and sums contributions per muscle key.
Only days with at least one contributing set appear; gaps stay implicit.
"""

from datetime import date
from typing import Callable, Iterable, Sequence

from .contributions import ExerciseResolver, contributions_for_set
from .dates import day_key, to_day
from .models import Contribution, DailyMuscleVolume, MuscleGranularity, WorkoutSet

ContributionFn = Callable[[WorkoutSet], Sequence[Contribution] | None]


def compute_daily_volumes(
    sets: Iterable[WorkoutSet],
    get_contributions: ContributionFn,
) -> list[DailyMuscleVolume]:
    """
    Sum contributions per day.

    Args:
        sets: Workout sets in any order
        get_contributions: Callback returning a set's contributions, or
            None/empty when the set should be ignored

    Returns:
        Daily volumes sorted ascending by date, unique per day
    """
    days: dict[date, dict[str, float]] = {}

    for workout_set in sets:
        if workout_set.date is None:
            continue
        if not workout_set.is_working_set:
            continue

        contributions = get_contributions(workout_set)
        if not contributions:
            continue

        muscles = days.setdefault(to_day(workout_set.date), {})
        for c in contributions:
            muscles[c.key] = muscles.get(c.key, 0.0) + c.weight

    return [
        DailyMuscleVolume(date=day, date_key=day_key(day), muscles=days[day])
        for day in sorted(days)
    ]


def compute_daily_muscle_volumes(
    sets: Iterable[WorkoutSet],
    resolver: ExerciseResolver,
    granularity: MuscleGranularity = "group",
) -> list[DailyMuscleVolume]:
    """Daily volumes with contributions resolved through *resolver*."""
    return compute_daily_volumes(
        sets,
        lambda s: contributions_for_set(s, resolver, granularity),
    )
