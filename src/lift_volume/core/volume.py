"""
Public query API for muscle volume.

Main entry points:
- get_muscle_volume_series(): rolling weekly, period-averaged or daily series
- get_latest_rolling_volume(): most recent usable rolling snapshot
- get_latest_composition(): latest rolling volume per muscle, largest first

Every call recomputes from the raw sets; results are deterministic for a
fixed set collection and catalog, so callers may memoize on their own.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

from .breaks import identify_break_days
from .config import GROUP_OTHER, LATEST_COMPOSITION_LABEL
from .contributions import ExerciseResolver
from .daily import compute_daily_muscle_volumes
from .models import (
    VOLUME_PERIODS,
    DailyMuscleVolume,
    MuscleComposition,
    MuscleGranularity,
    PeriodType,
    RollingWeeklyVolume,
    VolumePeriod,
    VolumeTimeSeries,
    WorkoutSet,
)
from .periods import compute_period_averages
from .rolling import compute_rolling_weekly_volumes
from .timeseries import (
    assemble_period_series,
    assemble_rolling_series,
    build_daily_series,
    drop_keys,
)


@dataclass(frozen=True)
class VolumePipeline:
    """Intermediate results of one pass: daily rows, break keys, rolling rows."""

    daily: list[DailyMuscleVolume]
    break_keys: frozenset[str]
    rolling: list[RollingWeeklyVolume]


def run_pipeline(
    sets: Iterable[WorkoutSet],
    resolver: ExerciseResolver,
    granularity: MuscleGranularity = "group",
) -> VolumePipeline:
    """Daily aggregation -> break detection -> rolling window."""
    daily = compute_daily_muscle_volumes(sets, resolver, granularity)
    break_keys = frozenset(identify_break_days(daily))
    rolling = compute_rolling_weekly_volumes(daily, break_keys)
    return VolumePipeline(daily=daily, break_keys=break_keys, rolling=rolling)


def get_rolling_weekly_series(
    sets: Iterable[WorkoutSet],
    resolver: ExerciseResolver,
    granularity: MuscleGranularity = "group",
    keys: Sequence[str] | None = None,
) -> VolumeTimeSeries:
    """Rolling 7-day volume per muscle for every non-break training day."""
    pipeline = run_pipeline(sets, resolver, granularity)
    return assemble_rolling_series(pipeline.rolling, keys)


def get_period_average_series(
    sets: Iterable[WorkoutSet],
    resolver: ExerciseResolver,
    period: PeriodType,
    granularity: MuscleGranularity = "group",
    keys: Sequence[str] | None = None,
) -> VolumeTimeSeries:
    """Average weekly volume per muscle for each month or year."""
    pipeline = run_pipeline(sets, resolver, granularity)
    averages = compute_period_averages(pipeline.rolling, period)
    return assemble_period_series(averages, keys)


def get_muscle_volume_series(
    sets: Iterable[WorkoutSet],
    resolver: ExerciseResolver,
    period: VolumePeriod = "weekly",
    granularity: MuscleGranularity = "group",
    keys: Sequence[str] | None = None,
    drop_other: bool = False,
) -> VolumeTimeSeries:
    """
    Muscle volume time series for the requested period.

    ``drop_other`` removes the "Other" column (muscles that match no known
    group or name), for displays that show only anatomical keys.

    Period semantics:
    - "weekly":  rolling 7-day sums (true weekly volume per muscle)
    - "monthly": average weekly sets per muscle for each month
    - "yearly":  average weekly sets per muscle for each year
    - "daily":   raw per-day totals, not rolling

    Break-return days are left out of weekly rows and monthly/yearly averages.

    Raises:
        ValueError: If period is not one of the four above
    """
    series = _series_for_period(sets, resolver, period, granularity, keys)
    return drop_keys(series, (GROUP_OTHER,)) if drop_other else series


def _series_for_period(
    sets: Iterable[WorkoutSet],
    resolver: ExerciseResolver,
    period: VolumePeriod,
    granularity: MuscleGranularity,
    keys: Sequence[str] | None,
) -> VolumeTimeSeries:
    if period not in VOLUME_PERIODS:
        raise ValueError(f"Invalid period: {period!r}. Must be one of {VOLUME_PERIODS}")

    if period == "daily":
        series = build_daily_series(sets, resolver, granularity)
        if keys is not None:
            series = VolumeTimeSeries(
                data=[
                    {
                        "timestamp": row["timestamp"],
                        "date_formatted": row["date_formatted"],
                        **{k: row.get(k, 0.0) for k in keys},
                    }
                    for row in series.data
                ],
                keys=list(keys),
            )
        return series
    if period == "weekly":
        return get_rolling_weekly_series(sets, resolver, granularity, keys)
    return get_period_average_series(sets, resolver, period, granularity, keys)


def latest_rolling_volume(
    rolling_volumes: Sequence[RollingWeeklyVolume],
) -> RollingWeeklyVolume | None:
    """
    Most recent non-break snapshot; the last snapshot if every row is a
    break-return day; None when there are no rows.
    """
    for rv in reversed(rolling_volumes):
        if not rv.is_in_break:
            return rv
    return rolling_volumes[-1] if rolling_volumes else None


def get_latest_rolling_volume(
    sets: Iterable[WorkoutSet],
    resolver: ExerciseResolver,
    granularity: MuscleGranularity = "group",
) -> RollingWeeklyVolume | None:
    """
    Current weekly volume status.

    Returns None when there is no training history at all; callers should
    treat that as "no history yet", not as an error.
    """
    pipeline = run_pipeline(sets, resolver, granularity)
    return latest_rolling_volume(pipeline.rolling)


def get_latest_composition(
    sets: Iterable[WorkoutSet],
    resolver: ExerciseResolver,
    granularity: MuscleGranularity = "muscle",
) -> MuscleComposition:
    """Latest rolling volume per muscle, sorted by value (descending)."""
    latest = get_latest_rolling_volume(sets, resolver, granularity)
    if latest is None:
        return MuscleComposition(entries=[], label="")

    entries = sorted(latest.muscles.items(), key=lambda kv: (-kv[1], kv[0]))
    return MuscleComposition(entries=entries, label=LATEST_COMPOSITION_LABEL)
