"""
Time-series assembly for charting.

Turns rolling or period-averaged volumes into flat rows
``{"timestamp", "date_formatted", <key>: value, ...}`` plus the list of
keys, and offers coarser re-bucketing of an already-rolling series.
Break-return rows are never emitted in rolling series.
"""

from datetime import date
from typing import Callable, Iterable, Sequence

from .contributions import ExerciseResolver, contributions_for_set
from .dates import (
    day_timestamp,
    format_day,
    format_month_year,
    format_week,
    format_year,
    from_timestamp,
    month_start,
    to_day,
    week_start,
    year_start,
)
from .daily import compute_daily_muscle_volumes
from .models import (
    VOLUME_PERIODS,
    MuscleGranularity,
    PeriodAverageVolume,
    RollingWeeklyVolume,
    VolumePeriod,
    VolumeTimeSeries,
    WorkoutSet,
)

Row = dict[str, float | int | str]


def collect_keys(maps: Iterable[dict[str, float]]) -> list[str]:
    """Union of keys across muscle maps, in first-seen order."""
    seen: dict[str, None] = {}
    for m in maps:
        for k in m:
            seen.setdefault(k, None)
    return list(seen)


def _row(day: date, label: str, muscles: dict[str, float], keys: Sequence[str]) -> Row:
    row: Row = {"timestamp": day_timestamp(day), "date_formatted": label}
    for k in keys:
        row[k] = muscles.get(k, 0.0)
    return row


def assemble_rolling_series(
    rolling_volumes: Sequence[RollingWeeklyVolume],
    keys: Sequence[str] | None = None,
) -> VolumeTimeSeries:
    """
    Chart rows for rolling weekly volume, one per non-break training day.

    Args:
        rolling_volumes: Rolling snapshots (break rows are dropped here)
        keys: Columns to emit; defaults to every key observed in the input

    Returns:
        VolumeTimeSeries with day labels ("5 Mar")
    """
    if keys is None:
        keys = collect_keys(rv.muscles for rv in rolling_volumes)
    keys = list(keys)

    data = [
        _row(rv.date, format_day(rv.date), rv.muscles, keys)
        for rv in rolling_volumes
        if not rv.is_in_break
    ]
    return VolumeTimeSeries(data=data, keys=keys)


def assemble_period_series(
    period_volumes: Sequence[PeriodAverageVolume],
    keys: Sequence[str] | None = None,
) -> VolumeTimeSeries:
    """Chart rows for period averages, timestamped at each period start."""
    if keys is None:
        keys = collect_keys(pa.avg_weekly_sets for pa in period_volumes)
    keys = list(keys)

    data = [
        _row(pa.start_date, pa.period_label, pa.avg_weekly_sets, keys)
        for pa in period_volumes
    ]
    return VolumeTimeSeries(data=data, keys=keys)


def _bucket_last(
    series: VolumeTimeSeries,
    bucket_start: Callable[[date], date],
    label: Callable[[date], str],
) -> VolumeTimeSeries:
    if not series.data:
        return series

    by_bucket: dict[date, Row] = {}
    for row in series.data:
        ts = row.get("timestamp")
        if not isinstance(ts, int) or not ts:
            continue
        start = bucket_start(from_timestamp(ts))
        out: Row = {"timestamp": day_timestamp(start), "date_formatted": label(start)}
        for k in series.keys:
            v = row.get(k)
            out[k] = v if isinstance(v, (int, float)) else 0.0
        # Rows are chronological, so the last write per bucket wins
        by_bucket[start] = out

    data = [by_bucket[start] for start in sorted(by_bucket)]
    return VolumeTimeSeries(data=data, keys=list(series.keys))


def bucket_series_to_weeks(series: VolumeTimeSeries) -> VolumeTimeSeries:
    """
    One row per ISO week (Monday start), keeping the last rolling row seen
    in that week.
    """
    return _bucket_last(series, week_start, format_week)


def bucket_series_to_months(series: VolumeTimeSeries) -> VolumeTimeSeries:
    """One row per calendar month, keeping the last rolling row in the month."""
    return _bucket_last(series, month_start, format_month_year)


def build_daily_series(
    sets: Iterable[WorkoutSet],
    resolver: ExerciseResolver,
    granularity: MuscleGranularity = "group",
) -> VolumeTimeSeries:
    """Plain per-day totals (no rolling), values rounded to 1 decimal."""
    daily = compute_daily_muscle_volumes(sets, resolver, granularity)
    keys = collect_keys(d.muscles for d in daily)

    data = []
    for d in daily:
        rounded = {k: round(v, 1) for k, v in d.muscles.items()}
        data.append(_row(d.date, format_day(d.date), rounded, keys))
    return VolumeTimeSeries(data=data, keys=keys)


_CALENDAR_BUCKETS: dict[str, tuple[Callable[[date], date], Callable[[date], str]]] = {
    "daily": (lambda d: d, format_day),
    "weekly": (week_start, format_week),
    "monthly": (month_start, format_month_year),
    "yearly": (year_start, format_year),
}


def build_calendar_series(
    sets: Iterable[WorkoutSet],
    resolver: ExerciseResolver,
    period: VolumePeriod = "weekly",
    granularity: MuscleGranularity = "group",
) -> VolumeTimeSeries:
    """
    Calendar-bucket sums of contributions (no rolling, no break handling).

    Unlike the rolling views, a monthly row here is the total sets in that
    month, not an average weekly rate.
    """
    if period not in VOLUME_PERIODS:
        raise ValueError(f"Invalid period: {period!r}. Must be one of {VOLUME_PERIODS}")
    bucket_start, label = _CALENDAR_BUCKETS[period]

    buckets: dict[date, dict[str, float]] = {}
    for workout_set in sets:
        if workout_set.date is None:
            continue
        contributions = contributions_for_set(workout_set, resolver, granularity)
        if not contributions:
            continue
        muscles = buckets.setdefault(bucket_start(to_day(workout_set.date)), {})
        for c in contributions:
            muscles[c.key] = muscles.get(c.key, 0.0) + c.weight

    starts = sorted(buckets)
    keys = collect_keys(buckets[s] for s in starts)
    data = [
        _row(s, label(s), {k: round(v, 1) for k, v in buckets[s].items()}, keys)
        for s in starts
    ]
    return VolumeTimeSeries(data=data, keys=keys)


def drop_keys(series: VolumeTimeSeries, excluded: Iterable[str]) -> VolumeTimeSeries:
    """Copy of *series* without the given columns."""
    excluded = set(excluded)
    keys = [k for k in series.keys if k not in excluded]
    data = [{k: v for k, v in row.items() if k not in excluded} for row in series.data]
    return VolumeTimeSeries(data=data, keys=keys)
