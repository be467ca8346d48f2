"""
Period averaging of rolling weekly volume.

Monthly and yearly views report the AVERAGE weekly volume per muscle, not a
sum: for each calendar bucket the rolling values of its non-break rows are
summed and divided by the number of those rows.  Break-return rows are
always excluded and empty buckets are not emitted.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from .dates import format_month_year, format_year, month_start, year_start
from .models import PERIOD_TYPES, PeriodAverageVolume, PeriodType, RollingWeeklyVolume


def period_key(day: date, period: PeriodType) -> str:
    """Grouping key: "2024-01" for monthly, "2024" for yearly."""
    return day.strftime("%Y-%m") if period == "monthly" else day.strftime("%Y")


def period_label(day: date, period: PeriodType) -> str:
    """Chart label: "Jan 24" for monthly, "24" for yearly."""
    return format_month_year(day) if period == "monthly" else format_year(day)


def period_start(day: date, period: PeriodType) -> date:
    return month_start(day) if period == "monthly" else year_start(day)


@dataclass
class _PeriodBucket:
    key: str
    label: str
    start_date: date
    rows: list[RollingWeeklyVolume] = field(default_factory=list)


def compute_period_averages(
    rolling_volumes: Sequence[RollingWeeklyVolume],
    period: PeriodType,
) -> list[PeriodAverageVolume]:
    """
    Average weekly volume per muscle for each month or year.

    Args:
        rolling_volumes: Rolling weekly snapshots
        period: "monthly" or "yearly"

    Returns:
        One entry per populated bucket, ascending by start date

    Raises:
        ValueError: If period is not "monthly" or "yearly"
    """
    if period not in PERIOD_TYPES:
        raise ValueError(f"Invalid period: {period!r}. Must be one of {PERIOD_TYPES}")

    buckets: dict[str, _PeriodBucket] = {}

    for rv in rolling_volumes:
        if rv.is_in_break:
            continue

        key = period_key(rv.date, period)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = _PeriodBucket(
                key=key,
                label=period_label(rv.date, period),
                start_date=period_start(rv.date, period),
            )
        bucket.rows.append(rv)

    averages: list[PeriodAverageVolume] = []

    for bucket in buckets.values():
        if not bucket.rows:
            continue

        muscle_sums: dict[str, float] = {}
        total_sets_sum = 0.0
        for rv in bucket.rows:
            for muscle, sets in rv.muscles.items():
                muscle_sums[muscle] = muscle_sums.get(muscle, 0.0) + sets
            total_sets_sum += rv.total_sets

        weeks_included = len(bucket.rows)
        averages.append(
            PeriodAverageVolume(
                period_key=bucket.key,
                period_label=bucket.label,
                start_date=bucket.start_date,
                end_date=max(rv.date for rv in bucket.rows),
                avg_weekly_sets={m: total / weeks_included for m, total in muscle_sums.items()},
                total_avg_sets=total_sets_sum / weeks_included,
                training_days_count=weeks_included,
                weeks_included=weeks_included,
            )
        )

    averages.sort(key=lambda pa: pa.start_date)
    return averages
