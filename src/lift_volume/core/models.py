"""
Data models for lift-volume.

Core dataclasses for workout input, per-set contributions, and the daily,
rolling and period volume aggregates built from them.  Aggregates are frozen
once built; muscle maps inside them are fresh dicts owned by each instance.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal

# Key resolution for contributions
MuscleGranularity = Literal["group", "muscle", "body_map"]
PeriodType = Literal["monthly", "yearly"]
VolumePeriod = Literal["daily", "weekly", "monthly", "yearly"]

GRANULARITIES: tuple[str, ...] = ("group", "muscle", "body_map")
PERIOD_TYPES: tuple[str, ...] = ("monthly", "yearly")
VOLUME_PERIODS: tuple[str, ...] = ("daily", "weekly", "monthly", "yearly")


@dataclass(frozen=True)
class WorkoutSet:
    """
    One performed set, as delivered by the ingestion layer.

    ``date`` is None when the source value was missing or unparseable;
    such sets never contribute volume.
    """

    exercise_name: str
    date: datetime | date | None
    is_warmup: bool = False
    set_type: str = "normal"  # "normal" | "warmup" | "dropset" | "failure" ...
    weight_kg: float = 0.0
    reps: int = 0

    @property
    def is_working_set(self) -> bool:
        """True unless flagged as a warmup either way."""
        return not (self.is_warmup or self.set_type == "warmup")


@dataclass(frozen=True)
class Contribution:
    """Weighted share of one set credited to one muscle key."""

    key: str
    weight: float

    def __post_init__(self) -> None:
        if self.weight < 0:
            raise ValueError("Contribution weight must be non-negative")


@dataclass(frozen=True)
class DailyMuscleVolume:
    """Summed contributions for a single training day."""

    date: date
    date_key: str  # YYYY-MM-DD
    muscles: dict[str, float] = field(default_factory=dict)

    @property
    def total_sets(self) -> float:
        return sum(self.muscles.values())


@dataclass(frozen=True)
class RollingWeeklyVolume:
    """
    Rolling 7-day volume snapshot as of one training day.

    ``is_in_break`` marks the first training day after a gap longer than
    the break threshold.
    """

    date: date
    date_key: str
    muscles: dict[str, float]
    total_sets: float
    is_in_break: bool = False


@dataclass(frozen=True)
class PeriodAverageVolume:
    """
    Average weekly volume per muscle for one calendar month or year.

    ``weeks_included`` counts the non-break rolling rows averaged, not
    calendar weeks.
    """

    period_key: str  # "YYYY-MM" or "YYYY"
    period_label: str
    start_date: date
    end_date: date
    avg_weekly_sets: dict[str, float]
    total_avg_sets: float
    training_days_count: int
    weeks_included: int


@dataclass
class VolumeTimeSeries:
    """
    Flat, chart-ready rows plus the muscle keys present as numeric columns.

    Each row holds ``timestamp`` (ms, UTC midnight), ``date_formatted`` and
    one float per key.
    """

    data: list[dict[str, float | int | str]] = field(default_factory=list)
    keys: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class MuscleComposition:
    """Latest rolling volume per muscle, sorted descending by value."""

    entries: list[tuple[str, float]]
    label: str
