"""
Contribution extraction: one set -> weighted per-muscle credits.

Rules, applied in order:

1. Cardio primary: no contributions.
2. Full-body primary: 1.0 to each key of a fixed target list; secondary
   muscles are ignored.
3. Otherwise 1.0 to the primary, then 0.5 to each secondary that is not
   blank, "None", Cardio or Full Body.

Keys are normalized per granularity (see core.muscles).  In body_map mode a
single muscle name can expand to several ids, each receiving the full
weight of that muscle.
"""

from typing import Protocol

from ..catalog.base import MuscleCatalogEntry
from .config import (
    FULL_BODY_GROUPS,
    FULL_BODY_TARGET_MUSCLES,
    FULL_BODY_WEIGHT,
    GROUP_TO_BODY_MAP_IDS,
    PRIMARY_WEIGHT,
    SECONDARY_WEIGHT,
)
from .models import GRANULARITIES, Contribution, MuscleGranularity, WorkoutSet
from .muscles import (
    body_map_ids,
    is_blank_muscle,
    is_cardio_name,
    is_full_body_name,
    normalize_muscle_group,
    normalize_muscle_name,
)


class ExerciseResolver(Protocol):
    """Anything that maps a raw exercise name to zero-or-one catalog entry."""

    def resolve(self, raw_name: str) -> MuscleCatalogEntry | None:
        ...


def _check_granularity(granularity: str) -> None:
    if granularity not in GRANULARITIES:
        raise ValueError(
            f"Invalid granularity: {granularity!r}. Must be one of {GRANULARITIES}"
        )


def normalize_keys(name: str, granularity: MuscleGranularity) -> tuple[str, ...]:
    """
    Normalize one muscle name to its key(s) at the given granularity.

    Args:
        name: Free-text muscle name from the catalog
        granularity: "group", "muscle" or "body_map"

    Returns:
        One key for group/muscle mode; zero or more ids for body_map mode
    """
    if granularity == "group":
        return (normalize_muscle_group(name),)
    if granularity == "muscle":
        return (normalize_muscle_name(name),)
    return body_map_ids(name)


def _full_body_contributions(granularity: MuscleGranularity) -> list[Contribution]:
    if granularity == "group":
        targets: tuple[str, ...] = FULL_BODY_GROUPS
    elif granularity == "muscle":
        targets = FULL_BODY_TARGET_MUSCLES
    else:
        # Each group's ids once; groups do not share ids
        targets = tuple(
            svg_id for group in FULL_BODY_GROUPS for svg_id in GROUP_TO_BODY_MAP_IDS[group]
        )
    return [Contribution(key=k, weight=FULL_BODY_WEIGHT) for k in targets]


def extract_contributions(
    entry: MuscleCatalogEntry,
    granularity: MuscleGranularity = "group",
) -> list[Contribution]:
    """
    Weighted muscle contributions of one working set of *entry*.

    Args:
        entry: Resolved catalog entry for the set's exercise
        granularity: Key resolution ("group", "muscle" or "body_map")

    Returns:
        List of contributions, possibly empty
    """
    _check_granularity(granularity)

    primary = entry.primary
    if primary.is_cardio:
        return []
    if primary.is_full_body:
        return _full_body_contributions(granularity)
    if is_blank_muscle(primary.name):
        return []

    contributions = [
        Contribution(key=k, weight=PRIMARY_WEIGHT)
        for k in normalize_keys(primary.name, granularity)
    ]

    for raw in entry.secondary_muscles:
        if is_blank_muscle(raw) or is_cardio_name(raw) or is_full_body_name(raw):
            continue
        for k in normalize_keys(raw.strip(), granularity):
            contributions.append(Contribution(key=k, weight=SECONDARY_WEIGHT))

    return contributions


def contributions_for_set(
    workout_set: WorkoutSet,
    resolver: ExerciseResolver,
    granularity: MuscleGranularity = "group",
) -> list[Contribution] | None:
    """
    Resolve a set's exercise and extract its contributions.

    Returns None when the set cannot contribute volume (warmup, no exercise
    name, unresolved name, or no contributions).
    """
    if not workout_set.is_working_set:
        return None
    if not workout_set.exercise_name:
        return None

    entry = resolver.resolve(workout_set.exercise_name)
    if entry is None:
        return None

    contributions = extract_contributions(entry, granularity)
    return contributions or None
