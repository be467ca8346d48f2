"""
Muscle-name normalization.

Free-text muscle names from the exercise catalog are mapped to keys at one
of three granularities:

- group:    one of the anatomical groups (Chest, Back, ...), Cardio,
            Full Body, or Other
- muscle:   the canonical catalog muscle name (e.g. "Triceps"), or Other
- body_map: one or more fine-grained body-map ids (e.g. "upper-pectoralis")
"""

import re
from functools import lru_cache

from .config import (
    GROUP_OTHER,
    GROUP_TO_BODY_MAP_IDS,
    MUSCLE_GROUP_ORDER,
    MUSCLE_GROUP_PATTERNS,
    MUSCLE_TO_BODY_MAP_IDS,
)

_CARDIO_RE = re.compile(r"cardio", re.IGNORECASE)
_FULL_BODY_RE = re.compile(r"full[\s-]*body", re.IGNORECASE)

# Lower-cased lookup of every muscle name known to the body map
_CANONICAL_MUSCLES: dict[str, str] = {name.lower(): name for name in MUSCLE_TO_BODY_MAP_IDS}


def is_cardio_name(name: str) -> bool:
    return bool(_CARDIO_RE.search(name))


def is_full_body_name(name: str) -> bool:
    return bool(_FULL_BODY_RE.search(name))


def is_blank_muscle(name: str | None) -> bool:
    """True for empty strings and the literal "None" used by catalogs."""
    if name is None:
        return True
    key = name.strip().lower()
    return key in ("", "none")


@lru_cache(maxsize=1024)
def normalize_muscle_group(name: str | None) -> str:
    """
    Map a free-text muscle name to its group.

    Matching is case-insensitive substring search over MUSCLE_GROUP_PATTERNS;
    unmatched names become "Other".
    """
    if is_blank_muscle(name):
        return GROUP_OTHER
    key = name.strip().lower()  # type: ignore[union-attr]

    for group, patterns in MUSCLE_GROUP_PATTERNS:
        for pattern in patterns:
            if pattern in key:
                return group

    return GROUP_OTHER


def normalize_muscle_name(name: str | None) -> str:
    """
    Canonical catalog muscle name, or "Other" when unknown.

    Group-level names ("Back", "legs") stay as their group label.
    """
    if is_blank_muscle(name):
        return GROUP_OTHER
    raw = name.strip()  # type: ignore[union-attr]
    canonical = _CANONICAL_MUSCLES.get(raw.lower())
    if canonical is not None:
        return canonical
    # Space/underscore variants: "Lower_Back", "latissimus dorsi"
    canonical = _CANONICAL_MUSCLES.get(re.sub(r"[\s_]+", " ", raw.lower()))
    if canonical is None:
        canonical = _CANONICAL_MUSCLES.get(re.sub(r"[\s_]+", "_", raw.lower()))
    if canonical is not None:
        return canonical
    group = raw.title()
    return group if is_anatomical_group(group) else GROUP_OTHER


def body_map_ids(name: str | None) -> tuple[str, ...]:
    """
    Body-map ids for a muscle name.

    Falls back to every id of the name's group; returns () for names that
    map to neither (Cardio, Full Body, Other).
    """
    ids = MUSCLE_TO_BODY_MAP_IDS.get(normalize_muscle_name(name))
    if ids is not None:
        return ids
    group = normalize_muscle_group(name)
    return GROUP_TO_BODY_MAP_IDS.get(group, ())


def is_anatomical_group(key: str) -> bool:
    """True for the six display groups (excludes Cardio/Full Body/Other)."""
    return key in MUSCLE_GROUP_ORDER
