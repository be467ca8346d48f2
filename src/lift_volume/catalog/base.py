"""
Base types for the exercise catalog.

The primary muscle of every catalog entry is classified once, when the
catalog is loaded, into a tagged PrimaryMuscle so that contribution
extraction never re-parses free text for cardio/full-body detection.
"""

from dataclasses import dataclass, field
from typing import Literal

from ..core.muscles import is_cardio_name, is_full_body_name

PrimaryKind = Literal["cardio", "full_body", "named"]


@dataclass(frozen=True)
class PrimaryMuscle:
    """Primary muscle of an exercise, tagged by kind."""

    kind: PrimaryKind
    name: str

    @classmethod
    def classify(cls, raw: str) -> "PrimaryMuscle":
        """Build from a free-text catalog value."""
        name = raw.strip()
        if is_cardio_name(name):
            return cls(kind="cardio", name=name)
        if is_full_body_name(name):
            return cls(kind="full_body", name=name)
        return cls(kind="named", name=name)

    @property
    def is_cardio(self) -> bool:
        return self.kind == "cardio"

    @property
    def is_full_body(self) -> bool:
        return self.kind == "full_body"


@dataclass(frozen=True)
class MuscleCatalogEntry:
    """
    Muscle metadata for one catalog exercise.

    ``secondary_muscles`` holds the individual names already split from the
    comma-separated catalog field; it may contain "None" or blanks, which
    the contribution extractor skips.
    """

    name: str
    primary: PrimaryMuscle
    secondary_muscles: tuple[str, ...] = field(default_factory=tuple)
    equipment: str | None = None

    @property
    def primary_muscle(self) -> str:
        return self.primary.name

    @classmethod
    def from_fields(
        cls,
        name: str,
        primary_muscle: str,
        secondary_muscles: str | list[str] | tuple[str, ...] | None = None,
        equipment: str | None = None,
    ) -> "MuscleCatalogEntry":
        """Build an entry from raw catalog fields (secondary may be a CSV string)."""
        if secondary_muscles is None:
            secondaries: tuple[str, ...] = ()
        elif isinstance(secondary_muscles, str):
            secondaries = tuple(s.strip() for s in secondary_muscles.split(","))
        else:
            secondaries = tuple(str(s).strip() for s in secondary_muscles)
        return cls(
            name=name,
            primary=PrimaryMuscle.classify(primary_muscle),
            secondary_muscles=secondaries,
            equipment=equipment,
        )
