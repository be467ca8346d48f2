"""
Exercise catalog for lift-volume.

Each exercise is described by a MuscleCatalogEntry holding its primary and
secondary muscles; free-text names from workout logs are matched to
catalog names by the resolver.
"""

from .base import MuscleCatalogEntry, PrimaryMuscle
from .registry import ExerciseCatalog, get_catalog

__all__ = [
    "MuscleCatalogEntry",
    "PrimaryMuscle",
    "ExerciseCatalog",
    "get_catalog",
]
