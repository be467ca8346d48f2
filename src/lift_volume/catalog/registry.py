"""
Exercise catalog registry.

ExerciseCatalog wraps the loaded {name: MuscleCatalogEntry} map, exposes a
content fingerprint (``version``) and resolves free-text exercise names to
entries through a version-cached ExerciseNameResolver.

Use get_catalog() to load the bundled catalog (plus user overrides from
``~/.lift-volume/exercises.yaml``).  If nothing can be loaded a RuntimeError
is raised; volume cannot be attributed without a catalog.
"""

import hashlib
import json
from pathlib import Path
from typing import Mapping

from .base import MuscleCatalogEntry
from .resolver import ExerciseNameResolver, NameResolution, get_name_resolver


def catalog_fingerprint(entries: Mapping[str, MuscleCatalogEntry]) -> str:
    """Stable SHA-256 over every entry's fields, independent of dict order."""
    payload = [
        [
            name,
            entry.primary.kind,
            entry.primary.name,
            list(entry.secondary_muscles),
            entry.equipment,
        ]
        for name, entry in sorted(entries.items())
    ]
    encoded = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()[:16]


class ExerciseCatalog:
    """
    Read-only exercise catalog.

    Satisfies the core ExerciseResolver protocol: resolve() returns the
    matched entry or None.
    """

    def __init__(self, entries: Mapping[str, MuscleCatalogEntry]):
        self._entries: dict[str, MuscleCatalogEntry] = dict(entries)
        self.version: str = catalog_fingerprint(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    @property
    def names(self) -> list[str]:
        return list(self._entries)

    def get(self, name: str) -> MuscleCatalogEntry | None:
        """Exact-name lookup."""
        return self._entries.get(name)

    @property
    def name_resolver(self) -> ExerciseNameResolver:
        return get_name_resolver(self.version, self._entries)

    def match(self, raw_name: str) -> NameResolution:
        """How *raw_name* maps onto a catalog name (for diagnostics)."""
        return self.name_resolver.resolve(raw_name)

    def resolve(self, raw_name: str) -> MuscleCatalogEntry | None:
        """Catalog entry for a free-text exercise name, or None."""
        resolution = self.match(raw_name)
        if not resolution.matched:
            return None
        return self._entries.get(resolution.name)


def get_catalog(
    catalog_path: Path | None = None,
    user_path: Path | None = None,
) -> ExerciseCatalog:
    """
    Load the exercise catalog.

    Args:
        catalog_path: Base YAML file (default: bundled exercises.yaml)
        user_path: Override YAML file (default: ~/.lift-volume/exercises.yaml)

    Returns:
        ExerciseCatalog

    Raises:
        RuntimeError: If no exercise could be loaded
    """
    from .loader import load_catalog_entries

    loaded = load_catalog_entries(catalog_path, user_path)
    if not loaded:
        raise RuntimeError(
            "lift-volume: no exercises could be loaded from YAML. "
            "Check that the catalog file is present and valid."
        )
    return ExerciseCatalog(loaded)
