"""
YAML -> MuscleCatalogEntry loader.

Loads the exercise catalog from the bundled ``src/lift_volume/exercises.yaml``
file.  Each item under the top-level ``exercises:`` list describes one
exercise::

    exercises:
      - name: Bench Press (Barbell)
        primary_muscle: Chest
        secondary_muscles: Triceps, Shoulders   # string or list
        equipment: Barbell

User overrides: ``~/.lift-volume/exercises.yaml`` in the same format.  A user
item whose name matches a bundled exercise is merged over it (only changed
keys need to be listed); any other name is added as a new exercise.

Usage (internal, called by registry.py):
    from .loader import load_catalog_entries
    entries = load_catalog_entries()   # dict or None on failure
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path
from typing import Any

import yaml

from .base import MuscleCatalogEntry

_REQUIRED_ENTRY_FIELDS: frozenset[str] = frozenset({"name", "primary_muscle"})


def entry_from_dict(d: dict) -> MuscleCatalogEntry:
    """Convert a raw dict (from YAML) to a MuscleCatalogEntry.

    Raises ValueError if any required field is absent or empty.
    """
    missing = _REQUIRED_ENTRY_FIELDS - {k for k, v in d.items() if v not in (None, "")}
    if missing:
        raise ValueError(f"MuscleCatalogEntry missing fields: {sorted(missing)}")

    secondary = d.get("secondary_muscles")
    if secondary is not None and not isinstance(secondary, (str, list, tuple)):
        raise ValueError(
            f"secondary_muscles must be a string or list, got {type(secondary).__name__}"
        )

    equipment = d.get("equipment")
    return MuscleCatalogEntry.from_fields(
        name=str(d["name"]).strip(),
        primary_muscle=str(d["primary_muscle"]),
        secondary_muscles=secondary,
        equipment=str(equipment) if equipment else None,
    )


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file; return {} when it is missing or malformed."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(f"lift-volume: cannot read catalog file {path} ({exc})", stacklevel=2)
        return {}
    return data if isinstance(data, dict) else {}


def _raw_items(path: Path) -> list[dict]:
    items = _load_yaml_file(path).get("exercises") or []
    if not isinstance(items, list):
        warnings.warn(f"lift-volume: 'exercises' in {path} is not a list; ignored", stacklevel=2)
        return []
    return [item for item in items if isinstance(item, dict)]


def get_bundled_catalog_path() -> Path | None:
    """Return the path to the bundled exercises.yaml, or None if not found."""
    # loader.py lives at src/lift_volume/catalog/loader.py
    candidate = Path(__file__).parent.parent / "exercises.yaml"
    return candidate if candidate.is_file() else None


def get_user_catalog_path() -> Path | None:
    """Return ~/.lift-volume/exercises.yaml if it exists, else None."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / ".lift-volume" / "exercises.yaml"
    return p if p.is_file() else None


def load_catalog_entries(
    bundled_path: Path | None = None,
    user_path: Path | None = None,
) -> dict[str, MuscleCatalogEntry] | None:
    """Return {exercise name: MuscleCatalogEntry} from the YAML sources.

    Args:
        bundled_path: Base catalog file (default: the bundled exercises.yaml)
        user_path: Override file (default: ~/.lift-volume/exercises.yaml if present)

    Returns None when no source yields a single valid entry.  Invalid items
    are skipped with a warning.
    """
    base = bundled_path if bundled_path is not None else get_bundled_catalog_path()
    override = user_path if user_path is not None else get_user_catalog_path()

    raw: dict[str, dict] = {}
    for source in (base, override):
        if source is None:
            continue
        for item in _raw_items(source):
            name = str(item.get("name") or "").strip()
            if not name:
                warnings.warn(f"lift-volume: skipping unnamed exercise in {source}", stacklevel=2)
                continue
            merged = dict(raw.get(name, {}))
            merged.update(item)
            raw[name] = merged

    result: dict[str, MuscleCatalogEntry] = {}
    for name, item in raw.items():
        try:
            result[name] = entry_from_dict(item)
        except ValueError as exc:
            warnings.warn(f"lift-volume: skipping exercise '{name}': {exc}", stacklevel=2)

    return result if result else None
