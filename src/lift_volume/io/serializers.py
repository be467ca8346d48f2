"""
JSON serialization for workout sets and volume results.

Handles conversion between dataclasses and JSON-compatible dicts.
"""

import json
import re
from datetime import date, datetime
from typing import Any

from ..core.dates import day_key
from ..core.models import (
    MuscleComposition,
    RollingWeeklyVolume,
    VolumeTimeSeries,
    WorkoutSet,
)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def parse_set_date(value: Any) -> date | datetime | None:
    """
    Parse a set timestamp.

    Accepts "YYYY-MM-DD" and ISO-8601 datetimes (a trailing "Z" is read as
    UTC).  Missing or unparseable values yield None so the set is ignored
    downstream instead of aborting the whole load.

    Args:
        value: Raw value from JSON

    Returns:
        date, datetime or None
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        if _DATE_RE.match(text):
            return datetime.strptime(text, "%Y-%m-%d").date()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def validate_date(date_str: str) -> str:
    """
    Validate a YYYY-MM-DD date string (used for user input).

    Raises:
        ValidationError: If date format is invalid
    """
    if not _DATE_RE.match(date_str):
        raise ValidationError(f"Invalid date format: {date_str}. Expected YYYY-MM-DD")

    try:
        datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError as e:
        raise ValidationError(f"Invalid date: {date_str}") from e

    return date_str


def validate_non_negative(value: int | float, name: str) -> int | float:
    """
    Validate that a value is non-negative.

    Raises:
        ValidationError: If value is negative
    """
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return value


def normalize_set_type(raw: Any) -> str:
    """
    Canonical set type.

    Export shorthands are folded: "w" and anything mentioning "warmup"
    (e.g. "warm-up set") become "warmup"; empty values become "normal".
    """
    text = str(raw or "").strip().lower()
    if not text:
        return "normal"
    if text == "w" or "warmup" in text.replace("-", "").replace(" ", ""):
        return "warmup"
    return text


def _number(data: dict[str, Any], key: str, cast: type, default: Any) -> Any:
    raw = data.get(key)
    if raw is None:
        return default
    if isinstance(raw, bool):
        raise ValidationError(f"{key} must be numeric, got {raw!r}")
    try:
        value = float(raw) if cast is int else cast(raw)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{key} must be numeric, got {raw!r}") from e
    if cast is int:
        if not value.is_integer():
            raise ValidationError(f"{key} must be a whole number, got {raw!r}")
        return int(value)
    return value


def _flag(data: dict[str, Any], key: str) -> bool:
    raw = data.get(key)
    if raw is None:
        return False
    if not isinstance(raw, bool):
        raise ValidationError(f"{key} must be true or false, got {raw!r}")
    return raw


def dict_to_workout_set(data: dict[str, Any]) -> WorkoutSet:
    """
    Convert dict to WorkoutSet.

    Args:
        data: Dict representation

    Returns:
        WorkoutSet instance

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Expected a JSON object, got {type(data).__name__}")

    exercise = data.get("exercise", data.get("exercise_title", ""))
    if exercise is None:
        exercise = ""
    if not isinstance(exercise, str):
        raise ValidationError(f"exercise must be a string, got {exercise!r}")

    set_type = normalize_set_type(data.get("set_type"))
    weight_kg = validate_non_negative(_number(data, "weight_kg", float, 0.0), "weight_kg")
    reps = validate_non_negative(_number(data, "reps", int, 0), "reps")

    return WorkoutSet(
        exercise_name=exercise.strip(),
        date=parse_set_date(data.get("date")),
        is_warmup=_flag(data, "is_warmup"),
        set_type=set_type,
        weight_kg=weight_kg,
        reps=reps,
    )


def workout_set_to_dict(workout_set: WorkoutSet) -> dict[str, Any]:
    """
    Convert WorkoutSet to JSON-compatible dict.

    Compact format: ``is_warmup`` is only written when True.
    """
    d = workout_set.date
    result: dict[str, Any] = {
        "exercise": workout_set.exercise_name,
        "date": d.isoformat() if d is not None else None,
        "set_type": workout_set.set_type,
        "weight_kg": workout_set.weight_kg,
        "reps": workout_set.reps,
    }
    if workout_set.is_warmup:
        result["is_warmup"] = True
    return result


def set_to_json_line(workout_set: WorkoutSet) -> str:
    """Serialize a set to a single JSONL line (no trailing newline)."""
    return json.dumps(workout_set_to_dict(workout_set), separators=(",", ":"))


def json_line_to_set(line: str) -> WorkoutSet:
    """
    Parse a JSONL line to WorkoutSet.

    Raises:
        ValidationError: If JSON is invalid or data doesn't validate
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}") from e

    return dict_to_workout_set(data)


# =============================================================================
# Volume results -> JSON (CLI --json output)
# =============================================================================


def rolling_volume_to_dict(rv: RollingWeeklyVolume) -> dict[str, Any]:
    return {
        "date": day_key(rv.date),
        "muscles": dict(rv.muscles),
        "total_sets": rv.total_sets,
        "is_in_break": rv.is_in_break,
    }


def series_to_dict(series: VolumeTimeSeries) -> dict[str, Any]:
    return {"keys": list(series.keys), "data": [dict(row) for row in series.data]}


def composition_to_dict(composition: MuscleComposition) -> dict[str, Any]:
    return {
        "label": composition.label,
        "entries": [{"muscle": k, "value": v} for k, v in composition.entries],
    }
