"""
JSONL-based storage for logged workout sets.

Handles reading, appending and clearing the workout file.
"""

import json
from pathlib import Path

from ..core.models import WorkoutSet
from .serializers import ValidationError, dict_to_workout_set, set_to_json_line


class WorkoutStore:
    """
    Manages workout sets stored in JSONL format.

    The file contains one JSON object per line, one line per performed set.
    Lines are kept in the order they were logged; the volume engine does
    not depend on that order.
    """

    def __init__(self, workouts_path: str | Path):
        """
        Initialize the workout store.

        Args:
            workouts_path: Path to the JSONL workouts file
        """
        self.workouts_path = Path(workouts_path)

    def exists(self) -> bool:
        """Check if the workouts file exists."""
        return self.workouts_path.exists()

    def init(self) -> None:
        """
        Initialize empty workouts file if it doesn't exist.

        Creates parent directories if needed.
        """
        self.workouts_path.parent.mkdir(parents=True, exist_ok=True)

        if not self.workouts_path.exists():
            self.workouts_path.touch()

    def load_sets(self) -> list[WorkoutSet]:
        """
        Load all sets from the workouts file.

        Returns:
            List of WorkoutSet in file order

        Raises:
            FileNotFoundError: If workouts file doesn't exist
            ValidationError: If a line is not valid JSON or fails validation
        """
        if not self.workouts_path.exists():
            raise FileNotFoundError(
                f"Workouts file not found: {self.workouts_path}. Log a set first."
            )

        sets: list[WorkoutSet] = []

        with open(self.workouts_path, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue

                try:
                    sets.append(dict_to_workout_set(json.loads(line)))
                except (json.JSONDecodeError, ValidationError) as e:
                    raise ValidationError(
                        f"Error parsing line {line_num} in {self.workouts_path}: {e}"
                    ) from e

        return sets

    def append_set(self, workout_set: WorkoutSet) -> None:
        """
        Append a set to the workouts file, creating it if needed.

        Args:
            workout_set: Set to append
        """
        self.init()
        with open(self.workouts_path, "a", encoding="utf-8") as f:
            f.write(set_to_json_line(workout_set) + "\n")

    def clear(self) -> None:
        """Remove all sets (keeps the file)."""
        if self.workouts_path.exists():
            self.workouts_path.write_text("")


def get_default_workouts_path() -> Path:
    """Default workouts file: ``~/.lift-volume/workouts.jsonl``."""
    return Path.home() / ".lift-volume" / "workouts.jsonl"
