"""Shared Typer app object, shared option types, and store/catalog utilities."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from ..catalog.registry import ExerciseCatalog, get_catalog
from ..io.workout_store import WorkoutStore, get_default_workouts_path

# Shared --workouts-path option type used across all commands
WorkoutsPathOption = Annotated[
    Optional[Path],
    typer.Option("--workouts-path", "-p", help="Path to workouts JSONL file"),
]

# Shared --catalog-path option type for commands that resolve exercises
CatalogPathOption = Annotated[
    Optional[Path],
    typer.Option("--catalog-path", "-c", help="Exercise catalog YAML (default: bundled)"),
]

GranularityOption = Annotated[
    str,
    typer.Option("--granularity", "-g", help="Muscle keys: group (default), muscle, body_map"),
]

JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

app = typer.Typer(
    name="lift-volume",
    help="Rolling, break-aware weekly training volume per muscle.",
    no_args_is_help=True,
)


def get_store(workouts_path: Path | None) -> WorkoutStore:
    """Get workout store from path or default location."""
    if workouts_path is None:
        workouts_path = get_default_workouts_path()
    return WorkoutStore(workouts_path)


def load_catalog(catalog_path: Path | None) -> ExerciseCatalog:
    """Load the exercise catalog, turning load failures into exit code 1."""
    from . import views

    if catalog_path is not None and not catalog_path.is_file():
        views.print_error(f"Catalog file not found: {catalog_path}")
        raise typer.Exit(1)

    try:
        return get_catalog(catalog_path)
    except RuntimeError as e:
        views.print_error(str(e))
        raise typer.Exit(1)
