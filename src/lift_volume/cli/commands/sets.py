"""Set logging commands: log-set, show-sets."""

import json
from datetime import datetime
from typing import Annotated, Optional

import typer
from rich.table import Table

from ...catalog.registry import get_catalog
from ...core.models import WorkoutSet
from ...io.serializers import (
    ValidationError,
    normalize_set_type,
    validate_date,
    validate_non_negative,
    workout_set_to_dict,
)
from .. import views
from ..app import CatalogPathOption, JsonOption, WorkoutsPathOption, app, get_store


@app.command("log-set")
def log_set(
    exercise: Annotated[str, typer.Argument(help="Exercise name, e.g. 'Bench Press (Barbell)'")],
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="Set date (YYYY-MM-DD, default: today)"),
    ] = None,
    reps: Annotated[
        int,
        typer.Option("--reps", "-r", help="Repetitions performed"),
    ] = 0,
    weight_kg: Annotated[
        float,
        typer.Option("--weight-kg", "-w", help="Load in kg"),
    ] = 0.0,
    set_type: Annotated[
        str,
        typer.Option("--set-type", "-t", help="normal | warmup (w) | dropset | failure"),
    ] = "normal",
    count: Annotated[
        int,
        typer.Option("--count", "-n", help="Log this many identical sets"),
    ] = 1,
    workouts_path: WorkoutsPathOption = None,
    catalog_path: CatalogPathOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Log one or more performed sets.

      lift-volume log-set "Bench Press (Barbell)" --date 2024-03-05 -r 8 -w 60 -n 3
    """
    if date is None:
        date = datetime.now().strftime("%Y-%m-%d")

    try:
        validate_date(date)
        validate_non_negative(reps, "reps")
        validate_non_negative(weight_kg, "weight_kg")
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if count < 1:
        views.print_error("--count must be at least 1")
        raise typer.Exit(1)

    workout_set = WorkoutSet(
        exercise_name=exercise.strip(),
        date=datetime.strptime(date, "%Y-%m-%d").date(),
        set_type=normalize_set_type(set_type),
        weight_kg=weight_kg,
        reps=reps,
    )

    store = get_store(workouts_path)
    for _ in range(count):
        store.append_set(workout_set)

    if json_out:
        print(json.dumps({"logged": count, "set": workout_set_to_dict(workout_set)}, indent=2))
        return

    views.print_success(f"Logged {count} × {workout_set.exercise_name} on {date}")

    try:
        catalog = get_catalog(catalog_path)
    except RuntimeError:
        return

    match = catalog.match(workout_set.exercise_name)
    if not match.matched:
        views.print_warning(
            f"'{workout_set.exercise_name}' is not in the exercise catalog; "
            "its sets will not count toward muscle volume."
        )
    elif match.name != workout_set.exercise_name:
        views.print_info(f"Counted as '{match.name}' ({match.method} match).")


@app.command("show-sets")
def show_sets(
    workouts_path: WorkoutsPathOption = None,
    limit: Annotated[
        int,
        typer.Option("--limit", "-l", help="Show only the last N sets (0 = all)"),
    ] = 20,
    json_out: JsonOption = False,
) -> None:
    """
    Show logged sets.
    """
    store = get_store(workouts_path)

    if not store.exists():
        views.print_info("No sets logged yet.")
        return

    try:
        sets = store.load_sets()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if limit > 0:
        sets = sets[-limit:]

    if json_out:
        print(json.dumps([workout_set_to_dict(s) for s in sets], indent=2))
        return

    table = Table(title="Logged sets")
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Date", style="cyan")
    table.add_column("Exercise")
    table.add_column("Type", style="magenta")
    table.add_column("Kg", justify="right")
    table.add_column("Reps", justify="right", style="bold")

    for i, s in enumerate(sets, 1):
        table.add_row(
            str(i),
            s.date.isoformat()[:10] if s.date is not None else "-",
            s.exercise_name,
            s.set_type,
            f"{s.weight_kg:.1f}" if s.weight_kg else "-",
            str(s.reps) if s.reps else "-",
        )

    views.console.print(table)
