"""Volume commands: volume, latest, composition, resolve."""

import json
from typing import Annotated, Optional

import typer

from ...core.config import GROUP_OTHER
from ...core.models import GRANULARITIES, VOLUME_PERIODS, WorkoutSet
from ...core.timeseries import (
    bucket_series_to_months,
    bucket_series_to_weeks,
    build_calendar_series,
    drop_keys,
)
from ...core.volume import (
    get_latest_composition,
    get_muscle_volume_series,
    latest_rolling_volume,
    run_pipeline,
)
from ...catalog.registry import ExerciseCatalog
from ...io.serializers import (
    ValidationError,
    composition_to_dict,
    rolling_volume_to_dict,
    series_to_dict,
)
from .. import views
from ..app import (
    CatalogPathOption,
    GranularityOption,
    JsonOption,
    WorkoutsPathOption,
    app,
    get_store,
    load_catalog,
)

_BUCKETS = ("week", "month")

_TITLES = {
    "daily": "Daily sets per muscle",
    "weekly": "Rolling weekly sets per muscle",
    "monthly": "Average weekly sets per muscle, by month",
    "yearly": "Average weekly sets per muscle, by year",
}


def _load_sets(workouts_path) -> list[WorkoutSet]:
    """Load logged sets; a missing file is an empty history."""
    store = get_store(workouts_path)
    if not store.exists():
        return []
    try:
        return store.load_sets()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)


def _check_granularity(granularity: str) -> None:
    if granularity not in GRANULARITIES:
        views.print_error(
            f"Invalid granularity '{granularity}'. Choose from: {', '.join(GRANULARITIES)}"
        )
        raise typer.Exit(1)


def _warn_unresolved(sets: list[WorkoutSet], catalog: ExerciseCatalog) -> None:
    unresolved = sorted(
        {s.exercise_name for s in sets if s.exercise_name and catalog.resolve(s.exercise_name) is None}
    )
    if unresolved:
        shown = ", ".join(unresolved[:5])
        more = f" (+{len(unresolved) - 5} more)" if len(unresolved) > 5 else ""
        views.print_warning(f"Not in catalog, ignored: {shown}{more}")


@app.command()
def volume(
    workouts_path: WorkoutsPathOption = None,
    catalog_path: CatalogPathOption = None,
    period: Annotated[
        str,
        typer.Option("--period", "-t", help="weekly (rolling, default), monthly, yearly or daily"),
    ] = "weekly",
    granularity: GranularityOption = "group",
    bucket: Annotated[
        Optional[str],
        typer.Option("--bucket", "-b", help="Thin the weekly series to one row per 'week' or 'month'"),
    ] = None,
    calendar: Annotated[
        bool,
        typer.Option("--calendar", help="Plain calendar-bucket totals instead of rolling volume"),
    ] = False,
    drop_other: Annotated[
        bool,
        typer.Option("--drop-other", help="Hide the 'Other' column (unrecognised muscles)"),
    ] = False,
    last: Annotated[
        int,
        typer.Option("--last", "-n", help="Show only the most recent N rows (0 = all)"),
    ] = 0,
    chart: Annotated[
        bool,
        typer.Option("--chart", help="Show an ASCII bar chart of row totals"),
    ] = False,
    json_out: JsonOption = False,
) -> None:
    """
    Show muscle volume over time.

    Weekly rows are rolling 7-day sums; monthly/yearly rows are the average
    weekly volume within each month/year.  Days that follow a break of more
    than a week are left out.
    """
    if period not in VOLUME_PERIODS:
        views.print_error(f"Invalid period '{period}'. Choose from: {', '.join(VOLUME_PERIODS)}")
        raise typer.Exit(1)
    _check_granularity(granularity)
    if bucket is not None and bucket not in _BUCKETS:
        views.print_error(f"Invalid bucket '{bucket}'. Choose from: {', '.join(_BUCKETS)}")
        raise typer.Exit(1)
    if bucket is not None and (period != "weekly" or calendar):
        views.print_error("--bucket only applies to the rolling weekly series.")
        raise typer.Exit(1)

    catalog = load_catalog(catalog_path)
    sets = _load_sets(workouts_path)

    if calendar:
        series = build_calendar_series(sets, catalog, period, granularity)
        if drop_other:
            series = drop_keys(series, (GROUP_OTHER,))
        title = f"Total sets per muscle ({period})"
    else:
        series = get_muscle_volume_series(sets, catalog, period, granularity, drop_other=drop_other)
        title = _TITLES[period]
        if bucket == "week":
            series = bucket_series_to_weeks(series)
        elif bucket == "month":
            series = bucket_series_to_months(series)

    if last > 0:
        series.data = series.data[-last:]

    if json_out:
        print(json.dumps(series_to_dict(series), indent=2))
        return

    _warn_unresolved(sets, catalog)
    views.print_series(series, title, chart=chart)


@app.command()
def latest(
    workouts_path: WorkoutsPathOption = None,
    catalog_path: CatalogPathOption = None,
    granularity: GranularityOption = "group",
    chart: Annotated[
        bool,
        typer.Option("--chart", help="Show the latest week as an ASCII bar chart"),
    ] = False,
    json_out: JsonOption = False,
) -> None:
    """
    Show the current rolling 7-day volume per muscle.
    """
    _check_granularity(granularity)

    catalog = load_catalog(catalog_path)
    sets = _load_sets(workouts_path)

    pipeline = run_pipeline(sets, catalog, granularity)
    snapshot = latest_rolling_volume(pipeline.rolling)

    if json_out:
        print(json.dumps(
            {"latest": rolling_volume_to_dict(snapshot) if snapshot is not None else None},
            indent=2,
        ))
        return

    if snapshot is None:
        views.print_info("No training history yet. Log sets with 'log-set'.")
        return

    if chart:
        views.print_composition(get_latest_composition(sets, catalog, granularity))
        return

    views.print_latest(snapshot)


@app.command()
def composition(
    workouts_path: WorkoutsPathOption = None,
    catalog_path: CatalogPathOption = None,
    granularity: Annotated[
        str,
        typer.Option("--granularity", "-g", help="Muscle keys: muscle (default), group, body_map"),
    ] = "muscle",
    json_out: JsonOption = False,
) -> None:
    """
    Show latest rolling volume per muscle, largest first.
    """
    _check_granularity(granularity)

    catalog = load_catalog(catalog_path)
    result = get_latest_composition(_load_sets(workouts_path), catalog, granularity)

    if json_out:
        print(json.dumps(composition_to_dict(result), indent=2))
        return

    views.print_composition(result)


@app.command()
def resolve(
    names: Annotated[list[str], typer.Argument(help="Exercise name(s) to look up")],
    catalog_path: CatalogPathOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show how exercise names map onto the catalog.
    """
    catalog = load_catalog(catalog_path)

    results = []
    for raw in names:
        resolution = catalog.match(raw)
        entry = catalog.get(resolution.name) if resolution.matched else None
        results.append((raw, resolution, entry))

    if json_out:
        print(json.dumps(
            [
                {
                    "input": raw,
                    "matched": entry.name if entry is not None else None,
                    "method": resolution.method,
                    "primary_muscle": entry.primary_muscle if entry is not None else None,
                    "secondary_muscles": list(entry.secondary_muscles) if entry is not None else [],
                }
                for raw, resolution, entry in results
            ],
            indent=2,
        ))
        return

    for raw, resolution, entry in results:
        views.print_resolution(raw, resolution, entry)
