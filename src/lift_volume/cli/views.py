"""
Rich-based views for CLI output.

Formats volume series, rolling snapshots and name resolutions as tables.
"""

from rich.console import Console
from rich.table import Table

from ..catalog.base import MuscleCatalogEntry
from ..catalog.resolver import NameResolution
from ..core.ascii_plot import create_composition_chart, create_series_chart
from ..core.models import MuscleComposition, RollingWeeklyVolume, VolumeTimeSeries

console = Console()

# Columns beyond this are summarised as "+N more" so tables stay readable
MAX_TABLE_COLUMNS = 8


def format_series_table(series: VolumeTimeSeries, title: str) -> Table:
    """
    Create a Rich table for a volume time series.

    Args:
        series: Series to display
        title: Table title

    Returns:
        Rich Table object
    """
    table = Table(title=title)

    keys = series.keys[:MAX_TABLE_COLUMNS]
    table.add_column("Date", style="cyan")
    for key in keys:
        table.add_column(key, justify="right")
    table.add_column("Total", justify="right", style="bold")

    for row in series.data:
        cells = [str(row["date_formatted"])]
        for key in keys:
            value = float(row.get(key, 0.0))
            cells.append(f"{value:.1f}" if value > 0 else "-")
        total = sum(float(row.get(k, 0.0)) for k in series.keys)
        cells.append(f"{total:.1f}")
        table.add_row(*cells)

    if len(series.keys) > MAX_TABLE_COLUMNS:
        table.caption = f"+{len(series.keys) - MAX_TABLE_COLUMNS} more muscles (use --json)"

    return table


def print_series(series: VolumeTimeSeries, title: str, chart: bool = False) -> None:
    """Print a volume series as a table, or as a bar chart of row totals."""
    if not series.data:
        console.print("[yellow]No volume to show yet.[/yellow]")
        return

    if chart:
        console.print(create_series_chart(series))
        return

    console.print(format_series_table(series, title))


def format_latest_table(latest: RollingWeeklyVolume) -> Table:
    """Table of one rolling snapshot, muscles sorted by sets (descending)."""
    table = Table(title=f"Rolling 7-day volume as of {latest.date_key}")
    table.add_column("Muscle", style="magenta")
    table.add_column("Sets", justify="right", style="bold")

    for muscle, sets in sorted(latest.muscles.items(), key=lambda kv: (-kv[1], kv[0])):
        table.add_row(muscle, f"{sets:.1f}")

    table.add_row("[dim]Total[/dim]", f"[dim]{latest.total_sets:.1f}[/dim]")
    return table


def print_latest(latest: RollingWeeklyVolume) -> None:
    console.print(format_latest_table(latest))
    if latest.is_in_break:
        print_warning("Latest training day follows a break; volume is partial.")


def print_composition(composition: MuscleComposition) -> None:
    console.print(create_composition_chart(composition))


def print_resolution(
    raw_name: str,
    resolution: NameResolution,
    entry: MuscleCatalogEntry | None,
) -> None:
    """
    Print how a free-text exercise name maps onto the catalog.

    Args:
        raw_name: Name as typed or logged
        resolution: Resolver outcome
        entry: Matched catalog entry (None when unmatched)
    """
    if entry is None:
        print_warning(f"'{raw_name}' does not match any catalog exercise.")
        return

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="dim")
    table.add_column("Value")
    table.add_row("Input", raw_name)
    table.add_row("Matched", f"[cyan]{entry.name}[/cyan]")
    table.add_row("Method", resolution.method)
    table.add_row("Primary", f"{entry.primary_muscle} ({entry.primary.kind})")
    secondary = ", ".join(s for s in entry.secondary_muscles if s and s.lower() != "none")
    table.add_row("Secondary", secondary or "-")
    table.add_row("Equipment", entry.equipment or "-")
    console.print(table)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")
