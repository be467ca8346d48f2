"""
ASCII charts for muscle volume.

Creates terminal-friendly bar charts of rolling weekly volume.
"""

from .models import MuscleComposition, RollingWeeklyVolume, VolumeTimeSeries


def create_simple_bar_chart(
    labels: list[str],
    values: list[float],
    width: int = 40,
    title: str = "",
) -> str:
    """
    Create a simple horizontal bar chart.

    Args:
        labels: Labels for each bar
        values: Values for each bar
        width: Maximum bar width
        title: Chart title

    Returns:
        ASCII bar chart string
    """
    if not values:
        return "No data to display."

    max_val = max(values)
    max_label_len = max(len(label) for label in labels) if labels else 0

    lines = []

    if title:
        lines.append(title)
        lines.append("─" * (max_label_len + width + 5))

    for label, value in zip(labels, values):
        bar_len = int((value / max_val) * width) if max_val > 0 else 0
        bar = "█" * bar_len
        lines.append(f"{label:>{max_label_len}} │{bar} {value:.1f}")

    return "\n".join(lines)


def create_composition_chart(composition: MuscleComposition, width: int = 40) -> str:
    """Bar per muscle of the latest rolling week, largest first."""
    if not composition.entries:
        return "No training history."

    labels = [k for k, _ in composition.entries]
    values = [v for _, v in composition.entries]
    title = f"Sets per muscle ({composition.label})"
    return create_simple_bar_chart(labels, values, width=width, title=title)


def create_latest_volume_chart(latest: RollingWeeklyVolume | None, width: int = 40) -> str:
    """Chart of one rolling snapshot, muscles in descending order."""
    if latest is None:
        return "No training history."

    ordered = sorted(latest.muscles.items(), key=lambda kv: (-kv[1], kv[0]))
    title = f"Weekly volume as of {latest.date_key} ({latest.total_sets:.1f} sets)"
    return create_simple_bar_chart(
        [k for k, _ in ordered],
        [v for _, v in ordered],
        width=width,
        title=title,
    )


def create_series_chart(
    series: VolumeTimeSeries,
    key: str | None = None,
    rows: int = 12,
    width: int = 40,
) -> str:
    """
    Chart the most recent rows of a series.

    Args:
        series: Volume time series
        key: Muscle column to plot; None plots the row total
        rows: Number of most recent rows to show
        width: Maximum bar width

    Returns:
        ASCII chart string
    """
    if not series.data:
        return "No training history."

    tail = series.data[-rows:]
    labels = [str(row["date_formatted"]) for row in tail]
    if key is None:
        values = [float(sum(float(row.get(k, 0.0)) for k in series.keys)) for row in tail]
        title = "Total sets"
    else:
        values = [float(row.get(key, 0.0)) for row in tail]
        title = f"{key} sets"

    return create_simple_bar_chart(labels, values, width=width, title=title)
