"""Volume engine: contributions, daily totals, breaks, rolling windows and periods."""
