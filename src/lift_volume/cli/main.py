"""
CLI entry point using Typer.

Provides commands for muscle volume tracking:
- log-set: Log performed sets
- show-sets: Display logged sets
- volume: Rolling weekly / monthly / yearly / daily volume per muscle
- latest: Current rolling 7-day volume
- composition: Latest volume per muscle, largest first
- resolve: Show how exercise names map onto the catalog
"""

from .app import app

# Import command modules so their @app.command() decorators register
from .commands import sets, volume  # noqa: F401

__all__ = ["app"]


if __name__ == "__main__":
    app()
