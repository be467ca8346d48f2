"""lift-volume: rolling weekly training volume per muscle."""

__version__ = "0.1.0"
