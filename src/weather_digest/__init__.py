"""
Weather Digest

This package aggregates public weather forecasts into daily gardening,
wellbeing, photography and local forecast outlooks.
"""

__version__ = "0.1.0"
__description__ = "Weather temporal aggregation and derived-indicator engine"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "WeatherDigestApp":
        from .main import WeatherDigestApp
        return WeatherDigestApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "WeatherDigestApp",
]
