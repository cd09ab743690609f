"""
Data processing module for the weather digest engine.

Provides normalization, day bucketing, statistical and directional
reducers, time-of-day windows and the historical record filter.
"""

from .reducers import average, minimum, maximum, total, finite_values, first_finite, is_finite_number
from .normalizer import SeriesNormalizer, pick_first, forecast_blocks, daily_keys
from .bucketer import DayBucketer
from .directional import circular_mean, circular_spread, degree_to_compass
from .windows import WindowExtractor
from .history import HistoricalRecordFilter

__all__ = [
    "average",
    "minimum",
    "maximum",
    "total",
    "finite_values",
    "first_finite",
    "is_finite_number",
    "SeriesNormalizer",
    "pick_first",
    "forecast_blocks",
    "daily_keys",
    "DayBucketer",
    "circular_mean",
    "circular_spread",
    "degree_to_compass",
    "WindowExtractor",
    "HistoricalRecordFilter",
]
