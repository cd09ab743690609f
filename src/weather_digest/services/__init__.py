"""
Service layer for the weather digest engine.

Provides data acquisition and one aggregation service per digest feature.
"""

from .acquisition import DataAcquisition
from .gardening import GardeningService
from .biometeo import BioWeatherService, pressure_trends
from .photography import PhotographyService
from .local_forecast import LocalForecastService
from .history import HistoricalService
from .passthrough import MarineService, SpaceWeatherService

__all__ = [
    "DataAcquisition",
    "GardeningService",
    "BioWeatherService",
    "pressure_trends",
    "PhotographyService",
    "LocalForecastService",
    "HistoricalService",
    "MarineService",
    "SpaceWeatherService",
]
