"""
Data models for the weather digest engine.

Contains DTOs for raw samples, day summaries, verdicts and archive records.
"""

from .samples import HourlyRecord, TimedValue, DayBucket
from .verdicts import (
    PlantingStatus,
    WateringStatus,
    EnergyLevel,
    UVLevel,
    PressureTendency,
    PollenLevel,
    CloudCondition,
    Transparency,
    MoonPhaseName,
    MilkyWayChance,
    PlantingVerdict,
    WateringVerdict,
    EnergyVerdict,
)
from .summaries import (
    TimeWindow,
    GardeningDaySummary,
    GardeningDay,
    GardeningOutlook,
    BioDaySummary,
    BioDay,
    BioOutlook,
    WindowStats,
    NightStats,
    PhotographyDay,
    PhotographyOutlook,
    LocalForecastDay,
    LocalForecast,
)
from .history import HistoricalArchiveEntry, RecordResult, MarineConditions, SpaceWeather

__all__ = [
    "HourlyRecord",
    "TimedValue",
    "DayBucket",
    "PlantingStatus",
    "WateringStatus",
    "EnergyLevel",
    "UVLevel",
    "PressureTendency",
    "PollenLevel",
    "CloudCondition",
    "Transparency",
    "MoonPhaseName",
    "MilkyWayChance",
    "PlantingVerdict",
    "WateringVerdict",
    "EnergyVerdict",
    "TimeWindow",
    "GardeningDaySummary",
    "GardeningDay",
    "GardeningOutlook",
    "BioDaySummary",
    "BioDay",
    "BioOutlook",
    "WindowStats",
    "NightStats",
    "PhotographyDay",
    "PhotographyOutlook",
    "LocalForecastDay",
    "LocalForecast",
    "HistoricalArchiveEntry",
    "RecordResult",
    "MarineConditions",
    "SpaceWeather",
]
