"""
Per-day summary models.

Every statistic is either a finite number or None, never NaN.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .verdicts import (
    CloudCondition,
    EnergyVerdict,
    MilkyWayChance,
    MoonPhaseName,
    PlantingVerdict,
    PollenLevel,
    PressureTendency,
    Transparency,
    UVLevel,
    WateringVerdict,
)


@dataclass(frozen=True)
class TimeWindow:
    """Minute-of-day window; either endpoint may be unknown."""

    start: Optional[int]
    end: Optional[int]

    @property
    def is_bounded(self) -> bool:
        return self.start is not None and self.end is not None


# Gardening

@dataclass(frozen=True)
class GardeningDaySummary:
    """Soil and precipitation statistics for one day."""

    date: str
    soil_temp_min: Optional[float] = None
    soil_temp_max: Optional[float] = None
    soil_temp_avg: Optional[float] = None
    soil_moist_min: Optional[float] = None
    soil_moist_max: Optional[float] = None
    soil_moist_avg: Optional[float] = None
    air_temp_min: Optional[float] = None
    air_temp_max: Optional[float] = None
    precip_sum: Optional[float] = None  # mm
    precip_probability: Optional[float] = None  # %


@dataclass(frozen=True)
class GardeningDay:
    summary: GardeningDaySummary
    planting: PlantingVerdict
    watering: WateringVerdict
    cover_alert: bool


@dataclass(frozen=True)
class GardeningOutlook:
    """Week of gardening verdicts plus highlights."""

    available: bool
    timezone: str
    days: Tuple[GardeningDay, ...] = ()
    ideal_days: Tuple[str, ...] = ()
    ok_days: Tuple[str, ...] = ()
    watering_days: Tuple[str, ...] = ()
    cover_days: Tuple[str, ...] = ()
    warmest_soil_day: Optional[str] = None
    wettest_day: Optional[str] = None


# Biometeorology

@dataclass(frozen=True)
class BioDaySummary:
    """UV, pressure, humidity and apparent temperature for one day."""

    date: str
    uv_index: Optional[float] = None
    uv_index_clear_sky: Optional[float] = None
    apparent_max: Optional[float] = None
    apparent_min: Optional[float] = None
    temp_max: Optional[float] = None
    temp_min: Optional[float] = None
    pressure_avg: Optional[float] = None  # hPa
    pressure_min: Optional[float] = None
    pressure_max: Optional[float] = None
    humidity_avg: Optional[float] = None  # %
    humidity_min: Optional[float] = None
    humidity_max: Optional[float] = None
    apparent_avg: Optional[float] = None
    pressure_trend: Optional[float] = None  # hPa vs. previous day


@dataclass(frozen=True)
class BioDay:
    summary: BioDaySummary
    energy: EnergyVerdict
    uv_level: UVLevel
    pressure_tendency: PressureTendency


@dataclass(frozen=True)
class BioOutlook:
    available: bool
    timezone: str
    days: Tuple[BioDay, ...] = ()
    pollen: Dict[str, PollenLevel] = field(default_factory=dict)


# Photography

@dataclass(frozen=True)
class WindowStats:
    """Sky statistics inside a golden-hour window."""

    window: TimeWindow
    cloud: Optional[float] = None  # %
    visibility: Optional[float] = None  # m
    condition: CloudCondition = CloudCondition.UNKNOWN


@dataclass(frozen=True)
class NightStats:
    """Sky statistics for 22:00 of the day through 02:00 of the next."""

    cloud: Optional[float] = None
    visibility: Optional[float] = None
    transparency: Optional[float] = None  # aerosol optical depth
    condition: CloudCondition = CloudCondition.UNKNOWN
    transparency_class: Transparency = Transparency.UNKNOWN


@dataclass(frozen=True)
class PhotographyDay:
    date: str
    source: str  # "forecast" or "astronomy"
    sunrise: Optional[str]
    sunset: Optional[str]
    moonrise: Optional[str]
    moonset: Optional[str]
    moon_phase: Optional[float]  # 0 new, 0.5 full
    morning: WindowStats
    evening: WindowStats
    night: NightStats
    moon_phase_name: MoonPhaseName = MoonPhaseName.UNKNOWN
    moon_illumination: Optional[float] = None  # 0..1
    milky_way: MilkyWayChance = MilkyWayChance.UNKNOWN


@dataclass(frozen=True)
class PhotographyOutlook:
    available: bool
    timezone: str
    days: Tuple[PhotographyDay, ...] = ()


# Local forecast

@dataclass(frozen=True)
class LocalForecastDay:
    date: str
    temp_max: Optional[float] = None
    temp_min: Optional[float] = None
    temp_max_int: Optional[int] = None
    temp_min_int: Optional[int] = None
    wind_direction_deg: Optional[float] = None
    wind_direction: Optional[str] = None


@dataclass(frozen=True)
class LocalForecast:
    available: bool
    days: Tuple[LocalForecastDay, ...] = ()
