"""
Classification verdict models.

Each rule set reports a closed enumeration plus a human-readable reason.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PlantingStatus(str, Enum):
    UNKNOWN = "unknown"
    TOO_COLD = "too_cold"
    COLD = "cold"
    TOO_HOT = "too_hot"
    TOO_DRY = "too_dry"
    TOO_WET = "too_wet"
    RAINY = "rainy"
    IDEAL = "ideal"
    OK = "ok"
    WATCH = "watch"


class WateringStatus(str, Enum):
    UNKNOWN = "unknown"
    NEEDS = "needs"
    LIGHT = "light"
    SKIP = "skip"
    MONITOR = "monitor"


class EnergyLevel(str, Enum):
    UNKNOWN = "unknown"
    ENERGETIC = "energetic"
    STEADY = "steady"
    DROWSY = "drowsy"
    EXHAUSTED = "exhausted"


class UVLevel(str, Enum):
    UNKNOWN = "unknown"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class PressureTendency(str, Enum):
    UNKNOWN = "unknown"
    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"


class PollenLevel(str, Enum):
    UNKNOWN = "unknown"
    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class CloudCondition(str, Enum):
    UNKNOWN = "unknown"
    CLEAR = "clear"
    HAZY = "hazy"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    OVERCAST = "overcast"


class Transparency(str, Enum):
    UNKNOWN = "unknown"
    CRYSTAL = "crystal"
    SLIGHT_HAZE = "slight_haze"
    HAZE = "haze"
    DENSE_HAZE = "dense_haze"


class MoonPhaseName(str, Enum):
    UNKNOWN = "unknown"
    NEW_MOON = "new_moon"
    WAXING_CRESCENT = "waxing_crescent"
    FIRST_QUARTER = "first_quarter"
    WAXING_GIBBOUS = "waxing_gibbous"
    FULL_MOON = "full_moon"
    WANING_GIBBOUS = "waning_gibbous"
    LAST_QUARTER = "last_quarter"
    WANING_CRESCENT = "waning_crescent"


class MilkyWayChance(str, Enum):
    UNKNOWN = "unknown"
    EXCELLENT = "excellent"
    POSSIBLE = "possible"
    MOONLIT = "moonlit"


@dataclass(frozen=True)
class PlantingVerdict:
    """Planting suitability for one day."""

    status: PlantingStatus
    reason: str


@dataclass(frozen=True)
class WateringVerdict:
    """Watering recommendation for one day."""

    status: WateringStatus
    note: str


@dataclass(frozen=True)
class EnergyVerdict:
    """Biometeorological energy score for one day."""

    level: EnergyLevel
    score: Optional[float]  # 0..100
    gauge: Optional[int]  # 0..10
    reason: str
