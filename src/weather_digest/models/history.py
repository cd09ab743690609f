"""
Historical archive and passthrough data models.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HistoricalArchiveEntry:
    """One day of the multi-decade daily archive."""

    year: int
    month: int
    day: int
    temp_max: Optional[float]
    temp_min: Optional[float]


@dataclass(frozen=True)
class RecordResult:
    """Temperature records for one calendar day across the archive."""

    status: str  # "ok", "no_data" or "insufficient_data"
    month: int
    day: int
    record_max: Optional[HistoricalArchiveEntry] = None
    record_min: Optional[HistoricalArchiveEntry] = None
    sample_count: int = 0

    @property
    def available(self) -> bool:
        return self.status == "ok"


@dataclass(frozen=True)
class MarineConditions:
    wave_height: Optional[float] = None  # m
    wave_direction: Optional[float] = None  # degrees
    wave_direction_compass: Optional[str] = None
    sea_surface_temperature: Optional[float] = None  # °C


@dataclass(frozen=True)
class SpaceWeather:
    kp_index: Optional[float] = None
    observed_at: Optional[str] = None
    aurora_possible: bool = False
