"""
Biometeorological rules.

Energy score from apparent temperature, humidity, pressure and its daily
trend, plus UV, pressure tendency and pollen levels.
"""

import logging
import math
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Tuple

from ..core import constants
from ..models import (
    EnergyLevel,
    EnergyVerdict,
    PollenLevel,
    PressureTendency,
    UVLevel,
)


@dataclass(frozen=True)
class EnergyCoefficients:
    """Tunable weights of the energy score."""

    baseline: float = constants.ENERGY_BASELINE
    comfort_temp: float = constants.ENERGY_COMFORT_TEMP
    temp_weight: float = constants.ENERGY_TEMP_WEIGHT
    humidity_high: float = constants.ENERGY_HUMIDITY_HIGH
    humidity_low: float = constants.ENERGY_HUMIDITY_LOW
    humidity_high_weight: float = constants.ENERGY_HUMIDITY_HIGH_WEIGHT
    humidity_low_weight: float = constants.ENERGY_HUMIDITY_LOW_WEIGHT
    reference_pressure: float = constants.ENERGY_REFERENCE_PRESSURE
    pressure_weight: float = constants.ENERGY_PRESSURE_WEIGHT
    trend_weight: float = constants.ENERGY_TREND_WEIGHT
    trend_cap: float = constants.ENERGY_TREND_CAP
    uv_threshold: float = constants.ENERGY_UV_THRESHOLD
    uv_penalty: float = constants.ENERGY_UV_PENALTY
    label_thresholds: Tuple[float, float, float] = constants.ENERGY_LABEL_THRESHOLDS

    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, Any]]) -> "EnergyCoefficients":
        """
        Build coefficients with values from the 'biometeo.energy' config section.

        Raises:
            ValueError: If an override key is unknown or not numeric
        """
        coefficients = cls()
        if not overrides:
            return coefficients

        known = {f.name for f in fields(cls)}
        changes = {}
        for key, value in overrides.items():
            if key not in known:
                raise ValueError(f"Unknown energy coefficient: {key}")
            if key == "label_thresholds":
                if not isinstance(value, (list, tuple)) or len(value) != 3:
                    raise ValueError("label_thresholds must be a list of three numbers")
                changes[key] = tuple(float(v) for v in value)
            else:
                try:
                    changes[key] = float(value)
                except (TypeError, ValueError):
                    raise ValueError(f"Energy coefficient {key} must be numeric, got {value!r}")
        return replace(coefficients, **changes)


class EnergyScorer:
    """Compute the daily energy verdict."""

    def __init__(
        self,
        coefficients: Optional[EnergyCoefficients] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.coefficients = coefficients or EnergyCoefficients()
        self.logger = logger or logging.getLogger(__name__)

    def humidity_penalty(self, humidity: Optional[float]) -> float:
        c = self.coefficients
        if humidity is None:
            return 0.0
        if humidity > c.humidity_high:
            return (humidity - c.humidity_high) * c.humidity_high_weight
        if humidity < c.humidity_low:
            return (c.humidity_low - humidity) * c.humidity_low_weight
        return 0.0

    def score(
        self,
        apparent_temp: Optional[float],
        humidity: Optional[float],
        pressure: Optional[float],
        pressure_trend: Optional[float] = None,
        uv_index: Optional[float] = None
    ) -> Optional[float]:
        """
        Raw score clamped to [0, 100]; missing terms contribute no penalty.

        Returns:
            None if apparent temperature, humidity and pressure are all missing
        """
        if apparent_temp is None and humidity is None and pressure is None:
            return None

        c = self.coefficients
        value = c.baseline
        if apparent_temp is not None:
            value -= abs(apparent_temp - c.comfort_temp) * c.temp_weight
        value -= self.humidity_penalty(humidity)
        if pressure is not None:
            value -= abs(pressure - c.reference_pressure) * c.pressure_weight
        if pressure_trend is not None:
            value -= min(abs(pressure_trend) * c.trend_weight, c.trend_cap)
        if uv_index is not None and uv_index > c.uv_threshold:
            value -= c.uv_penalty
        return max(0.0, min(100.0, value))

    def label(self, score: float) -> EnergyLevel:
        energetic, steady, drowsy = self.coefficients.label_thresholds
        if score >= energetic:
            return EnergyLevel.ENERGETIC
        if score >= steady:
            return EnergyLevel.STEADY
        if score >= drowsy:
            return EnergyLevel.DROWSY
        return EnergyLevel.EXHAUSTED

    def evaluate(
        self,
        apparent_temp: Optional[float],
        humidity: Optional[float],
        pressure: Optional[float],
        pressure_trend: Optional[float] = None,
        uv_index: Optional[float] = None
    ) -> EnergyVerdict:
        """
        Score one day.

        Args:
            apparent_temp: Mean apparent temperature (°C)
            humidity: Mean relative humidity (%)
            pressure: Mean sea-level pressure (hPa)
            pressure_trend: Pressure change vs. previous day (hPa)
            uv_index: Daily max UV index

        Returns:
            EnergyVerdict; level unknown with score None when no input is usable
        """
        value = self.score(apparent_temp, humidity, pressure, pressure_trend, uv_index)
        if value is None:
            return EnergyVerdict(EnergyLevel.UNKNOWN, None, None, "Not enough data")

        level = self.label(value)
        gauge = int(math.floor(value / 10 + 0.5))
        reason = _energy_reason(level, apparent_temp, humidity, pressure_trend)
        return EnergyVerdict(level, round(value, 1), gauge, reason)


def _energy_reason(
    level: EnergyLevel,
    apparent_temp: Optional[float],
    humidity: Optional[float],
    pressure_trend: Optional[float]
) -> str:
    parts = []
    if apparent_temp is not None:
        parts.append(f"feels like {apparent_temp:.0f} °C")
    if humidity is not None:
        parts.append(f"humidity {humidity:.0f}%")
    if pressure_trend is not None and abs(pressure_trend) > constants.PRESSURE_TREND_THRESHOLD:
        parts.append("pressure swing")
    detail = ", ".join(parts)
    return f"{level.value.capitalize()}: {detail}" if detail else level.value.capitalize()


def classify_uv(uv_index: Optional[float]) -> UVLevel:
    if uv_index is None:
        return UVLevel.UNKNOWN
    if uv_index < 3:
        return UVLevel.LOW
    if uv_index < 6:
        return UVLevel.MODERATE
    if uv_index < 8:
        return UVLevel.HIGH
    return UVLevel.VERY_HIGH


def classify_pressure_trend(trend: Optional[float]) -> PressureTendency:
    """Rising above +4 hPa/day, falling below -4 hPa/day."""
    if trend is None:
        return PressureTendency.UNKNOWN
    if trend > constants.PRESSURE_TREND_THRESHOLD:
        return PressureTendency.RISING
    if trend < -constants.PRESSURE_TREND_THRESHOLD:
        return PressureTendency.FALLING
    return PressureTendency.STABLE


def classify_pollen(concentration: Optional[float]) -> PollenLevel:
    """Pollen level from grains/m³."""
    if concentration is None:
        return PollenLevel.UNKNOWN
    if concentration <= 0:
        return PollenLevel.NONE
    if concentration < 20:
        return PollenLevel.LOW
    if concentration < 60:
        return PollenLevel.MODERATE
    return PollenLevel.HIGH
