"""
Gardening rules.

Planting suitability, watering need and frost cover alert for one day of
soil statistics. The first matching rule wins.
"""

from typing import Optional

from ..core import constants
from ..models import (
    GardeningDaySummary,
    PlantingStatus,
    PlantingVerdict,
    WateringStatus,
    WateringVerdict,
)


def _or_zero(value: Optional[float]) -> float:
    return 0.0 if value is None else value


def _within(value: float, bounds) -> bool:
    low, high = bounds
    return low <= value <= high


def evaluate_planting(summary: GardeningDaySummary) -> PlantingVerdict:
    """
    Classify planting suitability from mean soil temperature and moisture.

    Missing precipitation sum and probability count as 0.

    Args:
        summary: Day statistics

    Returns:
        PlantingVerdict with status and reason
    """
    temp = summary.soil_temp_avg
    moisture = summary.soil_moist_avg
    precip = _or_zero(summary.precip_sum)
    probability = _or_zero(summary.precip_probability)

    if temp is None:
        return PlantingVerdict(PlantingStatus.UNKNOWN, "No soil temperature data")
    if temp < constants.PLANTING_TOO_COLD_BELOW:
        return PlantingVerdict(PlantingStatus.TOO_COLD, f"Soil too cold ({temp:.1f} °C)")
    if temp < constants.PLANTING_COLD_BELOW:
        return PlantingVerdict(PlantingStatus.COLD, f"Soil still cool ({temp:.1f} °C)")
    if temp > constants.PLANTING_TOO_HOT_ABOVE:
        return PlantingVerdict(PlantingStatus.TOO_HOT, f"Soil too hot ({temp:.1f} °C)")
    if moisture is not None and moisture < constants.PLANTING_TOO_DRY_BELOW:
        return PlantingVerdict(PlantingStatus.TOO_DRY, f"Soil too dry ({moisture:.2f} m³/m³)")
    if moisture is not None and moisture > constants.PLANTING_TOO_WET_ABOVE:
        return PlantingVerdict(PlantingStatus.TOO_WET, f"Soil waterlogged ({moisture:.2f} m³/m³)")

    likely_rain = (
        probability > constants.PLANTING_RAIN_PROBABILITY_ABOVE
        and precip > constants.PLANTING_RAIN_WITH_PROBABILITY_MM
    )
    if likely_rain or precip > constants.PLANTING_RAIN_HEAVY_MM:
        return PlantingVerdict(PlantingStatus.RAINY, f"Heavy rain expected ({precip:.1f} mm)")

    moisture_ok = moisture is None or _within(moisture, constants.PLANTING_IDEAL_MOISTURE_RANGE)
    if (
        _within(temp, constants.PLANTING_IDEAL_TEMP_RANGE)
        and moisture_ok
        and precip <= constants.PLANTING_IDEAL_MAX_PRECIP_MM
    ):
        return PlantingVerdict(PlantingStatus.IDEAL, "Warm soil with balanced moisture")
    if _within(temp, constants.PLANTING_OK_TEMP_RANGE):
        return PlantingVerdict(PlantingStatus.OK, "Acceptable soil conditions")
    return PlantingVerdict(PlantingStatus.WATCH, "Marginal conditions, keep an eye on the soil")


def evaluate_watering(summary: GardeningDaySummary) -> WateringVerdict:
    """Classify watering need from mean soil moisture and precipitation sum."""
    moisture = summary.soil_moist_avg
    precip = _or_zero(summary.precip_sum)

    if moisture is None:
        return WateringVerdict(WateringStatus.UNKNOWN, "No soil moisture data")
    if (
        moisture < constants.WATERING_NEEDS_MOISTURE_BELOW
        and precip < constants.WATERING_NEEDS_PRECIP_BELOW
    ):
        return WateringVerdict(WateringStatus.NEEDS, "Dry soil and little rain, water deeply")
    if (
        moisture < constants.WATERING_LIGHT_MOISTURE_BELOW
        and precip < constants.WATERING_LIGHT_PRECIP_BELOW
    ):
        return WateringVerdict(WateringStatus.LIGHT, "Light watering recommended")
    if (
        moisture > constants.WATERING_SKIP_MOISTURE_ABOVE
        or precip > constants.WATERING_SKIP_PRECIP_ABOVE
    ):
        return WateringVerdict(WateringStatus.SKIP, "Enough water in soil or forecast")
    return WateringVerdict(WateringStatus.MONITOR, "Check soil before watering")


def cover_alert(summary: GardeningDaySummary) -> bool:
    """True when night frost threatens young plants."""
    air_min = summary.air_temp_min
    soil_min = summary.soil_temp_min
    if air_min is not None and air_min < constants.COVER_AIR_TEMP_BELOW:
        return True
    return soil_min is not None and soil_min < constants.COVER_SOIL_TEMP_BELOW
