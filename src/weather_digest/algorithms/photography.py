"""
Photography sky rules: cloud condition, atmospheric transparency, moon phase
name and Milky Way visibility.
"""

import math
from typing import Optional

from ..models import CloudCondition, MilkyWayChance, MoonPhaseName, Transparency

# Upper bounds (exclusive) of each phase bin, as a fraction of the synodic month
MOON_PHASE_BINS = (
    (0.05, MoonPhaseName.NEW_MOON),
    (0.23, MoonPhaseName.WAXING_CRESCENT),
    (0.27, MoonPhaseName.FIRST_QUARTER),
    (0.48, MoonPhaseName.WAXING_GIBBOUS),
    (0.52, MoonPhaseName.FULL_MOON),
    (0.73, MoonPhaseName.WANING_GIBBOUS),
    (0.77, MoonPhaseName.LAST_QUARTER),
    (0.95, MoonPhaseName.WANING_CRESCENT),
)

MILKY_WAY_MAX_ILLUMINATION = 0.2
MILKY_WAY_MAX_CLOUD = 50.0
MILKY_WAY_MAX_AOD = 0.18
MILKY_WAY_POSSIBLE_ILLUMINATION = 0.4


def classify_cloud(cloud_cover: Optional[float]) -> CloudCondition:
    """Cloud condition from total cloud cover (%), rounded half-up first."""
    if cloud_cover is None:
        return CloudCondition.UNKNOWN
    percent = math.floor(cloud_cover + 0.5)
    if percent <= 15:
        return CloudCondition.CLEAR
    if percent <= 40:
        return CloudCondition.HAZY
    if percent <= 70:
        return CloudCondition.PARTLY_CLOUDY
    if percent <= 90:
        return CloudCondition.CLOUDY
    return CloudCondition.OVERCAST


def classify_transparency(aod: Optional[float]) -> Transparency:
    """Transparency from aerosol optical depth at 550 nm."""
    if aod is None:
        return Transparency.UNKNOWN
    if aod < 0.08:
        return Transparency.CRYSTAL
    if aod < 0.15:
        return Transparency.SLIGHT_HAZE
    if aod < 0.25:
        return Transparency.HAZE
    return Transparency.DENSE_HAZE


def moon_phase_name(phase: Optional[float]) -> MoonPhaseName:
    if phase is None:
        return MoonPhaseName.UNKNOWN
    phase = phase % 1.0
    for upper, name in MOON_PHASE_BINS:
        if phase < upper:
            return name
    return MoonPhaseName.NEW_MOON


def milky_way_chance(
    illumination: Optional[float],
    night_cloud: Optional[float],
    aod: Optional[float]
) -> MilkyWayChance:
    """
    Chance to photograph the Milky Way.

    Args:
        illumination: Moon illuminated fraction (0..1)
        night_cloud: Mean night cloud cover (%); missing counts as overcast
        aod: Mean night aerosol optical depth; missing counts as hazy

    Returns:
        MilkyWayChance
    """
    if illumination is None:
        return MilkyWayChance.UNKNOWN
    cloud = 100.0 if night_cloud is None else night_cloud
    if (
        illumination < MILKY_WAY_MAX_ILLUMINATION
        and cloud < MILKY_WAY_MAX_CLOUD
        and aod is not None
        and aod < MILKY_WAY_MAX_AOD
    ):
        return MilkyWayChance.EXCELLENT
    if illumination < MILKY_WAY_POSSIBLE_ILLUMINATION:
        return MilkyWayChance.POSSIBLE
    return MilkyWayChance.MOONLIT
