"""
Directional (circular) statistics for angular samples such as wind bearing.
"""

import math
from typing import Iterable, Optional, Sequence

from ..core import constants
from .reducers import finite_values


def circular_mean(degrees: Iterable[float]) -> Optional[float]:
    """
    Mean direction of angles in degrees using the unit-vector method.

    Sine and cosine components are averaged independently and the angle is
    rebuilt with atan2, so [350, 10] averages to ~0°, not 180°.

    Args:
        degrees: Angles in degrees (non-finite entries are ignored)

    Returns:
        Mean angle in [0, 360), or None for empty input or when the
        vectors cancel out exactly
    """
    radians = [math.radians(value) for value in finite_values(degrees)]
    if not radians:
        return None

    mean_sin = sum(math.sin(r) for r in radians) / len(radians)
    mean_cos = sum(math.cos(r) for r in radians) / len(radians)
    if math.isclose(mean_sin, 0.0, abs_tol=1e-12) and math.isclose(mean_cos, 0.0, abs_tol=1e-12):
        return None

    angle = math.degrees(math.atan2(mean_sin, mean_cos)) % 360.0
    # atan2 of a tiny negative sine can land on 360.0 after the modulo
    return 0.0 if angle >= 360.0 else angle


def circular_spread(degrees: Iterable[float]) -> Optional[float]:
    """
    Circular standard deviation in degrees.

    Returns:
        0 for a single sample, None for empty input
    """
    radians = [math.radians(value) for value in finite_values(degrees)]
    if not radians:
        return None
    if len(radians) < 2:
        return 0.0

    n = len(radians)
    resultant = math.hypot(sum(math.sin(r) for r in radians) / n, sum(math.cos(r) for r in radians) / n)
    resultant = min(resultant, 1.0)
    if resultant <= 0:
        return 180.0
    return math.degrees(math.sqrt(-2 * math.log(resultant)))


def degree_to_compass(
    angle: Optional[float],
    labels: Sequence[str] = constants.COMPASS_POINTS
) -> Optional[str]:
    """
    Map an angle onto the nearest compass sector.

    With the default 16 labels each sector spans 22.5° and is centred on its
    label, so 0°, 359° and 360° all map to "N".

    Args:
        angle: Angle in degrees (any real value; wrapped into [0, 360))
        labels: Sector labels clockwise from north

    Returns:
        Compass label, or None if angle is missing
    """
    if angle is None or not finite_values([angle]):
        return None
    sector = 360.0 / len(labels)
    index = int(math.floor((angle % 360.0) / sector + 0.5)) % len(labels)
    return labels[index]
