"""
Passthrough normalizers for single-reading sources.

Marine conditions and the planetary K-index are reported as received;
only field names and value types are normalized.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from ..core import constants
from ..models import MarineConditions, SpaceWeather
from ..processing import degree_to_compass, first_finite
from ..processing.normalizer import MARINE_FIELDS, dig, pick_first


class MarineService:

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def normalize(self, payload: Optional[Mapping[str, Any]]) -> Optional[MarineConditions]:
        """
        Normalize the 'current' block of a marine payload.

        Returns:
            MarineConditions, or None when the block is missing or empty
        """
        current = dig(payload, "current")
        if not isinstance(current, Mapping):
            self.logger.warning("Marine conditions unavailable")
            return None

        values = {name: pick_first(current, aliases) for name, aliases in MARINE_FIELDS.items()}
        if all(value is None for value in values.values()):
            self.logger.warning("Marine payload carries no usable values")
            return None

        return MarineConditions(
            wave_height=values["wave_height"],
            wave_direction=values["wave_direction"],
            wave_direction_compass=degree_to_compass(values["wave_direction"]),
            sea_surface_temperature=values["sea_surface_temperature"],
        )


class SpaceWeatherService:

    def __init__(
        self,
        aurora_threshold: float = constants.AURORA_KP_THRESHOLD,
        logger: Optional[logging.Logger] = None
    ):
        self.aurora_threshold = aurora_threshold
        self.logger = logger or logging.getLogger(__name__)

    def normalize(self, table: Optional[Sequence[Any]]) -> Optional[SpaceWeather]:
        """
        Extract the latest Kp from the NOAA planetary K-index table.

        The first row is a header; the last row is the most recent reading,
        laid out as [time_tag, Kp, ...]. Kp arrives as a string.

        Returns:
            SpaceWeather, or None when the table is malformed
        """
        if not isinstance(table, (list, tuple)) or len(table) < 2:
            self.logger.warning("Space weather table unavailable or malformed")
            return None

        latest = table[-1]
        if isinstance(latest, Mapping):
            time_tag, raw_kp = latest.get("time_tag"), latest.get("Kp")
        elif isinstance(latest, (list, tuple)) and len(latest) >= 2:
            time_tag, raw_kp = latest[0], latest[1]
        else:
            self.logger.warning(f"Unexpected K-index row: {latest!r}")
            return None

        try:
            kp = first_finite(float(raw_kp))
        except (TypeError, ValueError):
            kp = None
        if kp is None:
            self.logger.warning(f"Unparseable Kp value: {raw_kp!r}")
            return None

        return SpaceWeather(
            kp_index=kp,
            observed_at=time_tag if isinstance(time_tag, str) else None,
            aurora_possible=kp >= self.aurora_threshold,
        )
